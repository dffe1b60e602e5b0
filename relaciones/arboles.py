"""
Soporte para modelos jerárquicos: un modelo es un árbol si tiene un
ForeignKey a sí mismo (por omisión llamado ``parent``, configurable con
el atributo de clase ``tree_parent_field``).
"""
from django.core.exceptions import FieldDoesNotExist

INDENTACION = '\u00a0' * 3


def parent_field_name(modelo):
    return getattr(modelo, 'tree_parent_field', 'parent')


def is_tree(modelo):
    try:
        field = modelo._meta.get_field(parent_field_name(modelo))
    except FieldDoesNotExist:
        return False
    return field.many_to_one and field.related_model is modelo


def ancestors(obj):
    """Ancestros de obj, del padre hacia la raíz."""
    nombre = parent_field_name(type(obj))
    resultado, vistos = [], {obj.pk}
    actual = getattr(obj, nombre)
    while actual is not None and actual.pk not in vistos:
        resultado.append(actual)
        vistos.add(actual.pk)
        actual = getattr(actual, nombre)
    return resultado


def depth(obj):
    return len(ancestors(obj))


def nested_options(objetos, key_name, display_column):
    """
    Mapeo clave -> texto indentado según la profundidad, con cada nodo
    ubicado después de sus ancestros.
    """
    filas = []
    for obj in objetos:
        camino = [a.pk for a in reversed(ancestors(obj))] + [obj.pk]
        filas.append((camino, obj))
    filas.sort(key=lambda fila: fila[0])
    return {
        getattr(obj, key_name): f'{INDENTACION * (len(camino) - 1)}{getattr(obj, display_column)}'
        for camino, obj in filas
    }
