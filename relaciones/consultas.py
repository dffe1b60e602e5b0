"""
Armado de consultas compartido entre el render del campo y la búsqueda.

'order' y 'select' vienen del esquema del formulario, lo escribe quien
diseña el formulario y nunca el usuario final, por eso se pasan como SQL
crudo sin interpretarlos.
"""
from django.db.models import CharField, Q
from django.db.models.expressions import RawSQL
from django.db.models.functions import Cast

from .configuracion import SELECTION

DIRECCIONES = ('asc', 'desc')


def _partes_del_orden(order):
    """Separa por comas de primer nivel, respetando paréntesis."""
    partes, actual, nivel = [], [], 0
    for caracter in order:
        if caracter == '(':
            nivel += 1
        elif caracter == ')':
            nivel -= 1
        if caracter == ',' and nivel == 0:
            partes.append(''.join(actual))
            actual = []
        else:
            actual.append(caracter)
    partes.append(''.join(actual))
    return [p.strip() for p in partes if p.strip()]


def raw_order_by(order):
    expresiones = []
    for parte in _partes_del_orden(order):
        descendente = False
        palabras = parte.rsplit(None, 1)
        if len(palabras) == 2 and palabras[1].lower() in DIRECCIONES:
            parte, descendente = palabras[0], palabras[1].lower() == 'desc'
        expresion = RawSQL(parte, ())
        expresiones.append(expresion.desc() if descendente else expresion.asc())
    return expresiones


def apply_order(queryset, order):
    if order:
        # La pk desempata para que las páginas sean estables.
        return queryset.order_by(*raw_order_by(order), 'pk')
    if queryset.ordered:
        return queryset
    return queryset.order_by('pk')


def exclude_self(queryset, owner):
    """
    Si el dueño y el modelo relacionado son la misma clase, el dueño
    no puede estar relacionado consigo mismo.
    """
    if owner is None or owner.pk is None or owner._state.adding:
        return queryset
    if owner._meta.concrete_model is not queryset.model._meta.concrete_model:
        return queryset
    return queryset.exclude(pk=owner.pk)


def with_display(queryset, config):
    if not config.select:
        return queryset
    return queryset.annotate(**{SELECTION: RawSQL(config.select, (), output_field=CharField())})


def search_filter(queryset, term, key_name, display_column):
    if not term:
        return queryset
    queryset = queryset.annotate(clave_texto=Cast(key_name, output_field=CharField()))
    lookups = Q(clave_texto__icontains=term)
    if display_column != key_name:
        lookups |= Q(**{f'{display_column}__icontains': term})
    return queryset.filter(lookups)
