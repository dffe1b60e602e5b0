"""
Alcances (filtros con nombre) que un modelo ofrece a los dropdowns.

Cada modelo declara los suyos en ``dropdown_scopes``::

    class Autor(models.Model):
        dropdown_scopes = {
            'activos': lambda queryset, owner: queryset.filter(activo=True),
        }

El esquema del formulario los referencia por nombre con la clave 'scope'.

Cada alcance se llama como ``alcance(queryset, owner)``. Durante la
búsqueda ``owner`` sale del ``_record`` que reenvía el navegador, así que
cualquier cliente puede elegir qué registro recibe el alcance: sirve para
filtrar según el dueño, no para decidir permisos. Un alcance que restrinja
por usuario tiene que resolverlo con datos propios del servidor.
"""
from .exceptions import ConfigurationError


def scopes_for(modelo):
    return getattr(modelo, 'dropdown_scopes', None) or {}


def get_scope(modelo, nombre, campo):
    try:
        return scopes_for(modelo)[nombre]
    except KeyError:
        raise ConfigurationError(modelo, nombre, campo)


def apply_scope(queryset, nombre, owner, campo):
    if not nombre:
        return queryset
    alcance = get_scope(queryset.model, nombre, campo)
    return alcance(queryset, owner)
