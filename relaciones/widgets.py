"""
Dropdown dinámico para relaciones con cientos o miles de registros.

En lugar de volcar toda la tabla relacionada como <option>, el campo se
renderiza sólo con el valor seleccionado y el resto se busca por AJAX
(select2, vía dal) a medida que el usuario escribe o scrollea.

La búsqueda usa ``icontains`` (``LIKE '%texto%'``), que no aprovecha
índices: en tablas grandes implica recorrerlas enteras.
"""
from dal import autocomplete, forward
from django import forms
from django.core.exceptions import ObjectDoesNotExist, ValidationError
from django.utils.text import capfirst

from .alcances import apply_scope
from .arboles import is_tree, nested_options
from .configuracion import RELATION_KINDS, RENDERABLE_KINDS, related_key_name, relation_field
from .consultas import apply_order, exclude_self, with_display

SEARCH_VIEW = 'relation-dropdown-search'

EMPTY_LABEL = '---------'


class RelationDynamicDropdown(autocomplete.ModelSelect2):
    """
    Select2 que renderiza únicamente las opciones elegidas (y la opción
    vacía), nunca el queryset entero.

    Las opciones se calculan al renderizar a partir de los valores que dal
    recibe como seleccionados: en un form ligado son los que envió el
    usuario, no los guardados en ``owner``.
    """

    def __init__(self, url=None, forward=None, owner=None, attribute=None, config=None,
                 empty_label=EMPTY_LABEL, *args, **kwargs):
        super().__init__(url, forward, *args, **kwargs)
        self.owner = owner
        self.attribute = attribute
        self.config = config
        self.empty_label = empty_label

    def filter_choices_to_render(self, selected_choices):
        try:
            opciones = initial_options(self.owner, self.attribute, self.config, selected_choices)
        except (ValueError, ValidationError):
            # Un valor que no es una clave válida no tiene opción que mostrar.
            opciones = {}
        self.choices = [('', self.empty_label)] + list(opciones.items())


class RenderableField:
    def __init__(self, field, options, config):
        self.field = field
        self.options = options
        self.config = config


def selected_value(owner, attribute, kind):
    field = relation_field(type(owner), attribute)
    if kind == RELATION_KINDS.belongs_to:
        return getattr(owner, field.attname)
    try:
        relacionado = getattr(owner, field.get_accessor_name())
    except (ObjectDoesNotExist, ValueError):
        return None
    return relacionado.pk if relacionado is not None else None


def is_editable(owner, attribute, kind):
    """
    Un hasOne cuyo OneToOneField no admite NULL no se puede reasignar desde
    el dueño: el registro anterior quedaría sin relación.
    """
    if kind != RELATION_KINDS.has_one:
        return True
    return relation_field(type(owner), attribute).field.null


def initial_options(owner, attribute, config, selected):
    """Opciones a renderizar: sólo los registros de ``selected``, si los hay."""
    modelo_owner = type(owner)
    modelo = relation_field(modelo_owner, attribute).related_model
    key_name = related_key_name(modelo_owner, attribute)
    display = config.display_column(key_name)

    valores = [valor for valor in selected if valor not in (None, '')]
    queryset = modelo._default_manager.filter(**{f'{key_name}__in': valores})
    queryset = apply_order(queryset, config.order)
    queryset = exclude_self(queryset, owner)
    queryset = apply_scope(queryset, config.scope, owner, attribute)
    queryset = with_display(queryset, config)

    # Los árboles necesitan todas las columnas para poder recorrer los padres.
    if is_tree(modelo):
        return nested_options(queryset, key_name, display)
    columnas = list(dict.fromkeys([key_name, display]))
    return {fila[key_name]: fila[display] for fila in queryset.values(*columnas)}


def build_attrs(config):
    attrs = dict(config.attributes)
    attrs['data-handler'] = SEARCH_VIEW
    attrs.setdefault('data-minimum-input-length', config.min_input_length)
    attrs.setdefault('data-ajax--delay', config.delay)
    return attrs


def build_forwards(owner, attribute):
    forwards = [forward.Const(attribute, '_attribute')]
    if owner.pk is not None and not owner._state.adding:
        forwards.append(forward.Const(owner.pk, '_record'))
    return forwards


def render(owner, attribute, config, url):
    """
    Devuelve el campo de formulario para ``attribute`` con el dropdown
    dinámico, o None si la relación no es belongsTo/hasOne y corresponde
    usar el campo por omisión de Django.

    Un hasOne con OneToOneField obligatorio se muestra deshabilitado.
    """
    if config.relation_kind not in RENDERABLE_KINDS:
        return None

    modelo_owner = type(owner)
    field = relation_field(modelo_owner, attribute)
    modelo = field.related_model
    key_name = related_key_name(modelo_owner, attribute)

    selected = selected_value(owner, attribute, config.relation_kind)
    opciones = initial_options(owner, attribute, config, [selected])

    if config.relation_kind == RELATION_KINDS.has_one:
        required = False
    else:
        required = not field.blank

    empty_label = config.empty_option or EMPTY_LABEL
    widget = RelationDynamicDropdown(
        url=url,
        forward=build_forwards(owner, attribute),
        attrs=build_attrs(config),
        owner=owner,
        attribute=attribute,
        config=config,
        empty_label=empty_label,
    )

    # Para validar se acepta cualquier registro que la búsqueda podría devolver.
    queryset = apply_scope(modelo._default_manager.all(), config.scope, owner, attribute)
    queryset = exclude_self(queryset, owner)

    choice_field = forms.ModelChoiceField(
        queryset=queryset,
        required=required,
        label=config.label or capfirst(getattr(field, 'verbose_name', None) or modelo._meta.verbose_name),
        empty_label=empty_label,
        to_field_name=None if key_name == modelo._meta.pk.attname else key_name,
        initial=selected,
        disabled=not is_editable(owner, attribute, config.relation_kind),
        widget=widget,
    )
    return RenderableField(choice_field, opciones, config)
