from django.conf import settings
from django.core.exceptions import FieldDoesNotExist
from model_utils import Choices

WIDGET_TYPE = 'relation-dynamic-dropdown'

# Nombre de la columna virtual que contiene la expresión de 'select'.
SELECTION = 'selection'

RELATION_KINDS = Choices(
    ('belongs_to', 'belongsTo'),
    ('has_one', 'hasOne'),
    ('has_many', 'hasMany'),
    ('belongs_to_many', 'belongsToMany'),
    ('other', 'other'),
)

# Los únicos tipos de relación que el dropdown dinámico sabe mostrar.
RENDERABLE_KINDS = (RELATION_KINDS.belongs_to, RELATION_KINDS.has_one)


def default_limit():
    return getattr(settings, 'DYNAMIC_DROPDOWN_LIMIT', 20)


def default_min_input_length():
    return getattr(settings, 'DYNAMIC_DROPDOWN_MIN_INPUT_LENGTH', 1)


def default_delay():
    return getattr(settings, 'DYNAMIC_DROPDOWN_DELAY', 300)


def relation_field(model, attribute):
    try:
        return model._meta.get_field(attribute)
    except FieldDoesNotExist:
        return None


def relation_kind(model, attribute):
    field = relation_field(model, attribute)
    if field is None or not field.is_relation:
        return RELATION_KINDS.other
    if field.many_to_many:
        return RELATION_KINDS.belongs_to_many
    if field.one_to_many:
        return RELATION_KINDS.has_many
    if field.many_to_one:
        return RELATION_KINDS.belongs_to
    if field.one_to_one:
        # El OneToOneField vive en este modelo; la relación inversa no.
        return RELATION_KINDS.belongs_to if field.concrete else RELATION_KINDS.has_one
    return RELATION_KINDS.other


def related_model(model, attribute):
    return relation_field(model, attribute).related_model


def related_key_name(model, attribute):
    """
    Columna del modelo relacionado que identifica cada opción.

    Un ForeignKey con ``to_field`` apunta a otra columna que no es la pk,
    y el valor guardado en el dueño es el de esa columna.
    """
    field = relation_field(model, attribute)
    if field.many_to_one or (field.one_to_one and field.concrete):
        return field.target_field.attname
    return field.related_model._meta.pk.attname


def _entero(valor, default, minimo=1):
    try:
        valor = int(valor)
    except (TypeError, ValueError):
        return default
    return valor if valor >= minimo else default


class RelationFieldConfig:
    """
    Configuración de un campo de tipo dropdown dinámico, armada a partir
    de la entrada del esquema del formulario en cada request.
    """

    def __init__(self, attribute, relation_kind=RELATION_KINDS.other, name_from=None,
                 select=None, order=None, scope=None, limit=None, empty_option=None,
                 label=None, attributes=None):
        self.attribute = attribute
        self.relation_kind = relation_kind
        self.name_from = name_from
        self.select = select
        self.order = order
        self.scope = scope
        self.limit = _entero(limit, default_limit())
        self.empty_option = empty_option
        self.label = label
        self.attributes = dict(attributes or {})

    @classmethod
    def from_descriptor(cls, descriptor, relation_kind=RELATION_KINDS.other):
        return cls(
            descriptor.name,
            relation_kind=relation_kind,
            name_from=descriptor.get('nameFrom'),
            select=descriptor.get('select'),
            order=descriptor.get('order'),
            scope=descriptor.get('scope'),
            limit=descriptor.get('limit'),
            empty_option=descriptor.get('emptyOption'),
            label=descriptor.get('label'),
            attributes=descriptor.get('attributes'),
        )

    @property
    def min_input_length(self):
        return _entero(self.attributes.get('data-minimum-input-length'), default_min_input_length(), minimo=0)

    @property
    def delay(self):
        return _entero(self.attributes.get('data-ajax--delay'), default_delay(), minimo=0)

    def display_column(self, key_name):
        """
        'select' tiene precedencia sobre 'nameFrom'; sin ninguno de los dos
        se muestra la clave.
        """
        if self.select:
            return SELECTION
        return self.name_from or key_name
