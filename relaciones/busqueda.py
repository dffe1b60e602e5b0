"""
Búsqueda paginada de opciones para el dropdown dinámico.

La vista la invoca por cada tecla o scroll del usuario. La configuración
del campo se resuelve en cada llamada a partir del esquema completo del
formulario y del nombre del atributo, de modo que dos dropdowns del mismo
formulario nunca comparten alcance, orden ni límite.
"""
import structlog
from annoying.functions import get_object_or_None
from django.core.exceptions import ValidationError

from .alcances import apply_scope
from .configuracion import (
    RELATION_KINDS,
    WIDGET_TYPE,
    RelationFieldConfig,
    related_key_name,
    related_model,
    relation_kind,
)
from .consultas import apply_order, exclude_self, search_filter, with_display
from .esquema import find_field

logger = structlog.get_logger(__name__)


class SearchResult:
    def __init__(self, id, text):
        self.id = id
        # Puede traer HTML, lo escapa (o no) quien lo muestra.
        self.text = text

    def as_json(self):
        return {'id': self.id, 'text': self.text}

    def __eq__(self, other):
        return isinstance(other, SearchResult) and (self.id, self.text) == (other.id, other.text)

    def __repr__(self):
        return f'<SearchResult {self.id}: {self.text}>'


class ResultPage:
    def __init__(self, results=None, has_more=False):
        self.results = results or []
        # Aproximación: si vino una página llena se asume que hay más.
        self.has_more = has_more

    def as_json(self):
        data = {'results': [r.as_json() for r in self.results]}
        if self.has_more:
            data['pagination'] = {'more': True}
        return data


def parse_page(valor):
    try:
        pagina = int(valor)
    except (TypeError, ValueError):
        return 1
    return max(pagina, 1)


def resolve_config(formulario, attribute):
    descriptor = find_field(formulario.esquema, attribute, WIDGET_TYPE)
    if descriptor is None:
        return None
    kind = relation_kind(formulario.modelo, descriptor.name)
    return RelationFieldConfig.from_descriptor(descriptor, relation_kind=kind)


def resolve_owner(modelo, record):
    """El registro dueño del formulario, o uno nuevo si todavía no existe."""
    if record in (None, ''):
        return modelo()
    try:
        owner = get_object_or_None(modelo, pk=record)
    except (ValueError, ValidationError):
        owner = None
    return owner or modelo()


def search(formulario, query, attribute, page=1, record=None):
    page = max(page, 1)
    config = resolve_config(formulario, attribute)
    if config is None or config.relation_kind == RELATION_KINDS.other:
        logger.warning('Campo de búsqueda desconocido', formulario=formulario.clave, campo=attribute)
        return ResultPage()

    modelo = related_model(formulario.modelo, attribute)
    key_name = related_key_name(formulario.modelo, attribute)
    display = config.display_column(key_name)
    owner = resolve_owner(formulario.modelo, record)

    queryset = apply_order(modelo._default_manager.all(), config.order)
    queryset = apply_scope(queryset, config.scope, owner, attribute)
    queryset = exclude_self(queryset, owner)
    queryset = with_display(queryset, config)
    queryset = search_filter(queryset, query, key_name, display)

    desde = (page - 1) * config.limit
    columnas = list(dict.fromkeys([key_name, display]))
    registros = list(queryset.values(*columnas)[desde:desde + config.limit])

    resultados = [SearchResult(r[key_name], r[display]) for r in registros]
    if config.empty_option and page == 1:
        # Permite al usuario limpiar la selección.
        resultados.insert(0, SearchResult('', config.empty_option))

    logger.info(
        'Búsqueda de relación',
        formulario=formulario.clave,
        campo=attribute,
        pagina=page,
        cantidad=len(registros),
    )
    return ResultPage(resultados, has_more=len(registros) == config.limit)
