from django.contrib.auth.mixins import LoginRequiredMixin
from django.http import Http404, JsonResponse

from dal import autocomplete
from sentry_sdk import capture_message
import structlog

from . import registro
from .busqueda import parse_page, search
from .exceptions import ConfigurationError, FormularioNoRegistrado

logger = structlog.get_logger(__name__)


class RelationDropdownSearchView(LoginRequiredMixin, autocomplete.Select2QuerySetView):
    """
    Responde las búsquedas de select2 para cualquier dropdown dinámico de un
    formulario registrado. El campo se identifica con ``_attribute``, que
    llega por querystring o en el ``forward`` de dal.
    """

    def parametro(self, nombre):
        valor = self.request.GET.get(nombre)
        if valor in (None, ''):
            valor = self.forwarded.get(nombre)
        return valor

    # Reemplaza el get de dal entero: su paginador cuenta el total y la
    # respuesta acá decide "more" con cantidad == límite y agrega la opción
    # vacía en la primera página.
    def get(self, request, *args, **kwargs):
        try:
            formulario = registro.obtener(kwargs['formulario'])
        except FormularioNoRegistrado:
            raise Http404(f'No existe el formulario {kwargs["formulario"]}')

        attribute = self.parametro('_attribute')
        page = parse_page(request.GET.get('page'))
        # '_type' ('query' o 'query:append') es informativo: no cambia la respuesta.
        logger.debug('Pedido de búsqueda', tipo=request.GET.get('_type'), campo=attribute)

        try:
            pagina = search(
                formulario,
                self.q,
                attribute,
                page=page,
                record=self.parametro('_record'),
            )
        except ConfigurationError as e:
            capture_message(f'Error de configuración en el formulario {formulario.clave}: {e}')
            logger.error(
                'Error de configuración',
                formulario=formulario.clave,
                campo=attribute,
                error=str(e),
            )
            return JsonResponse({'error': str(e)}, status=500)
        return JsonResponse(pagina.as_json())
