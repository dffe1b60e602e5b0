import pytest

from biblioteca.models import Ficha, Libro
from relaciones.configuracion import WIDGET_TYPE
from relaciones.registro import registrar


@pytest.fixture()
def formulario_fichas():
    """Fichas con un dropdown de libros paginado de a 2."""
    return registrar('test.fichas', Ficha, {
        'fields': {
            'codigo_de_barras': {'label': 'Código'},
            'libro': {
                'type': WIDGET_TYPE,
                'nameFrom': 'titulo',
                'order': 'titulo',
                'limit': 2,
            },
        },
    })


@pytest.fixture()
def formulario_libros():
    """Dos dropdowns del mismo tipo con configuraciones distintas."""
    return registrar('test.libros', Libro, {
        'fields': {
            'titulo': {},
            'autor': {
                'type': WIDGET_TYPE,
                'select': "apellido || ', ' || nombre",
                'scope': 'activos',
                'order': 'apellido',
                'limit': 3,
                'emptyOption': '-- sin autor --',
            },
        },
        'tabs': {
            'fields': {
                'secuela_de': {
                    'type': WIDGET_TYPE,
                    'nameFrom': 'titulo',
                    'order': 'titulo desc',
                    'limit': 5,
                },
                'editorial': {
                    'type': WIDGET_TYPE,
                    'nameFrom': 'nombre',
                    'order': 'nombre',
                },
            },
        },
    })


@pytest.fixture()
def formulario_con_alcance_inexistente():
    return registrar('test.alcance-inexistente', Libro, {
        'fields': {
            'autor': {
                'type': WIDGET_TYPE,
                'nameFrom': 'apellido',
                'scope': 'withPermissions',
            },
        },
    })
