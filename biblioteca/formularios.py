from relaciones.configuracion import WIDGET_TYPE
from relaciones.registro import registrar

from .models import Libro

LIBRO = 'biblioteca.libro'

ESQUEMA_LIBRO = {
    'fields': {
        'titulo': {
            'label': 'Título',
            'span': 'auto',
        },
        'autor': {
            'label': 'Autor',
            'type': WIDGET_TYPE,
            'select': "apellido || ', ' || nombre",
            'scope': 'activos',
            'order': 'apellido, nombre',
            'emptyOption': '-- sin autor --',
        },
    },
    'tabs': {
        'fields': {
            'categoria': {
                'label': 'Categoría',
                'type': WIDGET_TYPE,
                'nameFrom': 'nombre',
                'order': 'nombre',
            },
            'secuela_de': {
                'label': 'Secuela de',
                'type': WIDGET_TYPE,
                'nameFrom': 'titulo',
                'scope': 'publicados',
                'order': 'titulo',
                'limit': 10,
            },
            'coautores': {
                'label': 'Coautores',
                'type': WIDGET_TYPE,
                'nameFrom': 'apellido',
            },
        },
    },
    'secondaryTabs': {
        'fields': {
            'editorial': {
                'label': 'Editorial',
                'type': WIDGET_TYPE,
                'nameFrom': 'nombre',
                'order': 'nombre desc',
                'attributes': {
                    'data-minimum-input-length': 2,
                    'data-ajax--delay': 500,
                },
            },
            'ficha': {
                'label': 'Ficha',
                'type': WIDGET_TYPE,
                'nameFrom': 'codigo_de_barras',
            },
            'portada': {
                'label': 'Portada',
                'type': WIDGET_TYPE,
                'nameFrom': 'descripcion',
            },
        },
    },
}

registrar(LIBRO, Libro, ESQUEMA_LIBRO)
