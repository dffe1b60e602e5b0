"""
Formularios que usan el dropdown dinámico, indexados por clave.

La vista de búsqueda recibe la clave en la URL y a partir de ella
resuelve el modelo dueño y el esquema completo del formulario.
"""
import structlog

from .esquema import schema_from_dict
from .exceptions import FormularioNoRegistrado

logger = structlog.get_logger(__name__)

_formularios = {}


class FormularioRegistrado:
    def __init__(self, clave, modelo, esquema):
        self.clave = clave
        self.modelo = modelo
        self.esquema = esquema

    def __repr__(self):
        return f'<FormularioRegistrado {self.clave} ({self.modelo.__name__})>'


def registrar(clave, modelo, esquema):
    formulario = FormularioRegistrado(clave, modelo, schema_from_dict(esquema))
    _formularios[clave] = formulario
    logger.debug('Formulario registrado', formulario=clave, modelo=modelo.__name__)
    return formulario


def obtener(clave):
    try:
        return _formularios[clave]
    except KeyError:
        raise FormularioNoRegistrado(clave)
