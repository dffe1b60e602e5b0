"""
Representación tipada del esquema de un formulario.

El esquema sigue la forma habitual de declarar formularios de backend::

    {
        'fields': {
            'titulo': {'label': 'Título'},
        },
        'tabs': {
            'fields': {
                'autor': {
                    'type': 'relation-dynamic-dropdown',
                    'nameFrom': 'apellido',
                },
            },
        },
        'secondaryTabs': {'fields': {...}},
    }

Un mismo formulario puede tener varios campos del mismo tipo de widget,
así que la búsqueda siempre es por nombre *y* tipo.
"""

SECCIONES = ('fields', 'tabs', 'secondaryTabs')

TIPO_POR_OMISION = 'text'


class FieldDescriptor:
    def __init__(self, name, config=None):
        self.name = name
        self.config = dict(config or {})
        self.type = self.config.get('type', TIPO_POR_OMISION)

    def get(self, clave, default=None):
        return self.config.get(clave, default)

    def __repr__(self):
        return f'<FieldDescriptor {self.name} ({self.type})>'


class Container:
    def __init__(self, name, fields=None):
        self.name = name
        self.fields = fields if fields is not None else {}

    def __repr__(self):
        return f'<Container {self.name}: {list(self.fields)}>'


def _container_desde_campos(nombre, campos):
    container = Container(nombre)
    for nombre_campo, config in (campos or {}).items():
        config = config or {}
        descriptor = FieldDescriptor(nombre_campo, config)
        container.fields[nombre_campo] = descriptor
        # Formularios anidados: sus campos cuelgan de un container propio.
        anidado = config.get('form')
        if isinstance(anidado, dict):
            container.fields[f'{nombre_campo}.form'] = schema_from_dict(
                anidado, nombre=f'{nombre_campo}.form'
            )
    return container


def schema_from_dict(data, nombre='root'):
    raiz = Container(nombre)
    for seccion in SECCIONES:
        contenido = data.get(seccion)
        if not contenido:
            continue
        # 'fields' trae los campos directamente, las solapas los traen en su propio 'fields'.
        campos = contenido if seccion == 'fields' else contenido.get('fields')
        raiz.fields[seccion] = _container_desde_campos(seccion, campos)
    return raiz


def iter_fields(container, widget_type=None):
    """
    Recorre en profundidad y en orden de declaración todos los campos
    del esquema, opcionalmente sólo los de un tipo de widget.
    """
    for elemento in container.fields.values():
        if isinstance(elemento, Container):
            yield from iter_fields(elemento, widget_type)
        elif widget_type is None or elemento.type == widget_type:
            yield elemento


def find_field(container, name, widget_type):
    for descriptor in iter_fields(container, widget_type):
        if descriptor.name == name:
            return descriptor
    return None
