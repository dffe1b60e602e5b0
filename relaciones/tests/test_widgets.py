import pytest
from django import forms

from biblioteca.models import Libro
from biblioteca.tests.factories import (
    AutorFactory,
    CategoriaFactory,
    EditorialFactory,
    FichaFactory,
    LibroFactory,
    PortadaFactory,
)
from relaciones.arboles import INDENTACION
from relaciones.busqueda import resolve_config
from relaciones.exceptions import ConfigurationError
from relaciones.widgets import SEARCH_VIEW, RelationDynamicDropdown, render

URL = '/relaciones/test.libros/buscar'


def renderizar(formulario, owner, atributo):
    return render(owner, atributo, resolve_config(formulario, atributo), URL)


def test_solo_renderiza_la_opcion_seleccionada(formulario_libros, db):
    AutorFactory.create_batch(5)
    elegido = AutorFactory(apellido='Borges', nombre='Jorge Luis')
    libro = LibroFactory(autor=elegido)

    renderizado = renderizar(formulario_libros, libro, 'autor')
    assert renderizado.options == {elegido.id: 'Borges, Jorge Luis'}

    widget = renderizado.field.widget
    assert isinstance(widget, RelationDynamicDropdown)
    widget.filter_choices_to_render([str(elegido.id)])
    assert widget.choices == [('', '-- sin autor --'), (elegido.id, 'Borges, Jorge Luis')]


def test_las_opciones_siguen_a_los_valores_elegidos(formulario_libros, db):
    guardado = AutorFactory(apellido='Borges', nombre='Jorge Luis')
    enviado = AutorFactory(apellido='Ocampo', nombre='Silvina')
    widget = renderizar(formulario_libros, LibroFactory(autor=guardado), 'autor').field.widget

    widget.filter_choices_to_render([str(enviado.id)])
    assert widget.choices == [('', '-- sin autor --'), (enviado.id, 'Ocampo, Silvina')]

    widget.filter_choices_to_render([])
    assert widget.choices == [('', '-- sin autor --')]

    widget.filter_choices_to_render(['abc'])
    assert widget.choices == [('', '-- sin autor --')]


def test_has_one_obligatorio_queda_deshabilitado(db):
    from biblioteca.formularios import LIBRO
    from relaciones.registro import obtener

    portada = PortadaFactory(descripcion='Tapa dura')
    renderizado = renderizar(obtener(LIBRO), portada.libro, 'portada')
    assert renderizado.field.disabled
    assert renderizado.options == {portada.id: 'Tapa dura'}

    # La ficha admite NULL: se puede reasignar.
    assert not renderizar(obtener(LIBRO), portada.libro, 'ficha').field.disabled


def test_registro_nuevo_no_tiene_opciones(formulario_libros, db):
    AutorFactory.create_batch(3)
    renderizado = renderizar(formulario_libros, Libro(), 'autor')
    assert renderizado.options == {}


def test_atributos_del_widget(formulario_libros, db):
    libro = LibroFactory()
    attrs = renderizar(formulario_libros, libro, 'autor').field.widget.attrs
    assert attrs['data-handler'] == SEARCH_VIEW
    assert attrs['data-minimum-input-length'] == 1
    assert attrs['data-ajax--delay'] == 300


def test_no_pisa_los_atributos_configurados(db):
    from biblioteca.formularios import LIBRO
    from relaciones.registro import obtener

    libro = LibroFactory(editorial=EditorialFactory())
    attrs = renderizar(obtener(LIBRO), libro, 'editorial').field.widget.attrs
    assert attrs['data-minimum-input-length'] == 2
    assert attrs['data-ajax--delay'] == 500


def test_reenvia_atributo_y_registro(formulario_libros, db):
    libro = LibroFactory()
    widget = renderizar(formulario_libros, libro, 'autor').field.widget
    assert [(f.dst, f.val) for f in widget.forward] == [
        ('_attribute', 'autor'),
        ('_record', libro.pk),
    ]
    assert widget.url == URL

    widget = renderizar(formulario_libros, Libro(), 'autor').field.widget
    assert [(f.dst, f.val) for f in widget.forward] == [('_attribute', 'autor')]


def test_aplica_el_alcance_al_renderizar(formulario_libros, db):
    inactivo = AutorFactory(activo=False)
    libro = LibroFactory(autor=inactivo)
    renderizado = renderizar(formulario_libros, libro, 'autor')
    assert renderizado.options == {}
    assert inactivo not in renderizado.field.queryset


def test_alcance_inexistente_al_renderizar(formulario_con_alcance_inexistente, db):
    libro = LibroFactory()
    with pytest.raises(ConfigurationError):
        renderizar(formulario_con_alcance_inexistente, libro, 'autor')


def test_excluye_al_propio_registro(formulario_libros, db):
    libro = LibroFactory(titulo='Circular')
    libro.secuela_de = libro
    libro.save()
    otro = LibroFactory()

    renderizado = renderizar(formulario_libros, libro, 'secuela_de')
    assert renderizado.options == {}
    assert list(renderizado.field.queryset) == [otro]


def test_usa_la_clave_del_to_field(formulario_libros, db):
    editorial = EditorialFactory(codigo='ANA', nombre='Anagrama')
    libro = LibroFactory(editorial=editorial)
    renderizado = renderizar(formulario_libros, libro, 'editorial')
    assert renderizado.options == {'ANA': 'Anagrama'}
    assert renderizado.field.to_field_name == 'codigo'


def test_arbol_indentado(db):
    from biblioteca.formularios import LIBRO
    from relaciones.registro import obtener

    raiz = CategoriaFactory(nombre='Ficción')
    hija = CategoriaFactory(nombre='Policial', parent=raiz)
    nieta = CategoriaFactory(nombre='Negra', parent=hija)
    libro = LibroFactory(categoria=nieta)

    renderizado = renderizar(obtener(LIBRO), libro, 'categoria')
    assert renderizado.options == {nieta.id: f'{INDENTACION * 2}Negra'}


def test_has_one(db):
    from biblioteca.formularios import LIBRO
    from relaciones.registro import obtener

    libro = LibroFactory()
    ficha = FichaFactory(libro=libro, codigo_de_barras='9789500000001')
    FichaFactory()

    renderizado = renderizar(obtener(LIBRO), libro, 'ficha')
    assert renderizado.options == {ficha.id: '9789500000001'}
    assert not renderizado.field.required

    renderizado = renderizar(obtener(LIBRO), LibroFactory(), 'ficha')
    assert renderizado.options == {}


def test_otras_relaciones_usan_el_campo_por_omision(db):
    from biblioteca.formularios import LIBRO
    from relaciones.registro import obtener

    assert renderizar(obtener(LIBRO), LibroFactory(), 'coautores') is None


def test_campo_de_formulario(formulario_libros, db):
    libro = LibroFactory()
    field = renderizar(formulario_libros, libro, 'autor').field
    assert isinstance(field, forms.ModelChoiceField)
    assert not field.required
    assert field.empty_label == '-- sin autor --'
    assert field.initial == libro.autor_id
