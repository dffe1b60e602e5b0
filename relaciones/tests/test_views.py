import json
from http import HTTPStatus

from django.urls import reverse

from biblioteca.tests.factories import AutorFactory, LibroFactory


def url_busqueda(formulario):
    return reverse('relation-dropdown-search', args=[formulario.clave])


def test_requiere_login(db, client, formulario_fichas):
    response = client.get(url_busqueda(formulario_fichas), {'_attribute': 'libro'})
    assert response.status_code == HTTPStatus.FOUND


def test_formulario_inexistente(admin_client):
    response = admin_client.get(reverse('relation-dropdown-search', args=['no.existe']))
    assert response.status_code == HTTPStatus.NOT_FOUND


def test_busqueda_paginada(admin_client, formulario_fichas):
    cherry, apple, banana = [LibroFactory(titulo=t) for t in ('Cherry', 'Apple', 'Banana')]
    url = url_busqueda(formulario_fichas)

    response = admin_client.get(url, {'q': '', '_attribute': 'libro', '_type': 'query'})
    assert response.status_code == HTTPStatus.OK
    assert response.json() == {
        'results': [
            {'id': apple.id, 'text': 'Apple'},
            {'id': banana.id, 'text': 'Banana'},
        ],
        'pagination': {'more': True},
    }

    response = admin_client.get(url, {'q': '', '_attribute': 'libro', 'page': '2', '_type': 'query:append'})
    assert response.json() == {'results': [{'id': cherry.id, 'text': 'Cherry'}]}


def test_atributo_por_forward(admin_client, formulario_libros):
    libro = LibroFactory(titulo='Original')
    otro = LibroFactory(titulo='Otra historia')
    forward = json.dumps({'_attribute': 'secuela_de', '_record': libro.pk})

    response = admin_client.get(url_busqueda(formulario_libros), {'q': 'or', 'forward': forward})
    assert response.status_code == HTTPStatus.OK
    assert response.json() == {'results': [{'id': otro.id, 'text': 'Otra historia'}]}


def test_el_querystring_tiene_prioridad_sobre_el_forward(admin_client, formulario_libros):
    autor = AutorFactory(apellido='Walsh', nombre='Rodolfo')
    forward = json.dumps({'_attribute': 'secuela_de'})

    response = admin_client.get(
        url_busqueda(formulario_libros),
        {'q': 'walsh', '_attribute': 'autor', 'forward': forward},
    )
    assert response.json() == {
        'results': [
            {'id': '', 'text': '-- sin autor --'},
            {'id': autor.id, 'text': 'Walsh, Rodolfo'},
        ],
    }


def test_alcance_inexistente(admin_client, formulario_con_alcance_inexistente, mocker):
    capture = mocker.patch('relaciones.views.capture_message')
    AutorFactory()

    response = admin_client.get(
        url_busqueda(formulario_con_alcance_inexistente), {'_attribute': 'autor'}
    )
    assert response.status_code == HTTPStatus.INTERNAL_SERVER_ERROR
    error = response.json()['error']
    assert 'withPermissions' in error
    assert 'Autor' in error
    assert capture.call_count == 1
    assert 'withPermissions' in capture.call_args[0][0]
