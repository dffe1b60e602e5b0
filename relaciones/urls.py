from django.urls import re_path
from . import views

urlpatterns = [
    re_path(
        r"^(?P<formulario>[\w.-]+)/buscar$",
        views.RelationDropdownSearchView.as_view(),
        name="relation-dropdown-search",
    ),
]
