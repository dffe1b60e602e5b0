from django import forms

from relaciones.forms import RelationalModelForm

from .formularios import LIBRO
from .models import Ficha, Libro, Portada


class LibroForm(RelationalModelForm):
    formulario = LIBRO

    # Relaciones inversas: el campo real lo arma el dropdown al inicializar el form.
    ficha = forms.ModelChoiceField(queryset=Ficha.objects.none(), required=False)
    portada = forms.ModelChoiceField(queryset=Portada.objects.none(), required=False)

    class Meta:
        model = Libro
        fields = [
            'titulo',
            'publicado',
            'autor',
            'categoria',
            'editorial',
            'secuela_de',
            'coautores',
        ]
