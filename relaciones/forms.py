from django import forms
from django.urls import reverse

from . import registro
from .configuracion import (
    RELATION_KINDS,
    WIDGET_TYPE,
    RelationFieldConfig,
    relation_field,
    relation_kind,
)
from .esquema import iter_fields
from .widgets import SEARCH_VIEW, render


class RelationalModelForm(forms.ModelForm):
    """
    ModelForm que reemplaza los campos declarados como
    ``relation-dynamic-dropdown`` en el esquema registrado bajo ``formulario``.

    Las relaciones que no son belongsTo/hasOne conservan el campo que
    Django arma por omisión.
    """
    formulario = None

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        registrado = registro.obtener(self.formulario)
        url = reverse(SEARCH_VIEW, args=[registrado.clave])
        self.relaciones_dinamicas = {}
        for descriptor in iter_fields(registrado.esquema, WIDGET_TYPE):
            kind = relation_kind(self._meta.model, descriptor.name)
            config = RelationFieldConfig.from_descriptor(descriptor, relation_kind=kind)
            renderizado = render(self.instance, descriptor.name, config, url)
            if renderizado is None:
                continue
            self.fields[descriptor.name] = renderizado.field
            self.relaciones_dinamicas[descriptor.name] = renderizado

    def save(self, commit=True):
        instance = super().save(commit)
        if commit:
            self._save_has_one(instance)
        return instance

    def _save_has_one(self, instance):
        for nombre, renderizado in self.relaciones_dinamicas.items():
            if renderizado.config.relation_kind != RELATION_KINDS.has_one:
                continue
            if renderizado.field.disabled:
                continue
            # El OneToOneField vive en el modelo relacionado.
            relacion = relation_field(type(instance), nombre)
            campo = relacion.field
            anteriores = relacion.related_model._default_manager.filter(**{campo.name: instance})
            relacionado = self.cleaned_data.get(nombre)
            if relacionado is not None:
                anteriores = anteriores.exclude(pk=relacionado.pk)
            anteriores.update(**{campo.name: None})
            if relacionado is not None:
                setattr(relacionado, campo.name, instance)
                relacionado.save(update_fields=[campo.name])
