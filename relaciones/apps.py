from django.apps import AppConfig


class RelacionesConfig(AppConfig):
    name = 'relaciones'
    verbose_name = 'Relaciones dinámicas'
