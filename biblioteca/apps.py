from django.apps import AppConfig


class BibliotecaConfig(AppConfig):
    name = 'biblioteca'

    # Registra los esquemas de formulario que usan el dropdown dinámico.
    def ready(self):
        import biblioteca.formularios  # noqa
