class ConfigurationError(Exception):
    """
    El esquema de un formulario referencia algo que el modelo relacionado
    no provee (por ejemplo un alcance inexistente).
    """

    def __init__(self, modelo, alcance, campo):
        self.modelo = modelo
        self.alcance = alcance
        self.campo = campo
        super().__init__(
            f'El modelo {modelo.__name__} no define el alcance "{alcance}" '
            f'requerido por el campo "{campo}".'
        )


class FormularioNoRegistrado(KeyError):
    pass
