from django.db import models


def autores_activos(queryset, owner):
    return queryset.filter(activo=True)


def libros_publicados(queryset, owner):
    return queryset.filter(publicado=True)


class Autor(models.Model):
    nombre = models.CharField(max_length=100)
    apellido = models.CharField(max_length=100)
    email = models.EmailField(blank=True)
    activo = models.BooleanField(default=True)

    dropdown_scopes = {
        'activos': autores_activos,
    }

    class Meta:
        verbose_name_plural = 'autores'

    def __str__(self):
        return f'{self.apellido}, {self.nombre}'


class Categoria(models.Model):
    """
    Las categorías forman un árbol: el dropdown las muestra indentadas
    según su profundidad.
    """
    nombre = models.CharField(max_length=100)
    parent = models.ForeignKey(
        'self', null=True, blank=True, related_name='hijas', on_delete=models.CASCADE
    )

    def __str__(self):
        return self.nombre


class Editorial(models.Model):
    codigo = models.CharField(max_length=10, unique=True)
    nombre = models.CharField(max_length=100)

    class Meta:
        verbose_name_plural = 'editoriales'

    def __str__(self):
        return f'{self.nombre} ({self.codigo})'


class Libro(models.Model):
    titulo = models.CharField(max_length=200)
    publicado = models.BooleanField(default=True)
    autor = models.ForeignKey(
        Autor, null=True, blank=True, related_name='libros', on_delete=models.SET_NULL
    )
    categoria = models.ForeignKey(
        Categoria, null=True, blank=True, related_name='libros', on_delete=models.SET_NULL
    )
    # Se guarda el código de la editorial, no su id.
    editorial = models.ForeignKey(
        Editorial, to_field='codigo', null=True, blank=True,
        related_name='libros', on_delete=models.SET_NULL
    )
    secuela_de = models.ForeignKey(
        'self', null=True, blank=True, related_name='secuelas', on_delete=models.SET_NULL
    )
    coautores = models.ManyToManyField(Autor, blank=True, related_name='coescritos')

    dropdown_scopes = {
        'publicados': libros_publicados,
    }

    def __str__(self):
        return self.titulo


class Ficha(models.Model):
    codigo_de_barras = models.CharField(max_length=30, unique=True)
    libro = models.OneToOneField(
        Libro, null=True, blank=True, related_name='ficha', on_delete=models.SET_NULL
    )

    def __str__(self):
        return self.codigo_de_barras


class Portada(models.Model):
    """Cada portada pertenece a un único libro y no puede quedar suelta."""
    descripcion = models.CharField(max_length=200)
    libro = models.OneToOneField(Libro, related_name='portada', on_delete=models.CASCADE)

    def __str__(self):
        return self.descripcion
