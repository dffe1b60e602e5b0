from django.contrib import admin

from .forms import LibroForm
from .models import Autor, Categoria, Editorial, Ficha, Libro, Portada


class AutorAdmin(admin.ModelAdmin):
    list_display = ('apellido', 'nombre', 'email', 'activo')
    list_filter = ('activo',)
    search_fields = ('apellido', 'nombre', 'email')


class CategoriaAdmin(admin.ModelAdmin):
    list_display = ('nombre', 'parent')
    search_fields = ('nombre',)


class EditorialAdmin(admin.ModelAdmin):
    list_display = ('codigo', 'nombre')
    search_fields = ('codigo', 'nombre')


class LibroAdmin(admin.ModelAdmin):
    form = LibroForm
    list_display = ('titulo', 'autor', 'categoria', 'editorial', 'publicado')
    list_filter = ('publicado',)
    search_fields = ('titulo',)
    fields = (
        'titulo',
        'publicado',
        'autor',
        'categoria',
        'editorial',
        'secuela_de',
        'coautores',
        'ficha',
        'portada',
    )


class FichaAdmin(admin.ModelAdmin):
    list_display = ('codigo_de_barras', 'libro')
    search_fields = ('codigo_de_barras',)


class PortadaAdmin(admin.ModelAdmin):
    list_display = ('descripcion', 'libro')
    search_fields = ('descripcion',)


admin.site.register(Autor, AutorAdmin)
admin.site.register(Categoria, CategoriaAdmin)
admin.site.register(Editorial, EditorialAdmin)
admin.site.register(Libro, LibroAdmin)
admin.site.register(Ficha, FichaAdmin)
admin.site.register(Portada, PortadaAdmin)
