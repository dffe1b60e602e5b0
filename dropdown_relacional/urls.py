from django.urls import re_path
from django.conf.urls import include
from django.contrib import admin

from relaciones import urls as relaciones_urls

urlpatterns = [
    re_path(r'^admin/', admin.site.urls),
    re_path(r'^relaciones/', include(relaciones_urls)),
]
