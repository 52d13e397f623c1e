from django.contrib import admin
from django.urls import path, include

from .views import home

urlpatterns = [
    path("", home, name="home"),
    path("admin/", admin.site.urls),

    # login / logout / cambio de contraseña
    path("cuentas/", include("django.contrib.auth.urls")),

    path("cotizaciones/", include("cotizaciones.urls")),
    path("perfiles/", include("perfiles.urls")),
]
