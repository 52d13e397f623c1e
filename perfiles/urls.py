from django.urls import path

from . import views

app_name = "perfiles"

urlpatterns = [
    path("registro/", views.registro, name="registro"),
    path("pendiente/", views.pendiente_aprobacion, name="pendiente_aprobacion"),

    path("usuarios/", views.panel_usuarios, name="panel_usuarios"),
    path("usuarios/<int:pk>/aprobacion/", views.alternar_aprobacion, name="alternar_aprobacion"),
    path("usuarios/<int:pk>/admin/", views.alternar_admin, name="alternar_admin"),
]
