from django.urls import path

from . import views

app_name = "cotizaciones"

urlpatterns = [
    path("", views.panel, name="panel"),
    path("nueva/", views.nueva_cotizacion, name="nueva"),
    path("excel/", views.cotizaciones_excel, name="excel"),
    path("<int:pk>/", views.detalle, name="detalle"),
    path("<int:pk>/estado/", views.cambiar_estado, name="cambiar_estado"),
    path("<int:pk>/archivar/", views.archivar, name="archivar"),
    path("<int:pk>/eliminar/", views.eliminar, name="eliminar"),
    path("<int:pk>/pdf/", views.cotizacion_pdf, name="pdf"),
]
