from django.contrib import admin, messages

from perfiles.models import es_admin

from . import services
from .exceptions import CotizacionError
from .models import PartidaLaminado, Quotation, RepuestoCotizacion


class LineaSoloLecturaInline(admin.TabularInline):
    extra = 0
    can_delete = False

    def has_add_permission(self, request, obj=None):
        return False

    def has_change_permission(self, request, obj=None):
        return False


class PartidaLaminadoInline(LineaSoloLecturaInline):
    model = PartidaLaminado
    fields = ("nombre", "personalizada", "precio")
    readonly_fields = fields


class RepuestoCotizacionInline(LineaSoloLecturaInline):
    model = RepuestoCotizacion
    fields = ("nombre", "precio", "url_referencia")
    readonly_fields = fields


@admin.register(Quotation)
class QuotationAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "numero_siniestro",
        "modelo",
        "anio",
        "tipo",
        "estado",
        "archivada",
        "usuario",
        "total",
        "creado_en",
    )
    search_fields = ("numero_siniestro", "modelo", "marca", "placas", "usuario__username")
    list_filter = ("estado", "tipo", "archivada", "creado_en")

    readonly_fields = [f.name for f in Quotation._meta.fields]

    inlines = [PartidaLaminadoInline, RepuestoCotizacionInline]

    actions = [
        "marcar_pendiente",
        "marcar_aprobada",
        "marcar_rechazada",
        "archivar_cotizaciones",
    ]

    # ==================================================
    # ACCIONES DE ESTADO
    # ==================================================

    def _cambiar_estado(self, request, queryset, estado):
        cambiadas = 0
        for cotizacion in queryset:
            try:
                if services.cambiar_estado(cotizacion, estado, request.user):
                    cambiadas += 1
            except CotizacionError as e:
                messages.error(request, f"{cotizacion}: {e}")
        messages.success(request, f"{cambiadas} cotización(es) marcadas como {estado.upper()}.")

    @admin.action(description="Marcar como PENDIENTE")
    def marcar_pendiente(self, request, queryset):
        self._cambiar_estado(request, queryset, Quotation.Estado.PENDIENTE)

    @admin.action(description="Marcar como APROBADA")
    def marcar_aprobada(self, request, queryset):
        self._cambiar_estado(request, queryset, Quotation.Estado.APROBADA)

    @admin.action(description="Marcar como RECHAZADA")
    def marcar_rechazada(self, request, queryset):
        self._cambiar_estado(request, queryset, Quotation.Estado.RECHAZADA)

    @admin.action(description="Archivar")
    def archivar_cotizaciones(self, request, queryset):
        count = 0
        for cotizacion in queryset.filter(archivada=False):
            try:
                services.archivar(cotizacion, request.user)
            except CotizacionError as e:
                messages.error(request, f"{cotizacion}: {e}")
                continue
            count += 1
        messages.success(request, f"{count} cotización(es) archivadas.")

    # --------------------------------------------------
    # Borrado (pasa por el servicio)
    # --------------------------------------------------

    def _eliminar(self, request, cotizacion):
        try:
            services.eliminar(cotizacion, request.user)
        except CotizacionError as e:
            messages.error(request, f"No se pudo eliminar {cotizacion}: {e}")

    def delete_model(self, request, obj):
        self._eliminar(request, obj)

    def delete_queryset(self, request, queryset):
        for cotizacion in queryset:
            self._eliminar(request, cotizacion)

    # --------------------------------------------------
    # Permisos
    # --------------------------------------------------

    def has_add_permission(self, request):
        # Se crean desde la app (formulario de nueva cotización)
        return False

    def has_view_permission(self, request, obj=None):
        return es_admin(request.user)

    def has_change_permission(self, request, obj=None):
        return es_admin(request.user)

    def has_delete_permission(self, request, obj=None):
        return es_admin(request.user)

    def has_module_permission(self, request):
        return es_admin(request.user)
