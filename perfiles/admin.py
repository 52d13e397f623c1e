from django.contrib import admin, messages

from .models import Profile, es_admin
from .services import PerfilError, cambiar_admin, cambiar_aprobacion


@admin.register(Profile)
class ProfileAdmin(admin.ModelAdmin):
    list_display = (
        "nombre_completo",
        "nombre_corto",
        "email",
        "celular",
        "is_approved",
        "is_admin",
        "creado_en",
    )
    list_filter = ("is_approved", "is_admin")
    search_fields = ("nombre_completo", "nombre_corto", "user__username", "user__email", "celular")

    readonly_fields = ("user", "is_approved", "is_admin", "creado_en", "actualizado_en")

    actions = [
        "aprobar_usuarios",
        "desaprobar_usuarios",
        "hacer_admin",
        "quitar_admin",
    ]

    @admin.display(description="Correo")
    def email(self, obj):
        return obj.user.email or "-"

    # ==================================================
    # ACCIONES (aprobación / rol)
    # ==================================================

    def _aplicar(self, request, queryset, fn, valor, etiqueta):
        count = 0
        for perfil in queryset.select_related("user"):
            try:
                fn(perfil, request.user, valor)
            except PerfilError as e:
                messages.error(request, f"{perfil}: {e}")
                continue
            count += 1
        if count:
            messages.success(request, f"{count} usuario(s) {etiqueta}.")

    @admin.action(description="Aprobar usuarios")
    def aprobar_usuarios(self, request, queryset):
        self._aplicar(request, queryset, cambiar_aprobacion, True, "aprobados")

    @admin.action(description="Desaprobar usuarios")
    def desaprobar_usuarios(self, request, queryset):
        self._aplicar(request, queryset, cambiar_aprobacion, False, "desaprobados")

    @admin.action(description="Hacer administrador")
    def hacer_admin(self, request, queryset):
        self._aplicar(request, queryset, cambiar_admin, True, "ahora son administradores")

    @admin.action(description="Quitar administrador")
    def quitar_admin(self, request, queryset):
        self._aplicar(request, queryset, cambiar_admin, False, "ya no son administradores")

    # --------------------------------------------------
    # Permisos
    # --------------------------------------------------

    def has_add_permission(self, request):
        # El perfil nace con el usuario (signal)
        return False

    def has_change_permission(self, request, obj=None):
        return es_admin(request.user)

    def has_delete_permission(self, request, obj=None):
        return request.user.is_superuser
