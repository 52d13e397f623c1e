from django.conf import settings
from django.db import models


class Profile(models.Model):
    """
    Datos del usuario de la app de cotizaciones.
    El admin decide quién entra (is_approved) y quién administra (is_admin).
    """

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="perfil",
    )

    nombre_completo = models.CharField("Nombre completo", max_length=150, blank=True)
    nombre_corto = models.CharField("Nombre corto", max_length=40, blank=True)
    celular = models.CharField("Celular", max_length=30, blank=True)

    is_approved = models.BooleanField("Aprobado", default=False)
    is_admin = models.BooleanField("Administrador", default=False)

    creado_en = models.DateTimeField(auto_now_add=True)
    actualizado_en = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-creado_en"]
        verbose_name = "Perfil"
        verbose_name_plural = "Perfiles"

    def __str__(self):
        return self.nombre_completo or self.user.get_username()

    @property
    def nombre_visible(self):
        return self.nombre_corto or self.nombre_completo or self.user.get_username()


# ---------------- ACTOR ACTUAL ----------------

def perfil_de(user):
    if user is None or not getattr(user, "is_authenticated", False):
        return None
    try:
        return user.perfil
    except Profile.DoesNotExist:
        return None


def es_admin(user) -> bool:
    if user is None or not getattr(user, "is_authenticated", False):
        return False
    if user.is_superuser:
        return True
    perfil = perfil_de(user)
    return bool(perfil and perfil.is_admin)


def esta_aprobado(user) -> bool:
    if user is None or not getattr(user, "is_authenticated", False):
        return False
    if user.is_superuser:
        return True
    perfil = perfil_de(user)
    return bool(perfil and perfil.is_approved)
