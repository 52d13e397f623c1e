from django.conf import settings
from django.db.models.signals import post_save
from django.dispatch import receiver

from .models import Profile


@receiver(post_save, sender=settings.AUTH_USER_MODEL)
def crear_perfil_usuario(sender, instance, created, **kwargs):
    """
    Todo usuario nuevo nace con perfil pendiente de aprobación y sin rol admin.
    """
    if not created:
        return

    Profile.objects.get_or_create(
        user=instance,
        defaults={
            "nombre_completo": instance.get_full_name() or instance.get_username(),
        },
    )
