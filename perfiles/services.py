import logging

from .models import Profile, es_admin

logger = logging.getLogger(__name__)


class PerfilError(Exception):
    """Cambio de perfil no permitido."""


def cambiar_aprobacion(perfil: Profile, actor, aprobado=None) -> Profile:
    """
    Aprueba / desaprueba un usuario. Sin valor explícito, alterna el actual.
    """
    if not es_admin(actor):
        raise PerfilError("Solo un administrador puede aprobar usuarios.")

    nuevo = (not perfil.is_approved) if aprobado is None else bool(aprobado)
    if nuevo == perfil.is_approved:
        return perfil

    perfil.is_approved = nuevo
    perfil.save(update_fields=["is_approved", "actualizado_en"])
    logger.info(
        "Perfil %s %s por %s",
        perfil.pk, "aprobado" if nuevo else "desaprobado", actor.get_username(),
    )
    return perfil


def cambiar_admin(perfil: Profile, actor, is_admin=None) -> Profile:
    """
    Otorga / quita permisos de administrador.
    Nadie puede cambiar su propio rol.
    """
    if not es_admin(actor):
        raise PerfilError("Solo un administrador puede cambiar roles.")
    if perfil.user_id == actor.pk:
        raise PerfilError("No puedes cambiar tu propio rol de administrador.")

    nuevo = (not perfil.is_admin) if is_admin is None else bool(is_admin)
    if nuevo == perfil.is_admin:
        return perfil

    perfil.is_admin = nuevo
    perfil.save(update_fields=["is_admin", "actualizado_en"])
    logger.info(
        "Permisos de administrador %s a perfil %s por %s",
        "otorgados" if nuevo else "removidos", perfil.pk, actor.get_username(),
    )
    return perfil
