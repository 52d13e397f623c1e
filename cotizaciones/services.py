"""
Ciclo de vida de la cotización.

- Guardar: cualquier usuario aprobado; siempre entra PENDIENTE y sin archivar.
- Cambiar estado / archivar / eliminar: solo admin.

El permiso se revisa dos veces: aquí (PermisoDenegado, sin tocar la base) y en
la consulta misma (Quotation.objects.editables_por), que para un no-admin no
afecta ninguna fila. El objeto en memoria solo se actualiza después de que la
base confirma al menos una fila afectada.
"""
import logging

from django.core.exceptions import ValidationError
from django.db import transaction
from django.db.models import Q
from django.utils import timezone

from perfiles.models import Profile, es_admin

from .exceptions import OperacionFallida, PermisoDenegado, ValidacionError
from .models import PartidaLaminado, Quotation, RepuestoCotizacion

logger = logging.getLogger(__name__)

MSG_NO_ENCONTRADA = "No se encontró la cotización o no tienes permisos"


def _exigir_admin(user, accion):
    if not es_admin(user):
        logger.warning(
            "Usuario %s sin permisos intentó %s",
            getattr(user, "pk", None), accion,
        )
        raise PermisoDenegado(f"Solo un administrador puede {accion}.")


# ======================================================
# ALTA
# ======================================================

def guardar_cotizacion(borrador, user) -> Quotation:
    """
    Convierte el borrador en una cotización guardada (encabezado + líneas).
    Todo o nada: si una línea no valida, no queda nada guardado.
    """
    if user is None or not getattr(user, "is_authenticated", False):
        raise PermisoDenegado("Debes iniciar sesión para guardar la cotización")

    borrador.validar()
    desglose = borrador.desglose()

    cotizacion = Quotation(
        usuario=user,
        numero_siniestro=(borrador.numero_siniestro or "").strip(),
        marca=(borrador.marca or "").strip(),
        modelo=(borrador.modelo or "").strip(),
        anio=borrador.anio_entero(),
        placas=(borrador.placas or "").strip(),
        tipo=borrador.tipo,
        estado=Quotation.Estado.PENDIENTE,
        archivada=False,
    )
    cotizacion.aplicar_desglose(desglose)

    try:
        with transaction.atomic():
            cotizacion.full_clean()
            cotizacion.save()

            for orden, (pieza_id, nombre, personalizada) in enumerate(borrador.partidas_laminado()):
                partida = PartidaLaminado(
                    cotizacion=cotizacion,
                    pieza_id=pieza_id,
                    nombre=nombre,
                    personalizada=personalizada,
                    precio=desglose.precio_por_pieza,
                    orden=orden,
                )
                partida.full_clean()
                partida.save()

            for orden, r in enumerate(borrador.repuestos):
                repuesto = RepuestoCotizacion(
                    cotizacion=cotizacion,
                    referencia=r.id,
                    nombre=r.nombre,
                    precio=r.precio,
                    url_referencia=r.url_referencia,
                    orden=orden,
                )
                repuesto.full_clean()
                repuesto.save()
    except ValidationError as e:
        cotizacion.pk = None
        raise ValidacionError(e.messages) from e

    logger.info(
        "Cotización %s guardada por %s (%s, total %s)",
        cotizacion.pk, user.get_username(), cotizacion.tipo, cotizacion.total,
    )
    return cotizacion


# ======================================================
# CONSULTA
# ======================================================

def cotizaciones_visibles(user, incluir_archivadas=False, busqueda=""):
    qs = Quotation.objects.visibles_para(user, incluir_archivadas=incluir_archivadas)

    busqueda = (busqueda or "").strip()
    if busqueda:
        qs = qs.filter(Q(numero_siniestro__icontains=busqueda) | Q(modelo__icontains=busqueda))

    return qs.select_related("usuario").order_by("-creado_en")


def obtener_cotizacion(user, pk, incluir_archivadas=True):
    """Una cotización visible para el usuario; None si no existe o no la puede ver."""
    return (
        Quotation.objects.visibles_para(user, incluir_archivadas=incluir_archivadas)
        .prefetch_related("partidas_laminado", "repuestos")
        .filter(pk=pk)
        .first()
    )


def autores_de(cotizaciones):
    """{usuario_id: Profile} para mostrar quién hizo cada cotización."""
    ids = {c.usuario_id for c in cotizaciones}
    if not ids:
        return {}
    return {p.user_id: p for p in Profile.objects.filter(user_id__in=ids).select_related("user")}


# ======================================================
# TRANSICIONES (solo admin)
# ======================================================

def cambiar_estado(cotizacion: Quotation, nuevo_estado, user) -> bool:
    """
    Devuelve False si la cotización ya tenía ese estado (no se escribe nada).
    """
    _exigir_admin(user, "cambiar el estado")

    if nuevo_estado not in Quotation.Estado.values:
        raise ValueError(f"Estado inválido: {nuevo_estado!r}")

    if nuevo_estado == cotizacion.estado:
        return False

    ahora = timezone.now()
    filas = (
        Quotation.objects.editables_por(user)
        .filter(pk=cotizacion.pk)
        .update(estado=nuevo_estado, actualizado_en=ahora)
    )
    if filas == 0:
        logger.warning("No se pudo actualizar el estado de la cotización %s", cotizacion.pk)
        raise OperacionFallida(MSG_NO_ENCONTRADA)

    anterior = cotizacion.estado
    cotizacion.estado = nuevo_estado
    cotizacion.actualizado_en = ahora
    logger.info(
        "Cotización %s: %s -> %s por %s",
        cotizacion.pk, anterior, nuevo_estado, user.get_username(),
    )
    return True


def archivar(cotizacion: Quotation, user):
    """No hay forma de desarchivar."""
    _exigir_admin(user, "archivar cotizaciones")

    ahora = timezone.now()
    filas = (
        Quotation.objects.editables_por(user)
        .filter(pk=cotizacion.pk)
        .update(archivada=True, actualizado_en=ahora)
    )
    if filas == 0:
        logger.warning("No se pudo archivar la cotización %s", cotizacion.pk)
        raise OperacionFallida(MSG_NO_ENCONTRADA)

    cotizacion.archivada = True
    cotizacion.actualizado_en = ahora
    logger.info("Cotización %s archivada por %s", cotizacion.pk, user.get_username())


def eliminar(cotizacion, user):
    """
    Borra la cotización con sus líneas. Acepta la instancia o el id.
    """
    _exigir_admin(user, "eliminar cotizaciones")

    pk = cotizacion.pk if isinstance(cotizacion, Quotation) else cotizacion

    _, por_modelo = Quotation.objects.editables_por(user).filter(pk=pk).delete()
    if por_modelo.get(Quotation._meta.label, 0) == 0:
        logger.warning("No se pudo eliminar la cotización %s", pk)
        raise OperacionFallida(MSG_NO_ENCONTRADA)

    logger.info("Cotización %s eliminada por %s", pk, user.get_username())
