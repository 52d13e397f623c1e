from decimal import Decimal

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models

from perfiles.models import es_admin

from . import pricing


# ---------------- POLÍTICA DE ACCESO ----------------

class QuotationQuerySet(models.QuerySet):

    def visibles_para(self, user, incluir_archivadas=False):
        """
        Admin: todas (archivadas solo si se piden).
        Usuario normal: solo las suyas y nunca archivadas.
        """
        if es_admin(user):
            return self if incluir_archivadas else self.filter(archivada=False)
        if user is None or not getattr(user, "is_authenticated", False):
            return self.none()
        return self.filter(usuario=user, archivada=False)

    def editables_por(self, user):
        """Solo un admin puede cambiar estado, archivar o eliminar."""
        if es_admin(user):
            return self
        return self.none()


# ---------------- COTIZACIÓN ----------------

class Quotation(models.Model):
    class Tipo(models.TextChoices):
        CONTRAPARTE = pricing.CONTRAPARTE, "Contraparte"
        CLIENTE = pricing.CLIENTE, "Cliente"

    class Estado(models.TextChoices):
        PENDIENTE = "pendiente", "Pendiente"
        APROBADA = "aprobada", "Aprobada"
        RECHAZADA = "rechazada", "Rechazada"

    usuario = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="cotizaciones",
    )

    numero_siniestro = models.CharField("Número de siniestro", max_length=60, blank=True)
    marca = models.CharField(max_length=80, blank=True)
    modelo = models.CharField(max_length=120)
    anio = models.PositiveIntegerField("Año")
    placas = models.CharField(max_length=20, blank=True)

    tipo = models.CharField(max_length=12, choices=Tipo.choices)

    estado = models.CharField(
        max_length=12,
        choices=Estado.choices,
        default=Estado.PENDIENTE,
    )
    archivada = models.BooleanField(default=False)

    # Desglose (snapshot del cálculo al guardar)
    precio_por_pieza = models.DecimalField(max_digits=14, decimal_places=2, default=Decimal("0"))
    subtotal_laminado = models.DecimalField(max_digits=14, decimal_places=2, default=Decimal("0"))
    subtotal_repuestos = models.DecimalField(max_digits=14, decimal_places=2, default=Decimal("0"))
    mano_de_obra_instalacion = models.DecimalField(max_digits=14, decimal_places=2, default=Decimal("0"))
    ajuste = models.DecimalField(max_digits=14, decimal_places=2, default=Decimal("0"))
    total = models.DecimalField(max_digits=14, decimal_places=2, default=Decimal("0"))

    creado_en = models.DateTimeField(auto_now_add=True)
    actualizado_en = models.DateTimeField(auto_now=True)

    objects = QuotationQuerySet.as_manager()

    class Meta:
        ordering = ["-creado_en"]
        verbose_name = "Cotización"
        verbose_name_plural = "Cotizaciones"
        indexes = [
            models.Index(fields=["archivada", "creado_en"], name="cotiz_archivada_creado_idx"),
            models.Index(fields=["estado"], name="cotiz_estado_idx"),
        ]

    def __str__(self):
        siniestro = self.numero_siniestro or "N/A"
        return f"COT {self.pk} - Siniestro {siniestro} - {self.modelo} {self.anio}"

    @property
    def subtotal(self):
        return self.subtotal_laminado + self.subtotal_repuestos + self.mano_de_obra_instalacion

    def aplicar_desglose(self, desglose):
        self.precio_por_pieza = desglose.precio_por_pieza
        self.subtotal_laminado = desglose.subtotal_laminado
        self.subtotal_repuestos = desglose.subtotal_repuestos
        self.mano_de_obra_instalacion = desglose.mano_de_obra_instalacion
        self.ajuste = desglose.ajuste
        self.total = desglose.total


# ---------------- LÍNEAS (inmutables una vez guardadas) ----------------

class LineaInmutable(models.Model):

    class Meta:
        abstract = True

    def save(self, *args, **kwargs):
        if self.pk and type(self).objects.filter(pk=self.pk).exists():
            raise ValueError("Las piezas de una cotización guardada no se pueden modificar.")
        super().save(*args, **kwargs)


class PartidaLaminado(LineaInmutable):
    """
    Pieza de laminado y pintura: del catálogo (pieza_id = "f1", "t20", ...)
    o personalizada (pieza_id = "custom_<ms>").
    """
    cotizacion = models.ForeignKey(
        Quotation,
        on_delete=models.CASCADE,
        related_name="partidas_laminado",
    )

    pieza_id = models.CharField(max_length=40)
    nombre = models.CharField(max_length=200)
    personalizada = models.BooleanField(default=False)
    precio = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0"))],
    )
    orden = models.PositiveIntegerField(default=0)

    class Meta:
        ordering = ["orden", "id"]
        verbose_name = "Laminado y pintura"
        verbose_name_plural = "Laminado y pintura"

    def __str__(self):
        return f"{self.nombre} - ${self.precio:,.2f}"


class RepuestoCotizacion(LineaInmutable):
    cotizacion = models.ForeignKey(
        Quotation,
        on_delete=models.CASCADE,
        related_name="repuestos",
    )

    referencia = models.CharField(max_length=40, blank=True)
    nombre = models.CharField(max_length=200)
    precio = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0"))],
    )
    url_referencia = models.URLField("Liga Mercado Libre", max_length=500, blank=True)
    orden = models.PositiveIntegerField(default=0)

    class Meta:
        ordering = ["orden", "id"]
        verbose_name = "Pieza de reemplazo"
        verbose_name_plural = "Piezas de reemplazo"

    def __str__(self):
        return f"{self.nombre} - ${self.precio:,.2f}"
