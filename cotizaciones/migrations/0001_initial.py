from decimal import Decimal

from django.conf import settings
import django.core.validators
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Quotation",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("numero_siniestro", models.CharField(blank=True, max_length=60, verbose_name="Número de siniestro")),
                ("marca", models.CharField(blank=True, max_length=80)),
                ("modelo", models.CharField(max_length=120)),
                ("anio", models.PositiveIntegerField(verbose_name="Año")),
                ("placas", models.CharField(blank=True, max_length=20)),
                ("tipo", models.CharField(choices=[("contraparte", "Contraparte"), ("cliente", "Cliente")], max_length=12)),
                ("estado", models.CharField(choices=[("pendiente", "Pendiente"), ("aprobada", "Aprobada"), ("rechazada", "Rechazada")], default="pendiente", max_length=12)),
                ("archivada", models.BooleanField(default=False)),
                ("precio_por_pieza", models.DecimalField(decimal_places=2, default=Decimal("0"), max_digits=14)),
                ("subtotal_laminado", models.DecimalField(decimal_places=2, default=Decimal("0"), max_digits=14)),
                ("subtotal_repuestos", models.DecimalField(decimal_places=2, default=Decimal("0"), max_digits=14)),
                ("mano_de_obra_instalacion", models.DecimalField(decimal_places=2, default=Decimal("0"), max_digits=14)),
                ("ajuste", models.DecimalField(decimal_places=2, default=Decimal("0"), max_digits=14)),
                ("total", models.DecimalField(decimal_places=2, default=Decimal("0"), max_digits=14)),
                ("creado_en", models.DateTimeField(auto_now_add=True)),
                ("actualizado_en", models.DateTimeField(auto_now=True)),
                ("usuario", models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name="cotizaciones", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "verbose_name": "Cotización",
                "verbose_name_plural": "Cotizaciones",
                "ordering": ["-creado_en"],
                "indexes": [
                    models.Index(fields=["archivada", "creado_en"], name="cotiz_archivada_creado_idx"),
                    models.Index(fields=["estado"], name="cotiz_estado_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="PartidaLaminado",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("pieza_id", models.CharField(max_length=40)),
                ("nombre", models.CharField(max_length=200)),
                ("personalizada", models.BooleanField(default=False)),
                ("precio", models.DecimalField(decimal_places=2, max_digits=14, validators=[django.core.validators.MinValueValidator(Decimal("0"))])),
                ("orden", models.PositiveIntegerField(default=0)),
                ("cotizacion", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="partidas_laminado", to="cotizaciones.quotation")),
            ],
            options={
                "verbose_name": "Laminado y pintura",
                "verbose_name_plural": "Laminado y pintura",
                "ordering": ["orden", "id"],
            },
        ),
        migrations.CreateModel(
            name="RepuestoCotizacion",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("referencia", models.CharField(blank=True, max_length=40)),
                ("nombre", models.CharField(max_length=200)),
                ("precio", models.DecimalField(decimal_places=2, max_digits=14, validators=[django.core.validators.MinValueValidator(Decimal("0"))])),
                ("url_referencia", models.URLField(blank=True, max_length=500, verbose_name="Liga Mercado Libre")),
                ("orden", models.PositiveIntegerField(default=0)),
                ("cotizacion", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="repuestos", to="cotizaciones.quotation")),
            ],
            options={
                "verbose_name": "Pieza de reemplazo",
                "verbose_name_plural": "Piezas de reemplazo",
                "ordering": ["orden", "id"],
            },
        ),
    ]
