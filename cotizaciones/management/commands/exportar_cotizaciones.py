from django.core.management.base import BaseCommand

from cotizaciones.exportar import libro_cotizaciones
from cotizaciones.models import Quotation
from cotizaciones.services import autores_de


class Command(BaseCommand):
    help = "Exporta las cotizaciones a un archivo Excel (.xlsx)"

    def add_arguments(self, parser):
        parser.add_argument("path", type=str, help="Ruta del archivo .xlsx")
        parser.add_argument(
            "--archivadas",
            action="store_true",
            help="Incluye también las cotizaciones archivadas",
        )
        parser.add_argument(
            "--estado",
            choices=Quotation.Estado.values,
            help="Solo cotizaciones en este estado",
        )

    def handle(self, *args, **options):
        path = options["path"]

        qs = Quotation.objects.select_related("usuario").order_by("-creado_en")
        if not options["archivadas"]:
            qs = qs.filter(archivada=False)
        if options["estado"]:
            qs = qs.filter(estado=options["estado"])

        cotizaciones = list(qs)
        wb = libro_cotizaciones(cotizaciones, autores_de(cotizaciones))
        wb.save(path)

        self.stdout.write(self.style.SUCCESS(
            f"OK. Exportadas: {len(cotizaciones)} cotización(es) -> {path}"
        ))
