from decimal import Decimal
from io import BytesIO

from django.utils import timezone
from django.utils.html import escape

from openpyxl import Workbook
from openpyxl.utils import get_column_letter

from reportlab.lib import colors
from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle


ENCABEZADOS_EXCEL = [
    "ID", "Fecha", "Siniestro", "Marca", "Modelo", "Año", "Placas",
    "Tipo", "Estado", "Archivada", "Autor",
    "Subtotal Laminado", "Subtotal Repuestos", "Mano de Obra", "Ajuste", "Total",
]


def _fecha(dt):
    return timezone.localtime(dt).strftime("%d/%m/%Y") if dt else ""


def _dinero(valor):
    return f"${Decimal(valor or 0):,.2f}"


def libro_cotizaciones(cotizaciones, autores=None) -> Workbook:
    """Una fila por cotización, con fila TOTAL al final."""
    autores = autores or {}

    wb = Workbook()
    ws = wb.active
    ws.title = "Cotizaciones"
    ws.append(ENCABEZADOS_EXCEL)

    total = Decimal("0")
    for c in cotizaciones:
        perfil = autores.get(c.usuario_id)
        autor = perfil.nombre_visible if perfil else c.usuario.get_username()
        total += c.total

        ws.append([
            c.pk,
            _fecha(c.creado_en),
            c.numero_siniestro or "",
            c.marca or "",
            c.modelo,
            c.anio,
            c.placas or "",
            c.get_tipo_display(),
            c.get_estado_display(),
            "Sí" if c.archivada else "No",
            autor,
            float(c.subtotal_laminado),
            float(c.subtotal_repuestos),
            float(c.mano_de_obra_instalacion),
            float(c.ajuste),
            float(c.total),
        ])

    ws.append([""] * (len(ENCABEZADOS_EXCEL) - 2) + ["TOTAL", float(total)])

    for col in range(1, len(ENCABEZADOS_EXCEL) + 1):
        ws.column_dimensions[get_column_letter(col)].width = 16

    return wb


def pdf_cotizacion(cotizacion, autor=None) -> bytes:
    buffer = BytesIO()
    try:
        doc = SimpleDocTemplate(
            buffer,
            pagesize=letter,
            leftMargin=36,
            rightMargin=36,
            topMargin=36,
            bottomMargin=36,
        )
        styles = getSampleStyleSheet()
        story = []

        story.append(Paragraph("Cotización de Hojalatería y Pintura", styles["Title"]))
        story.append(Spacer(1, 8))
        story.append(Paragraph(f"<b>Número de siniestro:</b> {escape(cotizacion.numero_siniestro or 'N/A')}", styles["Normal"]))
        story.append(Paragraph(f"<b>Fecha:</b> {_fecha(cotizacion.creado_en)}", styles["Normal"]))
        story.append(Paragraph(
            f"<b>Vehículo:</b> {escape(cotizacion.marca or '')} {escape(cotizacion.modelo)} {cotizacion.anio}".replace("  ", " "),
            styles["Normal"],
        ))
        if cotizacion.placas:
            story.append(Paragraph(f"<b>Placas:</b> {escape(cotizacion.placas)}", styles["Normal"]))
        story.append(Paragraph(f"<b>Tipo:</b> {cotizacion.get_tipo_display()}", styles["Normal"]))
        story.append(Paragraph(f"<b>Estado:</b> {cotizacion.get_estado_display()}", styles["Normal"]))
        if autor:
            story.append(Paragraph(f"<b>Elaboró:</b> {escape(autor)}", styles["Normal"]))
        story.append(Spacer(1, 12))

        data = [["Concepto", "Importe"]]

        for p in cotizacion.partidas_laminado.all():
            data.append([f"Laminado y pintura: {p.nombre}", _dinero(p.precio)])
        for r in cotizacion.repuestos.all():
            data.append([f"Repuesto: {r.nombre}", _dinero(r.precio)])
        if cotizacion.mano_de_obra_instalacion:
            data.append(["Mano de obra instalación", _dinero(cotizacion.mano_de_obra_instalacion)])

        data.append(["Subtotal Laminado y Pintura", _dinero(cotizacion.subtotal_laminado)])
        data.append(["Subtotal Repuestos", _dinero(cotizacion.subtotal_repuestos)])
        if cotizacion.ajuste:
            data.append(["Ajuste (20%)", _dinero(cotizacion.ajuste)])
        data.append(["TOTAL", _dinero(cotizacion.total)])

        table = Table(data, colWidths=[400, 120], repeatRows=1)
        table.setStyle(TableStyle([
            ("BACKGROUND", (0, 0), (-1, 0), colors.lightgrey),
            ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
            ("FONTSIZE", (0, 0), (-1, -1), 9),
            ("GRID", (0, 0), (-1, -1), 0.4, colors.grey),
            ("ALIGN", (1, 1), (1, -1), "RIGHT"),
            ("VALIGN", (0, 0), (-1, -1), "TOP"),

            # TOTAL (última fila)
            ("BACKGROUND", (0, -1), (-1, -1), colors.whitesmoke),
            ("FONTNAME", (0, -1), (-1, -1), "Helvetica-Bold"),
        ]))

        story.append(table)
        doc.build(story)

        return buffer.getvalue()
    finally:
        buffer.close()
