from io import BytesIO

import pytest
from django.urls import reverse
from django.utils import timezone
from openpyxl import load_workbook

from cotizaciones.models import Quotation

pytestmark = pytest.mark.django_db


def _datos_cotizacion(accion, **extra):
    datos = {
        "tipo": "cliente",
        "numero_siniestro": "S-2024",
        "marca": "Nissan",
        "modelo": "Versa",
        "anio": str(timezone.localdate().year - 5),
        "placas": "XYZ-987",
        "piezas": ["f1"],
        "piezas_personalizadas": "Techo",
        "repuestos-TOTAL_FORMS": "1",
        "repuestos-INITIAL_FORMS": "0",
        "repuestos-MIN_NUM_FORMS": "0",
        "repuestos-MAX_NUM_FORMS": "1000",
        "repuestos-0-nombre": "Faro Delantero Izquierdo",
        "repuestos-0-precio": "$1,000",
        "repuestos-0-url_referencia": "",
        "accion": accion,
    }
    datos.update(extra)
    return datos


# ═══════════════════════════════════════════════════════════════════════════════
# PANEL / NUEVA / DETALLE
# ═══════════════════════════════════════════════════════════════════════════════

def test_home_redirige_al_panel(client, usuario):
    client.force_login(usuario)
    resp = client.get(reverse("home"))
    assert resp.status_code == 302
    assert resp.url == reverse("cotizaciones:panel")


def test_panel_lista_cotizaciones(client, usuario, cotizacion):
    client.force_login(usuario)
    resp = client.get(reverse("cotizaciones:panel"))
    assert resp.status_code == 200
    assert "S-1001" in resp.content.decode()


def test_nueva_formulario_vacio(client, usuario):
    client.force_login(usuario)
    resp = client.get(reverse("cotizaciones:nueva") + "?tipo=cliente")
    assert resp.status_code == 200
    assert resp.context["form"].initial == {"tipo": "cliente"}


def test_resumen_no_guarda(client, usuario):
    client.force_login(usuario)
    resp = client.post(reverse("cotizaciones:nueva"), _datos_cotizacion("resumen"))

    assert resp.status_code == 200
    desglose = resp.context["desglose"]
    assert desglose.subtotal == 5500
    assert desglose.total == 6600
    assert Quotation.objects.count() == 0


def test_guardar_crea_y_redirige(client, usuario):
    client.force_login(usuario)
    resp = client.post(reverse("cotizaciones:nueva"), _datos_cotizacion("guardar"))

    cot = Quotation.objects.get()
    assert resp.status_code == 302
    assert resp.url == reverse("cotizaciones:detalle", args=[cot.pk])
    assert cot.usuario == usuario
    assert cot.estado == "pendiente"
    assert cot.total == 6600
    assert cot.partidas_laminado.count() == 2
    assert cot.repuestos.count() == 1


def test_guardar_sin_modelo_muestra_error(client, usuario):
    client.force_login(usuario)
    resp = client.post(reverse("cotizaciones:nueva"), _datos_cotizacion("guardar", modelo=""))

    assert resp.status_code == 200
    assert resp.context["form"].errors
    assert Quotation.objects.count() == 0


def test_repuesto_con_precio_invalido(client, usuario):
    client.force_login(usuario)
    datos = _datos_cotizacion("guardar", **{"repuestos-0-precio": "mil pesos"})
    resp = client.post(reverse("cotizaciones:nueva"), datos)

    assert resp.status_code == 200
    assert resp.context["formset"].errors[0]["precio"]
    assert Quotation.objects.count() == 0


def test_repuesto_con_ceros_de_mas(client, usuario):
    client.force_login(usuario)
    datos = _datos_cotizacion("guardar", **{"repuestos-0-precio": "100.000"})
    resp = client.post(reverse("cotizaciones:nueva"), datos)

    assert resp.status_code == 302
    assert Quotation.objects.get().repuestos.get().precio == 100


def test_nueva_sugiere_repuestos(client, usuario):
    client.force_login(usuario)
    resp = client.get(reverse("cotizaciones:nueva"))

    html = resp.content.decode()
    assert '<datalist id="ejemplos-repuestos">' in html
    assert '<option value="Faro Delantero Izquierdo">' in html
    assert 'list="ejemplos-repuestos"' in html


def test_detalle_de_otro_usuario_es_404(client, otro_usuario, cotizacion):
    client.force_login(otro_usuario)
    resp = client.get(reverse("cotizaciones:detalle", args=[cotizacion.pk]))
    assert resp.status_code == 404


def test_detalle_propio(client, usuario, cotizacion):
    client.force_login(usuario)
    resp = client.get(reverse("cotizaciones:detalle", args=[cotizacion.pk]))
    assert resp.status_code == 200
    assert "Cofre (Capó)" in resp.content.decode()


# ═══════════════════════════════════════════════════════════════════════════════
# ACCIONES DE ADMIN
# ═══════════════════════════════════════════════════════════════════════════════

def test_admin_cambia_estado(client, admin_user, cotizacion):
    client.force_login(admin_user)
    url = reverse("cotizaciones:cambiar_estado", args=[cotizacion.pk])
    resp = client.post(url, {"estado": "aprobada"}, follow=True)

    cotizacion.refresh_from_db()
    assert cotizacion.estado == "aprobada"
    assert "Estado actualizado correctamente" in resp.content.decode()


def test_cambiar_estado_solo_post(client, admin_user, cotizacion):
    client.force_login(admin_user)
    resp = client.get(reverse("cotizaciones:cambiar_estado", args=[cotizacion.pk]))
    assert resp.status_code == 405


def test_no_admin_no_cambia_estado(client, usuario, cotizacion):
    client.force_login(usuario)
    url = reverse("cotizaciones:cambiar_estado", args=[cotizacion.pk])
    resp = client.post(url, {"estado": "aprobada"}, follow=True)

    cotizacion.refresh_from_db()
    assert cotizacion.estado == "pendiente"
    assert "No se pudo actualizar el estado" in resp.content.decode()


def test_admin_archiva(client, admin_user, cotizacion):
    client.force_login(admin_user)
    resp = client.post(reverse("cotizaciones:archivar", args=[cotizacion.pk]))

    assert resp.url == reverse("cotizaciones:panel")
    cotizacion.refresh_from_db()
    assert cotizacion.archivada is True


def test_admin_elimina(client, admin_user, cotizacion):
    client.force_login(admin_user)
    resp = client.post(reverse("cotizaciones:eliminar", args=[cotizacion.pk]))

    assert resp.url == reverse("cotizaciones:panel")
    assert not Quotation.objects.filter(pk=cotizacion.pk).exists()


def test_no_admin_no_elimina(client, usuario, cotizacion):
    client.force_login(usuario)
    client.post(reverse("cotizaciones:eliminar", args=[cotizacion.pk]))
    assert Quotation.objects.filter(pk=cotizacion.pk).exists()


# ═══════════════════════════════════════════════════════════════════════════════
# EXPORTACIONES
# ═══════════════════════════════════════════════════════════════════════════════

def test_pdf(client, usuario, cotizacion):
    client.force_login(usuario)
    resp = client.get(reverse("cotizaciones:pdf", args=[cotizacion.pk]))

    assert resp.status_code == 200
    assert resp["Content-Type"] == "application/pdf"
    assert resp.content.startswith(b"%PDF")


def test_excel(client, admin_user, usuario, crear_cotizacion):
    crear_cotizacion(usuario)
    crear_cotizacion(usuario, siniestro="S-1002")
    client.force_login(admin_user)

    resp = client.get(reverse("cotizaciones:excel"))
    assert resp.status_code == 200

    ws = load_workbook(BytesIO(resp.content))["Cotizaciones"]
    filas = list(ws.iter_rows(values_only=True))
    # encabezado + 2 cotizaciones + TOTAL
    assert len(filas) == 4
    assert filas[-1][-2] == "TOTAL"
    assert filas[-1][-1] == 8000


def test_comando_exportar(tmp_path, usuario, admin_user, crear_cotizacion):
    from django.core.management import call_command

    from cotizaciones import services

    crear_cotizacion(usuario)
    archivada = crear_cotizacion(usuario, siniestro="S-2")
    services.archivar(archivada, admin_user)

    destino = tmp_path / "cotizaciones.xlsx"
    call_command("exportar_cotizaciones", str(destino))
    assert load_workbook(destino)["Cotizaciones"].max_row == 3

    call_command("exportar_cotizaciones", str(destino), "--archivadas")
    assert load_workbook(destino)["Cotizaciones"].max_row == 4
