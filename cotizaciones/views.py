from django.contrib import messages
from django.http import Http404, HttpResponse
from django.shortcuts import redirect, render
from django.views.decorators.http import require_POST

from perfiles.decorators import aprobado_requerido
from perfiles.models import es_admin

from . import services
from .exceptions import CotizacionError, ValidacionError
from .exportar import libro_cotizaciones, pdf_cotizacion
from .forms import CotizacionForm, RepuestoFormSet
from .catalogo import EJEMPLOS_REPUESTOS
from .models import Quotation


@aprobado_requerido
def panel(request):
    admin = es_admin(request.user)
    q = request.GET.get("q", "").strip()
    ver_archivadas = admin and request.GET.get("archivadas") == "1"

    cotizaciones = list(
        services.cotizaciones_visibles(request.user, incluir_archivadas=ver_archivadas, busqueda=q)
    )
    autores = services.autores_de(cotizaciones)

    filas = [(c, autores.get(c.usuario_id)) for c in cotizaciones]
    return render(request, "cotizaciones/panel.html", {
        "filas": filas,
        "q": q,
        "ver_archivadas": ver_archivadas,
        "es_admin": admin,
    })


@aprobado_requerido
def nueva_cotizacion(request):
    """
    Un solo formulario: datos del vehículo, piezas y repuestos.
    accion=resumen muestra el desglose sin guardar; accion=guardar lo persiste.
    """
    desglose = None

    if request.method == "POST":
        form = CotizacionForm(request.POST)
        formset = RepuestoFormSet(request.POST, prefix="repuestos")

        if form.is_valid() and formset.is_valid():
            try:
                borrador = form.construir_borrador(formset)
                if request.POST.get("accion") == "guardar":
                    cotizacion = services.guardar_cotizacion(borrador, request.user)
                    messages.success(request, "¡Cotización guardada exitosamente!")
                    return redirect("cotizaciones:detalle", pk=cotizacion.pk)

                borrador.validar()
                desglose = borrador.desglose()
            except ValidacionError as e:
                for err in e.errores:
                    form.add_error(None, err)
            except CotizacionError as e:
                messages.error(request, f"No se pudo guardar la cotización. {e}")
    else:
        tipo = request.GET.get("tipo")
        initial = {"tipo": tipo} if tipo in Quotation.Tipo.values else {}
        form = CotizacionForm(initial=initial)
        formset = RepuestoFormSet(prefix="repuestos")

    return render(request, "cotizaciones/nueva.html", {
        "form": form,
        "formset": formset,
        "desglose": desglose,
        "ejemplos_repuestos": EJEMPLOS_REPUESTOS,
    })


def _cotizacion_o_404(request, pk):
    cotizacion = services.obtener_cotizacion(request.user, pk)
    if cotizacion is None:
        raise Http404("Cotización no encontrada")
    return cotizacion


@aprobado_requerido
def detalle(request, pk: int):
    cotizacion = _cotizacion_o_404(request, pk)
    autor = services.autores_de([cotizacion]).get(cotizacion.usuario_id)

    return render(request, "cotizaciones/detalle.html", {
        "cotizacion": cotizacion,
        "autor": autor,
        "es_admin": es_admin(request.user),
        "estados": Quotation.Estado.choices,
    })


# ======================================================
# ACCIONES DE ADMIN
# ======================================================

@require_POST
@aprobado_requerido
def cambiar_estado(request, pk: int):
    cotizacion = _cotizacion_o_404(request, pk)
    nuevo = request.POST.get("estado", "")

    try:
        cambio = services.cambiar_estado(cotizacion, nuevo, request.user)
    except (CotizacionError, ValueError) as e:
        messages.error(request, f"No se pudo actualizar el estado: {e}")
    else:
        if cambio:
            messages.success(request, "Estado actualizado correctamente")

    return redirect("cotizaciones:detalle", pk=pk)


@require_POST
@aprobado_requerido
def archivar(request, pk: int):
    cotizacion = _cotizacion_o_404(request, pk)

    try:
        services.archivar(cotizacion, request.user)
    except CotizacionError as e:
        messages.error(request, f"No se pudo archivar: {e}")
        return redirect("cotizaciones:detalle", pk=pk)

    messages.success(request, "Cotización archivada correctamente")
    return redirect("cotizaciones:panel")


@require_POST
@aprobado_requerido
def eliminar(request, pk: int):
    try:
        services.eliminar(pk, request.user)
    except CotizacionError as e:
        messages.error(request, f"No se pudo eliminar: {e}")
        return redirect("cotizaciones:panel")

    messages.success(request, "Cotización eliminada correctamente")
    return redirect("cotizaciones:panel")


# ======================================================
# EXPORTACIONES
# ======================================================

@aprobado_requerido
def cotizacion_pdf(request, pk: int):
    cotizacion = _cotizacion_o_404(request, pk)
    perfil = services.autores_de([cotizacion]).get(cotizacion.usuario_id)

    resp = HttpResponse(
        pdf_cotizacion(cotizacion, perfil.nombre_visible if perfil else None),
        content_type="application/pdf",
    )
    resp["Content-Disposition"] = f'attachment; filename="cotizacion_{cotizacion.pk}.pdf"'
    return resp


@aprobado_requerido
def cotizaciones_excel(request):
    ver_archivadas = es_admin(request.user) and request.GET.get("archivadas") == "1"
    cotizaciones = list(
        services.cotizaciones_visibles(
            request.user,
            incluir_archivadas=ver_archivadas,
            busqueda=request.GET.get("q", ""),
        )
    )
    wb = libro_cotizaciones(cotizaciones, services.autores_de(cotizaciones))

    response = HttpResponse(
        content_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    )
    response["Content-Disposition"] = 'attachment; filename="cotizaciones.xlsx"'

    wb.save(response)
    return response
