from django.contrib import messages
from django.contrib.auth import login
from django.contrib.auth.decorators import login_required
from django.shortcuts import get_object_or_404, redirect, render
from django.views.decorators.http import require_POST

from .decorators import admin_requerido
from .forms import RegistroForm
from .models import Profile, esta_aprobado, perfil_de
from .services import PerfilError, cambiar_admin, cambiar_aprobacion


def registro(request):
    if request.user.is_authenticated:
        return redirect("home")

    if request.method == "POST":
        form = RegistroForm(request.POST)
        if form.is_valid():
            user = form.save()
            login(request, user, backend="django.contrib.auth.backends.ModelBackend")
            messages.success(request, "¡Cuenta creada! Un administrador debe aprobarla.")
            return redirect("perfiles:pendiente_aprobacion")
    else:
        form = RegistroForm()

    return render(request, "perfiles/registro.html", {"form": form})


@login_required
def pendiente_aprobacion(request):
    # Ya aprobado: al panel
    if esta_aprobado(request.user):
        return redirect("cotizaciones:panel")
    return render(
        request,
        "perfiles/pendiente_aprobacion.html",
        {"perfil": perfil_de(request.user)},
    )


# ======================================================
# PANEL DE USUARIOS (solo admin)
# ======================================================

@admin_requerido
def panel_usuarios(request):
    perfiles = list(Profile.objects.select_related("user"))
    pendientes = [p for p in perfiles if not p.is_approved]
    aprobados = [p for p in perfiles if p.is_approved]
    return render(request, "perfiles/panel_usuarios.html", {
        "pendientes": pendientes,
        "aprobados": aprobados,
        "secciones": [
            ("Pendientes de aprobación", pendientes),
            ("Aprobados", aprobados),
        ],
    })


@require_POST
@admin_requerido
def alternar_aprobacion(request, pk: int):
    perfil = get_object_or_404(Profile.objects.select_related("user"), pk=pk)
    try:
        cambiar_aprobacion(perfil, request.user)
    except PerfilError as e:
        messages.error(request, str(e))
    else:
        estado = "aprobado" if perfil.is_approved else "desaprobado"
        messages.success(request, f"Usuario {estado} correctamente")
    return redirect("perfiles:panel_usuarios")


@require_POST
@admin_requerido
def alternar_admin(request, pk: int):
    perfil = get_object_or_404(Profile.objects.select_related("user"), pk=pk)
    try:
        cambiar_admin(perfil, request.user)
    except PerfilError as e:
        messages.error(request, str(e))
    else:
        cambio = "otorgados" if perfil.is_admin else "removidos"
        messages.success(request, f"Permisos de administrador {cambio} correctamente")
    return redirect("perfiles:panel_usuarios")
