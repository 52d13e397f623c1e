from django.shortcuts import redirect, render

from perfiles.models import esta_aprobado


def home(request):
    if not request.user.is_authenticated:
        return render(request, "home.html")

    # Sin aprobación todavía: a la pantalla de espera
    if not esta_aprobado(request.user):
        return redirect("perfiles:pendiente_aprobacion")
    return redirect("cotizaciones:panel")
