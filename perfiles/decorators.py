from functools import wraps

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.shortcuts import redirect

from .models import es_admin, esta_aprobado


def aprobado_requerido(view_func):
    """
    login_required + cuenta aprobada por un admin.
    Sin aprobación se manda a la pantalla de "pendiente de aprobación".
    """
    @login_required
    @wraps(view_func)
    def _wrapped(request, *args, **kwargs):
        if not esta_aprobado(request.user):
            return redirect("perfiles:pendiente_aprobacion")
        return view_func(request, *args, **kwargs)

    return _wrapped


def admin_requerido(view_func):
    """Como aprobado_requerido, pero además Profile.is_admin (o superusuario)."""
    @aprobado_requerido
    @wraps(view_func)
    def _wrapped(request, *args, **kwargs):
        if not es_admin(request.user):
            messages.error(request, "No tienes permisos para administrar usuarios.")
            return redirect("cotizaciones:panel")
        return view_func(request, *args, **kwargs)

    return _wrapped
