"""
Fixtures compartidas: usuarios (normal, admin, sin aprobar) y cotizaciones.
"""
import pytest

from cotizaciones.services import guardar_cotizacion

from .utils import armar_borrador


def _crear_usuario(django_user_model, username, aprobado=True, admin=False):
    user = django_user_model.objects.create_user(
        username=username,
        password="secreto123",
        email=f"{username}@taller.mx",
    )
    perfil = user.perfil
    perfil.nombre_completo = username.title()
    perfil.nombre_corto = username[:3].upper()
    perfil.celular = "5512345678"
    perfil.is_approved = aprobado
    perfil.is_admin = admin
    perfil.save()
    return user


@pytest.fixture
def usuario(db, django_user_model):
    return _crear_usuario(django_user_model, "hojalatero")


@pytest.fixture
def otro_usuario(db, django_user_model):
    return _crear_usuario(django_user_model, "pintor")


@pytest.fixture
def admin_user(db, django_user_model):
    return _crear_usuario(django_user_model, "jefe", admin=True)


@pytest.fixture
def usuario_sin_aprobar(db, django_user_model):
    return _crear_usuario(django_user_model, "nuevo", aprobado=False)


@pytest.fixture
def crear_cotizacion():
    def _crear(user, **kwargs):
        return guardar_cotizacion(armar_borrador(**kwargs), user)
    return _crear


@pytest.fixture
def cotizacion(usuario, crear_cotizacion):
    return crear_cotizacion(usuario)
