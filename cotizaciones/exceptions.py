class CotizacionError(Exception):
    """Errores base del módulo de cotizaciones."""


class ValidacionError(CotizacionError):
    """Faltan datos o son inválidos; no se intenta guardar nada."""

    def __init__(self, errores):
        if isinstance(errores, str):
            errores = [errores]
        self.errores = list(errores)
        super().__init__("; ".join(self.errores))


class PermisoDenegado(CotizacionError):
    """El usuario no es administrador."""


class OperacionFallida(CotizacionError):
    """La base no encontró la cotización o la política de acceso la rechazó."""
