"""
Cotización en edición (antes de guardarse).

Vive solo en memoria: se crea vacía al iniciar una cotización nueva, se va
modificando (piezas, repuestos, datos del vehículo) y al guardarse se convierte
en un Quotation persistido (ver services.guardar_cotizacion).
"""
import time
from dataclasses import dataclass
from decimal import Decimal

from . import catalogo
from .exceptions import ValidacionError
from .pricing import (
    PRECIOS_LAMINADO,
    a_centavos,
    anio_de_referencia,
    calcular_cotizacion,
    interpretar_precio,
)


@dataclass(frozen=True)
class PiezaPersonalizada:
    id: str
    nombre: str


@dataclass
class RepuestoBorrador:
    id: str
    nombre: str
    precio: Decimal
    url_referencia: str = ""


def _marca_de_tiempo_ms() -> int:
    return int(time.time() * 1000)


class CotizacionBorrador:

    def __init__(self, tipo, anio_actual=None):
        if tipo not in PRECIOS_LAMINADO:
            raise ValidacionError(f"Tipo de cotización inválido: {tipo!r}")

        self.tipo = str(tipo)
        self.anio_actual = anio_actual

        self.numero_siniestro = ""
        self.marca = ""
        self.modelo = ""
        self.anio = None
        self.placas = ""

        self.piezas_seleccionadas = []
        self.piezas_personalizadas = []
        self.repuestos = []

    def __repr__(self):
        return (
            f"<CotizacionBorrador {self.tipo} {self.modelo or '-'} {self.anio or '-'} "
            f"piezas={len(self.piezas_seleccionadas) + len(self.piezas_personalizadas)} "
            f"repuestos={len(self.repuestos)}>"
        )

    # ------------------------
    # IDS
    # ------------------------

    def _nuevo_id(self, prefijo, existentes):
        ms = _marca_de_tiempo_ms()
        while f"{prefijo}{ms}" in existentes:
            ms += 1
        return f"{prefijo}{ms}"

    # ------------------------
    # LAMINADO Y PINTURA
    # ------------------------

    def alternar_pieza(self, parte_id: str) -> bool:
        """Marca / desmarca una pieza del catálogo. Devuelve si quedó seleccionada."""
        if not catalogo.existe_parte(parte_id):
            raise ValidacionError(f"Pieza desconocida: {parte_id}")

        if parte_id in self.piezas_seleccionadas:
            self.piezas_seleccionadas.remove(parte_id)
            return False
        self.piezas_seleccionadas.append(parte_id)
        return True

    def seleccionar_piezas(self, parte_ids):
        """Reemplaza la selección completa (sin duplicados, respetando el orden)."""
        desconocidas = [pid for pid in parte_ids if not catalogo.existe_parte(pid)]
        if desconocidas:
            raise ValidacionError(f"Piezas desconocidas: {', '.join(desconocidas)}")

        seleccion = []
        for pid in parte_ids:
            if pid not in seleccion:
                seleccion.append(pid)
        self.piezas_seleccionadas = seleccion

    def agregar_pieza_personalizada(self, nombre: str) -> PiezaPersonalizada:
        nombre = (nombre or "").strip()
        if not nombre:
            raise ValidacionError("El nombre de la pieza personalizada es obligatorio.")

        existentes = {p.id for p in self.piezas_personalizadas}
        pieza = PiezaPersonalizada(id=self._nuevo_id("custom_", existentes), nombre=nombre)
        self.piezas_personalizadas.append(pieza)
        return pieza

    def quitar_pieza_personalizada(self, pieza_id: str):
        self.piezas_personalizadas = [p for p in self.piezas_personalizadas if p.id != pieza_id]

    def partidas_laminado(self):
        """
        (pieza_id, nombre, personalizada) en el orden en que se cotizan:
        primero catálogo, luego personalizadas.
        """
        partidas = [
            (pid, catalogo.obtener_parte(pid).nombre, False)
            for pid in self.piezas_seleccionadas
        ]
        partidas += [
            (p.id, f"{p.nombre} (personalizada)", True)
            for p in self.piezas_personalizadas
        ]
        return partidas

    # ------------------------
    # REPUESTOS
    # ------------------------

    def _datos_repuesto(self, nombre, precio, url_referencia):
        errores = []
        nombre = (nombre or "").strip()
        if not nombre:
            errores.append("El nombre de la pieza es obligatorio.")

        valor = interpretar_precio(precio)
        if valor is None:
            errores.append("El costo estimado debe ser un número mayor o igual a 0.")
        else:
            valor = a_centavos(valor)
            if valor is None:
                errores.append("El costo estimado admite máximo 2 decimales.")

        if errores:
            raise ValidacionError(errores)
        return nombre, valor, (url_referencia or "").strip()

    def agregar_repuesto(self, nombre, precio, url_referencia="") -> RepuestoBorrador:
        nombre, valor, url = self._datos_repuesto(nombre, precio, url_referencia)
        existentes = {r.id for r in self.repuestos}
        repuesto = RepuestoBorrador(
            id=self._nuevo_id("", existentes),
            nombre=nombre,
            precio=valor,
            url_referencia=url,
        )
        self.repuestos.append(repuesto)
        return repuesto

    def editar_repuesto(self, repuesto_id, nombre, precio, url_referencia="") -> RepuestoBorrador:
        repuesto = self.obtener_repuesto(repuesto_id)
        nombre, valor, url = self._datos_repuesto(nombre, precio, url_referencia)
        repuesto.nombre = nombre
        repuesto.precio = valor
        repuesto.url_referencia = url
        return repuesto

    def eliminar_repuesto(self, repuesto_id):
        self.repuestos = [r for r in self.repuestos if r.id != repuesto_id]

    def obtener_repuesto(self, repuesto_id) -> RepuestoBorrador:
        for r in self.repuestos:
            if r.id == repuesto_id:
                return r
        raise ValidacionError(f"No existe la pieza de reemplazo {repuesto_id}.")

    # ------------------------
    # TOTALES / VALIDACIÓN
    # ------------------------

    def anio_entero(self):
        """El año como int ("2021" -> 2021); None si falta o no es un número."""
        if self.anio is None or isinstance(self.anio, bool):
            return None
        try:
            return int(str(self.anio).strip())
        except ValueError:
            return None

    def desglose(self):
        return calcular_cotizacion(
            self.anio_entero(),
            self.tipo,
            piezas_seleccionadas=self.piezas_seleccionadas,
            piezas_personalizadas=self.piezas_personalizadas,
            precios_repuestos=[r.precio for r in self.repuestos],
            anio_actual=self.anio_actual,
        )

    def errores(self):
        errores = []
        if not (self.modelo or "").strip():
            errores.append("El modelo del vehículo es obligatorio.")

        anio = self.anio_entero()
        if self.anio is None or self.anio == "":
            errores.append("El año del vehículo es obligatorio.")
        elif anio is None:
            errores.append("El año del vehículo debe ser un número.")
        elif anio > anio_de_referencia(self.anio_actual) + 1:
            errores.append("El año del vehículo no puede ser mayor al próximo año.")
        return errores

    def validar(self):
        errores = self.errores()
        if errores:
            raise ValidacionError(errores)
