"""
Catálogo fijo de piezas de carrocería para laminado y pintura.

Se carga una sola vez al importar el módulo y no se modifica: categorías y
piezas son tuplas de dataclasses congeladas, en el orden en que se muestran.
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Optional, Tuple


@dataclass(frozen=True)
class ParteVehiculo:
    id: str
    nombre: str


@dataclass(frozen=True)
class CategoriaPartes:
    id: str
    titulo: str
    descripcion: str
    partes: Tuple[ParteVehiculo, ...]


CATEGORIAS = (
    CategoriaPartes(
        id="frente",
        titulo="1. Parte Delantera (Frente)",
        descripcion="Zona desde el parabrisas hacia adelante. Crítica en colisiones frontales.",
        partes=(
            ParteVehiculo("f1", "Cofre (Capó)"),
            ParteVehiculo("f2", "Bisagras de Cofre"),
            ParteVehiculo("f3", "Varilla de Soporte de Cofre"),
            ParteVehiculo("f4", "Aislante Térmico de Cofre"),
            ParteVehiculo("f5", "Chapa/Cerradura de Cofre"),
            ParteVehiculo("f6", "Defensa Delantera (Facia)"),
            ParteVehiculo("f7", "Absorbedor de Impacto Delantero"),
            ParteVehiculo("f8", "Alma Delantera"),
            ParteVehiculo("f9", "Parrilla Superior"),
            ParteVehiculo("f10", "Parrilla Inferior"),
            ParteVehiculo("f11", "Faro Principal Izquierdo"),
            ParteVehiculo("f12", "Faro Principal Derecho"),
            ParteVehiculo("f13", "Faro de Niebla Izquierdo"),
            ParteVehiculo("f14", "Faro de Niebla Derecho"),
            ParteVehiculo("f15", "Bisel/Marco de Faro de Niebla Izquierdo"),
            ParteVehiculo("f16", "Bisel/Marco de Faro de Niebla Derecho"),
            ParteVehiculo("f17", "Marco del Radiador (Marco Frontal)"),
            ParteVehiculo("f18", "Condensador"),
            ParteVehiculo("f19", "Radiador"),
            ParteVehiculo("f20", "Tolva Inferior de Motor"),
            ParteVehiculo("f21", "Parabrisas"),
            ParteVehiculo("f22", "Brazos Limpiaparabrisas"),
            ParteVehiculo("f23", "Plumas Limpiaparabrisas"),
            ParteVehiculo("f24", "Emblema Frontal"),
        ),
    ),
    CategoriaPartes(
        id="izquierdo",
        titulo="2. Costado Izquierdo (Lado del Conductor)",
        descripcion="Lado del conductor. Diferencia entre sedán/hatchback y pickup/SUV.",
        partes=(
            ParteVehiculo("i1", "Salpicadera Delantera Izquierda"),
            ParteVehiculo("i2", "Lodera (Guardafango) Delantera Izquierda"),
            ParteVehiculo("i3", "Espejo Lateral Izquierdo"),
            ParteVehiculo("i4", "Puerta Delantera Izquierda (Cascarón)"),
            ParteVehiculo("i5", "Cristal Puerta Delantera Izquierda"),
            ParteVehiculo("i6", "Elevador (Motor Vidrio) Puerta Del. Izq."),
            ParteVehiculo("i7", "Manija Exterior Puerta Delantera Izquierda"),
            ParteVehiculo("i8", "Moldura Puerta Delantera Izquierda"),
            ParteVehiculo("i9", "Pilar A Izquierdo"),
            ParteVehiculo("i10", "Pilar B (Poste Central) Izquierdo"),
            ParteVehiculo("i11", "Estribo Izquierdo"),
            ParteVehiculo("i12", "Puerta Trasera Izquierda (Cascarón)"),
            ParteVehiculo("i13", "Cristal Puerta Trasera Izquierda"),
            ParteVehiculo("i14", "Elevador (Motor Vidrio) Puerta Tras. Izq."),
            ParteVehiculo("i15", "Manija Exterior Puerta Trasera Izquierda"),
            ParteVehiculo("i16", "Moldura Puerta Trasera Izquierda"),
            ParteVehiculo("i17", "Costado Trasero (Lienzo) Izquierdo"),
            ParteVehiculo("i18", "Batea Lado Izquierdo (Pickups)"),
            ParteVehiculo("i19", "Rin Delantero Izquierdo"),
            ParteVehiculo("i20", "Rin Trasero Izquierdo"),
            ParteVehiculo("i21", "Llanta Delantera Izquierda"),
            ParteVehiculo("i22", "Llanta Trasera Izquierda"),
        ),
    ),
    CategoriaPartes(
        id="derecho",
        titulo="3. Costado Derecho (Lado del Copiloto)",
        descripcion="Lado del copiloto. Incluye tapa de gasolina y antena.",
        partes=(
            ParteVehiculo("d1", "Salpicadera Delantera Derecha"),
            ParteVehiculo("d2", "Lodera (Guardafango) Delantera Derecha"),
            ParteVehiculo("d3", "Espejo Lateral Derecho"),
            ParteVehiculo("d4", "Puerta Delantera Derecha (Cascarón)"),
            ParteVehiculo("d5", "Cristal Puerta Delantera Derecha"),
            ParteVehiculo("d6", "Elevador (Motor Vidrio) Puerta Del. Der."),
            ParteVehiculo("d7", "Manija Exterior Puerta Delantera Derecha"),
            ParteVehiculo("d8", "Moldura Puerta Delantera Derecha"),
            ParteVehiculo("d9", "Pilar A Derecho"),
            ParteVehiculo("d10", "Pilar B (Poste Central) Derecho"),
            ParteVehiculo("d11", "Estribo Derecho"),
            ParteVehiculo("d12", "Puerta Trasera Derecha (Cascarón)"),
            ParteVehiculo("d13", "Cristal Puerta Trasera Derecha"),
            ParteVehiculo("d14", "Elevador (Motor Vidrio) Puerta Tras. Der."),
            ParteVehiculo("d15", "Manija Exterior Puerta Trasera Derecha"),
            ParteVehiculo("d16", "Moldura Puerta Trasera Derecha"),
            ParteVehiculo("d17", "Costado Trasero (Lienzo) Derecho"),
            ParteVehiculo("d18", "Batea Lado Derecho (Pickups)"),
            ParteVehiculo("d19", "Tapa de Gasolina"),
            ParteVehiculo("d20", "Antena"),
            ParteVehiculo("d21", "Rin Delantero Derecho"),
            ParteVehiculo("d22", "Rin Trasero Derecho"),
            ParteVehiculo("d23", "Llanta Delantera Derecha"),
            ParteVehiculo("d24", "Llanta Trasera Derecha"),
        ),
    ),
    CategoriaPartes(
        id="trasera",
        titulo="4. Parte Trasera",
        descripcion="Zona crítica para alcances traseros.",
        partes=(
            ParteVehiculo("t1", "Defensa Trasera (Facia)"),
            ParteVehiculo("t2", "Alma Trasera"),
            ParteVehiculo("t3", "Absorbedor Trasero"),
            ParteVehiculo("t4", "Cajuela (Tapa)"),
            ParteVehiculo("t5", "Portón Trasero"),
            ParteVehiculo("t6", "Tapa de Batea (Pickups)"),
            ParteVehiculo("t7", "Bisagras de Cajuela/Portón"),
            ParteVehiculo("t8", "Amortiguadores de Gas Cajuela/Portón"),
            ParteVehiculo("t9", "Chapa de Cajuela/Portón"),
            ParteVehiculo("t10", "Calavera Esquina Izquierda"),
            ParteVehiculo("t11", "Calavera Esquina Derecha"),
            ParteVehiculo("t12", "Calavera en Tapa Izquierda"),
            ParteVehiculo("t13", "Calavera en Tapa Derecha"),
            ParteVehiculo("t14", "Medallón (Cristal Trasero)"),
            ParteVehiculo("t15", "Panel Trasero"),
            ParteVehiculo("t16", "Piso de Cajuela"),
            ParteVehiculo("t17", "Sensores de Reversa"),
            ParteVehiculo("t18", "Cámara de Reversa"),
            ParteVehiculo("t19", "Alerón / Spoiler"),
            ParteVehiculo("t20", "Tercera Luz de Stop"),
        ),
    ),
)


# Lista plana en orden de catálogo
PARTES = tuple(p for cat in CATEGORIAS for p in cat.partes)


PARTES_POR_ID = MappingProxyType({p.id: p for p in PARTES})


def obtener_parte(parte_id: str) -> Optional[ParteVehiculo]:
    return PARTES_POR_ID.get(parte_id)


def existe_parte(parte_id: str) -> bool:
    return parte_id in PARTES_POR_ID


def opciones_por_categoria():
    """Choices agrupados para formularios de Django."""
    return [
        (cat.titulo, [(p.id, p.nombre) for p in cat.partes])
        for cat in CATEGORIAS
    ]


# Sugerencias para el nombre de una pieza de reemplazo
EJEMPLOS_REPUESTOS = (
    "Faro Delantero Izquierdo",
    "Faro Delantero Derecho",
    "Calavera Izquierda",
    "Calavera Derecha",
    "Parrilla Delantera",
    "Parachoques Delantero",
    "Parachoques Trasero",
    "Espejo Lateral Izquierdo",
    "Espejo Lateral Derecho",
    "Cristal Parabrisas",
    "Cristal Trasero",
    "Moldura de Puerta",
    "Manija de Puerta",
)
