"""
Motor de precios de la cotización.

Funciones puras: mismo input, mismo desglose. El año de referencia se puede
inyectar (anio_actual) para que el cálculo no dependa del reloj.

Reglas:
- Precio por pieza de laminado y pintura según antigüedad del vehículo y tipo
  de cotización (tres rangos).
- Mano de obra de instalación según cuántas piezas de reemplazo hay.
- Cotizaciones de CLIENTE llevan un ajuste del 20% sobre el subtotal.
"""
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from django.utils import timezone

CONTRAPARTE = "contraparte"
CLIENTE = "cliente"

# (reciente, intermedio, antiguo)
PRECIOS_LAMINADO = {
    CONTRAPARTE: (Decimal("2000"), Decimal("1500"), Decimal("1200")),
    CLIENTE: (Decimal("2500"), Decimal("2000"), Decimal("1700")),
}

# Rangos relativos al año actual Y:
#   reciente   = Y-3 .. Y+1
#   intermedio = Y-14 .. Y-4
#   antiguo    = <= Y-15
ANTIGUEDAD_RECIENTE = 3
ANTIGUEDAD_INTERMEDIA = 14

MANO_OBRA_UNA_PIEZA = Decimal("500")
MANO_OBRA_POR_PIEZA = Decimal("400")

AJUSTE_CLIENTE = Decimal("0.20")

ANIO_MINIMO = 1990

CERO = Decimal("0")
CENTAVOS = Decimal("0.01")


def anio_de_referencia(anio_actual=None) -> int:
    return int(anio_actual) if anio_actual is not None else timezone.localdate().year


def anios_disponibles(anio_actual=None):
    """Años seleccionables: del próximo año hacia atrás hasta 1990."""
    y = anio_de_referencia(anio_actual)
    return list(range(y + 1, ANIO_MINIMO - 1, -1))


def _validar_tipo(tipo):
    if tipo not in PRECIOS_LAMINADO:
        raise ValueError(f"Tipo de cotización inválido: {tipo!r}")


def precio_por_pieza(anio: int, tipo: str, anio_actual=None) -> Decimal:
    _validar_tipo(tipo)
    y = anio_de_referencia(anio_actual)
    reciente, intermedio, antiguo = PRECIOS_LAMINADO[tipo]

    if y - ANTIGUEDAD_RECIENTE <= anio <= y + 1:
        return reciente
    elif y - ANTIGUEDAD_INTERMEDIA <= anio <= y - (ANTIGUEDAD_RECIENTE + 1):
        return intermedio
    return antiguo


def mano_de_obra_instalacion(cantidad_repuestos: int) -> Decimal:
    if cantidad_repuestos <= 0:
        return CERO
    if cantidad_repuestos == 1:
        return MANO_OBRA_UNA_PIEZA
    return cantidad_repuestos * MANO_OBRA_POR_PIEZA


def interpretar_precio(valor):
    """
    Convierte lo que escribió el usuario a Decimal ("$ 1,250.50" -> 1250.50).
    Devuelve None si no es un número finito y no negativo.
    """
    if valor is None or isinstance(valor, bool):
        return None
    if isinstance(valor, Decimal):
        numero = valor
    elif isinstance(valor, (int, float)):
        numero = Decimal(str(valor))
    else:
        texto = str(valor).replace("$", "").replace(",", "").replace(" ", "").strip()
        if not texto:
            return None
        try:
            numero = Decimal(texto)
        except InvalidOperation:
            return None

    if not numero.is_finite() or numero < 0:
        return None
    return numero


def a_centavos(valor: Decimal):
    """
    Deja el precio en 2 decimales ("1.500" -> 1.50).
    None si trae centavos de más ("1.505").
    """
    if valor.normalize().as_tuple().exponent < -2:
        return None
    return valor.quantize(CENTAVOS)


def parse_precio(valor) -> Decimal:
    """Como interpretar_precio, pero 0 cuando no se puede interpretar."""
    numero = interpretar_precio(valor)
    return CERO if numero is None else numero


def calcular_ajuste(subtotal: Decimal, tipo: str) -> Decimal:
    _validar_tipo(tipo)
    if tipo == CLIENTE:
        return (subtotal * AJUSTE_CLIENTE).quantize(CENTAVOS, rounding=ROUND_HALF_UP)
    return CERO


@dataclass(frozen=True)
class DesglosePrecio:
    tipo: str
    precio_por_pieza: Decimal
    piezas_laminado: int
    subtotal_laminado: Decimal
    piezas_repuesto: int
    subtotal_repuestos: Decimal
    mano_de_obra_instalacion: Decimal
    subtotal: Decimal
    ajuste: Decimal
    total: Decimal


def calcular_cotizacion(
    anio,
    tipo: str,
    piezas_seleccionadas=(),
    piezas_personalizadas=(),
    precios_repuestos=(),
    anio_actual=None,
) -> DesglosePrecio:
    """
    Desglose completo de la cotización.

    - anio: año del vehículo; sin año el precio por pieza es 0.
    - piezas_seleccionadas / piezas_personalizadas: solo cuenta la cantidad,
      todas las piezas llevan el mismo precio unitario.
    - precios_repuestos: precio de cada pieza de reemplazo (texto o número).
    """
    _validar_tipo(tipo)

    unitario = precio_por_pieza(anio, tipo, anio_actual) if anio else CERO
    n_laminado = len(list(piezas_seleccionadas)) + len(list(piezas_personalizadas))
    subtotal_laminado = n_laminado * unitario

    precios = [parse_precio(p) for p in precios_repuestos]
    subtotal_repuestos = sum(precios, CERO)
    mano_obra = mano_de_obra_instalacion(len(precios))

    subtotal = subtotal_laminado + subtotal_repuestos + mano_obra
    ajuste = calcular_ajuste(subtotal, tipo)

    return DesglosePrecio(
        tipo=str(tipo),
        precio_por_pieza=unitario,
        piezas_laminado=n_laminado,
        subtotal_laminado=subtotal_laminado,
        piezas_repuesto=len(precios),
        subtotal_repuestos=subtotal_repuestos,
        mano_de_obra_instalacion=mano_obra,
        subtotal=subtotal,
        ajuste=ajuste,
        total=subtotal + ajuste,
    )
