from decimal import Decimal

import pytest

from cotizaciones.pricing import (
    CLIENTE,
    CONTRAPARTE,
    DesglosePrecio,
    a_centavos,
    anios_disponibles,
    calcular_ajuste,
    calcular_cotizacion,
    interpretar_precio,
    mano_de_obra_instalacion,
    parse_precio,
    precio_por_pieza,
)

Y = 2026


# ═══════════════════════════════════════════════════════════════════════════════
# PRECIO POR PIEZA
# ═══════════════════════════════════════════════════════════════════════════════

class TestPrecioPorPieza:

    @pytest.mark.parametrize("anio", [Y + 1, Y, Y - 1, Y - 2, Y - 3])
    def test_rango_reciente(self, anio):
        assert precio_por_pieza(anio, CONTRAPARTE, anio_actual=Y) == 2000
        assert precio_por_pieza(anio, CLIENTE, anio_actual=Y) == 2500

    @pytest.mark.parametrize("anio", [Y - 4, Y - 5, Y - 10, Y - 14])
    def test_rango_intermedio(self, anio):
        assert precio_por_pieza(anio, CONTRAPARTE, anio_actual=Y) == 1500
        assert precio_por_pieza(anio, CLIENTE, anio_actual=Y) == 2000

    @pytest.mark.parametrize("anio", [Y - 15, Y - 16, Y - 40, 1990, 1950])
    def test_rango_antiguo(self, anio):
        assert precio_por_pieza(anio, CONTRAPARTE, anio_actual=Y) == 1200
        assert precio_por_pieza(anio, CLIENTE, anio_actual=Y) == 1700

    def test_todos_los_anios_tienen_un_solo_precio(self):
        validos = {
            CONTRAPARTE: {Decimal("2000"), Decimal("1500"), Decimal("1200")},
            CLIENTE: {Decimal("2500"), Decimal("2000"), Decimal("1700")},
        }
        for anio in range(1900, Y + 2):
            for tipo, precios in validos.items():
                assert precio_por_pieza(anio, tipo, anio_actual=Y) in precios

    def test_fronteras_de_rango(self):
        assert precio_por_pieza(Y - 3, CONTRAPARTE, anio_actual=Y) == 2000
        assert precio_por_pieza(Y - 4, CONTRAPARTE, anio_actual=Y) == 1500
        assert precio_por_pieza(Y - 14, CONTRAPARTE, anio_actual=Y) == 1500
        assert precio_por_pieza(Y - 15, CONTRAPARTE, anio_actual=Y) == 1200

    def test_tipo_invalido(self):
        with pytest.raises(ValueError):
            precio_por_pieza(Y, "particular", anio_actual=Y)

    def test_anios_disponibles(self):
        anios = anios_disponibles(Y)
        assert anios[0] == Y + 1
        assert anios[-1] == 1990
        assert anios == sorted(anios, reverse=True)


# ═══════════════════════════════════════════════════════════════════════════════
# MANO DE OBRA / AJUSTE / PRECIOS ESCRITOS
# ═══════════════════════════════════════════════════════════════════════════════

class TestManoDeObra:

    @pytest.mark.parametrize("n,esperado", [(0, 0), (1, 500), (2, 800), (3, 1200), (5, 2000)])
    def test_mano_de_obra(self, n, esperado):
        assert mano_de_obra_instalacion(n) == esperado


class TestAjuste:

    def test_cliente_lleva_20_por_ciento(self):
        assert calcular_ajuste(Decimal("5500"), CLIENTE) == Decimal("1100.00")

    def test_cliente_redondea_a_centavos(self):
        assert calcular_ajuste(Decimal("1000.33"), CLIENTE) == Decimal("200.07")

    def test_contraparte_sin_ajuste(self):
        assert calcular_ajuste(Decimal("5500"), CONTRAPARTE) == 0


class TestParsePrecio:

    @pytest.mark.parametrize("texto,esperado", [
        ("1000", Decimal("1000")),
        ("1,250.50", Decimal("1250.50")),
        ("$ 300", Decimal("300")),
        (450, Decimal("450")),
        (99.5, Decimal("99.5")),
    ])
    def test_valores_validos(self, texto, esperado):
        assert parse_precio(texto) == esperado

    @pytest.mark.parametrize("texto", ["", "abc", None, "-10", "NaN", "Infinity"])
    def test_invalidos_valen_cero(self, texto):
        assert parse_precio(texto) == 0
        assert interpretar_precio(texto) is None

    @pytest.mark.parametrize("texto,esperado", [
        ("100.000", Decimal("100.00")),
        ("1.500", Decimal("1.50")),
        ("1250.5", Decimal("1250.50")),
        ("300", Decimal("300.00")),
    ])
    def test_a_centavos(self, texto, esperado):
        valor = a_centavos(interpretar_precio(texto))
        assert valor == esperado
        assert valor.as_tuple().exponent == -2

    def test_a_centavos_rechaza_fracciones_de_centavo(self):
        assert a_centavos(Decimal("1.505")) is None
        assert a_centavos(Decimal("0.001")) is None


# ═══════════════════════════════════════════════════════════════════════════════
# DESGLOSE COMPLETO
# ═══════════════════════════════════════════════════════════════════════════════

class TestCalcularCotizacion:

    def test_contraparte_dos_piezas_sin_repuestos(self):
        d = calcular_cotizacion(Y, CONTRAPARTE, ["f1", "f2"], anio_actual=Y)

        assert d.precio_por_pieza == 2000
        assert d.subtotal_laminado == 4000
        assert d.mano_de_obra_instalacion == 0
        assert d.subtotal == 4000
        assert d.ajuste == 0
        assert d.total == 4000

    def test_cliente_con_personalizada_y_un_repuesto(self):
        d = calcular_cotizacion(
            Y - 5,
            CLIENTE,
            piezas_seleccionadas=["f1"],
            piezas_personalizadas=["Techo"],
            precios_repuestos=["1000"],
            anio_actual=Y,
        )

        assert d.precio_por_pieza == 2000
        assert d.piezas_laminado == 2
        assert d.subtotal_laminado == 4000
        assert d.subtotal_repuestos == 1000
        assert d.mano_de_obra_instalacion == 500
        assert d.subtotal == 5500
        assert d.ajuste == 1100
        assert d.total == 6600

    def test_varios_repuestos(self):
        d = calcular_cotizacion(
            Y - 20, CONTRAPARTE,
            piezas_seleccionadas=["t1"],
            precios_repuestos=[Decimal("350.50"), "abc", 1200],
            anio_actual=Y,
        )

        assert d.subtotal_laminado == 1200
        assert d.subtotal_repuestos == Decimal("1550.50")
        assert d.mano_de_obra_instalacion == 1200
        assert d.total == Decimal("3950.50")

    def test_sin_anio_el_laminado_vale_cero(self):
        d = calcular_cotizacion(None, CLIENTE, ["f1", "f2"], anio_actual=Y)
        assert d.precio_por_pieza == 0
        assert d.subtotal_laminado == 0

    def test_sin_piezas(self):
        d = calcular_cotizacion(Y, CLIENTE, anio_actual=Y)
        assert d.total == 0

    def test_es_determinista(self):
        args = (Y - 7, CLIENTE, ["f1", "i3"], ["Techo"], ["99.90", "10"])
        a = calcular_cotizacion(*args, anio_actual=Y)
        b = calcular_cotizacion(*args, anio_actual=Y)
        assert isinstance(a, DesglosePrecio)
        assert a == b

    def test_total_contraparte_igual_a_subtotal(self):
        d = calcular_cotizacion(Y - 2, CONTRAPARTE, ["f1"], precios_repuestos=["500", "700"], anio_actual=Y)
        assert d.total == d.subtotal
