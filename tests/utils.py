from cotizaciones.borrador import CotizacionBorrador

ANIO_ACTUAL = 2026


def armar_borrador(
    tipo="contraparte",
    anio=ANIO_ACTUAL,
    piezas=("f1", "f2"),
    personalizadas=(),
    repuestos=(),
    modelo="Versa",
    siniestro="S-1001",
):
    """Borrador listo para guardar; repuestos = [(nombre, precio), ...]."""
    borrador = CotizacionBorrador(tipo, anio_actual=ANIO_ACTUAL)
    borrador.numero_siniestro = siniestro
    borrador.marca = "Nissan"
    borrador.modelo = modelo
    borrador.anio = anio
    borrador.placas = "ABC-123"
    borrador.seleccionar_piezas(list(piezas))
    for nombre in personalizadas:
        borrador.agregar_pieza_personalizada(nombre)
    for nombre, precio in repuestos:
        borrador.agregar_repuesto(nombre, precio)
    return borrador
