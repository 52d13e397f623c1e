import dataclasses

import pytest

from cotizaciones import catalogo


def test_catalogo_completo():
    assert len(catalogo.CATEGORIAS) == 4
    assert [c.id for c in catalogo.CATEGORIAS] == ["frente", "izquierdo", "derecho", "trasera"]
    assert [len(c.partes) for c in catalogo.CATEGORIAS] == [24, 22, 24, 20]
    assert len(catalogo.PARTES) == 90


def test_ids_unicos():
    ids = [p.id for p in catalogo.PARTES]
    assert len(ids) == len(set(ids))


def test_busqueda_por_id():
    assert catalogo.obtener_parte("f1").nombre == "Cofre (Capó)"
    assert catalogo.obtener_parte("zz9") is None
    assert catalogo.existe_parte("t20")
    assert not catalogo.existe_parte("t21")


def test_opciones_por_categoria():
    opciones = catalogo.opciones_por_categoria()
    assert len(opciones) == 4
    titulo, partes = opciones[0]
    assert titulo.startswith("1.")
    assert partes[0] == ("f1", "Cofre (Capó)")


def test_catalogo_inmutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        catalogo.PARTES[0].nombre = "Otra cosa"
    with pytest.raises(TypeError):
        catalogo.PARTES_POR_ID["x1"] = catalogo.PARTES[0]
