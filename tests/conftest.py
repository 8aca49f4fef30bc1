import pytest

from sales_report.models import Product, Sale, Seller


def write_lines(path, lines):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def sellers():
    return [
        Seller("CC", "111", "Ana", "Lopez"),
        Seller("CE", "222", "Juan", "García"),
        Seller("TI", "333", "Laura", "Pérez"),
    ]


@pytest.fixture
def products():
    return [
        Product(1, "Laptop", 100.0),
        Product(2, "Laptop", 200.0),
        Product(3, "Tablet", 50.0),
        Product(4, "Cámara", 10.0),
    ]


@pytest.fixture
def sales():
    return [
        Sale("111", 1, 2),
        Sale("222", 2, 1),
        Sale("111", 3, 4),
        Sale("333", 99, 5),
        Sale("999", 1, 7),
    ]


@pytest.fixture
def data_dir(tmp_path):
    data = tmp_path / "data"
    write_lines(data / "vendedores.txt", [
        "TipoDocumento;NumeroDocumento;NombresVendedor;ApellidosVendedor",
        "CC;111;Ana;Lopez",
        "CE;222;Juan;García",
        "TI;333;Laura;Pérez",
    ])
    write_lines(data / "productos.txt", [
        "IDProducto;NombreProducto;PrecioPorUnidadProducto",
        "1;Laptop;1.000,00",
        "2;Smartphone;250,50",
        "3;Tablet;abc",
    ])
    write_lines(data / "Vendedor_111.txt", [
        "NumeroDocumentoVendedor;IDProducto;CantidadProductoVendido",
        "111;1;2",
        "111;2;4",
    ])
    write_lines(data / "Vendedor_222.txt", [
        "NumeroDocumentoVendedor;IDProducto;CantidadProductoVendido",
        "222;2;1",
        "222;3;9",
    ])
    return data
