# Directories and file names
DATA_DIRECTORY = "data"
REPORTS_DIRECTORY = "reportes"
SELLERS_FILE = "vendedores.txt"
PRODUCTS_FILE = "productos.txt"
SALES_FILE_PREFIX = "Vendedor_"
SALES_FILE_PATTERN = r"Vendedor_\d+\.txt"
SELLERS_REPORT = "reporte_vendedores.csv"
PRODUCTS_REPORT = "reporte_productos.csv"

DELIMITER = ";"

# Header rows, always the first line of each file
SELLERS_HEADER = ["TipoDocumento", "NumeroDocumento", "NombresVendedor", "ApellidosVendedor"]
PRODUCTS_HEADER = ["IDProducto", "NombreProducto", "PrecioPorUnidadProducto"]
SALES_HEADER = ["NumeroDocumentoVendedor", "IDProducto", "CantidadProductoVendido"]
SELLERS_REPORT_HEADER = ["TipoDocumento", "NúmeroDocumento", "NombreCompleto", "TotalVentas"]
PRODUCTS_REPORT_HEADER = ["NombreProducto", "CantidadVendida", "PrecioPromedio"]

# Data generation defaults
SALESMAN_COUNT = 5
PRODUCTS_COUNT = 100
SALES_PER_SALESMAN = 10
MIN_PRICE = 10.0
MAX_PRICE = 1000.0
MAX_QUANTITY = 10
MIN_DOCUMENT_NUMBER = 1_000_000_000
MAX_DOCUMENT_NUMBER = 1_999_999_999

DOCUMENT_TYPES = ["CC", "CE", "TI", "PP"]
FIRST_NAMES = ["Juan", "María", "Carlos", "Ana", "Pedro", "Laura"]
LAST_NAMES = ["García", "Rodríguez", "Martínez", "López", "González", "Pérez"]
PRODUCT_NAMES = ["Laptop", "Smartphone", "Tablet", "Smartwatch", "Auriculares", "Cámara"]
