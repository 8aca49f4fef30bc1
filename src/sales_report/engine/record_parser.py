from __future__ import annotations

import logging
import re
from typing import Callable, Iterable, Optional, TypeVar

from sales_report.constants import DELIMITER
from sales_report.models import Product, Sale, Seller

logger = logging.getLogger(__name__)

T = TypeVar("T")

# es_ES numbers: "." groups thousands (optional), "," is the decimal separator
_SPANISH_DECIMAL = re.compile(r"-?(\d{1,3}(\.\d{3})+|\d+)(,\d+)?", re.ASCII)
_INTEGER = re.compile(r"[+-]?\d+", re.ASCII)
_TO_SPANISH = str.maketrans(",.", ".,")


def parse_decimal(text: str) -> float:
    """
    Parse a number written with the Spanish (es_ES) convention, e.g. "1.234,56".
    Raises ValueError when the text is not such a number.
    """
    value = text.strip()
    if not _SPANISH_DECIMAL.fullmatch(value):
        raise ValueError(f"Not an es_ES decimal: {text!r}")
    return float(value.replace(".", "").replace(",", "."))


def format_decimal(value: float) -> str:
    """Format with two decimals in the es_ES convention: 1234.5 -> "1.234,50"."""
    return f"{value:,.2f}".translate(_TO_SPANISH)


def _parse_int(text: str) -> int:
    """Plain ASCII integer, optional sign; no whitespace or "_" separators."""
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"Not an integer: {text!r}")
    return int(text)


def _split(line: str, field_count: int) -> Optional[list[str]]:
    parts = line.rstrip("\r\n").split(DELIMITER)
    if len(parts) != field_count:
        return None
    return parts


def parse_seller_line(line: str) -> Optional[Seller]:
    parts = _split(line, 4)
    if parts is None:
        return None
    document_type, document_number, first_name, last_name = parts
    return Seller(document_type, document_number, first_name, last_name)


def parse_product_line(line: str) -> Optional[Product]:
    parts = _split(line, 3)
    if parts is None:
        return None
    raw_id, name, raw_price = parts
    try:
        product_id = _parse_int(raw_id)
    except ValueError:
        return None
    try:
        price = parse_decimal(raw_price)
    except ValueError:
        logger.warning("Error parsing price for product: %s (%r)", name, raw_price)
        return None
    if price < 0:
        logger.warning("Negative price for product: %s (%r)", name, raw_price)
        return None
    return Product(product_id, name, price)


def parse_sale_line(line: str) -> Optional[Sale]:
    parts = _split(line, 3)
    if parts is None:
        return None
    document_number, raw_product_id, raw_quantity = parts
    try:
        product_id = _parse_int(raw_product_id)
        quantity = _parse_int(raw_quantity)
    except ValueError:
        return None
    if quantity <= 0:
        return None
    return Sale(document_number, product_id, quantity)


def parse_lines(lines: Iterable[str], parse_line: Callable[[str], Optional[T]]) -> list[T]:
    """
    Parse a stream of raw file lines into records.
    The first line is the header and is always discarded without being checked.
    Blank and malformed lines are skipped.
    """
    records: list[T] = []
    iterator = iter(lines)
    next(iterator, None)
    for line in iterator:
        if not line.strip():
            continue
        record = parse_line(line)
        if record is not None:
            records.append(record)
    return records
