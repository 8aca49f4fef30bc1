from __future__ import annotations

import logging
import os
import re
from typing import Callable, Optional, TypeVar

from sales_report.constants import SALES_FILE_PATTERN
from sales_report.engine.record_parser import (
    parse_lines,
    parse_product_line,
    parse_sale_line,
    parse_seller_line,
)
from sales_report.models import Product, Sale, Seller

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _read_records(path: str, parse_line: Callable[[str], Optional[T]]) -> list[T]:
    with open(path, encoding="utf-8") as fh:
        return parse_lines(fh, parse_line)


def read_sellers(path: str) -> list[Seller]:
    """Read the sellers reference file. OSError propagates: the run cannot continue without it."""
    sellers = _read_records(path, parse_seller_line)
    logger.info("Loaded %d sellers from %s", len(sellers), path)
    return sellers


def read_products(path: str) -> list[Product]:
    """Read the products reference file. OSError propagates: the run cannot continue without it."""
    products = _read_records(path, parse_product_line)
    logger.info("Loaded %d products from %s", len(products), path)
    return products


def list_sales_files(data_dir: str, pattern: str = SALES_FILE_PATTERN) -> list[str]:
    """Paths of the per-seller sales files in data_dir, sorted by file name."""
    if not os.path.isdir(data_dir):
        return []
    regex = re.compile(pattern)
    return [
        os.path.join(data_dir, name)
        for name in sorted(os.listdir(data_dir))
        if regex.fullmatch(name)
    ]


def read_sales(data_dir: str, pattern: str = SALES_FILE_PATTERN) -> list[Sale]:
    """
    Read every per-seller sales file found in data_dir.
    A missing directory or one without sales files yields no sales.
    """
    files = list_sales_files(data_dir, pattern)
    if not files:
        logger.info("No sales files found in %s", data_dir)
        return []

    sales: list[Sale] = []
    for path in files:
        sales.extend(_read_records(path, parse_sale_line))
    logger.info("Loaded %d sales from %d files", len(sales), len(files))
    return sales
