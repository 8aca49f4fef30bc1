import os

import numpy as np
import pandas as pd

from sales_report.constants import (
    DATA_DIRECTORY,
    DELIMITER,
    DOCUMENT_TYPES,
    FIRST_NAMES,
    LAST_NAMES,
    MAX_DOCUMENT_NUMBER,
    MAX_PRICE,
    MIN_DOCUMENT_NUMBER,
    MIN_PRICE,
    PRODUCT_NAMES,
    PRODUCTS_COUNT,
    PRODUCTS_FILE,
    PRODUCTS_HEADER,
    SALESMAN_COUNT,
    SELLERS_FILE,
    SELLERS_HEADER,
)
from sales_report.engine.record_parser import format_decimal


class CatalogGenerator:
    """
    Generate the sellers and products reference files with random names,
    document numbers and prices.
    - Document numbers are unique within one generated seller list.
    - Prices are rounded to 2 decimals and written in the es_ES format ("1.234,56").
    """

    def __init__(
        self,
        data_dir: str = DATA_DIRECTORY,
        random_seed: int = 42,
        sellers_file: str = SELLERS_FILE,
        products_file: str = PRODUCTS_FILE,
    ):
        self.data_dir = data_dir
        self.random_seed = random_seed
        self.rng = np.random.default_rng(self.random_seed)
        self.sellers_path = os.path.join(data_dir, sellers_file)
        self.products_path = os.path.join(data_dir, products_file)

    def _pick(self, choices, count: int) -> list:
        return [choices[i] for i in self.rng.integers(0, len(choices), size=count)]

    def generate_sellers(self, count: int = SALESMAN_COUNT) -> pd.DataFrame:
        """Columns: TipoDocumento, NumeroDocumento, NombresVendedor, ApellidosVendedor."""
        if count < 0:
            raise ValueError(f"Seller count must be non-negative, got {count}")

        span = MAX_DOCUMENT_NUMBER - MIN_DOCUMENT_NUMBER + 1
        document_numbers = self.rng.choice(span, size=count, replace=False) + MIN_DOCUMENT_NUMBER

        doc_type, doc_number, first_name, last_name = SELLERS_HEADER
        return pd.DataFrame(
            {
                doc_type: self._pick(DOCUMENT_TYPES, count),
                doc_number: document_numbers.astype(np.int64),
                first_name: self._pick(FIRST_NAMES, count),
                last_name: self._pick(LAST_NAMES, count),
            },
            columns=SELLERS_HEADER,
        )

    def generate_products(self, count: int = PRODUCTS_COUNT) -> pd.DataFrame:
        """Columns: IDProducto (1..count), NombreProducto, PrecioPorUnidadProducto."""
        if count < 0:
            raise ValueError(f"Product count must be non-negative, got {count}")

        product_id, name, price = PRODUCTS_HEADER
        prices = self.rng.uniform(MIN_PRICE, MAX_PRICE, size=count).round(2)
        return pd.DataFrame(
            {
                product_id: np.arange(1, count + 1),
                name: self._pick(PRODUCT_NAMES, count),
                price: prices,
            },
            columns=PRODUCTS_HEADER,
        )

    def save_sellers(self, sellers_df: pd.DataFrame) -> str:
        return self._save(sellers_df, self.sellers_path)

    def save_products(self, products_df: pd.DataFrame) -> str:
        price = PRODUCTS_HEADER[2]
        out = products_df.copy()
        out[price] = out[price].map(format_decimal)
        return self._save(out, self.products_path)

    def _save(self, df: pd.DataFrame, path: str) -> str:
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        df.to_csv(path, sep=DELIMITER, index=False, lineterminator="\n", encoding="utf-8")
        return path
