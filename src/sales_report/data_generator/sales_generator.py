import os

import numpy as np
import pandas as pd

from sales_report.constants import (
    DATA_DIRECTORY,
    DELIMITER,
    MAX_QUANTITY,
    PRODUCTS_HEADER,
    SALES_FILE_PREFIX,
    SALES_HEADER,
    SALES_PER_SALESMAN,
    SELLERS_HEADER,
)


class SalesGenerator:
    """
    Builds one Vendedor_<document number>.txt sales file per seller.
    Each line sells a random catalog product in a quantity between 1 and MAX_QUANTITY.
    """

    def __init__(
        self,
        sellers_df: pd.DataFrame,
        products_df: pd.DataFrame,
        data_dir: str = DATA_DIRECTORY,
        random_seed: int = 42,
    ) -> None:
        self.data_dir = data_dir
        self.random_seed = random_seed
        self.rng = np.random.default_rng(self.random_seed)

        # Validate expected columns
        for df, required in ((sellers_df, SELLERS_HEADER), (products_df, PRODUCTS_HEADER)):
            missing = set(required) - set(df.columns)
            if missing:
                raise ValueError(f"Missing expected columns: {missing}")

        self.document_numbers = sellers_df[SELLERS_HEADER[1]].astype(str).tolist()
        self.product_ids = products_df[PRODUCTS_HEADER[0]].astype(int).to_numpy()

    def sales_path(self, document_number: str) -> str:
        return os.path.join(self.data_dir, f"{SALES_FILE_PREFIX}{document_number}.txt")

    def generate_seller_sales(self, document_number: str,
                              sales_count: int = SALES_PER_SALESMAN) -> pd.DataFrame:
        """Columns: NumeroDocumentoVendedor, IDProducto, CantidadProductoVendido."""
        if sales_count < 0:
            raise ValueError(f"Sales count must be non-negative, got {sales_count}")
        if sales_count and len(self.product_ids) == 0:
            raise ValueError("Cannot generate sales without products")

        seller_col, product_col, quantity_col = SALES_HEADER
        product_ids = (
            self.rng.choice(self.product_ids, size=sales_count)
            if sales_count else np.array([], dtype=int)
        )
        return pd.DataFrame(
            {
                seller_col: [document_number] * sales_count,
                product_col: product_ids,
                quantity_col: self.rng.integers(1, MAX_QUANTITY + 1, size=sales_count),
            },
            columns=SALES_HEADER,
        )

    def generate(self, sales_per_seller: int = SALES_PER_SALESMAN) -> dict:
        """Write every seller's sales file and return {path: DataFrame}."""
        os.makedirs(self.data_dir or ".", exist_ok=True)
        written = {}
        for document_number in self.document_numbers:
            sales = self.generate_seller_sales(document_number, sales_per_seller)
            path = self.sales_path(document_number)
            sales.to_csv(path, sep=DELIMITER, index=False, lineterminator="\n", encoding="utf-8")
            written[path] = sales
        return written
