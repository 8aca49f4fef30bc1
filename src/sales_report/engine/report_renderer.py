from __future__ import annotations

import os
from typing import Iterable

import pandas as pd

from sales_report.constants import (
    DELIMITER,
    PRODUCTS_REPORT_HEADER,
    SELLERS_REPORT_HEADER,
)
from sales_report.models import ProductSummary, Seller

MONEY_FORMAT = "%.2f"


def _sort_descending(df: pd.DataFrame, column: str) -> pd.DataFrame:
    # Stable ascending sort on the negated key keeps input order for ties.
    return df.sort_values(column, key=lambda s: -s, kind="stable").reset_index(drop=True)


def sellers_report_frame(sellers: Iterable[Seller]) -> pd.DataFrame:
    """
    One row per seller, zero totals included, ranked by total sales.
    Columns: TipoDocumento, NúmeroDocumento, NombreCompleto, TotalVentas.
    """
    doc_type, doc_number, full_name, total = SELLERS_REPORT_HEADER
    df = pd.DataFrame(
        [
            {
                doc_type: s.document_type,
                doc_number: s.document_number,
                full_name: s.full_name,
                total: float(s.total_sales),
            }
            for s in sellers
        ],
        columns=SELLERS_REPORT_HEADER,
    )
    df[total] = df[total].astype(float)
    return _sort_descending(df, total)


def products_report_frame(summaries: Iterable[ProductSummary]) -> pd.DataFrame:
    """
    Product-name summaries that sold at least one unit, ranked by quantity sold.
    Columns: NombreProducto, CantidadVendida, PrecioPromedio.
    """
    name, quantity, average = PRODUCTS_REPORT_HEADER
    df = pd.DataFrame(
        [
            {
                name: s.name,
                quantity: int(s.total_quantity_sold),
                average: float(s.average_price),
            }
            for s in summaries
            if s.total_quantity_sold > 0
        ],
        columns=PRODUCTS_REPORT_HEADER,
    )
    df[quantity] = df[quantity].astype(int)
    df[average] = df[average].astype(float)
    return _sort_descending(df, quantity)


def _formatted_fields(df: pd.DataFrame) -> pd.DataFrame:
    out = df.copy()
    for column in out.columns:
        if pd.api.types.is_float_dtype(out[column]):
            out[column] = out[column].map(lambda v: MONEY_FORMAT % v)
    return out.astype(str)


def render_report(df: pd.DataFrame) -> str:
    """
    Serialize a report frame: header row, ";" separated, money with two decimals.
    Fields are written as-is, without CSV quoting, so names keep any '"' they contain.
    """
    rows = [DELIMITER.join(df.columns)]
    rows.extend(DELIMITER.join(fields) for fields in _formatted_fields(df).itertuples(index=False, name=None))
    return "\n".join(rows) + "\n"


def write_report(df: pd.DataFrame, path: str) -> str:
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="") as fh:
        fh.write(render_report(df))
    return path
