from __future__ import annotations

from typing import Iterable

import pandas as pd

from sales_report.models import Product, ProductSummary

SUMMARY_COLUMNS = ["name", "total_quantity_sold", "total_revenue"]


def product_summary_frame(products: Iterable[Product]) -> pd.DataFrame:
    """
    Roll up aggregated products by name, merging every id that shares a name.

    Returns a DataFrame with columns name, total_quantity_sold, total_revenue,
    one row per distinct name in first-seen order.
    """
    df = pd.DataFrame(
        [
            {"name": p.name, "sold_quantity": p.sold_quantity, "price": p.price}
            for p in products
        ],
        columns=["name", "sold_quantity", "price"],
    )
    if df.empty:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)

    df["revenue"] = df["sold_quantity"] * df["price"]
    return (
        df.groupby("name", sort=False)
        .agg(
            total_quantity_sold=("sold_quantity", "sum"),
            total_revenue=("revenue", "sum"),
        )
        .reset_index()
    )


def summarize_products(products: Iterable[Product]) -> list[ProductSummary]:
    frame = product_summary_frame(products)
    return [
        ProductSummary(
            name=row.name,
            total_quantity_sold=int(row.total_quantity_sold),
            total_revenue=float(row.total_revenue),
        )
        for row in frame.itertuples(index=False)
    ]
