from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Mapping

from sales_report.models import Product, Sale, Seller

logger = logging.getLogger(__name__)


@dataclass
class AggregationResult:
    processed: int = 0
    dropped: int = 0
    revenue: float = 0.0


def aggregate_sales(
    sales: Iterable[Sale],
    sellers_by_document: Mapping[str, Seller],
    products_by_id: Mapping[int, Product],
) -> AggregationResult:
    """
    Fold every sale into the totals of its seller and product, in place.

    The seller is resolved by exact document number and the product by id.
    A sale that resolves neither or only one of them changes nothing and is
    only counted as dropped.
    """
    result = AggregationResult()
    for sale in sales:
        seller = sellers_by_document.get(sale.seller_document_number)
        product = products_by_id.get(sale.product_id)
        if seller is None or product is None:
            result.dropped += 1
            continue

        amount = product.price * sale.quantity
        seller.add_sale(amount)
        product.add_sold(sale.quantity)
        result.processed += 1
        result.revenue += amount

    if result.dropped:
        logger.info("Dropped %d sales with unknown seller or product", result.dropped)
    logger.info("Aggregated %d sales", result.processed)
    return result
