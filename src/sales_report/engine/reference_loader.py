from __future__ import annotations

import logging
from typing import Iterable

from sales_report.models import Product, Seller

logger = logging.getLogger(__name__)


def index_sellers(sellers: Iterable[Seller]) -> dict[str, Seller]:
    """Map document number -> Seller. A repeated document number replaces the earlier seller."""
    by_document: dict[str, Seller] = {}
    for seller in sellers:
        if seller.document_number in by_document:
            logger.debug("Duplicate seller document number %s, keeping the last one",
                         seller.document_number)
        by_document[seller.document_number] = seller
    return by_document


def index_products(products: Iterable[Product]) -> dict[int, Product]:
    """Map product id -> Product. A repeated id replaces the earlier product."""
    by_id: dict[int, Product] = {}
    for product in products:
        if product.id in by_id:
            logger.debug("Duplicate product id %d, keeping the last one", product.id)
        by_id[product.id] = product
    return by_id
