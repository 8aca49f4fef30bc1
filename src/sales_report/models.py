from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Seller:
    """
    A salesperson from the sellers reference file.
    total_sales starts at 0 and is only accumulated by the sales aggregator.
    """
    document_type: str
    document_number: str
    first_name: str
    last_name: str
    total_sales: float = 0.0

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def add_sale(self, amount: float) -> None:
        self.total_sales += amount


@dataclass
class Product:
    """A catalog product; sold_quantity is accumulated by the sales aggregator."""
    id: int
    name: str
    price: float
    sold_quantity: int = 0

    def add_sold(self, quantity: int) -> None:
        self.sold_quantity += quantity


@dataclass(frozen=True)
class Sale:
    """One line of a seller's sales file."""
    seller_document_number: str
    product_id: int
    quantity: int


@dataclass
class ProductSummary:
    """Totals for every product id sharing the same name."""
    name: str
    total_quantity_sold: int = 0
    total_revenue: float = 0.0

    @property
    def average_price(self) -> float:
        if self.total_quantity_sold > 0:
            return self.total_revenue / self.total_quantity_sold
        return 0.0
