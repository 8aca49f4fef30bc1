import random

import pytest

from sales_report.engine.reference_loader import index_products, index_sellers
from sales_report.engine.sales_aggregator import aggregate_sales
from sales_report.models import Product, Sale, Seller


def _run(sellers, products, sales):
    return aggregate_sales(sales, index_sellers(sellers), index_products(products))


def test_single_sale_example():
    seller = Seller("CC", "111", "Ana", "Lopez")
    product = Product(1, "Laptop", 100.0)
    result = _run([seller], [product], [Sale("111", 1, 3)])

    assert seller.total_sales == pytest.approx(300.0)
    assert product.sold_quantity == 3
    assert result.processed == 1
    assert result.dropped == 0
    assert result.revenue == pytest.approx(300.0)


def test_unknown_product_or_seller_changes_nothing():
    seller = Seller("CC", "111", "Ana", "Lopez")
    product = Product(1, "Laptop", 100.0)
    result = _run([seller], [product], [Sale("111", 99, 5), Sale("999", 1, 5)])

    assert seller.total_sales == 0
    assert product.sold_quantity == 0
    assert result.processed == 0
    assert result.dropped == 2


def test_mixed_sales(sellers, products, sales):
    result = _run(sellers, products, sales)

    assert [s.total_sales for s in sellers] == pytest.approx([400.0, 200.0, 0.0])
    assert [p.sold_quantity for p in products] == [2, 1, 4, 0]
    assert (result.processed, result.dropped) == (3, 2)


def test_dropped_count_is_logged(sellers, products, sales, caplog):
    caplog.set_level("INFO")
    _run(sellers, products, sales)
    assert "Dropped 2 sales" in caplog.text


def test_order_does_not_change_totals():
    rng = random.Random(7)
    sales = [Sale(str(rng.choice([111, 222, 333])), rng.randint(1, 5), rng.randint(1, 10))
             for _ in range(200)]

    def totals(ordered):
        sellers = [Seller("CC", d, "A", "B") for d in ("111", "222", "333")]
        products = [Product(i, f"P{i}", 10.25 * i) for i in range(1, 5)]
        _run(sellers, products, ordered)
        return [s.total_sales for s in sellers], [p.sold_quantity for p in products]

    shuffled = sales[:]
    rng.shuffle(shuffled)
    seller_totals, quantities = totals(sales)
    shuffled_totals, shuffled_quantities = totals(shuffled)

    assert shuffled_quantities == quantities
    assert shuffled_totals == pytest.approx(seller_totals)


def test_no_sales():
    result = _run([Seller("CC", "1", "A", "B")], [Product(1, "P", 1.0)], [])
    assert (result.processed, result.dropped, result.revenue) == (0, 0, 0.0)
