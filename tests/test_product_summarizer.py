import pytest

from sales_report.engine.product_summarizer import product_summary_frame, summarize_products
from sales_report.models import Product, ProductSummary


def test_products_sharing_a_name_are_merged():
    products = [Product(1, "Laptop", 100.0, 2), Product(2, "Laptop", 200.0, 1)]
    [summary] = summarize_products(products)

    assert summary.name == "Laptop"
    assert summary.total_quantity_sold == 3
    assert summary.total_revenue == pytest.approx(400.0)
    assert round(summary.average_price, 2) == 133.33


def test_one_summary_per_name_in_first_seen_order():
    products = [
        Product(1, "Tablet", 50.0, 1),
        Product(2, "Laptop", 100.0, 0),
        Product(3, "Tablet", 70.0, 2),
        Product(4, "Cámara", 10.0, 5),
    ]
    summaries = summarize_products(products)

    assert [s.name for s in summaries] == ["Tablet", "Laptop", "Cámara"]
    assert [s.total_quantity_sold for s in summaries] == [3, 0, 5]
    assert summaries[0].total_revenue == pytest.approx(190.0)


def test_unsold_name_has_zero_average():
    [summary] = summarize_products([Product(1, "Laptop", 100.0)])
    assert summary == ProductSummary("Laptop", 0, 0.0)
    assert summary.average_price == 0


def test_quantity_total_matches_products():
    products = [Product(i, f"P{i % 3}", 1.5 * i, i) for i in range(1, 10)]
    summaries = summarize_products(products)
    assert sum(s.total_quantity_sold for s in summaries) == sum(p.sold_quantity for p in products)


def test_empty_products():
    assert summarize_products([]) == []
    assert list(product_summary_frame([]).columns) == ["name", "total_quantity_sold", "total_revenue"]
