from __future__ import annotations

import argparse
import logging
import os
from dataclasses import dataclass, field
from typing import Iterable, Optional

from sales_report.constants import (
    DATA_DIRECTORY,
    PRODUCTS_FILE,
    PRODUCTS_REPORT,
    REPORTS_DIRECTORY,
    SALES_FILE_PATTERN,
    SELLERS_FILE,
    SELLERS_REPORT,
)
from sales_report.engine.file_reader import read_products, read_sales, read_sellers
from sales_report.engine.product_summarizer import summarize_products
from sales_report.engine.reference_loader import index_products, index_sellers
from sales_report.engine.report_renderer import (
    products_report_frame,
    sellers_report_frame,
    write_report,
)
from sales_report.engine.sales_aggregator import AggregationResult, aggregate_sales
from sales_report.models import Product, ProductSummary, Seller

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    sellers: list[Seller]
    products: list[Product]
    summaries: list[ProductSummary]
    aggregation: AggregationResult
    report_paths: list[str] = field(default_factory=list)


class SalesReportPipeline:
    """
    Reads the sellers, products and per-seller sales files from data_dir,
    aggregates them and writes the sellers and products reports to reports_dir.

    Steps run strictly in sequence: reference data, sales, aggregation,
    product summaries, reports. Missing reference files raise OSError before
    any report is written.
    """

    def __init__(
        self,
        data_dir: str = DATA_DIRECTORY,
        reports_dir: str = REPORTS_DIRECTORY,
        sellers_file: str = SELLERS_FILE,
        products_file: str = PRODUCTS_FILE,
        sales_pattern: str = SALES_FILE_PATTERN,
        sellers_report: str = SELLERS_REPORT,
        products_report: str = PRODUCTS_REPORT,
    ) -> None:
        self.data_dir = data_dir
        self.reports_dir = reports_dir
        self.sellers_path = os.path.join(data_dir, sellers_file)
        self.products_path = os.path.join(data_dir, products_file)
        self.sales_pattern = sales_pattern
        self.sellers_report_path = os.path.join(reports_dir, sellers_report)
        self.products_report_path = os.path.join(reports_dir, products_report)

    def run(self) -> PipelineResult:
        sellers_by_document = index_sellers(read_sellers(self.sellers_path))
        products_by_id = index_products(read_products(self.products_path))
        sales = read_sales(self.data_dir, self.sales_pattern)

        aggregation = aggregate_sales(sales, sellers_by_document, products_by_id)

        sellers = list(sellers_by_document.values())
        products = list(products_by_id.values())
        summaries = summarize_products(products)

        result = PipelineResult(sellers, products, summaries, aggregation)
        # Independent writes: the sellers report stays if the products one fails.
        result.report_paths.append(
            write_report(sellers_report_frame(sellers), self.sellers_report_path))
        logger.info("Sellers report written to %s", self.sellers_report_path)
        result.report_paths.append(
            write_report(products_report_frame(summaries), self.products_report_path))
        logger.info("Products report written to %s", self.products_report_path)
        return result


def parse_args(argv: Optional[Iterable[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Aggregate the generated sales files into seller and product reports.")
    parser.add_argument("--data-dir", default=DATA_DIRECTORY,
                        help="directory holding the sellers, products and sales files")
    parser.add_argument("--reports-dir", default=REPORTS_DIRECTORY,
                        help="directory the reports are written to")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser.parse_args(argv)


def main(argv: Optional[Iterable[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    pipeline = SalesReportPipeline(data_dir=args.data_dir, reports_dir=args.reports_dir)
    try:
        result = pipeline.run()
    except OSError as exc:
        logger.error("Error processing the files: %s", exc)
        return 1

    print(f"Processed {result.aggregation.processed} sales "
          f"({result.aggregation.dropped} dropped). Reports saved in '{args.reports_dir}'.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
