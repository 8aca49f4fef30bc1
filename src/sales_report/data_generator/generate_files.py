from __future__ import annotations

import argparse
import logging
from typing import Iterable, Optional

from sales_report.constants import (
    DATA_DIRECTORY,
    PRODUCTS_COUNT,
    SALES_PER_SALESMAN,
    SALESMAN_COUNT,
)
from sales_report.data_generator.catalog_generator import CatalogGenerator
from sales_report.data_generator.sales_generator import SalesGenerator

logger = logging.getLogger(__name__)


def generate_files(
    data_dir: str = DATA_DIRECTORY,
    sellers: int = SALESMAN_COUNT,
    products: int = PRODUCTS_COUNT,
    sales_per_seller: int = SALES_PER_SALESMAN,
    random_seed: int = 42,
) -> list[str]:
    """Write the sellers, products and per-seller sales files; return the written paths."""
    catalog = CatalogGenerator(data_dir=data_dir, random_seed=random_seed)
    sellers_df = catalog.generate_sellers(sellers)
    products_df = catalog.generate_products(products)
    paths = [catalog.save_sellers(sellers_df), catalog.save_products(products_df)]

    # Separate stream so the sales do not depend on how much the catalog consumed
    sales = SalesGenerator(sellers_df, products_df, data_dir=data_dir,
                           random_seed=random_seed + 1)
    paths.extend(sales.generate(sales_per_seller))
    logger.info("Wrote %d files to %s", len(paths), data_dir)
    return paths


def parse_args(argv: Optional[Iterable[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate fake sellers, products and sales files.")
    parser.add_argument("--data-dir", default=DATA_DIRECTORY)
    parser.add_argument("--sellers", type=int, default=SALESMAN_COUNT)
    parser.add_argument("--products", type=int, default=PRODUCTS_COUNT)
    parser.add_argument("--sales-per-seller", type=int, default=SALES_PER_SALESMAN)
    parser.add_argument("--seed", type=int, default=42)
    return parser.parse_args(argv)


def main(argv: Optional[Iterable[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    try:
        paths = generate_files(
            data_dir=args.data_dir,
            sellers=args.sellers,
            products=args.products,
            sales_per_seller=args.sales_per_seller,
            random_seed=args.seed,
        )
    except (OSError, ValueError) as exc:
        logger.error("Error generating the files: %s", exc)
        return 1

    print(f"Wrote {len(paths)} files to '{args.data_dir}'")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
