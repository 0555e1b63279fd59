#!/usr/bin/env python3
"""
Fetch the configured in-app purchase products once and print the outcome.

Uses config/catalog_config.yml (or --config) to choose the identifier
resource and the store backend (local catalog file or HTTP endpoint).
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

load_dotenv()

from iap_catalog.dependencies import build_catalog_client
from iap_catalog.integrations.contracts.results import FetchFailure, FetchResult
from iap_catalog.utils.config_loader import load_catalog_config


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def print_result(result: FetchResult) -> None:
    if isinstance(result, FetchFailure):
        print(f"FAILED [{result.error.value}] {result.message}")
        return

    print(f"Found {len(result.products)} product(s):\n")
    for product in result.products:
        print(json.dumps(product.model_dump(exclude_none=True), indent=2, ensure_ascii=False))


def main() -> int:
    parser = argparse.ArgumentParser(description="Fetch in-app purchase products from the store")
    parser.add_argument("--config", type=Path, default=None, help="Path to catalog_config.yml")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    setup_logging(args.verbose)

    cfg = load_catalog_config(args.config)
    client = build_catalog_client(cfg)
    result = client.fetch_products_sync(on_result=print_result)
    return 0 if result.ok else 1


if __name__ == "__main__":
    sys.exit(main())
