"""Local store service backed by a catalog file.

Resolves product identifiers against products listed in a local JSON or YAML
file, without calling any external API. Every request is recorded so tests
can assert how (and whether) the store was called.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import FrozenSet, Iterable, List, Optional

import yaml

from iap_catalog.integrations.contracts.interfaces import Product, StoreRequestError, StoreService
from iap_catalog.integrations.policy.response_wrappers import normalize_products_response

logger = logging.getLogger(__name__)


class LocalStoreService(StoreService):
    """Mock store that answers product requests from local data."""

    def __init__(
        self,
        catalog_path: Optional[Path] = None,
        products: Optional[Iterable[Product]] = None,
        fail_with: Optional[str] = None,
    ) -> None:
        self.catalog_path = Path(catalog_path) if catalog_path else None
        self._products = list(products) if products is not None else None
        self.fail_with = fail_with
        self.requests: List[FrozenSet[str]] = []

    async def request_products(self, identifiers: FrozenSet[str]) -> List[Product]:
        self.requests.append(frozenset(identifiers))
        if self.fail_with:
            raise StoreRequestError(self.fail_with)

        catalog = self._load_catalog()
        matched = [product for product in catalog if product.product_id in identifiers]
        logger.debug("Local store matched %d of %d requested identifiers", len(matched), len(identifiers))
        return matched

    def _load_catalog(self) -> List[Product]:
        if self._products is not None:
            return self._products
        if self.catalog_path is None:
            return []

        try:
            text = self.catalog_path.read_text(encoding="utf-8")
        except OSError as exc:
            raise StoreRequestError(f"Local catalog unavailable: {self.catalog_path}", cause=exc) from exc

        if self.catalog_path.suffix.lower() in {".yml", ".yaml"}:
            data = yaml.safe_load(text) or []
        else:
            data = json.loads(text)
        return normalize_products_response(data)
