"""
Product catalog client.

Resolves the pre-configured set of in-app purchase product identifiers into
product records via a StoreService, and reports a single FetchResult per call.

Each call carries its own completion signal. Nothing about a pending request
is stored on the client, so overlapping calls cannot receive each other's
results.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Callable, Optional

from iap_catalog.catalog.product_ids import (
    DEFAULT_RESOURCE_NAME,
    dedupe_identifiers,
    load_product_identifiers,
    resolve_product_ids_path,
)
from iap_catalog.integrations.contracts.interfaces import StoreRequestError, StoreService
from iap_catalog.integrations.contracts.results import ErrorKind, FetchFailure, FetchResult, FetchSuccess

logger = logging.getLogger(__name__)

ResultCallback = Callable[[FetchResult], None]


class CompletionSignal:
    """Delivers one FetchResult to a callback. The first result wins."""

    def __init__(self, on_result: Optional[ResultCallback] = None) -> None:
        self._on_result = on_result
        self._result: Optional[FetchResult] = None

    @property
    def delivered(self) -> bool:
        return self._result is not None

    @property
    def result(self) -> Optional[FetchResult]:
        return self._result

    def deliver(self, result: FetchResult) -> FetchResult:
        if self._result is not None:
            logger.warning("Ignoring duplicate fetch result %r; already delivered %r", result, self._result)
            return self._result

        self._result = result
        if self._on_result is not None:
            self._on_result(result)
        return result


class ProductCatalogClient:
    """Fetches store products for the identifiers listed in the local resource."""

    def __init__(
        self,
        store: StoreService,
        product_ids_path: Optional[Path] = None,
        resource_dir: Optional[Path] = None,
        resource_name: str = DEFAULT_RESOURCE_NAME,
    ) -> None:
        self.store = store
        self.product_ids_path = Path(product_ids_path) if product_ids_path else None
        self.resource_dir = Path(resource_dir) if resource_dir else None
        self.resource_name = resource_name

    async def fetch_products(self, on_result: Optional[ResultCallback] = None) -> FetchResult:
        """
        Resolve the configured product catalog.

        Args:
            on_result: Optional callback, invoked exactly once with the outcome.

        Returns:
            The same FetchResult passed to ``on_result``.
        """
        signal = CompletionSignal(on_result)

        identifiers = load_product_identifiers(self._locate_product_ids())
        if identifiers is None:
            logger.warning("No product identifier resource found (name=%s)", self.resource_name)
            return signal.deliver(FetchFailure(ErrorKind.NO_PRODUCT_IDS_FOUND))

        requested = dedupe_identifiers(identifiers)
        logger.debug("Requesting %d product(s) from store (%d listed)", len(requested), len(identifiers))

        try:
            products = await self.store.request_products(requested)
        except StoreRequestError as e:
            logger.warning("Product request failed: %s", e)
            return signal.deliver(FetchFailure(ErrorKind.PRODUCT_REQUEST_FAILED))
        except Exception:
            logger.exception("Unexpected error while requesting products")
            return signal.deliver(FetchFailure(ErrorKind.PRODUCT_REQUEST_FAILED))

        if not products:
            logger.info("Store returned no products for %d identifier(s)", len(requested))
            return signal.deliver(FetchFailure(ErrorKind.NO_PRODUCTS_FOUND))

        logger.info("Fetched %d product(s) from store", len(products))
        return signal.deliver(FetchSuccess(products=list(products)))

    def fetch_products_sync(self, on_result: Optional[ResultCallback] = None) -> FetchResult:
        """Blocking variant of ``fetch_products`` for callers without an event loop."""
        return asyncio.run(self.fetch_products(on_result))

    def _locate_product_ids(self) -> Optional[Path]:
        if self.product_ids_path is not None:
            return self.product_ids_path
        if self.resource_dir is not None:
            return resolve_product_ids_path(self.resource_dir, self.resource_name)
        return None
