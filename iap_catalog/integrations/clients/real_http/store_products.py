"""
Real Store Products HTTP Client.

Used when the store catalog endpoint is configured. Sends the requested
product identifiers in a single lookup call and normalizes the returned
records into Product contracts.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, FrozenSet, List, Optional

import httpx

from iap_catalog.integrations.contracts.interfaces import Product, StoreRequestError, StoreService
from iap_catalog.integrations.policy.response_wrappers import normalize_products_response

logger = logging.getLogger(__name__)


class HttpStoreService(StoreService):
    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        lookup_path: str = "/products/lookup",
        timeout_seconds: float = 20.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = (base_url or os.getenv("IAP_STORE_API_URL", "")).rstrip("/")
        self.api_key = api_key or os.getenv("IAP_STORE_API_KEY", "")
        self.lookup_path = lookup_path
        self.timeout_seconds = timeout_seconds
        self._transport = transport

    async def request_products(self, identifiers: FrozenSet[str]) -> List[Product]:
        if not self.base_url:
            raise StoreRequestError("IAP_STORE_API_URL is not configured.")

        headers: Dict[str, str] = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"

        payload: Dict[str, Any] = {"product_ids": sorted(identifiers)}
        url = f"{self.base_url}{self.lookup_path}"

        try:
            async with httpx.AsyncClient(timeout=self.timeout_seconds, transport=self._transport) as client:
                response = await client.post(url, json=payload, headers=headers)
                response.raise_for_status()
                data = response.json() if response.content else []
        except httpx.HTTPError as exc:
            logger.warning("Store product lookup failed: %s", exc)
            raise StoreRequestError(f"Product request to {url} failed: {exc}", cause=exc) from exc
        except ValueError as exc:
            raise StoreRequestError(f"Store returned invalid JSON from {url}", cause=exc) from exc

        return normalize_products_response(data)
