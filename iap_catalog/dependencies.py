"""Wiring for the catalog client: mock vs real store selection happens here only."""

from __future__ import annotations

import logging
import os
from typing import Optional

from iap_catalog.catalog.client import ProductCatalogClient
from iap_catalog.integrations.clients.mocks.local_store import LocalStoreService
from iap_catalog.integrations.clients.real_http.store_products import HttpStoreService
from iap_catalog.integrations.contracts.interfaces import StoreService
from iap_catalog.utils.config_loader import CatalogConfig

logger = logging.getLogger(__name__)


def build_store_service(config: CatalogConfig) -> StoreService:
    backend = os.getenv("IAP_STORE_BACKEND", config.store.backend).strip().lower()

    if backend == "http":
        http_cfg = config.store.http
        logger.info("Using HTTP store service")
        return HttpStoreService(
            base_url=http_cfg.base_url or None,
            api_key=os.getenv(http_cfg.api_key_env, "") or None,
            lookup_path=http_cfg.lookup_path,
            timeout_seconds=http_cfg.timeout_seconds,
        )

    if backend != "local":
        raise ValueError(f"Unsupported store backend '{backend}'.")

    logger.info("Using local store service")
    return LocalStoreService(catalog_path=config.resolve_path(config.store.local_catalog_path))


def build_catalog_client(config: CatalogConfig, store: Optional[StoreService] = None) -> ProductCatalogClient:
    return ProductCatalogClient(
        store=store or build_store_service(config),
        resource_dir=config.resolve_path(config.product_ids.directory),
        resource_name=config.product_ids.name,
    )
