"""
Catalog configuration loader (identifier resource, store backend).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent.parent


class ProductIdsConfig(BaseModel):
    directory: str = "config"
    name: str = "IAP_ProductIDs"


class HttpStoreConfig(BaseModel):
    base_url: str = ""
    api_key_env: str = "IAP_STORE_API_KEY"
    lookup_path: str = "/products/lookup"
    timeout_seconds: float = Field(default=20.0, gt=0.0, le=300.0)


class StoreConfig(BaseModel):
    backend: Literal["local", "http"] = "local"
    local_catalog_path: str = "data/store_catalog.json"
    http: HttpStoreConfig = Field(default_factory=HttpStoreConfig)


class CatalogConfig(BaseModel):
    product_ids: ProductIdsConfig = Field(default_factory=ProductIdsConfig)
    store: StoreConfig = Field(default_factory=StoreConfig)

    def resolve_path(self, value: str) -> Path:
        """Resolve a config path relative to the project root."""
        path = Path(value)
        return path if path.is_absolute() else PROJECT_ROOT / path


def load_catalog_config(config_path: Optional[Path] = None) -> CatalogConfig:
    """
    Load and validate catalog configuration from YAML file

    Args:
        config_path: Path to config file. Defaults to config/catalog_config.yml

    Returns:
        Validated CatalogConfig object

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValidationError: If config doesn't match schema
    """
    if config_path is None:
        config_path = PROJECT_ROOT / "config" / "catalog_config.yml"

    if not config_path.exists():
        raise FileNotFoundError(f"Catalog config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    try:
        cfg = CatalogConfig(**data)
        logger.info("Successfully loaded catalog config from %s", config_path)
        return cfg
    except ValidationError as e:
        logger.error("Catalog config validation failed: %s", e)
        raise
