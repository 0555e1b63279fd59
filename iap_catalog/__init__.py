"""
In-app purchase product catalog client.

Loads the configured product identifiers, asks the store service for the
matching products and reports a single FetchResult per request.
"""

from .catalog.client import ProductCatalogClient
from .integrations.contracts import (
    ERROR_DESCRIPTIONS,
    ErrorKind,
    FetchFailure,
    FetchResult,
    FetchSuccess,
    Product,
    StoreRequestError,
    StoreService,
    describe,
)

__all__ = [
    "ProductCatalogClient",
    "ERROR_DESCRIPTIONS", "ErrorKind", "FetchFailure", "FetchResult", "FetchSuccess",
    "Product", "StoreRequestError", "StoreService", "describe",
]
