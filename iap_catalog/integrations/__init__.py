"""
Integrations layer.
This package contains all code used to communicate with the external store service
that resolves in-app purchase product identifiers into product records.

Key rule:
- The catalog client MUST NOT call the store directly over HTTP.
- It calls a StoreService implementation (under iap_catalog/integrations/clients).
- We use the MOCK local store during development and the REAL_HTTP client when
  the store endpoint is configured.
"""

from .contracts import (
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
from .policy import IntegrationResponseError

__all__ = [
    "ERROR_DESCRIPTIONS", "ErrorKind", "FetchFailure", "FetchResult", "FetchSuccess",
    "Product", "StoreRequestError", "StoreService", "describe",
    "IntegrationResponseError",
]
