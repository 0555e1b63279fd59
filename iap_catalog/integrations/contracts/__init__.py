"""
Integration contracts.

Shapes shared by every store backend and by the catalog client:
- Product: record returned by the store
- StoreService: interface implemented by mock and real HTTP clients
- FetchResult / ErrorKind: the single outcome of a catalog fetch
"""

from .interfaces import Product, StoreRequestError, StoreService
from .results import (
    ERROR_DESCRIPTIONS,
    ErrorKind,
    FetchFailure,
    FetchResult,
    FetchSuccess,
    describe,
)

__all__ = [
    "Product", "StoreRequestError", "StoreService",
    "ERROR_DESCRIPTIONS", "ErrorKind", "FetchFailure", "FetchResult",
    "FetchSuccess", "describe",
]
