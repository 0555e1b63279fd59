"""
Fetch result contracts.

A catalog fetch produces exactly one of:
- FetchSuccess: a non-empty list of products
- FetchFailure: a classified ErrorKind

Descriptions for each ErrorKind are kept in a lookup table so callers can
display or log them directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Union

from .interfaces import Product


class ErrorKind(str, Enum):
    NO_PRODUCT_IDS_FOUND = "NO_PRODUCT_IDS_FOUND"
    NO_PRODUCTS_FOUND = "NO_PRODUCTS_FOUND"
    # Reserved for the purchase flow; fetch never emits it.
    PAYMENT_WAS_CANCELLED = "PAYMENT_WAS_CANCELLED"
    PRODUCT_REQUEST_FAILED = "PRODUCT_REQUEST_FAILED"


ERROR_DESCRIPTIONS: Dict[ErrorKind, str] = {
    ErrorKind.NO_PRODUCT_IDS_FOUND: "No In-App Purchase product identifiers were found.",
    ErrorKind.NO_PRODUCTS_FOUND: "No In-App Purchases were found.",
    ErrorKind.PRODUCT_REQUEST_FAILED: "Unable to fetch available In-App Purchase products at the moment.",
    ErrorKind.PAYMENT_WAS_CANCELLED: "In-App Purchase process was cancelled.",
}


def describe(error: ErrorKind) -> str:
    """Return the human-readable text for an error kind."""
    return ERROR_DESCRIPTIONS[ErrorKind(error)]


@dataclass(frozen=True)
class FetchSuccess:
    products: List[Product]

    def __post_init__(self) -> None:
        if not self.products:
            raise ValueError("FetchSuccess requires at least one product")

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class FetchFailure:
    error: ErrorKind

    @property
    def ok(self) -> bool:
        return False

    @property
    def message(self) -> str:
        return describe(self.error)


FetchResult = Union[FetchSuccess, FetchFailure]
