from __future__ import annotations

from abc import ABC, abstractmethod
from typing import FrozenSet, List, Optional

from pydantic import BaseModel, ConfigDict


# ---------------------------------------------------------------------------
# Shared data models
# ---------------------------------------------------------------------------

class Product(BaseModel):
    """A purchasable item as resolved by the store service.

    Only ``product_id`` is required. Any additional fields the store sends
    are kept on the model untouched.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    product_id: str
    title: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = None
    currency: Optional[str] = None
    price_locale: Optional[str] = None


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class StoreRequestError(RuntimeError):
    """Raised by a store service when the product request itself fails."""

    def __init__(self, message: str, *, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.cause = cause


# ---------------------------------------------------------------------------
# Abstract store interface
# ---------------------------------------------------------------------------

class StoreService(ABC):
    """Every store backend (local mock or real HTTP) must implement this interface."""

    @abstractmethod
    async def request_products(self, identifiers: FrozenSet[str]) -> List[Product]:
        """Resolve product identifiers to product records.

        Returns zero or more products. Raises ``StoreRequestError`` when the
        request could not be completed.
        """
