"""Pytest fixtures for catalog client tests."""

import json
import plistlib

import pytest

from iap_catalog.integrations.contracts.interfaces import Product, StoreRequestError, StoreService


class FakeStoreService(StoreService):
    """Store double that returns canned products and records each request."""

    def __init__(self, products=None, error=None):
        self.products = list(products or [])
        self.error = error
        self.requests = []

    async def request_products(self, identifiers):
        self.requests.append(identifiers)
        if self.error is not None:
            raise self.error
        return [p for p in self.products if p.product_id in identifiers]


@pytest.fixture
def coins100():
    return Product(product_id="com.app.coins100", title="100 Coins", price=0.99, currency="USD")


@pytest.fixture
def noads():
    return Product(product_id="com.app.noads", title="Remove Ads", price=2.99, currency="USD")


@pytest.fixture
def fake_store(coins100, noads):
    return FakeStoreService(products=[coins100, noads])


@pytest.fixture
def failing_store():
    return FakeStoreService(error=StoreRequestError("connection reset"))


@pytest.fixture
def write_product_ids(tmp_path):
    """Write an IAP_ProductIDs resource in the requested format and return its path."""

    def _write(content, suffix=".plist", name="IAP_ProductIDs"):
        path = tmp_path / f"{name}{suffix}"
        if suffix == ".plist":
            path.write_bytes(plistlib.dumps(content))
        elif suffix == ".json":
            path.write_text(json.dumps(content), encoding="utf-8")
        else:
            path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def store_factory():
    return FakeStoreService
