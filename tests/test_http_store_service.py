import json

import httpx
import pytest

from iap_catalog.integrations.clients.real_http.store_products import HttpStoreService
from iap_catalog.integrations.contracts.interfaces import StoreRequestError
from iap_catalog.integrations.policy.response_wrappers import IntegrationResponseError


def _transport(handler, seen):
    def _handle(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return handler(request)

    return httpx.MockTransport(_handle)


@pytest.mark.asyncio
async def test_posts_sorted_ids_and_normalizes_products():
    seen = []
    transport = _transport(
        lambda request: httpx.Response(200, json={"products": [
            {"productIdentifier": "com.app.coins100", "price": 0.99},
            {"productIdentifier": "com.app.noads", "price": 2.99},
        ]}),
        seen,
    )
    store = HttpStoreService(base_url="https://store.test/", api_key="secret", transport=transport)

    products = await store.request_products(frozenset({"com.app.noads", "com.app.coins100"}))

    assert [p.product_id for p in products] == ["com.app.coins100", "com.app.noads"]
    request = seen[0]
    assert str(request.url) == "https://store.test/products/lookup"
    assert request.headers["Authorization"] == "Bearer secret"
    assert json.loads(request.content) == {"product_ids": ["com.app.coins100", "com.app.noads"]}


@pytest.mark.asyncio
async def test_no_auth_header_without_api_key(monkeypatch):
    monkeypatch.delenv("IAP_STORE_API_KEY", raising=False)
    seen = []
    transport = _transport(lambda request: httpx.Response(200, json=[]), seen)
    store = HttpStoreService(base_url="https://store.test", transport=transport)

    assert await store.request_products(frozenset()) == []
    assert "Authorization" not in seen[0].headers


@pytest.mark.asyncio
async def test_http_status_error_becomes_store_request_error():
    transport = _transport(lambda request: httpx.Response(503, json={"detail": "down"}), [])
    store = HttpStoreService(base_url="https://store.test", transport=transport)

    with pytest.raises(StoreRequestError) as exc:
        await store.request_products(frozenset({"a"}))

    assert isinstance(exc.value.cause, httpx.HTTPStatusError)


@pytest.mark.asyncio
async def test_connection_error_becomes_store_request_error():
    def _raise(request):
        raise httpx.ConnectError("refused", request=request)

    store = HttpStoreService(base_url="https://store.test", transport=_transport(_raise, []))

    with pytest.raises(StoreRequestError):
        await store.request_products(frozenset({"a"}))


@pytest.mark.asyncio
async def test_invalid_json_becomes_store_request_error():
    transport = _transport(lambda request: httpx.Response(200, content=b"<html>"), [])
    store = HttpStoreService(base_url="https://store.test", transport=transport)

    with pytest.raises(StoreRequestError):
        await store.request_products(frozenset({"a"}))


@pytest.mark.asyncio
async def test_malformed_records_raise_integration_error():
    transport = _transport(lambda request: httpx.Response(200, json={"products": [{"title": "no id"}]}), [])
    store = HttpStoreService(base_url="https://store.test", transport=transport)

    with pytest.raises(IntegrationResponseError):
        await store.request_products(frozenset({"a"}))


@pytest.mark.asyncio
async def test_missing_base_url_is_request_error(monkeypatch):
    monkeypatch.delenv("IAP_STORE_API_URL", raising=False)
    store = HttpStoreService()

    with pytest.raises(StoreRequestError):
        await store.request_products(frozenset({"a"}))


def test_base_url_and_key_fall_back_to_environment(monkeypatch):
    monkeypatch.setenv("IAP_STORE_API_URL", "https://env.store.test/")
    monkeypatch.setenv("IAP_STORE_API_KEY", "env-key")

    store = HttpStoreService()

    assert store.base_url == "https://env.store.test"
    assert store.api_key == "env-key"
