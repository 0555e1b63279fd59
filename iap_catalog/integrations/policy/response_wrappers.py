from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from iap_catalog.integrations.contracts.interfaces import Product


class IntegrationResponseError(ValueError):
    def __init__(self, message: str, *, payload: Optional[Any] = None) -> None:
        super().__init__(message)
        self.payload = payload if payload is not None else {}


def normalize_products_response(raw: Any) -> List[Product]:
    """Turn a store payload into validated Product records.

    Accepts a bare list of records, or a mapping holding the list under
    ``products``, ``items`` or ``data``.
    """
    records = _extract_records(raw)
    return [normalize_product_record(record) for record in records]


def normalize_product_record(record: Any) -> Product:
    if not isinstance(record, dict):
        raise IntegrationResponseError(f"Product record must be an object; got {type(record).__name__}.", payload=record)

    product_id = _first_non_empty(record, "product_id", "productId", "productIdentifier", "id")
    title = _first_non_empty(record, "title", "localizedTitle", "name", default="")
    description = _first_non_empty(record, "description", "localizedDescription", default="")
    price = record.get("price")
    currency = _first_non_empty(record, "currency", "currencyCode", default="")
    price_locale = _first_non_empty(record, "price_locale", "priceLocale", default="")

    known = {
        "product_id", "productId", "productIdentifier", "id",
        "title", "localizedTitle", "name",
        "description", "localizedDescription",
        "price", "currency", "currencyCode", "price_locale", "priceLocale",
    }
    extras = {key: value for key, value in record.items() if key not in known}

    payload: Dict[str, Any] = {
        "product_id": str(product_id),
        "title": title or None,
        "description": description or None,
        "price": _coerce_price(price),
        "currency": str(currency).upper() or None,
        "price_locale": price_locale or None,
        **extras,
    }
    try:
        return Product(**payload)
    except ValidationError as exc:
        raise IntegrationResponseError(f"Product validation failed: {exc}", payload=record) from exc


def _extract_records(raw: Any) -> List[Any]:
    if isinstance(raw, list):
        return raw
    if isinstance(raw, dict):
        for key in ("products", "items", "data"):
            value = raw.get(key)
            if isinstance(value, list):
                return value
        raise IntegrationResponseError("Product response has no products list.", payload=raw)
    raise IntegrationResponseError(f"Unsupported product response type {type(raw).__name__}.", payload=raw)


def _first_non_empty(data: Dict[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        value = data.get(key)
        if value is None:
            continue
        if isinstance(value, str) and not value.strip():
            continue
        return value
    if default is not None:
        return default
    raise IntegrationResponseError(f"Missing required field. Checked keys: {', '.join(keys)}", payload=data)


def _coerce_price(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    try:
        price = float(value)
    except (TypeError, ValueError) as exc:
        raise IntegrationResponseError(f"Invalid product price: {value!r}") from exc
    if price < 0:
        raise IntegrationResponseError(f"Product price must be >= 0; got {price}.")
    return price
