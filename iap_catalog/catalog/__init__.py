from .client import CompletionSignal, ProductCatalogClient, ResultCallback
from .product_ids import dedupe_identifiers, load_product_identifiers, resolve_product_ids_path

__all__ = [
    "CompletionSignal",
    "ProductCatalogClient",
    "ResultCallback",
    "dedupe_identifiers",
    "load_product_identifiers",
    "resolve_product_ids_path",
]
