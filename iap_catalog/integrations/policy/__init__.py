from .response_wrappers import IntegrationResponseError, normalize_product_record, normalize_products_response

__all__ = ["IntegrationResponseError", "normalize_product_record", "normalize_products_response"]
