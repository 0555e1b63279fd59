"""
Real HTTP store clients.

These clients talk to the remote store catalog over HTTP.

Important:
- Must implement the same StoreService interface as the mock clients
- Must return Product records (see iap_catalog/integrations/contracts)

Switching:
The selection of mock vs real clients happens in iap_catalog/dependencies.py only.
"""

from .store_products import HttpStoreService

__all__ = ["HttpStoreService"]
