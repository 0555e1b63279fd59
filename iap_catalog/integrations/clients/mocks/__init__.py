"""
Mock store clients.

These clients return realistic product records without calling any external API.
They are used when:
- The store catalog endpoint is not reachable (local development)
- We want to exercise the catalog client end-to-end in tests

Mock clients implement the SAME StoreService interface as the real HTTP client.
"""

from .local_store import LocalStoreService

__all__ = ["LocalStoreService"]
