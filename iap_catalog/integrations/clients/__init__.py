from .mocks import LocalStoreService
from .real_http import HttpStoreService

__all__ = ["LocalStoreService", "HttpStoreService"]
