"""Storage layer - abstract contract and in-memory implementation."""

from content_admin.storage.base import StorageBackend
from content_admin.storage.memory import InMemoryStorage

__all__ = ["StorageBackend", "InMemoryStorage"]
