# storage/__init__.py
"""Storage-System: Cache-Backends und Client-Factory für ACL-Snapshots."""

from __future__ import annotations

from .cache import CacheBackend, DefaultCache, InMemoryCache, RedisCache
from .client_factory import CacheClientFactory
from .constants import CacheConfig, StorageConstants

__all__ = [
    "CacheBackend",
    "CacheClientFactory",
    "CacheConfig",
    "DefaultCache",
    "InMemoryCache",
    "RedisCache",
    "StorageConstants",
]
