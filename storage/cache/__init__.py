# storage/cache/__init__.py
"""Cache-Backends für ACL-Snapshots."""

from .base import CacheBackend
from .default_cache import DefaultCache
from .memory_cache import InMemoryCache
from .redis_cache import RedisCache, build_redis_config

__all__ = [
    "CacheBackend",
    "DefaultCache",
    "InMemoryCache",
    "RedisCache",
    "build_redis_config",
]
