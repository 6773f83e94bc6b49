# storage/cache/redis_cache.py
"""Redis-Cache für ACL-Snapshots."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import redis.asyncio as aioredis

from gateway_logging import get_logger

from ..constants import CacheConfig, StorageConstants
from ..utils import effective_ttl, handle_storage_errors

if TYPE_CHECKING:
    from config.settings import Settings

logger = get_logger(__name__)


def build_redis_config(settings: Settings) -> dict[str, Any]:
    """Erstellt die Redis-Verbindungsparameter aus den Settings.

    Im IPv6-Modus wird der feste Service-Host verwendet (Auflösung über
    AAAA-Records), sonst die ``redis_url``.
    """
    if settings.ipv6:
        return {
            "host": settings.redis_host,
            "port": StorageConstants.REDIS_DEFAULT_PORT,
            **CacheConfig.REDIS_CONFIG_DEFAULTS,
        }
    return {"url": settings.redis_url, **CacheConfig.REDIS_CONFIG_DEFAULTS}


class RedisCache:
    """Cache-Backend auf Basis von ``redis.asyncio``."""

    def __init__(self, client: aioredis.Redis) -> None:
        self.client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> RedisCache:
        """Erstellt den Client aus den Settings (Verbindung erst beim ersten Befehl)."""
        config = build_redis_config(settings)
        url = config.pop("url", None)
        client = aioredis.Redis.from_url(url, **config) if url else aioredis.Redis(**config)
        logger.debug({"event": "redis_cache_created", "ipv6": settings.ipv6})
        return cls(client)

    @handle_storage_errors("redis_get")
    async def get(self, key: str) -> str | None:
        return await self.client.get(key)

    @handle_storage_errors("redis_set")
    async def set(self, key: str, value: str, expire: int | None = None) -> None:
        await self.client.set(key, value, ex=effective_ttl(expire))

    @handle_storage_errors("redis_delete")
    async def delete(self, key: str) -> None:
        await self.client.delete(key)

    async def aclose(self) -> None:
        await self.client.aclose()
