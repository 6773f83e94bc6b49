# storage/cache/default_cache.py
"""Fallback-Cache ohne Funktionalität."""

from __future__ import annotations

from gateway_logging import get_logger

logger = get_logger(__name__)


class DefaultCache:
    """No-Op-Cache: jeder Lookup ist ein Miss, Schreibzugriffe verpuffen."""

    async def get(self, key: str) -> str | None:
        logger.debug("DefaultCache.get ohne Wirkung: %s", key)
        return None

    async def set(self, key: str, value: str, expire: int | None = None) -> None:
        logger.debug("DefaultCache.set ohne Wirkung: %s (ttl=%s)", key, expire)

    async def delete(self, key: str) -> None:
        logger.debug("DefaultCache.delete ohne Wirkung: %s", key)

    async def aclose(self) -> None:
        return None
