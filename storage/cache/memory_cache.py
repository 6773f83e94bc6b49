# storage/cache/memory_cache.py
"""Prozesslokaler In-Memory-Cache mit TTL."""

from __future__ import annotations

import time
from collections.abc import Callable

from ..utils import effective_ttl


class InMemoryCache:
    """In-Memory-Cache für Single-Process-Deployments und Tests.

    Abgelaufene Einträge werden beim Lesen entfernt.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._entries: dict[str, tuple[str, float | None]] = {}

    async def get(self, key: str) -> str | None:
        entry = self._entries.get(key)
        if entry is None:
            return None

        value, expires_at = entry
        if expires_at is not None and self._clock() >= expires_at:
            del self._entries[key]
            return None
        return value

    async def set(self, key: str, value: str, expire: int | None = None) -> None:
        ttl = effective_ttl(expire)
        expires_at = self._clock() + ttl if ttl is not None else None
        self._entries[key] = (value, expires_at)

    async def delete(self, key: str) -> None:
        self._entries.pop(key, None)

    async def aclose(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
