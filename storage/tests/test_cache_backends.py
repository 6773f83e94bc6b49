# storage/tests/test_cache_backends.py
"""Tests für die Cache-Backends."""

from unittest.mock import AsyncMock

import pytest

from config.settings import create_test_settings
from storage.cache import DefaultCache, InMemoryCache, RedisCache, build_redis_config
from storage.utils import effective_ttl


class FakeClock:
    """Steuerbare Uhr für TTL-Tests."""

    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


class TestEffectiveTtl:
    """Tests für die TTL-Normalisierung."""

    def test_positive_ttl(self) -> None:
        """Prüft, dass positive Werte übernommen werden."""
        assert effective_ttl(60) == 60

    @pytest.mark.parametrize("expire", [None, 0, -5, True])
    def test_no_expiry(self, expire) -> None:
        """Prüft, dass fehlende oder nicht-positive TTLs "ohne Ablauf" bedeuten."""
        assert effective_ttl(expire) is None


class TestInMemoryCache:
    """Tests für den In-Memory-Cache."""

    @pytest.mark.asyncio
    async def test_set_get_delete(self) -> None:
        """Prüft das Grundverhalten."""
        cache = InMemoryCache()

        await cache.set("key", "value")
        assert await cache.get("key") == "value"

        await cache.delete("key")
        assert await cache.get("key") is None

    @pytest.mark.asyncio
    async def test_entry_expires(self) -> None:
        """Prüft, dass Einträge nach Ablauf der TTL verschwinden."""
        clock = FakeClock()
        cache = InMemoryCache(clock=clock)

        await cache.set("key", "value", 10)
        clock.now += 9
        assert await cache.get("key") == "value"

        clock.now += 1
        assert await cache.get("key") is None
        assert len(cache) == 0

    @pytest.mark.asyncio
    async def test_zero_ttl_never_expires(self) -> None:
        """Prüft, dass TTL 0 keinen Ablauf setzt."""
        clock = FakeClock()
        cache = InMemoryCache(clock=clock)

        await cache.set("key", "value", 0)
        clock.now += 10_000

        assert await cache.get("key") == "value"

    @pytest.mark.asyncio
    async def test_delete_missing_key(self) -> None:
        """Prüft, dass das Löschen unbekannter Schlüssel keinen Fehler wirft."""
        await InMemoryCache().delete("missing")


class TestDefaultCache:
    """Tests für den No-Op-Cache."""

    @pytest.mark.asyncio
    async def test_always_misses(self) -> None:
        """Prüft, dass der No-Op-Cache nie etwas liefert."""
        cache = DefaultCache()

        await cache.set("key", "value", 10)

        assert await cache.get("key") is None


class TestRedisCache:
    """Tests für den Redis-Cache mit gemocktem Client."""

    @pytest.mark.asyncio
    async def test_set_passes_ttl(self) -> None:
        """Prüft, dass die TTL als ``ex`` übergeben wird."""
        client = AsyncMock()
        cache = RedisCache(client)

        await cache.set("key", "value", 30)
        await cache.set("other", "value", 0)

        assert client.set.await_args_list[0].kwargs == {"ex": 30}
        assert client.set.await_args_list[1].kwargs == {"ex": None}

    @pytest.mark.asyncio
    async def test_get_and_delete(self) -> None:
        """Prüft, dass get und delete an den Client delegieren."""
        client = AsyncMock()
        client.get.return_value = "value"
        cache = RedisCache(client)

        assert await cache.get("key") == "value"
        await cache.delete("key")

        client.delete.assert_awaited_once_with("key")

    @pytest.mark.asyncio
    async def test_errors_propagate(self) -> None:
        """Prüft, dass Verbindungsfehler geloggt und weitergereicht werden."""
        client = AsyncMock()
        client.get.side_effect = ConnectionError("down")
        cache = RedisCache(client)

        with pytest.raises(ConnectionError):
            await cache.get("key")


class TestRedisConfig:
    """Tests für die Redis-Verbindungsparameter."""

    def test_url_mode(self) -> None:
        """Prüft, dass ohne IPv6 die URL verwendet wird."""
        settings = create_test_settings(redis_url="redis://cache:6379/1")

        config = build_redis_config(settings)

        assert config["url"] == "redis://cache:6379/1"
        assert config["decode_responses"] is True

    def test_ipv6_mode(self) -> None:
        """Prüft, dass im IPv6-Modus der feste Host verwendet wird."""
        settings = create_test_settings(ipv6=True, redis_host="redis")

        config = build_redis_config(settings)

        assert "url" not in config
        assert config["host"] == "redis"
        assert config["port"] == 6379
