# storage/client_factory.py
"""Client-Factory für Cache-Backends mit Registry pro Provider."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from config.constants import CACHE_PROVIDER_DEFAULT, CACHE_PROVIDER_MEMORY, CACHE_PROVIDER_REDIS
from gateway_logging import get_logger

from .cache import CacheBackend, DefaultCache, InMemoryCache, RedisCache
from .constants import ErrorMessages

if TYPE_CHECKING:
    from config.settings import Settings

logger = get_logger(__name__)

CacheBuilder = Callable[["Settings"], CacheBackend]


class CacheClientFactory:
    """Erzeugt pro Provider-Name genau einen Cache-Client und verwendet ihn wieder.

    Die Factory wird einmal beim Start erstellt und an die
    Autorisierungskomponenten übergeben.
    """

    def __init__(self, settings: Settings) -> None:
        self._settings = settings
        self._clients: dict[str, CacheBackend] = {}
        self._builders: dict[str, CacheBuilder] = {
            CACHE_PROVIDER_DEFAULT: lambda _settings: DefaultCache(),
            CACHE_PROVIDER_MEMORY: lambda _settings: InMemoryCache(),
            CACHE_PROVIDER_REDIS: RedisCache.from_settings,
        }

    def register(self, provider: str, builder: CacheBuilder) -> None:
        """Registriert einen zusätzlichen Provider."""
        self._builders[provider] = builder

    def get_client(self, provider: str | None = None) -> CacheBackend:
        """Gibt den Client für ``provider`` zurück (Default: aus den Settings).

        Unbekannte Provider fallen auf den No-Op-Cache zurück.
        """
        name = provider or self._settings.cache_provider
        client = self._clients.get(name)
        if client is not None:
            return client

        builder = self._builders.get(name)
        if builder is None:
            logger.warning(ErrorMessages.UNKNOWN_CACHE_PROVIDER.format(provider=name))
            builder = self._builders[CACHE_PROVIDER_DEFAULT]

        client = builder(self._settings)
        self._clients[name] = client
        logger.info("Cache-Client erstellt: %s (%s)", name, type(client).__name__)
        return client

    async def close_all_clients(self) -> None:
        """Schließt alle Clients und leert die Registry."""
        for name, client in list(self._clients.items()):
            try:
                await client.aclose()
            except Exception as e:
                logger.warning("Fehler beim Schließen des Cache-Clients %s: %s", name, e)
        self._clients.clear()
        logger.info("🔌 Alle Cache-Clients geschlossen")
