# storage/constants.py
"""Storage-System Konstanten und Konfiguration."""

from __future__ import annotations

from typing import Any


class StorageConstants:
    """Zentrale Konstanten für das Storage-System."""

    # Timeouts (Sekunden)
    REDIS_SOCKET_TIMEOUT = 5

    # Redis
    REDIS_DEFAULT_PORT = 6379


class CacheConfig:
    """Cache-Konfiguration."""

    REDIS_CONFIG_DEFAULTS: dict[str, Any] = {
        "decode_responses": True,
        "socket_connect_timeout": StorageConstants.REDIS_SOCKET_TIMEOUT,
    }


class ErrorMessages:
    """Standardisierte Fehlermeldungen."""

    UNKNOWN_CACHE_PROVIDER = "Unbekannter Cache-Provider '{provider}', verwende Default-Cache"
