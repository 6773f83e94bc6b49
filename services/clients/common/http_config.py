# services/clients/common/http_config.py
"""HTTP-Konfiguration für den Core-API-Client.

Übersetzt die Gateway-Settings in die Keyword-Argumente für
``httpx.AsyncClient``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import httpx

from gateway_logging import get_logger

from .constants import (
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_CONNECTION_LIMIT,
    DEFAULT_KEEPALIVE_CONNECTION_LIMIT,
    DEFAULT_TIMEOUT,
)

if TYPE_CHECKING:
    from config.settings import Settings

logger = get_logger(__name__)


@dataclass(slots=True)
class HTTPClientConfig:
    """Timeouts, Pool-Limits und Header für einen HTTP-Client."""

    timeout: float = DEFAULT_TIMEOUT
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT
    connection_limit: int = DEFAULT_CONNECTION_LIMIT
    keepalive_connection_limit: int = DEFAULT_KEEPALIVE_CONNECTION_LIMIT
    trust_env: bool = True
    verify_ssl: bool = True
    headers: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_settings(cls, settings: Settings) -> HTTPClientConfig:
        """Konfiguration für die Core Data API aus den Settings."""
        return cls(
            timeout=settings.core_api_timeout_seconds,
            connect_timeout=min(DEFAULT_CONNECT_TIMEOUT, settings.core_api_timeout_seconds),
            headers=create_json_headers(),
        )


def create_httpx_client_config(
    config: HTTPClientConfig | None = None,
    base_url: str | None = None,
    **overrides: Any,
) -> dict[str, Any]:
    """Erstellt die Keyword-Argumente für ``httpx.AsyncClient``.

    Args:
        config: HTTP-Konfiguration (optional)
        base_url: Basis-URL für den Client (optional)
        **overrides: Überschreibungen für einzelne Argumente

    Returns:
        Dictionary mit httpx Client-Konfiguration
    """
    config = config or HTTPClientConfig()

    client_config: dict[str, Any] = {
        "timeout": httpx.Timeout(config.timeout, connect=config.connect_timeout),
        "verify": config.verify_ssl,
        "limits": httpx.Limits(
            max_connections=config.connection_limit,
            max_keepalive_connections=config.keepalive_connection_limit,
        ),
        "trust_env": config.trust_env,
    }
    if base_url:
        client_config["base_url"] = base_url
    if config.headers:
        client_config["headers"] = dict(config.headers)

    client_config.update(overrides)

    logger.debug({
        "event": "core_api_http_config",
        "base_url": base_url,
        "timeout": config.timeout,
        "connect_timeout": config.connect_timeout,
    })
    return client_config


def create_json_headers(additional_headers: dict[str, str] | None = None) -> dict[str, str]:
    """JSON-Header für REST- und GraphQL-Aufrufe."""
    return {
        "Content-Type": "application/json",
        "Accept": "application/json",
        **(additional_headers or {}),
    }


__all__ = [
    "HTTPClientConfig",
    "create_httpx_client_config",
    "create_json_headers",
]
