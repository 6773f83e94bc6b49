# services/clients/common/__init__.py
"""Common Utilities für Client Services.

Dieses Package enthält wiederverwendbare Komponenten für alle Client Services:
- Konstanten und Konfigurationswerte
- HTTP Client Konfiguration
- Konsistente Fehlerbehandlung
"""

from __future__ import annotations

from .constants import (
    CLIENT_INIT_EVENT,
    CORE_API_ERROR_EVENT,
    CORE_API_REQUEST_EVENT,
    CREATE_POLICY_FOR_ACCOUNTS_PATH,
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_TIMEOUT,
    GRAPHQL_PATH,
    PERMISSIONS_PATH,
)
from .error_handling import to_core_api_error, wrap_core_api_errors
from .http_config import HTTPClientConfig, create_httpx_client_config, create_json_headers

__all__ = [
    "CLIENT_INIT_EVENT",
    "CORE_API_ERROR_EVENT",
    "CORE_API_REQUEST_EVENT",
    "CREATE_POLICY_FOR_ACCOUNTS_PATH",
    "DEFAULT_CONNECT_TIMEOUT",
    "DEFAULT_TIMEOUT",
    "GRAPHQL_PATH",
    "PERMISSIONS_PATH",
    "HTTPClientConfig",
    "create_httpx_client_config",
    "create_json_headers",
    "to_core_api_error",
    "wrap_core_api_errors",
]
