# services/clients/common/constants.py
"""Konstanten für Client Services.

Alle Magic Numbers und Hard-coded Strings sind hier zentralisiert.
"""

from __future__ import annotations

from typing import Final

# =====================================================================
# HTTP Client Konfiguration
# =====================================================================

# Timeouts (in Sekunden)
DEFAULT_TIMEOUT: Final[float] = 30.0
DEFAULT_CONNECT_TIMEOUT: Final[float] = 5.0

# Connection Pool Limits
DEFAULT_CONNECTION_LIMIT: Final[int] = 100
DEFAULT_KEEPALIVE_CONNECTION_LIMIT: Final[int] = 30

# =====================================================================
# Core Data API
# =====================================================================

GRAPHQL_PATH: Final[str] = "/graphql"
PERMISSIONS_PATH: Final[str] = "/permissions"
CREATE_POLICY_FOR_ACCOUNTS_PATH: Final[str] = "/permissions/createPolicyForAccounts"

# Schlüssel im Fehler-Body der Core API
CORE_API_VALIDATION_KEY: Final[str] = "validation"
CORE_API_GQL_ERRORS_KEY: Final[str] = "errors"

# =====================================================================
# Logging Events
# =====================================================================

CLIENT_INIT_EVENT: Final[str] = "core_api_client_init"
CORE_API_REQUEST_EVENT: Final[str] = "core_api_request"
CORE_API_ERROR_EVENT: Final[str] = "core_api_error"
