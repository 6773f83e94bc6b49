"""Zentrale Konstanten für das Core-Modul.

Definiert HTTP-Status-Codes, Fehlercodes, Severity-Level und die
API-seitigen Standardnachrichten.
"""

from __future__ import annotations

from enum import Enum
from typing import Final


class HTTPStatus:
    """HTTP-Status-Code-Konstanten für Error-Handler."""

    OK: Final[int] = 200

    # Client Errors
    BAD_REQUEST: Final[int] = 400
    UNAUTHORIZED: Final[int] = 401
    FORBIDDEN: Final[int] = 403
    NOT_FOUND: Final[int] = 404
    UNPROCESSABLE_ENTITY: Final[int] = 422

    # Server Errors
    INTERNAL_SERVER_ERROR: Final[int] = 500
    BAD_GATEWAY: Final[int] = 502
    SERVICE_UNAVAILABLE: Final[int] = 503


class SeverityLevel(Enum):
    """Severity-Level für Exceptions und Logging."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"


class ErrorCode:
    """Zentrale Error-Code-Konstanten."""

    INTERNAL_ERROR: Final[str] = "INTERNAL_ERROR"
    UNKNOWN_ERROR: Final[str] = "UNKNOWN_ERROR"

    BAD_REQUEST: Final[str] = "BAD_REQUEST"
    VALIDATION_ERROR: Final[str] = "VALIDATION_ERROR"
    FORBIDDEN: Final[str] = "FORBIDDEN"
    NOT_FOUND: Final[str] = "NOT_FOUND"

    DEPENDENCY_ERROR: Final[str] = "DEPENDENCY_ERROR"
    CORE_API_ERROR: Final[str] = "CORE_API_ERROR"


class PermissionDenialReason(str, Enum):
    """Unterart einer Autorisierungs-Ablehnung (nur für Observability)."""

    NO_MATCHING_ROLE = "no_matching_role"
    NO_ALLOWED_IDS = "no_allowed_ids"
    ACCOUNT_NOT_ALLOWED = "account_not_allowed"


class LoggingConfig:
    """Konfiguration für Logger-Namen."""

    AUDIT_LOGGER_NAME: Final[str] = "gateway.audit"
    ERROR_LOGGER_NAME: Final[str] = "gateway.error"


# Nachrichten, die an das Frontend gehen
INSUFFICIENT_PERMISSIONS_MESSAGE: Final[str] = "You have insufficient permissions."
ACCOUNT_NOT_AUTHORIZED_MESSAGE: Final[str] = "Not authorized to perform the operation"
MISSING_ACCOUNT_CONTEXT_MESSAGE: Final[str] = "Invalid request. The accountId query parameter is required."
MISSING_ACCOUNT_PARAMETER_MESSAGE: Final[str] = "Missing mandatory accountId query parameter"
INVALID_LOGGED_IN_USER_MESSAGE: Final[str] = "Invalid logged in user"


ERROR_CODE_TO_HTTP_STATUS: Final[dict[str, int]] = {
    ErrorCode.BAD_REQUEST: HTTPStatus.BAD_REQUEST,
    ErrorCode.VALIDATION_ERROR: HTTPStatus.UNPROCESSABLE_ENTITY,
    ErrorCode.FORBIDDEN: HTTPStatus.FORBIDDEN,
    ErrorCode.NOT_FOUND: HTTPStatus.NOT_FOUND,
    ErrorCode.DEPENDENCY_ERROR: HTTPStatus.SERVICE_UNAVAILABLE,
    ErrorCode.CORE_API_ERROR: HTTPStatus.BAD_GATEWAY,
    ErrorCode.INTERNAL_ERROR: HTTPStatus.INTERNAL_SERVER_ERROR,
    ErrorCode.UNKNOWN_ERROR: HTTPStatus.INTERNAL_SERVER_ERROR,
}


SEVERITY_TO_LOG_LEVEL: Final[dict[str, str]] = {
    SeverityLevel.LOW.value: "INFO",
    SeverityLevel.MEDIUM.value: "WARNING",
    SeverityLevel.HIGH.value: "ERROR",
    SeverityLevel.CRITICAL.value: "CRITICAL",
}


DEFAULT_ERROR_MESSAGES: Final[dict[str, str]] = {
    ErrorCode.BAD_REQUEST: "Bad request",
    ErrorCode.VALIDATION_ERROR: "Validation failed",
    ErrorCode.FORBIDDEN: INSUFFICIENT_PERMISSIONS_MESSAGE,
    ErrorCode.NOT_FOUND: "Resource not found",
    ErrorCode.DEPENDENCY_ERROR: "Upstream dependency failed",
    ErrorCode.CORE_API_ERROR: "Core API request failed",
    ErrorCode.INTERNAL_ERROR: "Internal server error",
    ErrorCode.UNKNOWN_ERROR: "Unknown error",
}


__all__ = [
    "ACCOUNT_NOT_AUTHORIZED_MESSAGE",
    "DEFAULT_ERROR_MESSAGES",
    "ERROR_CODE_TO_HTTP_STATUS",
    "INSUFFICIENT_PERMISSIONS_MESSAGE",
    "INVALID_LOGGED_IN_USER_MESSAGE",
    "MISSING_ACCOUNT_CONTEXT_MESSAGE",
    "MISSING_ACCOUNT_PARAMETER_MESSAGE",
    "SEVERITY_TO_LOG_LEVEL",
    "ErrorCode",
    "HTTPStatus",
    "LoggingConfig",
    "PermissionDenialReason",
    "SeverityLevel",
]
