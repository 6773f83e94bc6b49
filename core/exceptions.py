"""Zentrale Gateway Exception-Hierarchie.

Alle Ausnahmen erben von ``GatewayException`` und tragen konsistente Felder
für Fehlercode, Nachricht, optionale Details und Schweregrad. Die Nachrichten
gehen unverändert an das Frontend und sind daher englisch.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .constants import (
    DEFAULT_ERROR_MESSAGES,
    ErrorCode,
    PermissionDenialReason,
    SeverityLevel,
)

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass
class GatewayErrorPayload:
    """Strukturierte Fehlerdaten für API/Logging.

    Attributes:
        error_code: Stabiler, maschinenlesbarer Fehlercode
        message: Menschlich lesbare Beschreibung
        severity: Schweregrad (z. B. LOW, MEDIUM, HIGH, CRITICAL)
        details: Optionale Zusatzinformationen
    """

    error_code: str
    message: str
    severity: str
    details: Mapping[str, Any] | None


class GatewayException(Exception):
    """Basisklasse für alle domänenspezifischen Gateway-Ausnahmen.

    Args:
        error_code: Maschineller Fehlercode in SCREAMING_SNAKE_CASE
        message: Fehlermeldung
        severity: Schweregrad, Standard ``HIGH``
        details: Optionale strukturierte Zusatzinfos
        cause: Optionale ursprüngliche Ausnahme (Verkettung)
    """

    def __init__(
        self,
        error_code: str,
        message: str,
        *,
        severity: str = SeverityLevel.HIGH.value,
        details: Mapping[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.error_code: str = error_code
        self.message: str = message
        self.severity: str = severity
        self.details: Mapping[str, Any] | None = details
        self.__cause__ = cause

    def to_payload(self) -> GatewayErrorPayload:
        """Serialisiert die Ausnahme in ein strukturiertes Payload-Objekt."""
        return GatewayErrorPayload(
            error_code=self.error_code,
            message=self.message,
            severity=self.severity,
            details=self.details,
        )

    def __str__(self) -> str:
        return self.message


class BadRequestError(GatewayException):
    """Ungültige Anfrage (HTTP 400), z. B. fehlender Account-Kontext."""

    def __init__(self, message: str | None = None, **kwargs: Any) -> None:
        if message is None:
            message = DEFAULT_ERROR_MESSAGES[ErrorCode.BAD_REQUEST]
        kwargs.setdefault("severity", SeverityLevel.LOW.value)
        super().__init__(ErrorCode.BAD_REQUEST, message, **kwargs)


class ForbiddenError(GatewayException):
    """Autorisierung verweigert (HTTP 403).

    ``reason`` unterscheidet, ob gar keine Rolle gepasst hat oder ob die
    angefragten IDs nicht erlaubt sind. Nachricht und Status sind identisch.
    """

    def __init__(
        self,
        message: str | None = None,
        *,
        reason: PermissionDenialReason | None = None,
        **kwargs: Any,
    ) -> None:
        if message is None:
            message = DEFAULT_ERROR_MESSAGES[ErrorCode.FORBIDDEN]
        kwargs.setdefault("severity", SeverityLevel.MEDIUM.value)
        if reason is not None and "details" not in kwargs:
            kwargs["details"] = {"reason": reason.value}
        super().__init__(ErrorCode.FORBIDDEN, message, **kwargs)
        self.reason: PermissionDenialReason | None = reason


class NotFoundError(GatewayException):
    """Ressource wurde nicht gefunden."""

    def __init__(self, message: str | None = None, **kwargs: Any) -> None:
        if message is None:
            message = DEFAULT_ERROR_MESSAGES[ErrorCode.NOT_FOUND]
        kwargs.setdefault("severity", SeverityLevel.LOW.value)
        super().__init__(ErrorCode.NOT_FOUND, message, **kwargs)


class DependencyError(GatewayException):
    """Fehler in abhängigen Komponenten (externe Systeme)."""

    def __init__(
        self,
        message: str | None = None,
        *,
        error_code: str = ErrorCode.DEPENDENCY_ERROR,
        **kwargs: Any,
    ) -> None:
        if message is None:
            message = DEFAULT_ERROR_MESSAGES[error_code]
        super().__init__(error_code, message, **kwargs)


class CoreApiError(DependencyError):
    """Fehlgeschlagene Anfrage an die Core Data API.

    Args:
        message: Fehlermeldung
        status_code: HTTP-Status der Core API, falls vorhanden
        is_validation_error: Core API hat Validierungsfehler gemeldet
        is_gql_error: Core API hat GraphQL-Fehler gemeldet
    """

    def __init__(
        self,
        message: str | None = None,
        *,
        status_code: int | None = None,
        is_validation_error: bool = False,
        is_gql_error: bool = False,
        **kwargs: Any,
    ) -> None:
        if message is None:
            message = DEFAULT_ERROR_MESSAGES[ErrorCode.CORE_API_ERROR]
        kwargs.setdefault("details", {
            "status_code": status_code,
            "validation": is_validation_error,
            "gql": is_gql_error,
        })
        super().__init__(message, error_code=ErrorCode.CORE_API_ERROR, **kwargs)
        self.status_code = status_code
        self.is_validation_error = is_validation_error
        self.is_gql_error = is_gql_error


__all__ = [
    "BadRequestError",
    "CoreApiError",
    "DependencyError",
    "ForbiddenError",
    "GatewayErrorPayload",
    "GatewayException",
    "NotFoundError",
]
