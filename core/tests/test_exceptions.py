# core/tests/test_exceptions.py
"""Tests für die Gateway-Exception-Hierarchie."""

import httpx

from core.constants import ErrorCode, PermissionDenialReason, SeverityLevel
from core.exceptions import (
    BadRequestError,
    CoreApiError,
    DependencyError,
    ForbiddenError,
    GatewayException,
    NotFoundError,
)


class TestExceptions:
    """Tests für Fehlercodes, Nachrichten und Details."""

    def test_forbidden_defaults(self) -> None:
        """Prüft Default-Nachricht und Schweregrad von ForbiddenError."""
        exc = ForbiddenError()

        assert exc.error_code == ErrorCode.FORBIDDEN
        assert exc.message == "You have insufficient permissions."
        assert exc.severity == SeverityLevel.MEDIUM.value
        assert exc.reason is None
        assert exc.details is None

    def test_forbidden_reason_in_details(self) -> None:
        """Prüft, dass der Verweigerungsgrund in den Details landet."""
        exc = ForbiddenError(reason=PermissionDenialReason.NO_ALLOWED_IDS)

        assert exc.reason is PermissionDenialReason.NO_ALLOWED_IDS
        assert exc.to_payload().details == {"reason": "no_allowed_ids"}

    def test_bad_request(self) -> None:
        """Prüft BadRequestError mit eigener Nachricht."""
        exc = BadRequestError("Invalid logged in user")

        assert isinstance(exc, GatewayException)
        assert exc.error_code == ErrorCode.BAD_REQUEST
        assert str(exc) == "Invalid logged in user"

    def test_not_found_default_message(self) -> None:
        """Prüft die Default-Nachricht von NotFoundError."""
        assert NotFoundError().message == "Resource not found"

    def test_core_api_error_chains_cause(self) -> None:
        """Prüft, dass CoreApiError die ursprüngliche Ausnahme verkettet."""
        cause = httpx.ConnectError("refused")

        exc = CoreApiError("Core API request failed: get_permission_policies", status_code=502, cause=cause)

        assert isinstance(exc, DependencyError)
        assert exc.error_code == ErrorCode.CORE_API_ERROR
        assert exc.status_code == 502
        assert exc.__cause__ is cause
        assert not exc.is_validation_error
        assert not exc.is_gql_error
