"""Globaler Error Handler für Gateway-Ausnahmen.

Übersetzt ``GatewayException``-Instanzen in strukturierte JSON-Antworten und
loggt sie mit dem passenden Level.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from fastapi.responses import JSONResponse

from gateway_logging import get_logger

from .constants import (
    ERROR_CODE_TO_HTTP_STATUS,
    SEVERITY_TO_LOG_LEVEL,
    ErrorCode,
    HTTPStatus,
    LoggingConfig,
    SeverityLevel,
)
from .exceptions import GatewayErrorPayload, GatewayException

if TYPE_CHECKING:
    from fastapi import FastAPI, Request
    from fastapi.responses import Response

logger = get_logger(LoggingConfig.ERROR_LOGGER_NAME)


@dataclass(frozen=True)
class ErrorContext:
    """Request-bezogener Kontext für Fehlerbehandlung.

    Attributes:
        route: Pfad, der den Fehler ausgelöst hat
        method: HTTP-Methode
        account_id: Optionaler Account aus dem Request-State
    """

    route: str | None
    method: str | None
    account_id: int | None = None


class ExceptionClassifier:
    """Klassifiziert Exceptions in HTTP-Status und Payload."""

    @staticmethod
    def classify(exc: BaseException) -> tuple[int, GatewayErrorPayload]:
        """Klassifiziert eine Exception in HTTP-Status und Payload.

        Args:
            exc: Aufgetretene Ausnahme

        Returns:
            Tupel aus (http_status, payload)
        """
        if isinstance(exc, GatewayException):
            status = ERROR_CODE_TO_HTTP_STATUS.get(exc.error_code, HTTPStatus.INTERNAL_SERVER_ERROR)
            return status, exc.to_payload()

        payload = GatewayErrorPayload(
            error_code=ErrorCode.INTERNAL_ERROR,
            message="Internal server error",
            severity=SeverityLevel.CRITICAL.value,
            details={"type": type(exc).__name__},
        )
        return HTTPStatus.INTERNAL_SERVER_ERROR, payload


class ResponseBuilder:
    """Erstellt strukturierte HTTP-Antworten für Fehler."""

    @staticmethod
    def build_response(*, status: int, payload: GatewayErrorPayload) -> JSONResponse:
        """Erstellt eine Fehler-Antwort im Boom-kompatiblen Format."""
        body: dict[str, Any] = {
            "statusCode": status,
            "error": payload.error_code,
            "message": payload.message,
        }
        if payload.details:
            body["details"] = dict(payload.details)
        return JSONResponse(status_code=status, content=body)


class GlobalErrorHandler:
    """Zentrale Fehlerbehandlung mit strukturierter Antwort und Logging."""

    def __init__(self) -> None:
        self.classifier = ExceptionClassifier()
        self.response_builder = ResponseBuilder()

    async def handle_request_exception(self, request: Request, exc: BaseException) -> Response:
        """Transformiert eine Ausnahme in eine HTTP-Response inkl. Logging."""
        ctx = self._extract_error_context(request)
        status, payload = self.classifier.classify(exc)
        self._log_error(payload, ctx)
        return self.response_builder.build_response(status=status, payload=payload)

    @staticmethod
    def _extract_error_context(request: Request) -> ErrorContext:
        account = getattr(request.state, "account", None)
        return ErrorContext(
            route=request.url.path,
            method=request.method,
            account_id=getattr(account, "id_account", None),
        )

    @staticmethod
    def _log_error(payload: GatewayErrorPayload, ctx: ErrorContext) -> None:
        log_level_name = SEVERITY_TO_LOG_LEVEL.get(payload.severity.upper(), "ERROR")
        log_method = getattr(logger, log_level_name.lower(), logger.error)
        log_method(
            "Fehler aufgetreten: %s %s -> %s (%s)",
            ctx.method,
            ctx.route,
            payload.error_code,
            payload.message,
        )


def register_exception_handlers(app: FastAPI, handler: GlobalErrorHandler | None = None) -> GlobalErrorHandler:
    """Registriert den Handler für alle ``GatewayException``-Unterklassen."""
    handler = handler or GlobalErrorHandler()
    app.add_exception_handler(GatewayException, handler.handle_request_exception)
    return handler


__all__ = [
    "ErrorContext",
    "ExceptionClassifier",
    "GlobalErrorHandler",
    "ResponseBuilder",
    "register_exception_handlers",
]
