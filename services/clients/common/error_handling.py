# services/clients/common/error_handling.py
"""Error Handling Utilities für Client Services.

Übersetzt httpx-Fehler in ``CoreApiError`` und markiert sie als
Validierungs- oder GraphQL-Fehler der Core API.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Any, ParamSpec, TypeVar

import httpx

from core.exceptions import CoreApiError
from gateway_logging import get_logger

from .constants import CORE_API_ERROR_EVENT, CORE_API_GQL_ERRORS_KEY, CORE_API_VALIDATION_KEY

logger = get_logger(__name__)

P = ParamSpec("P")
R = TypeVar("R")


def _response_body(response: httpx.Response | None) -> dict[str, Any]:
    if response is None:
        return {}
    try:
        body = response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


def to_core_api_error(exc: httpx.HTTPError, operation: str) -> CoreApiError:
    """Erzeugt einen ``CoreApiError`` aus einem httpx-Fehler.

    Args:
        exc: Ursprünglicher httpx-Fehler
        operation: Name der Client-Operation für Logs

    Returns:
        CoreApiError mit Status und Validierungs-/GraphQL-Kennzeichnung
    """
    response = exc.response if isinstance(exc, httpx.HTTPStatusError) else None
    body = _response_body(response)
    is_validation_error = bool(body.get(CORE_API_VALIDATION_KEY))
    is_gql_error = not is_validation_error and bool(body.get(CORE_API_GQL_ERRORS_KEY))
    status_code = response.status_code if response is not None else None

    logger.warning({
        "event": CORE_API_ERROR_EVENT,
        "operation": operation,
        "status_code": status_code,
        "validation": is_validation_error,
        "gql": is_gql_error,
        "error": str(exc),
    })

    return CoreApiError(
        f"Core API request failed: {operation}",
        status_code=status_code,
        is_validation_error=is_validation_error,
        is_gql_error=is_gql_error,
        cause=exc,
    )


def wrap_core_api_errors(
    operation: str,
) -> Callable[[Callable[P, Awaitable[R]]], Callable[P, Awaitable[R]]]:
    """Decorator, der httpx-Fehler einer Client-Operation als ``CoreApiError`` weiterreicht.

    Es wird nicht erneut versucht; andere Ausnahmen bleiben unverändert.
    """

    def decorator(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
        @wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            try:
                return await func(*args, **kwargs)
            except httpx.HTTPError as e:
                raise to_core_api_error(e, operation) from e

        return wrapper

    return decorator


__all__ = [
    "to_core_api_error",
    "wrap_core_api_errors",
]
