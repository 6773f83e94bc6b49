# storage/utils.py
"""Utility-Funktionen für das Storage-System."""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar

from gateway_logging import get_logger

logger = get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def handle_storage_errors(operation_name: str) -> Callable[[F], F]:
    """Decorator für einheitliches Error-Logging in Cache-Operationen.

    Fehler werden geloggt und unverändert weitergereicht.
    """
    def decorator(func: F) -> F:
        @wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await func(*args, **kwargs)
            except (ConnectionError, TimeoutError) as e:
                logger.error("%s fehlgeschlagen - Verbindungsproblem: %s", operation_name, e)
                raise
            except Exception as e:
                logger.exception("%s fehlgeschlagen - Unerwarteter Fehler: %s", operation_name, e)
                raise
        return wrapper  # type: ignore
    return decorator


def effective_ttl(expire: int | None) -> int | None:
    """Gibt die TTL in Sekunden zurück oder None für "ohne Ablauf"."""
    if isinstance(expire, bool) or not isinstance(expire, int) or expire <= 0:
        return None
    return expire
