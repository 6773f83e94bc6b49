# services/permissions/utils.py
"""Hilfsfunktionen für die Berechtigungsauswertung."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeVar

T = TypeVar("T")


def to_list(value: T | Iterable[T] | None) -> list[T]:
    """Normalisiert ein Einzelelement, eine Sequenz oder ``None`` zu einer Liste.

    Strings und Enum-Werte auf ``str``-Basis gelten als Einzelelement.
    """
    if value is None:
        return []
    if isinstance(value, (str, bytes, int)) or not isinstance(value, Iterable):
        return [value]  # type: ignore[list-item]
    return list(value)


def unique(values: Iterable[T]) -> list[T]:
    """Entfernt Duplikate und behält die Reihenfolge des ersten Auftretens."""
    return list(dict.fromkeys(values))


__all__ = ["to_list", "unique"]
