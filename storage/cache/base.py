# storage/cache/base.py
"""Schnittstelle der Cache-Backends."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class CacheBackend(Protocol):
    """Minimaler Key-Value-Cache für serialisierte Snapshots."""

    async def get(self, key: str) -> str | None:
        """Liefert den Wert oder None bei Cache-Miss."""
        ...

    async def set(self, key: str, value: str, expire: int | None = None) -> None:
        """Speichert den Wert, optional mit TTL in Sekunden."""
        ...

    async def delete(self, key: str) -> None:
        """Entfernt den Schlüssel."""
        ...

    async def aclose(self) -> None:
        """Gibt Verbindungen frei."""
        ...
