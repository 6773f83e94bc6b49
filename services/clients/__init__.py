# services/clients/__init__.py
"""Services Clients Paket."""

from __future__ import annotations

from .core_api import CoreApiClient

__all__ = [
    "CoreApiClient",
]
