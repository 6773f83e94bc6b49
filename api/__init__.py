"""API Package des VCS-Gateways: Request-Dependencies für die Autorisierung."""

from __future__ import annotations

from .dependencies import permissions_dependency, teams_permissions_dependency

__all__ = [
    "permissions_dependency",
    "teams_permissions_dependency",
]
