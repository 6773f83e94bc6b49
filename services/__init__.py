# services/__init__.py
"""Services Paket: Core-API-Client und Berechtigungs-Services."""

from __future__ import annotations

from .clients import CoreApiClient
from .permissions import (
    AccessListService,
    PermissionService,
    PolicyResolutionService,
    PolicyService,
    create_team_permission,
)

__all__ = [
    "AccessListService",
    "CoreApiClient",
    "PermissionService",
    "PolicyResolutionService",
    "PolicyService",
    "create_team_permission",
]
