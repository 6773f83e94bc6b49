"""FastAPI Dependencies des Gateways."""

from __future__ import annotations

from .permissions import (
    get_request_account,
    get_request_user,
    get_request_user_in_db,
    permissions_dependency,
    teams_permissions_dependency,
)

__all__ = [
    "get_request_account",
    "get_request_user",
    "get_request_user_in_db",
    "permissions_dependency",
    "teams_permissions_dependency",
]
