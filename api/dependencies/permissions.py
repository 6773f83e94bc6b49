"""FastAPI Dependencies für Berechtigungsprüfungen.

Setzt voraus, dass die Session-Middleware ``account``, ``user`` und
``user_in_db`` in ``request.state`` abgelegt hat. Die Dependencies bauen
die Policy, erzeugen den Evaluator, erzwingen optional die direkte Rolle
und legen den Evaluator zusätzlich in ``request.state`` ab.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Depends, Request

from core.constants import INVALID_LOGGED_IN_USER_MESSAGE, MISSING_ACCOUNT_PARAMETER_MESSAGE
from core.container import AuthorizationContainer, get_container
from core.exceptions import BadRequestError
from gateway_logging import get_logger
from services.permissions import PermissionService, create_team_permission

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Iterable

    from data_models import Account, PermissionAction, RequestUser, Resource, User

logger = get_logger(__name__)

# ============================================================================
# REQUEST CONTEXT
# ============================================================================

def get_request_account(request: Request) -> Account:
    """Account aus dem Request-State.

    Raises:
        BadRequestError: Wenn kein Account aufgelöst wurde
    """
    account = getattr(request.state, "account", None)
    if account is None:
        raise BadRequestError(MISSING_ACCOUNT_PARAMETER_MESSAGE)
    return account


def get_request_user_in_db(request: Request) -> User:
    """Benutzer-Datensatz aus dem Request-State.

    Raises:
        BadRequestError: Wenn kein Benutzer-Datensatz vorliegt
    """
    user_in_db = getattr(request.state, "user_in_db", None)
    if user_in_db is None:
        raise BadRequestError(INVALID_LOGGED_IN_USER_MESSAGE)
    return user_in_db


def get_request_user(request: Request) -> RequestUser:
    """Session-Benutzer aus dem Request-State."""
    user = getattr(request.state, "user", None)
    if user is None:
        raise BadRequestError(INVALID_LOGGED_IN_USER_MESSAGE)
    return user


# ============================================================================
# PERMISSION DEPENDENCIES
# ============================================================================

def permissions_dependency(
    action: PermissionAction,
    resources: Resource | Iterable[Resource],
    enforce: bool = True,
) -> Callable[..., Awaitable[PermissionService]]:
    """Erstellt eine Dependency für Repository-bezogene Berechtigungen.

    Args:
        action: Angefragte Aktion
        resources: Angefragte Ressource(n)
        enforce: Direkte Rolle hart erzwingen

    Returns:
        Dependency, die einen ``PermissionService`` liefert
    """
    resource_list = list(resources) if not isinstance(resources, str) else [resources]

    async def dependency(
        request: Request,
        container: AuthorizationContainer = Depends(get_container),
    ) -> PermissionService:
        account = get_request_account(request)
        user_in_db = get_request_user_in_db(request)
        user = get_request_user(request)

        policy = await container.policy_resolution_service().build_repository_policy(
            user,
            account,
            user_in_db,
        )
        permission = await PermissionService.factory(policy, action, resource_list)
        request.state.permission = permission

        if enforce:
            permission.enforce()

        logger.debug({
            "event": "permission_resolved",
            "account_id": account.id_account,
            "action": action.value,
            "resources": [r.value for r in resource_list],
            "enforced": enforce,
        })
        return permission

    return dependency


def teams_permissions_dependency(
    action: PermissionAction,
    enforce: bool = True,
) -> Callable[..., Awaitable[PermissionService]]:
    """Erstellt eine Dependency für Team-bezogene Berechtigungen (Ressource ``Teams``)."""

    async def dependency(
        request: Request,
        container: AuthorizationContainer = Depends(get_container),
    ) -> PermissionService:
        account = get_request_account(request)
        user_in_db = get_request_user_in_db(request)

        policy = await container.policy_resolution_service().build_team_policy(account, user_in_db)
        team_permission = await create_team_permission(policy, action)
        request.state.team_permission = team_permission

        if enforce:
            team_permission.enforce()

        return team_permission

    return dependency


__all__ = [
    "get_request_account",
    "get_request_user",
    "get_request_user_in_db",
    "permissions_dependency",
    "teams_permissions_dependency",
]
