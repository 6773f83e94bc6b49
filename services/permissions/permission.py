# services/permissions/permission.py
"""Berechtigungsauswertung auf Basis einer aufgelösten Policy.

``PermissionService`` berechnet einmalig die passenden Rollen (direkt, Team,
ACL) und bietet darauf zwei Formen der Prüfung an:

- ``enforce``: hartes Gate über die direkte Account-Rolle
- ``repositories_enforce`` / ``teams_enforce`` / ``get_allowed_ids``: weicher
  Filter über die erlaubten IDs des jeweiligen Scopes

Welcher Scope gilt, bestimmt die übergebene ``AllowedIdSource``.
"""

from __future__ import annotations

from itertools import chain
from typing import TYPE_CHECKING, NoReturn

from core.constants import (
    INSUFFICIENT_PERMISSIONS_MESSAGE,
    MISSING_ACCOUNT_CONTEXT_MESSAGE,
    LoggingConfig,
    PermissionDenialReason,
)
from core.exceptions import BadRequestError, ForbiddenError
from data_models import ACLUserRole, MatchingRole, Resource, UserRoleName
from gateway_logging import get_logger

from .id_sources import (
    REPOSITORY_ID_SOURCE,
    REPOSITORY_SCOPE,
    TEAM_ID_SOURCE,
    TEAM_SCOPE,
    AllowedIdSource,
)
from .utils import to_list, unique

if TYPE_CHECKING:
    from collections.abc import Iterable

    from data_models import PermissionAction

    from .policy import PolicyService

audit_logger = get_logger(LoggingConfig.AUDIT_LOGGER_NAME)


class PermissionService:
    """Auswertung einer Policy für eine Aktion auf Ressourcen.

    Args:
        policy: Policy, deren Grant-Zeilen bereits geladen sind
        source: Quelle der erlaubten IDs (Repositories oder Teams)
    """

    def __init__(self, policy: PolicyService, source: AllowedIdSource = REPOSITORY_ID_SOURCE) -> None:
        self.policy = policy
        self.source = source
        self.matching_role = self._compute_matching_role(policy)

    @classmethod
    async def factory(
        cls,
        policy: PolicyService | None,
        action: PermissionAction,
        resources: Resource | Iterable[Resource],
        source: AllowedIdSource = REPOSITORY_ID_SOURCE,
    ) -> PermissionService:
        """Lädt die Grant-Zeilen der Policy und erzeugt den Evaluator.

        Raises:
            BadRequestError: Wenn keine Policy (also kein Account-Kontext) vorliegt
        """
        if policy is None:
            raise BadRequestError(MISSING_ACCOUNT_CONTEXT_MESSAGE)

        return cls(await policy.init(action, resources), source)

    @staticmethod
    def _compute_matching_role(policy: PolicyService) -> MatchingRole:
        policy_roles = {row.role for row in policy.get_policies()}
        user_role = policy.get_user_role()

        return MatchingRole(
            user=(user_role,) if user_role in policy_roles else (),
            team=tuple(role for role in policy.get_user_team_roles() if role in policy_roles),
            acl=tuple(role for role in (ACLUserRole.READ, ACLUserRole.ADMIN) if role in policy_roles),
        )

    def get_allowed_resources(self) -> list[Resource]:
        """Ressourcen aller Grant-Zeilen, die eine direkte Benutzerrolle nennen."""
        return unique(
            row.resource for row in self.policy.get_policies() if isinstance(row.role, UserRoleName)
        )

    def enforce(self) -> PermissionService:
        """Prüft nur die direkte Rolle des Benutzers.

        Returns:
            self, damit weitere Abfragen verkettet werden können

        Raises:
            ForbiddenError: Wenn die direkte Rolle nicht in den Grant-Zeilen vorkommt
        """
        if self.matching_role.user:
            return self

        self._deny(PermissionDenialReason.NO_MATCHING_ROLE)

    def repositories_enforce(self, repository_ids: int | Iterable[int] | None = None) -> list[int]:
        """Gibt die erlaubten Repository-IDs zurück oder verweigert den Zugriff."""
        return self._enforce_ids(repository_ids, REPOSITORY_SCOPE)

    def teams_enforce(self, team_ids: int | Iterable[int] | None = None) -> list[int]:
        """Gibt die erlaubten Team-IDs zurück oder verweigert den Zugriff."""
        return self._enforce_ids(team_ids, TEAM_SCOPE)

    def _enforce_ids(self, ids: int | Iterable[int] | None, scope: str) -> list[int]:
        if scope != self.source.scope:
            raise ValueError(
                f"Evaluator für Scope '{self.source.scope}' kann keine IDs für '{scope}' prüfen"
            )

        if not self.source.has_matching_role(self.matching_role):
            self._deny(PermissionDenialReason.NO_MATCHING_ROLE)

        allowed_ids = self.get_allowed_ids(ids)

        # Auch eine leere Liste zählt als explizite Anfrage
        if ids is not None and not allowed_ids:
            self._deny(PermissionDenialReason.NO_ALLOWED_IDS)

        return allowed_ids

    def get_allowed_ids(self, ids: int | Iterable[int] | None = None) -> list[int]:
        """Erlaubte IDs des Scopes.

        Ohne angefragte IDs wird die deduplizierte Vereinigung aller Pools
        zurückgegeben, in der Pool-Reihenfolge der Quelle
        (Repositories: ACL, Account, Team-Rollen). Mit angefragten IDs werden
        diese in ihrer eigenen Reihenfolge gefiltert.
        """
        requested = to_list(ids)

        allowed = unique(chain.from_iterable(self.source.allowed_pools(self.policy, self.matching_role)))

        if requested:
            allowed_set = set(allowed)
            return [item for item in requested if item in allowed_set]
        return allowed

    def _deny(self, reason: PermissionDenialReason) -> NoReturn:
        audit_logger.info({
            "event": "permission_denied",
            "scope": self.source.scope,
            "reason": reason.value,
            "user_role": self.policy.get_user_role().value,
            "root_account_id": self.policy.root_account_id,
        })
        raise ForbiddenError(INSUFFICIENT_PERMISSIONS_MESSAGE, reason=reason)


async def create_team_permission(
    policy: PolicyService | None,
    action: PermissionAction,
) -> PermissionService:
    """Erzeugt einen Evaluator für Team-IDs auf der Ressource ``Teams``."""
    return await PermissionService.factory(policy, action, Resource.TEAMS, source=TEAM_ID_SOURCE)


__all__ = [
    "PermissionService",
    "create_team_permission",
]
