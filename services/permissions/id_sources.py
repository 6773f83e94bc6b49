# services/permissions/id_sources.py
"""Quellen erlaubter IDs für die Berechtigungsauswertung.

Eine Quelle legt fest, welche Rollen überhaupt zum ID-Gate zulassen und aus
welchen Pools sich die erlaubten IDs in welcher Reihenfolge zusammensetzen.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final, Protocol, runtime_checkable

from data_models import TeamRoleName

if TYPE_CHECKING:
    from data_models import MatchingRole

    from .policy import PolicyService

REPOSITORY_SCOPE: Final[str] = "repositories"
TEAM_SCOPE: Final[str] = "teams"


@runtime_checkable
class AllowedIdSource(Protocol):
    """Strategie für die ID-Pools eines Scopes (Repositories oder Teams)."""

    scope: str

    def has_matching_role(self, matching_role: MatchingRole) -> bool:
        """True, wenn mindestens eine für diesen Scope relevante Rolle passt."""
        ...

    def allowed_pools(self, policy: PolicyService, matching_role: MatchingRole) -> list[list[int]]:
        """ID-Pools der passenden Rollen in Auswertungsreihenfolge."""
        ...


class RepositoryIdSource:
    """Repository-IDs aus ACL-Pools, Account-Pool und Team-Rollen-Pools (in dieser Reihenfolge)."""

    scope = REPOSITORY_SCOPE

    def has_matching_role(self, matching_role: MatchingRole) -> bool:
        return not matching_role.is_empty

    def allowed_pools(self, policy: PolicyService, matching_role: MatchingRole) -> list[list[int]]:
        pools = [policy.get_acl_repositories(role) for role in matching_role.acl]

        if matching_role.user:
            pools.append(policy.get_account_repository_ids())

        grouped = policy.get_repository_ids_grouped_by_team_role()
        if grouped:
            pools.extend(grouped.get(role, []) for role in matching_role.team)
        return pools


class TeamIdSource:
    """Team-IDs: alle eigenen Teams über die direkte Rolle, sonst nur Teams mit ``team_admin``."""

    scope = TEAM_SCOPE

    def has_matching_role(self, matching_role: MatchingRole) -> bool:
        return bool(matching_role.user) or TeamRoleName.TEAM_ADMIN in matching_role.team

    def allowed_pools(self, policy: PolicyService, matching_role: MatchingRole) -> list[list[int]]:
        pools: list[list[int]] = []
        if matching_role.user:
            pools.append(policy.get_all_user_team_ids())
        if TeamRoleName.TEAM_ADMIN in matching_role.team:
            pools.append(policy.get_user_team_ids_by_team_role(TeamRoleName.TEAM_ADMIN))
        return pools


REPOSITORY_ID_SOURCE = RepositoryIdSource()
TEAM_ID_SOURCE = TeamIdSource()


__all__ = [
    "REPOSITORY_ID_SOURCE",
    "REPOSITORY_SCOPE",
    "TEAM_ID_SOURCE",
    "TEAM_SCOPE",
    "AllowedIdSource",
    "RepositoryIdSource",
    "TeamIdSource",
]
