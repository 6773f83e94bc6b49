# data_models/teams.py
"""Team-Zuordnungen eines Benutzers aus der Core Data API."""

from __future__ import annotations

from .accounts import CoreApiModel
from .enums import TeamRoleName

# Schlüssel für Teams ohne aufgelöste Team-Rolle
NOT_PART_OF_THE_TEAM = "not_part_of_the_team"

AllowedRepositoriesByTeamRole = dict[TeamRoleName, list[int]]
UserTeamIdsByTeamRole = dict[str, list[int]]


class TeamRoleRef(CoreApiModel):
    """Team-Rolle, wie sie an einer Team-Mitgliedschaft hängt."""
    id_team_role: int | None = None
    name: str | None = None


class UserTeam(CoreApiModel):
    """Team, in dem der Benutzer Mitglied ist."""
    id_team: int
    fk_account: int | None = None
    name: str = ""
    team_role: TeamRoleRef | None = None


class TeamRepositoryRole(CoreApiModel):
    """Repository, auf das der Benutzer über eine Team-Rolle Zugriff hat."""
    name: TeamRoleName
    fk_repository: int


__all__ = [
    "NOT_PART_OF_THE_TEAM",
    "AllowedRepositoriesByTeamRole",
    "TeamRepositoryRole",
    "TeamRoleRef",
    "UserTeam",
    "UserTeamIdsByTeamRole",
]
