# data_models/permissions.py
"""Grant-Zeilen der Policy-Matrix und abgeleitete Rollen."""

from __future__ import annotations

from dataclasses import dataclass, field

from pydantic import Field

from .accounts import CoreApiModel
from .enums import ACLUserRole, PermissionsRoleName, Resource, TeamRoleName, UserRoleName


class PermissionsPolicy(CoreApiModel):
    """Eine Zeile ``(plans, role, resource, actions)`` der Grant-Matrix.

    Unbekannte Rollen oder Ressourcen werden bereits beim Parsen abgelehnt.
    """
    id_permission: int | None = None
    fk_account: int | None = None
    plans: list[str] = Field(default_factory=list)
    role: PermissionsRoleName
    resource: Resource
    actions: list[str] = Field(default_factory=list)


@dataclass(frozen=True)
class MatchingRole:
    """Rollen des Akteurs, die in den geladenen Grant-Zeilen tatsächlich vorkommen."""
    user: tuple[UserRoleName, ...] = field(default_factory=tuple)
    team: tuple[TeamRoleName, ...] = field(default_factory=tuple)
    acl: tuple[ACLUserRole, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        return not (self.user or self.team or self.acl)


__all__ = [
    "MatchingRole",
    "PermissionsPolicy",
]
