# data_models/__init__.py
"""Data Models Paket für Accounts, Benutzer, ACL-Snapshots und Grants."""

from __future__ import annotations

from .accounts import Account, CoreApiModel, Plan, RequestUser, Subscription, User, UserRole
from .acl import (
    AccessList,
    AllowedAccount,
    AllowedAccounts,
    AllowedRepositories,
    dump_allowed_accounts,
    parse_allowed_accounts,
)
from .enums import (
    ACTIVE_SUBSCRIPTION_STATUSES,
    ACLUserRole,
    EffectivePlanCode,
    GitProvider,
    PermissionAction,
    PermissionsRoleName,
    PlanCode,
    Resource,
    SpecialPlanCode,
    SystemUserRoleName,
    TeamRoleName,
    UserRoleName,
)
from .permissions import MatchingRole, PermissionsPolicy
from .teams import (
    NOT_PART_OF_THE_TEAM,
    AllowedRepositoriesByTeamRole,
    TeamRepositoryRole,
    TeamRoleRef,
    UserTeam,
    UserTeamIdsByTeamRole,
)

__all__ = [
    "ACTIVE_SUBSCRIPTION_STATUSES",
    "NOT_PART_OF_THE_TEAM",
    "ACLUserRole",
    "AccessList",
    "Account",
    "AllowedAccount",
    "AllowedAccounts",
    "AllowedRepositories",
    "AllowedRepositoriesByTeamRole",
    "CoreApiModel",
    "EffectivePlanCode",
    "GitProvider",
    "MatchingRole",
    "PermissionAction",
    "PermissionsPolicy",
    "PermissionsRoleName",
    "Plan",
    "PlanCode",
    "RequestUser",
    "Resource",
    "SpecialPlanCode",
    "Subscription",
    "SystemUserRoleName",
    "TeamRepositoryRole",
    "TeamRoleName",
    "TeamRoleRef",
    "User",
    "UserRole",
    "UserRoleName",
    "UserTeam",
    "UserTeamIdsByTeamRole",
    "dump_allowed_accounts",
    "parse_allowed_accounts",
]
