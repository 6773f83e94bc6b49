# services/permissions/__init__.py
"""Berechtigungs-Services: Policy-Auflösung, Auswertung und ACL-Snapshot."""

from __future__ import annotations

from .acl import (
    AccessListService,
    AccessListSynchronizer,
    AllowedRepositoriesOnAccount,
    allowed_accounts_cache_key,
)
from .id_sources import (
    REPOSITORY_ID_SOURCE,
    REPOSITORY_SCOPE,
    TEAM_ID_SOURCE,
    TEAM_SCOPE,
    AllowedIdSource,
    RepositoryIdSource,
    TeamIdSource,
)
from .permission import PermissionService, create_team_permission
from .policy import PolicyOptions, PolicyService
from .resolution import PolicyResolutionService
from .subscription import get_account_plan_code, is_subscription_active, resolve_effective_plan_code

__all__ = [
    "REPOSITORY_ID_SOURCE",
    "REPOSITORY_SCOPE",
    "TEAM_ID_SOURCE",
    "TEAM_SCOPE",
    "AccessListService",
    "AccessListSynchronizer",
    "AllowedIdSource",
    "AllowedRepositoriesOnAccount",
    "PermissionService",
    "PolicyOptions",
    "PolicyResolutionService",
    "PolicyService",
    "RepositoryIdSource",
    "TeamIdSource",
    "allowed_accounts_cache_key",
    "create_team_permission",
    "get_account_plan_code",
    "is_subscription_active",
    "resolve_effective_plan_code",
]
