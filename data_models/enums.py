# data_models/enums.py
"""Geschlossene Aufzählungen für Rollen, Ressourcen, Aktionen und Pläne."""

from __future__ import annotations

from enum import Enum


class Resource(str, Enum):
    """Ressourcen, für die Grants in der Policy-Matrix existieren."""
    API = "API"
    APPLICATIONS = "Applications"
    ACCOUNTS = "Accounts"
    ACTIONS = "Actions"
    CLI = "CLI"
    CUSTOM_ENGINES = "CustomEngines"
    ENGINES = "Engines"
    CUSTOM_CONFIG = "EnginesConfig"
    FINDINGS = "Findings"
    JIRA = "Jira"
    JIRA_CONFIG = "JiraConfig"
    PREHOOKS = "Prehooks"
    REPORTS = "Reports"
    REPOSITORIES = "Repositories"
    RULES = "Rules"
    SAML = "Saml"
    SCANS = "Scans"
    STATS = "Stats"
    SUBSCRIPTION = "Subscription"
    TEAMS = "Teams"
    USERS = "Users"
    USER_EVENTS = "UserEvents"


class PermissionAction(str, Enum):
    """Aktionen auf einer Ressource."""
    READ = "read"
    WRITE = "write"


class UserRoleName(str, Enum):
    """Direkte Account-Rollen eines Benutzers."""
    ADMIN = "admin"
    DEVELOPER = "developer"
    SECURITY_ENGINEER = "security_engineer"
    MANAGER = "manager"


class SystemUserRoleName(str, Enum):
    """Systemrollen, die nie in der Policy-Matrix stehen."""
    OWNER = "owner"


class ACLUserRole(str, Enum):
    """Rollen aus dem beim VCS-Provider synchronisierten ACL-Snapshot."""
    READ = "acl_read"
    ADMIN = "acl_admin"


class TeamRoleName(str, Enum):
    """Rollen eines Benutzers innerhalb eines Teams."""
    DEVELOPER = "team_developer"
    SECURITY_ENGINEER = "team_security_engineer"
    TEAM_ADMIN = "team_admin"


class PlanCode(str, Enum):
    """Abo-Pläne."""
    OPEN_SOURCE = "GR_OPEN_SOURCE"
    INDIVIDUAL = "GR_INDIVIDUAL"
    STARTUP = "GR_STARTUP"
    BUSINESS = "GR_BUSINESS"
    FREE = "FREE"
    STANDARD = "STANDARD"
    PROFESSIONAL = "PROFESSIONAL"


class SpecialPlanCode(str, Enum):
    """Plan-Codes außerhalb der Abo-Verwaltung."""
    ONPREMISE = "ONPREMISE"


class GitProvider(str, Enum):
    """Unterstützte VCS-Provider."""
    GITHUB = "GITHUB"
    GITLAB = "GITLAB"
    BITBUCKET = "BITBUCKET"
    BITBUCKET_DATA_CENTER = "BITBUCKET_DATA_CENTER"


# Rollen, die in Grant-Zeilen vorkommen dürfen
PermissionsRoleName = UserRoleName | SystemUserRoleName | ACLUserRole | TeamRoleName
EffectivePlanCode = PlanCode | SpecialPlanCode

ACTIVE_SUBSCRIPTION_STATUSES: frozenset[str] = frozenset({"active", "trialing"})


__all__ = [
    "ACTIVE_SUBSCRIPTION_STATUSES",
    "ACLUserRole",
    "EffectivePlanCode",
    "GitProvider",
    "PermissionAction",
    "PermissionsRoleName",
    "PlanCode",
    "Resource",
    "SpecialPlanCode",
    "SystemUserRoleName",
    "TeamRoleName",
    "UserRoleName",
]
