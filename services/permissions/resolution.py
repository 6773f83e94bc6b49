# services/permissions/resolution.py
"""Zusammenstellung von Policies aus Core API und ACL-Snapshot.

Lädt die Repository- und Team-Pools eines Benutzers, baut daraus
``PolicyService``-Instanzen und fasst die Account-Berechtigungen eines
Benutzers zusammen.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from data_models import (
    NOT_PART_OF_THE_TEAM,
    PermissionAction,
    Resource,
    TeamRoleName,
)
from gateway_logging import get_logger

from .permission import PermissionService
from .policy import PolicyOptions, PolicyService

if TYPE_CHECKING:
    from config.settings import Settings
    from data_models import (
        Account,
        AllowedRepositoriesByTeamRole,
        RequestUser,
        User,
        UserTeamIdsByTeamRole,
    )
    from services.clients.core_api import CoreApiClient

    from .acl import AccessListService

logger = get_logger(__name__)

# Ressourcen der Account-Übersicht
ACCOUNT_WRITE_RESOURCES: tuple[Resource, ...] = (
    Resource.ACCOUNTS,
    Resource.JIRA_CONFIG,
    Resource.SUBSCRIPTION,
    Resource.CUSTOM_CONFIG,
    Resource.SAML,
    Resource.USERS,
    Resource.TEAMS,
    Resource.ACTIONS,
)
ACCOUNT_READ_RESOURCES: tuple[Resource, ...] = (Resource.USER_EVENTS,)


class PolicyResolutionService:
    """Baut Policies für einen Benutzer auf einem Account.

    Args:
        core_api: Client für Repositories, Teams und Benutzer
        settings: Konfiguration (Deployment-Modus für den Plan)
        access_list: Zugriff auf den ACL-Snapshot
    """

    def __init__(
        self,
        core_api: CoreApiClient,
        settings: Settings,
        access_list: AccessListService,
    ) -> None:
        self._core_api = core_api
        self._settings = settings
        self._access_list = access_list

    async def get_all_account_repository_ids(self, account_id: int) -> list[int]:
        return await self._core_api.find_repository_ids_by_account_id(account_id)

    async def get_allowed_repository_ids_grouped_by_team_role(
        self,
        user_id: str,
        account_id: int,
    ) -> AllowedRepositoriesByTeamRole | None:
        """Repository-IDs je Team-Rolle, ``None`` ohne Team-Repositories.

        Die Map enthält immer alle drei Team-Rollen, auch wenn eine leer ist.
        """
        rows = await self._core_api.query_repositories_by_user_on_team(user_id, account_id)
        if not rows:
            return None

        grouped: AllowedRepositoriesByTeamRole = {role: [] for role in TeamRoleName}
        for row in rows:
            grouped[row.name].append(row.fk_repository)
        return grouped

    async def get_user_team_ids_by_team_role_on_account(
        self,
        account_id: int,
        user_id: str,
    ) -> UserTeamIdsByTeamRole:
        """Team-IDs des Benutzers gruppiert nach Team-Rollenname."""
        teams = await self._core_api.query_user_teams_on_user_account(account_id, user_id)

        grouped: UserTeamIdsByTeamRole = {}
        for team in teams:
            role = (team.team_role.name if team.team_role else None) or NOT_PART_OF_THE_TEAM
            grouped.setdefault(role, []).append(team.id_team)
        return grouped

    async def create_policy(
        self,
        account: Account,
        user_in_db: User | None = None,
        options: PolicyOptions | None = None,
    ) -> PolicyService:
        return await PolicyService.create_instance(
            account,
            user_in_db,
            options,
            core_api=self._core_api,
            settings=self._settings,
        )

    async def build_repository_policy(
        self,
        user: RequestUser,
        account: Account,
        user_in_db: User,
    ) -> PolicyService:
        """Policy mit Account-, ACL- und Team-Repository-Pools.

        Raises:
            ForbiddenError: Wenn der Account nicht im ACL-Snapshot des Benutzers steht
        """
        acl = await self._access_list.get_allowed_repositories_by_user_on_account(user, account.id_account)
        all_account_repository_ids = await self.get_all_account_repository_ids(account.id_account)
        grouped = await self.get_allowed_repository_ids_grouped_by_team_role(
            user_in_db.id_user,
            account.id_account,
        )

        return await self.create_policy(account, user_in_db, PolicyOptions(
            acl_allowed_repositories=acl.allowed_repositories,
            all_account_repository_ids=all_account_repository_ids,
            allowed_repository_ids_grouped_by_team_role=grouped,
        ))

    async def build_team_policy(self, account: Account, user_in_db: User) -> PolicyService:
        """Policy mit den Team-IDs des Benutzers je Team-Rolle."""
        user_team_ids = await self.get_user_team_ids_by_team_role_on_account(
            account.id_account,
            user_in_db.id_user,
        )
        return await self.create_policy(
            account,
            user_in_db,
            PolicyOptions(user_team_ids_by_team_role=user_team_ids),
        )

    async def get_policy_by_request_user_and_account(
        self,
        user: RequestUser,
        account: Account,
    ) -> PolicyService:
        """Policy für den Session-Benutzer mit ACL- und Account-Repository-Pools."""
        user_in_db = await self._core_api.find_user_with_role_by_provider_internal_id(
            user.provider_internal_id,
            user.provider,
            account.id_account,
        )
        acl = await self._access_list.get_allowed_repositories_by_user_on_account(user, account.id_account)
        all_account_repository_ids = await self.get_all_account_repository_ids(account.id_account)

        return await self.create_policy(account, user_in_db, PolicyOptions(
            acl_allowed_repositories=acl.allowed_repositories,
            all_account_repository_ids=all_account_repository_ids,
        ))

    async def get_account_permission_for_user(
        self,
        user: RequestUser,
        account: Account,
    ) -> dict[str, list[Resource]]:
        """Fasst zusammen, welche Account-Ressourcen der Benutzer lesen bzw. schreiben darf."""
        policy = await self.get_policy_by_request_user_and_account(user, account)

        write_permission = await PermissionService.factory(
            policy, PermissionAction.WRITE, ACCOUNT_WRITE_RESOURCES,
        )
        allowed_write_resources = write_permission.get_allowed_resources()

        read_permission = await PermissionService.factory(
            policy, PermissionAction.READ, ACCOUNT_READ_RESOURCES,
        )
        allowed_read_resources = read_permission.get_allowed_resources()

        logger.debug({
            "event": "account_permissions_resolved",
            "account_id": account.id_account,
            "read": [r.value for r in allowed_read_resources],
            "write": [r.value for r in allowed_write_resources],
        })
        return {
            PermissionAction.READ.value: allowed_read_resources,
            PermissionAction.WRITE.value: allowed_write_resources,
        }


__all__ = [
    "ACCOUNT_READ_RESOURCES",
    "ACCOUNT_WRITE_RESOURCES",
    "PolicyResolutionService",
]
