# services/permissions/policy.py
"""Policy-Auflösung pro Autorisierungsprüfung.

Eine ``PolicyService``-Instanz bündelt den effektiven Abo-Plan, die direkte
Rolle des Benutzers, seine Team-Rollen, die geladenen Grant-Zeilen und die
drei Repository-Pools (Account, ACL, Team-Rollen). Sie lebt nur für einen
Request und wird nicht persistiert.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from data_models import (
    ACLUserRole,
    AllowedRepositories,
    PermissionsPolicy,
    SystemUserRoleName,
    TeamRoleName,
    UserRoleName,
)
from gateway_logging import get_logger

from .subscription import resolve_effective_plan_code
from .utils import to_list

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from config.settings import Settings
    from data_models import (
        Account,
        AllowedRepositoriesByTeamRole,
        EffectivePlanCode,
        PermissionAction,
        PermissionsRoleName,
        Resource,
        User,
        UserTeamIdsByTeamRole,
    )
    from services.clients.core_api import CoreApiClient

logger = get_logger(__name__)


@dataclass(slots=True)
class PolicyOptions:
    """Bereits aufgelöste Repository- und Team-Pools für eine Policy.

    Attributes:
        acl_allowed_repositories: ACL-Repositories des Accounts (read/admin)
        all_account_repository_ids: Alle Repository-IDs des Accounts
        allowed_repository_ids_grouped_by_team_role: Repository-IDs je Team-Rolle
        user_team_ids_by_team_role: Team-IDs des Benutzers je Team-Rollenname
    """

    acl_allowed_repositories: AllowedRepositories | None = None
    all_account_repository_ids: list[int] = field(default_factory=list)
    allowed_repository_ids_grouped_by_team_role: Mapping[str, list[int]] | None = None
    user_team_ids_by_team_role: Mapping[str, list[int]] | None = None


def _to_team_role(name: str) -> TeamRoleName | None:
    try:
        return TeamRoleName(name)
    except ValueError:
        return None


def _team_role_key(name: str) -> str:
    return name.value if isinstance(name, TeamRoleName) else str(name)


class PolicyService:
    """Aufgelöste Policy für Account, Benutzer und angefragte Ressourcen.

    Instanzen werden über ``create_instance`` erzeugt; ``init`` lädt danach
    die Grant-Zeilen für eine konkrete Aktion.
    """

    def __init__(
        self,
        user_in_db: User | None = None,
        options: PolicyOptions | None = None,
        *,
        core_api: CoreApiClient,
        settings: Settings,
    ) -> None:
        self._core_api = core_api
        self._settings = settings
        options = options or PolicyOptions()

        self._plan_code: EffectivePlanCode | None = None
        self._root_account_id: int | None = None
        self._policies: list[PermissionsPolicy] = []

        # Ohne Rolle in der DB gilt developer; owner wird wie admin behandelt
        self._user_role: UserRoleName = UserRoleName.DEVELOPER
        if user_in_db is not None and user_in_db.role is not None:
            role_name = user_in_db.role.name
            self._user_role = (
                UserRoleName.ADMIN if role_name == SystemUserRoleName.OWNER else UserRoleName(role_name)
            )

        grouped = options.allowed_repository_ids_grouped_by_team_role
        self._team_role_repository_ids: AllowedRepositoriesByTeamRole | None = None
        if grouped is not None:
            self._team_role_repository_ids = {
                role: list(ids)
                for key, ids in grouped.items()
                if (role := _to_team_role(_team_role_key(key))) is not None
            }

        self._user_team_ids_by_team_role: UserTeamIdsByTeamRole = {
            _team_role_key(key): list(ids)
            for key, ids in (options.user_team_ids_by_team_role or {}).items()
        }

        role_source: Iterable[str] = (
            grouped.keys() if grouped is not None else self._user_team_ids_by_team_role.keys()
        )
        self._user_team_roles: list[TeamRoleName] = [
            role for key in role_source if (role := _to_team_role(_team_role_key(key))) is not None
        ]

        acl = options.acl_allowed_repositories or AllowedRepositories()
        self._account_repository_ids: list[int] = list(options.all_account_repository_ids)
        self._acl_read_repository_ids: list[int] = acl.read + acl.admin
        self._acl_write_repository_ids: list[int] = list(acl.admin)

    @classmethod
    async def create_instance(
        cls,
        account: Account,
        user_in_db: User | None = None,
        options: PolicyOptions | None = None,
        *,
        core_api: CoreApiClient,
        settings: Settings,
    ) -> PolicyService:
        """Erzeugt eine Policy und löst direkt den Plan des Accounts auf."""
        policy = cls(user_in_db, options, core_api=core_api, settings=settings)
        return await policy.init_account(account)

    async def init_account(self, account: Account) -> PolicyService:
        """Löst den effektiven Plan über den Root-Account auf.

        Hat der Account einen eigenen Root-Account, wird dieser geladen und
        dessen Abo verwendet. Muss vor ``init`` abgeschlossen sein.
        """
        root_account = account
        if account.has_distinct_root:
            root_account = await self._core_api.find_account_by_id(account.id_root_account)

        self._plan_code = resolve_effective_plan_code(root_account, self._settings)
        self._root_account_id = account.id_root_account

        logger.debug({
            "event": "policy_account_initialized",
            "account_id": account.id_account,
            "root_account_id": self._root_account_id,
            "plan_code": self._plan_code.value,
        })
        return self

    async def init(
        self,
        action: PermissionAction,
        resources: Resource | Iterable[Resource],
    ) -> PolicyService:
        """Lädt die Grant-Zeilen für die Aktion auf den angefragten Ressourcen."""
        await self._init_policies(action, to_list(resources))
        return self

    async def _init_policies(self, action: PermissionAction, resources: list[Resource]) -> None:
        roles: list[PermissionsRoleName] = [
            self._user_role,
            ACLUserRole.READ,
            ACLUserRole.ADMIN,
            *TeamRoleName,
        ]

        if not (resources and self._root_account_id and self._plan_code):
            logger.debug({
                "event": "policy_fetch_skipped",
                "root_account_id": self._root_account_id,
                "plan_code": self._plan_code,
                "resources": [r.value for r in resources],
            })
            return

        self._policies = await self._core_api.get_permission_policies(
            self._root_account_id,
            self._plan_code,
            roles,
            resources,
            action,
        )
        logger.debug({
            "event": "policy_rows_loaded",
            "root_account_id": self._root_account_id,
            "action": action.value,
            "resources": [r.value for r in resources],
            "rows": len(self._policies),
        })

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def plan_code(self) -> EffectivePlanCode | None:
        return self._plan_code

    @property
    def root_account_id(self) -> int | None:
        return self._root_account_id

    def get_user_role(self) -> UserRoleName:
        return self._user_role

    def get_user_team_roles(self) -> list[TeamRoleName]:
        return list(self._user_team_roles)

    def get_policies(self) -> list[PermissionsPolicy]:
        return list(self._policies)

    def get_account_repository_ids(self) -> list[int]:
        return list(self._account_repository_ids)

    def get_repository_ids_grouped_by_team_role(self) -> AllowedRepositoriesByTeamRole | None:
        return self._team_role_repository_ids

    def get_acl_repositories(self, role: ACLUserRole) -> list[int]:
        """ACL-Repositories je Rolle: ``acl_admin`` liefert den Schreib-, ``acl_read`` den Lesepool."""
        if role is ACLUserRole.ADMIN:
            return list(self._acl_write_repository_ids)
        return list(self._acl_read_repository_ids)

    def get_user_team_ids_by_team_role(self, team_role: TeamRoleName) -> list[int]:
        return list(self._user_team_ids_by_team_role.get(team_role.value, []))

    def get_all_user_team_ids(self) -> list[int]:
        return [team_id for ids in self._user_team_ids_by_team_role.values() for team_id in ids]


__all__ = [
    "PolicyOptions",
    "PolicyService",
]
