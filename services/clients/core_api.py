# services/clients/core_api.py
"""Client für die Core Data API.

Kapselt die REST- und GraphQL-Aufrufe, die die Autorisierung benötigt:
Grant-Matrix, Accounts, Benutzer, Repositories und Team-Zuordnungen.
Fehler werden als ``CoreApiError`` weitergereicht und nicht wiederholt.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, Any

import httpx
from pydantic import TypeAdapter, ValidationError

from core.exceptions import CoreApiError
from data_models import (
    Account,
    EffectivePlanCode,
    PermissionAction,
    PermissionsPolicy,
    PermissionsRoleName,
    Resource,
    TeamRepositoryRole,
    User,
    UserTeam,
)
from gateway_logging import get_logger

from .common import (
    CLIENT_INIT_EVENT,
    CORE_API_REQUEST_EVENT,
    CREATE_POLICY_FOR_ACCOUNTS_PATH,
    GRAPHQL_PATH,
    PERMISSIONS_PATH,
    HTTPClientConfig,
    create_httpx_client_config,
    wrap_core_api_errors,
)

if TYPE_CHECKING:
    from config.settings import Settings
    from data_models import GitProvider

logger = get_logger(__name__)

_policies_adapter: TypeAdapter[list[PermissionsPolicy]] = TypeAdapter(list[PermissionsPolicy])
_user_teams_adapter: TypeAdapter[list[UserTeam]] = TypeAdapter(list[UserTeam])
_team_repository_roles_adapter: TypeAdapter[list[TeamRepositoryRole]] = TypeAdapter(
    list[TeamRepositoryRole]
)

USER_FIELDS = """
    idUser
    login
    provider
    providerInternalId
    acl
"""

FIND_USER_BY_PROVIDER_INTERNAL_ID_QUERY = f"""
query($providerInternalId: String!, $provider: EnumUsersProvider!) {{
  users(
    condition: {{ provider: $provider, providerInternalId: $providerInternalId, deletedAt: null }}
    first: 1
  ) {{
    nodes {{ {USER_FIELDS} }}
  }}
}}
"""

FIND_USERS_WITH_ROLE_QUERY = f"""
query($providerInternalIds: [String!], $provider: EnumUsersProvider!, $fkAccount: Int!) {{
  users(
    filter: {{
      provider: {{ equalTo: $provider }}
      providerInternalId: {{ in: $providerInternalIds }}
      deletedAt: {{ isNull: true }}
    }}
  ) {{
    nodes {{
      {USER_FIELDS}
      accountsUsers: accountsUsersByFkUser(condition: {{ fkAccount: $fkAccount }}) {{
        nodes {{
          role: roleByFkRole {{ idRole name description }}
        }}
      }}
    }}
  }}
}}
"""

UPDATE_USER_MUTATION = f"""
mutation updateUser($input: UpdateUserInput!) {{
  updateUser(input: $input) {{
    user {{ {USER_FIELDS} }}
  }}
}}
"""

FIND_REPOSITORIES_BY_ACCOUNT_QUERY = """
query($idAccount: Int!) {
  repositories(condition: { fkAccount: $idAccount, deletedAt: null }) {
    nodes { idRepository }
  }
}
"""


def _dig(data: Any, *path: str | int) -> Any:
    """Liest einen verschachtelten Wert, ``None`` wenn der Pfad nicht existiert."""
    current = data
    for key in path:
        if isinstance(key, int):
            if not isinstance(current, list) or len(current) <= key:
                return None
        elif not isinstance(current, dict) or key not in current:
            return None
        current = current[key]
    return current


class CoreApiClient:
    """Asynchroner Client für die Core Data API.

    Args:
        settings: Anwendungskonfiguration (Basis-URL, Timeout)
        http_client: Optionaler vorkonfigurierter ``httpx.AsyncClient`` (z. B. für Tests)
    """

    def __init__(
        self,
        settings: Settings,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings
        if http_client is None:
            http_client = httpx.AsyncClient(**create_httpx_client_config(
                HTTPClientConfig.from_settings(settings),
                base_url=settings.core_api_uri,
            ))
        self._http = http_client

        logger.debug({
            "event": CLIENT_INIT_EVENT,
            "base_url": str(self._http.base_url),
        })

    async def aclose(self) -> None:
        """Schließt den zugrunde liegenden HTTP-Client."""
        await self._http.aclose()

    async def __aenter__(self) -> CoreApiClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    async def _request(self, method: str, url: str, **kwargs: Any) -> Any:
        logger.debug({"event": CORE_API_REQUEST_EVENT, "method": method, "url": url})
        response = await self._http.request(method, url, **kwargs)
        response.raise_for_status()
        if not response.content:
            return None
        return response.json()

    async def _graphql(self, query: str, variables: dict[str, Any]) -> Any:
        body = await self._request("POST", GRAPHQL_PATH, json={"query": query, "variables": variables})
        if isinstance(body, dict) and body.get("errors"):
            raise CoreApiError(
                "Core API GraphQL request failed",
                status_code=httpx.codes.OK,
                is_gql_error=True,
            )
        return body

    @staticmethod
    def _validate(adapter: TypeAdapter[Any], data: Any, operation: str) -> Any:
        try:
            return adapter.validate_python(data)
        except ValidationError as e:
            raise CoreApiError(
                f"Invalid Core API response: {operation}",
                cause=e,
            ) from e

    # ------------------------------------------------------------------
    # Permissions
    # ------------------------------------------------------------------

    @wrap_core_api_errors("get_permission_policies")
    async def get_permission_policies(
        self,
        account_id: int,
        plan_code: EffectivePlanCode,
        roles: Sequence[PermissionsRoleName],
        resources: Sequence[Resource],
        action: PermissionAction,
    ) -> list[PermissionsPolicy]:
        """Lädt die Grant-Zeilen für Rollen x Ressourcen x Aktion.

        Zeilen mit unbekannten Rollen oder Ressourcen führen zu ``CoreApiError``.
        """
        params: list[tuple[str, str | int]] = [
            ("accountId", account_id),
            ("planCode", plan_code.value),
            ("action", action.value),
        ]
        params.extend(("roles", role.value) for role in roles)
        params.extend(("resources", resource.value) for resource in resources)

        data = await self._request("GET", PERMISSIONS_PATH, params=params)
        return self._validate(_policies_adapter, data or [], "get_permission_policies")

    @wrap_core_api_errors("create_policy_for_accounts")
    async def create_policy_for_accounts(self, account_ids: Iterable[int]) -> Any:
        """Legt die Standard-Policy-Zeilen für neue Accounts an."""
        return await self._request(
            "POST",
            CREATE_POLICY_FOR_ACCOUNTS_PATH,
            json={"accountIds": list(account_ids)},
        )

    # ------------------------------------------------------------------
    # Accounts
    # ------------------------------------------------------------------

    @wrap_core_api_errors("find_account_by_id")
    async def find_account_by_id(self, account_id: int) -> Account:
        """Lädt einen Account inklusive Root-Account-Info und Abo."""
        data = await self._request(
            "GET",
            f"/accounts/{account_id}",
            params={"withRootAccountInfo": 1, "withSubscription": 1},
        )
        return self._validate(TypeAdapter(Account), data, "find_account_by_id")

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    @wrap_core_api_errors("find_user_by_provider_internal_id")
    async def find_user_by_provider_internal_id(
        self,
        provider_internal_id: str,
        provider: GitProvider,
    ) -> User | None:
        body = await self._graphql(
            FIND_USER_BY_PROVIDER_INTERNAL_ID_QUERY,
            {"providerInternalId": provider_internal_id, "provider": provider.value.upper()},
        )
        node = _dig(body, "data", "users", "nodes", 0)
        if node is None:
            return None
        return self._validate(TypeAdapter(User), node, "find_user_by_provider_internal_id")

    @wrap_core_api_errors("find_user_with_role_by_provider_internal_id")
    async def find_user_with_role_by_provider_internal_id(
        self,
        provider_internal_id: str,
        provider: GitProvider,
        account_id: int,
    ) -> User | None:
        """Lädt den Benutzer mit seiner Rolle auf ``account_id``.

        Returns:
            Benutzer oder None, falls kein Datensatz existiert
        """
        body = await self._graphql(
            FIND_USERS_WITH_ROLE_QUERY,
            {
                "providerInternalIds": [provider_internal_id],
                "provider": provider.value.upper(),
                "fkAccount": int(account_id),
            },
        )
        node = _dig(body, "data", "users", "nodes", 0)
        if node is None:
            return None

        user_data = {key: value for key, value in node.items() if key != "accountsUsers"}
        role = _dig(node, "accountsUsers", "nodes", 0, "role")
        if role:
            user_data["role"] = role
        return self._validate(TypeAdapter(User), user_data, "find_user_with_role_by_provider_internal_id")

    @wrap_core_api_errors("update_user")
    async def update_user(self, id_user: str, patch: dict[str, Any]) -> User | None:
        """Aktualisiert Felder eines Benutzers (z. B. die gespeicherte ACL)."""
        body = await self._graphql(
            UPDATE_USER_MUTATION,
            {"input": {"idUser": id_user, "patch": patch}},
        )
        user = _dig(body, "data", "updateUser", "user")
        if user is None:
            return None
        return self._validate(TypeAdapter(User), user, "update_user")

    # ------------------------------------------------------------------
    # Repositories und Teams
    # ------------------------------------------------------------------

    @wrap_core_api_errors("find_repository_ids_by_account_id")
    async def find_repository_ids_by_account_id(self, account_id: int) -> list[int]:
        body = await self._graphql(FIND_REPOSITORIES_BY_ACCOUNT_QUERY, {"idAccount": account_id})
        nodes = _dig(body, "data", "repositories", "nodes") or []
        return [int(node["idRepository"]) for node in nodes]

    @wrap_core_api_errors("query_repositories_by_user_on_team")
    async def query_repositories_by_user_on_team(
        self,
        user_id: str,
        account_id: int,
    ) -> list[TeamRepositoryRole]:
        """Lädt die Repositories, auf die der Benutzer über Team-Rollen zugreifen darf."""
        data = await self._request(
            "GET",
            f"/users/{user_id}/repositories",
            params={"accountId": account_id},
        )
        rows = _dig(data, "allowedRepositories") or []
        return self._validate(_team_repository_roles_adapter, rows, "query_repositories_by_user_on_team")

    @wrap_core_api_errors("query_user_teams_on_user_account")
    async def query_user_teams_on_user_account(
        self,
        account_id: int,
        user_id: str,
        team_role_id: int | None = None,
    ) -> list[UserTeam]:
        """Lädt die Teams des Benutzers auf einem Account inklusive Team-Rolle."""
        params: dict[str, int] = {"accountId": account_id}
        if team_role_id is not None:
            params["teamRoleId"] = team_role_id

        data = await self._request("GET", f"/users/{user_id}/accountTeams", params=params)
        teams = _dig(data, "teams") or []
        return self._validate(_user_teams_adapter, teams, "query_user_teams_on_user_account")


__all__ = [
    "CoreApiClient",
]
