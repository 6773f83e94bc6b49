# services/permissions/tests/test_policy.py
"""Tests für PolicyService."""

import pytest

from config.settings import create_test_settings
from data_models import (
    ACLUserRole,
    AllowedRepositories,
    PermissionAction,
    PlanCode,
    Resource,
    SpecialPlanCode,
    TeamRoleName,
    UserRoleName,
)
from services.permissions.policy import PolicyOptions, PolicyService


class TestUserRole:
    """Tests für die Normalisierung der direkten Rolle."""

    @pytest.mark.asyncio
    async def test_owner_is_treated_as_admin(self, create_policy) -> None:
        """Prüft, dass owner zu admin normalisiert wird."""
        policy = await create_policy("owner", [])

        assert policy.get_user_role() is UserRoleName.ADMIN

    @pytest.mark.asyncio
    async def test_missing_role_defaults_to_developer(self, create_policy) -> None:
        """Prüft, dass ein Benutzer ohne Rolle als developer gilt."""
        policy = await create_policy(None, [])

        assert policy.get_user_role() is UserRoleName.DEVELOPER

    @pytest.mark.asyncio
    async def test_missing_user_defaults_to_developer(self, core_api, settings, account_factory) -> None:
        """Prüft, dass ohne Benutzer-Datensatz ebenfalls developer gilt."""
        policy = await PolicyService.create_instance(
            account_factory(), None, core_api=core_api, settings=settings,
        )

        assert policy.get_user_role() is UserRoleName.DEVELOPER

    @pytest.mark.asyncio
    async def test_manager_role_is_kept(self, create_policy) -> None:
        """Prüft, dass andere Rollen unverändert übernommen werden."""
        policy = await create_policy("manager", [])

        assert policy.get_user_role() is UserRoleName.MANAGER


class TestPlanResolution:
    """Tests für die Auflösung des effektiven Plans."""

    @pytest.mark.asyncio
    async def test_plan_from_own_account(self, core_api, settings, account_factory) -> None:
        """Prüft, dass ohne eigenen Root-Account der Plan des Accounts gilt."""
        policy = await PolicyService.create_instance(
            account_factory("STANDARD", status="active"), core_api=core_api, settings=settings,
        )

        assert policy.plan_code is PlanCode.STANDARD
        assert policy.root_account_id == 1
        core_api.find_account_by_id.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_plan_from_root_account(self, core_api, settings, account_factory) -> None:
        """Prüft, dass der Plan des Root-Accounts verwendet wird."""
        core_api.find_account_by_id.return_value = account_factory(
            "PROFESSIONAL", id_account=7, id_root_account=7, status="trialing",
        )

        policy = await PolicyService.create_instance(
            account_factory("STANDARD", id_account=12, id_root_account=7, status="active"),
            core_api=core_api,
            settings=settings,
        )

        core_api.find_account_by_id.assert_awaited_once_with(7)
        assert policy.plan_code is PlanCode.PROFESSIONAL
        assert policy.root_account_id == 7

    @pytest.mark.asyncio
    async def test_inactive_subscription_is_free(self, core_api, settings, account_factory) -> None:
        """Prüft, dass ein inaktives Abo auf FREE fällt."""
        policy = await PolicyService.create_instance(
            account_factory("STANDARD", status="canceled"), core_api=core_api, settings=settings,
        )

        assert policy.plan_code is PlanCode.FREE

    @pytest.mark.asyncio
    async def test_onpremise_overrides_plan(self, core_api, account_factory) -> None:
        """Prüft, dass im On-Premise-Betrieb immer ONPREMISE gilt."""
        policy = await PolicyService.create_instance(
            account_factory("STANDARD", status="active"),
            core_api=core_api,
            settings=create_test_settings(environment="onpremise"),
        )

        assert policy.plan_code is SpecialPlanCode.ONPREMISE


class TestInitPolicies:
    """Tests für das Laden der Grant-Zeilen."""

    @pytest.mark.asyncio
    async def test_requests_user_acl_and_team_roles(self, create_policy, core_api) -> None:
        """Prüft die angefragten Rollen, Ressourcen und die Aktion."""
        policy = await create_policy("developer", [("developer", "Repositories")])

        await policy.init(PermissionAction.READ, Resource.REPOSITORIES)

        core_api.get_permission_policies.assert_awaited_once_with(
            1,
            PlanCode.FREE,
            [
                UserRoleName.DEVELOPER,
                ACLUserRole.READ,
                ACLUserRole.ADMIN,
                TeamRoleName.DEVELOPER,
                TeamRoleName.SECURITY_ENGINEER,
                TeamRoleName.TEAM_ADMIN,
            ],
            [Resource.REPOSITORIES],
            PermissionAction.READ,
        )
        assert [row.role for row in policy.get_policies()] == [UserRoleName.DEVELOPER]

    @pytest.mark.asyncio
    async def test_skips_fetch_without_resources(self, create_policy, core_api) -> None:
        """Prüft, dass ohne Ressourcen keine Grant-Zeilen geladen werden."""
        policy = await create_policy("developer", [("developer", "Repositories")])

        await policy.init(PermissionAction.READ, [])

        core_api.get_permission_policies.assert_not_awaited()
        assert policy.get_policies() == []

    @pytest.mark.asyncio
    async def test_skips_fetch_without_root_account(self, core_api, settings, account_factory) -> None:
        """Prüft, dass ohne Root-Account keine Grant-Zeilen geladen werden."""
        policy = await PolicyService.create_instance(
            account_factory(id_root_account=None), core_api=core_api, settings=settings,
        )

        await policy.init(PermissionAction.WRITE, [Resource.ACTIONS, Resource.TEAMS])

        core_api.get_permission_policies.assert_not_awaited()
        assert policy.get_policies() == []


class TestPools:
    """Tests für die Repository- und Team-Pools."""

    @pytest.mark.asyncio
    async def test_acl_pools(self, create_policy) -> None:
        """Prüft, dass acl_read Lese- und Admin-IDs, acl_admin nur Admin-IDs liefert."""
        policy = await create_policy("developer", [], acl={"read": [1, 2], "admin": [3]})

        assert policy.get_acl_repositories(ACLUserRole.READ) == [1, 2, 3]
        assert policy.get_acl_repositories(ACLUserRole.ADMIN) == [3]

    @pytest.mark.asyncio
    async def test_empty_defaults(self, create_policy) -> None:
        """Prüft die Defaults ohne Optionen."""
        policy = await create_policy("developer", [])

        assert policy.get_account_repository_ids() == []
        assert policy.get_acl_repositories(ACLUserRole.READ) == []
        assert policy.get_repository_ids_grouped_by_team_role() is None
        assert policy.get_user_team_roles() == []
        assert policy.get_all_user_team_ids() == []

    @pytest.mark.asyncio
    async def test_team_roles_from_grouped_repositories(self, create_policy, team_grouped) -> None:
        """Prüft, dass die Team-Rollen aus der gruppierten Repository-Map stammen."""
        policy = await create_policy(
            "developer",
            [],
            team_grouped=team_grouped(team_admin=[1]),
            user_team_ids={"team_developer": [5]},
        )

        assert set(policy.get_user_team_roles()) == set(TeamRoleName)

    @pytest.mark.asyncio
    async def test_team_roles_from_team_ids(self, create_policy) -> None:
        """Prüft, dass ohne Repository-Map die Team-ID-Map die Rollen liefert."""
        policy = await create_policy(
            "developer",
            [],
            user_team_ids={"team_admin": [1, 2], "not_part_of_the_team": [3]},
        )

        assert policy.get_user_team_roles() == [TeamRoleName.TEAM_ADMIN]
        assert policy.get_user_team_ids_by_team_role(TeamRoleName.TEAM_ADMIN) == [1, 2]
        assert policy.get_user_team_ids_by_team_role(TeamRoleName.DEVELOPER) == []
        assert policy.get_all_user_team_ids() == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_options_are_copied(self, core_api, settings, account_factory) -> None:
        """Prüft, dass Änderungen an den Optionen die Policy nicht verändern."""
        ids = [1, 2]
        options = PolicyOptions(
            acl_allowed_repositories=AllowedRepositories(read=[4], admin=[5]),
            all_account_repository_ids=ids,
        )
        policy = await PolicyService.create_instance(
            account_factory(), None, options, core_api=core_api, settings=settings,
        )

        ids.append(3)

        assert policy.get_account_repository_ids() == [1, 2]
