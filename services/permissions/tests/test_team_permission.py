# services/permissions/tests/test_team_permission.py
"""Tests für die Team-Auswertung (``create_team_permission``)."""

import pytest

from core.constants import PermissionDenialReason
from core.exceptions import BadRequestError, ForbiddenError
from data_models import PermissionAction
from services.permissions.id_sources import TEAM_ID_SOURCE
from services.permissions.permission import create_team_permission

TEAM_IDS = {
    "team_admin": [1, 2],
    "team_developer": [3],
    "not_part_of_the_team": [4],
}


class TestTeamPermission:
    """Tests für Team-IDs auf der Ressource Teams."""

    @pytest.mark.asyncio
    async def test_uses_team_source(self, create_policy) -> None:
        """Prüft, dass der Evaluator die Team-Quelle verwendet."""
        policy = await create_policy("manager", [("manager", "Teams")], user_team_ids=TEAM_IDS)

        permission = await create_team_permission(policy, PermissionAction.WRITE)

        assert permission.source is TEAM_ID_SOURCE

    @pytest.mark.asyncio
    async def test_missing_policy_is_bad_request(self) -> None:
        """Prüft, dass ohne Policy ein BadRequestError geworfen wird."""
        with pytest.raises(BadRequestError):
            await create_team_permission(None, PermissionAction.READ)

    @pytest.mark.asyncio
    async def test_direct_role_gets_all_user_teams(self, create_policy) -> None:
        """Prüft, dass die direkte Rolle alle Teams des Benutzers freigibt."""
        policy = await create_policy("manager", [("manager", "Teams")], user_team_ids=TEAM_IDS)

        permission = await create_team_permission(policy, PermissionAction.WRITE)

        assert permission.teams_enforce() == [1, 2, 3, 4]
        assert permission.teams_enforce([4, 9]) == [4]

    @pytest.mark.asyncio
    async def test_team_admin_gets_administered_teams(self, create_policy) -> None:
        """Prüft, dass team_admin nur die selbst administrierten Teams freigibt."""
        policy = await create_policy(
            "developer",
            [("team_admin", "Teams"), ("team_developer", "Teams")],
            user_team_ids=TEAM_IDS,
        )

        permission = await create_team_permission(policy, PermissionAction.WRITE)

        assert permission.teams_enforce() == [1, 2]
        assert permission.teams_enforce([2, 3]) == [2]

    @pytest.mark.asyncio
    async def test_team_developer_alone_is_denied(self, create_policy) -> None:
        """Prüft, dass team_developer allein kein Team-Gate öffnet."""
        policy = await create_policy("developer", [("team_developer", "Teams")], user_team_ids=TEAM_IDS)

        permission = await create_team_permission(policy, PermissionAction.READ)

        with pytest.raises(ForbiddenError) as exc_info:
            permission.teams_enforce()

        assert exc_info.value.reason is PermissionDenialReason.NO_MATCHING_ROLE

    @pytest.mark.asyncio
    async def test_requested_unknown_teams_are_denied(self, create_policy) -> None:
        """Prüft, dass fremde Team-IDs verweigert werden."""
        policy = await create_policy("developer", [("team_admin", "Teams")], user_team_ids=TEAM_IDS)

        permission = await create_team_permission(policy, PermissionAction.WRITE)

        with pytest.raises(ForbiddenError) as exc_info:
            permission.teams_enforce([3, 4])

        assert exc_info.value.reason is PermissionDenialReason.NO_ALLOWED_IDS

    @pytest.mark.asyncio
    async def test_acl_roles_do_not_open_teams(self, create_policy) -> None:
        """Prüft, dass ACL-Rollen für Team-IDs keine Rolle spielen."""
        policy = await create_policy("developer", [("acl_admin", "Teams")], user_team_ids=TEAM_IDS)

        permission = await create_team_permission(policy, PermissionAction.WRITE)

        with pytest.raises(ForbiddenError):
            permission.teams_enforce()

    @pytest.mark.asyncio
    async def test_team_evaluator_rejects_repository_enforce(self, create_policy) -> None:
        """Prüft, dass ein Team-Evaluator keine Repository-IDs prüft."""
        policy = await create_policy("manager", [("manager", "Teams")], user_team_ids=TEAM_IDS)
        permission = await create_team_permission(policy, PermissionAction.WRITE)

        with pytest.raises(ValueError):
            permission.repositories_enforce([1])
