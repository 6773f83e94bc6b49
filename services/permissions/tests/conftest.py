# services/permissions/tests/conftest.py
"""Gemeinsame Fixtures für die Berechtigungs-Tests."""

from collections.abc import Callable
from unittest.mock import AsyncMock

import pytest

from config.settings import create_test_settings
from data_models import (
    Account,
    AllowedRepositories,
    GitProvider,
    PermissionsPolicy,
    Plan,
    Subscription,
    User,
    UserRole,
)
from services.clients.core_api import CoreApiClient
from services.permissions.policy import PolicyOptions, PolicyService

PolicyRow = tuple[str, str]


@pytest.fixture
def settings():
    """Test-Settings ohne .env."""
    return create_test_settings(environment="development")


@pytest.fixture
def core_api() -> AsyncMock:
    """Core-API-Client als AsyncMock."""
    return AsyncMock(spec=CoreApiClient)


@pytest.fixture
def account_factory() -> Callable[..., Account]:
    """Factory für Accounts mit Plan und optionalem Root-Account."""

    def _create(
        plan_code: str = "FREE",
        *,
        id_account: int = 1,
        id_root_account: int | None = 1,
        status: str | None = None,
    ) -> Account:
        return Account(
            id_account=id_account,
            id_root_account=id_root_account,
            login="test",
            provider=GitProvider.GITHUB,
            subscription=Subscription(
                id_subscription=1,
                status=status,
                plan=Plan(id_plan=1, code=plan_code),
            ),
        )

    return _create


@pytest.fixture
def user_factory() -> Callable[..., User]:
    """Factory für Benutzer-Datensätze mit Rolle."""

    def _create(role_name: str | None = "developer") -> User:
        role = UserRole(id_role=1, name=role_name) if role_name else None
        return User(id_user="some-id", login="test-user", provider=GitProvider.GITHUB, role=role)

    return _create


@pytest.fixture
def policy_rows() -> Callable[..., list[PermissionsPolicy]]:
    """Baut Grant-Zeilen aus (role, resource)-Paaren."""

    def _create(rows: list[PolicyRow], action: str = "write", plans: tuple[str, ...] = ("FREE",)):
        return [
            PermissionsPolicy.model_validate({
                "idPermission": 50 + index,
                "fkAccount": 1,
                "plans": list(plans),
                "role": role,
                "resource": resource,
                "actions": [action],
            })
            for index, (role, resource) in enumerate(rows)
        ]

    return _create


@pytest.fixture
def create_policy(core_api, settings, account_factory, user_factory, policy_rows):
    """Erzeugt eine Policy, deren Grant-Abfrage die übergebenen Zeilen liefert."""

    async def _create(
        user_role: str | None,
        rows: list[PolicyRow],
        all_account_repository_ids: list[int] | None = None,
        acl: dict[str, list[int]] | None = None,
        team_grouped: dict[str, list[int]] | None = None,
        user_team_ids: dict[str, list[int]] | None = None,
    ) -> PolicyService:
        core_api.get_permission_policies.return_value = policy_rows(rows)
        options = PolicyOptions(
            acl_allowed_repositories=AllowedRepositories(**acl) if acl else None,
            all_account_repository_ids=all_account_repository_ids or [],
            allowed_repository_ids_grouped_by_team_role=team_grouped,
            user_team_ids_by_team_role=user_team_ids,
        )
        return await PolicyService.create_instance(
            account_factory(),
            user_factory(user_role),
            options,
            core_api=core_api,
            settings=settings,
        )

    return _create


@pytest.fixture
def team_grouped() -> Callable[..., dict[str, list[int]]]:
    """Team-gruppierte Repository-IDs mit allen drei Team-Rollen."""

    def _create(team_admin=(), team_developer=(), team_security_engineer=()) -> dict[str, list[int]]:
        return {
            "team_admin": list(team_admin),
            "team_developer": list(team_developer),
            "team_security_engineer": list(team_security_engineer),
        }

    return _create
