# services/permissions/acl.py
"""ACL-Snapshot eines Benutzers: Cache, Benutzer-Datensatz und Synchronisation.

Der Snapshot (``AllowedAccounts``) wird beim VCS-Provider synchronisiert,
mit TTL im Cache abgelegt und zusätzlich in der ``acl``-Spalte des
Benutzers gespeichert. Fehlt er an beiden Stellen, läuft die erste
Synchronisation noch (``is_synchronizing``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from core.constants import ACCOUNT_NOT_AUTHORIZED_MESSAGE, PermissionDenialReason
from core.exceptions import DependencyError, ForbiddenError
from data_models import (
    AccessList,
    AllowedAccounts,
    AllowedRepositories,
    dump_allowed_accounts,
    parse_allowed_accounts,
)
from gateway_logging import get_logger

if TYPE_CHECKING:
    from config.settings import Settings
    from data_models import RequestUser, User
    from services.clients.core_api import CoreApiClient
    from storage.cache.base import CacheBackend

logger = get_logger(__name__)

ALLOWED_ACCOUNTS_CACHE_KEY_TEMPLATE = "allowedAccounts_{provider}_{login}_v2"


def allowed_accounts_cache_key(user: RequestUser) -> str:
    """Cache-Schlüssel des Snapshots pro (Provider, Login)."""
    return ALLOWED_ACCOUNTS_CACHE_KEY_TEMPLATE.format(provider=user.session_provider, login=user.login)


@runtime_checkable
class AccessListSynchronizer(Protocol):
    """Externer Dienst, der den Snapshot beim VCS-Provider erzeugt."""

    async def synchronize(self, user: RequestUser, write_access_mode: bool) -> AllowedAccounts:
        ...


@dataclass(slots=True)
class AllowedRepositoriesOnAccount:
    """Ergebnis von ``get_allowed_repositories_by_user_on_account``."""

    allowed_accounts: AllowedAccounts
    allowed_repositories: AllowedRepositories

    @property
    def all_allowed_repository_ids(self) -> list[int]:
        return self.allowed_repositories.all_ids


class AccessListService:
    """Liest, erneuert und löscht den ACL-Snapshot eines Benutzers.

    Args:
        cache: Cache-Client aus der ``CacheClientFactory``
        core_api: Client für Benutzer-Datensätze
        settings: Konfiguration (TTL, Write-Access-Modus)
        synchronizer: Optionaler Synchronisationsdienst für ``renew``
    """

    def __init__(
        self,
        cache: CacheBackend,
        core_api: CoreApiClient,
        settings: Settings,
        synchronizer: AccessListSynchronizer | None = None,
    ) -> None:
        self._cache = cache
        self._core_api = core_api
        self._settings = settings
        self._synchronizer = synchronizer

    async def _find_user(self, user: RequestUser) -> User | None:
        return await self._core_api.find_user_by_provider_internal_id(
            user.provider_internal_id,
            user.provider,
        )

    async def renew_allowed_accounts_by_user(self, user: RequestUser) -> str:
        """Synchronisiert den Snapshot neu, cached ihn und speichert ihn am Benutzer.

        Returns:
            Serialisierter Snapshot
        """
        if self._synchronizer is None:
            raise DependencyError("Access list synchronizer is not configured")

        allowed_accounts = await self._synchronizer.synchronize(
            user,
            self._settings.acl_write_access_repos_mode,
        )
        allowed_accounts_json = dump_allowed_accounts(allowed_accounts)

        cache_key = allowed_accounts_cache_key(user)
        await self._cache.set(cache_key, allowed_accounts_json, self._settings.acl_cache_expire_time)

        user_in_db = await self._find_user(user)
        if user_in_db is None:
            logger.warning({
                "event": "acl_renew_user_missing",
                "provider": user.session_provider,
                "login": user.login,
            })
        else:
            await self._core_api.update_user(user_in_db.id_user, {"acl": allowed_accounts_json})

        logger.info({
            "event": "acl_renewed",
            "provider": user.session_provider,
            "login": user.login,
            "accounts": len(allowed_accounts),
        })
        return allowed_accounts_json

    async def get_allowed_accounts_by_user(self, user: RequestUser) -> AccessList:
        """Liest den Snapshot: Cache, dann Benutzer-Datensatz, sonst ``is_synchronizing``."""
        cache_key = allowed_accounts_cache_key(user)

        allowed_accounts_json = await self._cache.get(cache_key)
        if allowed_accounts_json is None:
            user_in_db = await self._find_user(user)
            if user_in_db is not None and user_in_db.acl:
                allowed_accounts_json = user_in_db.acl
                await self._cache.set(cache_key, allowed_accounts_json, self._settings.acl_cache_expire_time)
            else:
                logger.debug({
                    "event": "acl_synchronizing",
                    "provider": user.session_provider,
                    "login": user.login,
                })
                return AccessList(is_synchronizing=True)

        return AccessList(allowed_accounts=parse_allowed_accounts(allowed_accounts_json))

    async def clear_allowed_accounts_by_user(self, user: RequestUser) -> None:
        """Löscht den Snapshot aus Cache und Benutzer-Datensatz."""
        await self._cache.delete(allowed_accounts_cache_key(user))

        user_in_db = await self._find_user(user)
        if user_in_db is not None:
            await self._core_api.update_user(user_in_db.id_user, {"acl": None})

    async def check_if_user_can_access_account_id(self, user: RequestUser, account_id: int | str) -> None:
        """Raises ForbiddenError, wenn der Account nicht im Snapshot steht."""
        access_list = await self.get_allowed_accounts_by_user(user)
        self._ensure_account_allowed(access_list, account_id)

    async def get_allowed_repositories_by_user_on_account(
        self,
        user: RequestUser,
        account_id: int,
    ) -> AllowedRepositoriesOnAccount:
        """Gibt die ACL-Repositories des Benutzers auf ``account_id`` zurück."""
        access_list = await self.get_allowed_accounts_by_user(user)
        self._ensure_account_allowed(access_list, account_id)

        allowed_account = access_list.allowed_accounts[str(int(account_id))]
        return AllowedRepositoriesOnAccount(
            access_list.allowed_accounts,
            allowed_account.allowed_repositories,
        )

    @staticmethod
    def _ensure_account_allowed(access_list: AccessList, account_id: int | str) -> None:
        try:
            requested = int(account_id)
        except (TypeError, ValueError):
            requested = None

        if requested is None or requested not in access_list.account_ids:
            raise ForbiddenError(
                ACCOUNT_NOT_AUTHORIZED_MESSAGE,
                reason=PermissionDenialReason.ACCOUNT_NOT_ALLOWED,
            )


__all__ = [
    "ALLOWED_ACCOUNTS_CACHE_KEY_TEMPLATE",
    "AccessListService",
    "AccessListSynchronizer",
    "AllowedRepositoriesOnAccount",
    "allowed_accounts_cache_key",
]
