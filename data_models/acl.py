# data_models/acl.py
"""Modelle des ACL-Snapshots (``AllowedAccounts``)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic.alias_generators import to_camel

from .enums import GitProvider


class AllowedRepositories(BaseModel):
    """Repository-IDs mit Lese- bzw. Admin-Zugriff beim VCS-Provider."""
    read: list[int] = Field(default_factory=list)
    admin: list[int] = Field(default_factory=list)

    @property
    def all_ids(self) -> list[int]:
        return self.read + self.admin


class AllowedAccount(BaseModel):
    """Account-Eintrag im ACL-Snapshot."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    id_account: int | None = None
    login: str
    provider: GitProvider
    allowed_repositories: AllowedRepositories = Field(default_factory=AllowedRepositories)
    avatar_url: str | None = Field(default=None, alias="avatar_url")
    url: str | None = None


AllowedAccounts = dict[str, AllowedAccount]

allowed_accounts_adapter: TypeAdapter[AllowedAccounts] = TypeAdapter(AllowedAccounts)


def parse_allowed_accounts(raw: str | bytes) -> AllowedAccounts:
    """Parst den serialisierten Snapshot aus Cache oder Benutzer-Datensatz."""
    return allowed_accounts_adapter.validate_json(raw)


def dump_allowed_accounts(allowed_accounts: AllowedAccounts) -> str:
    """Serialisiert den Snapshot für Cache und Benutzer-Datensatz."""
    return allowed_accounts_adapter.dump_json(allowed_accounts, by_alias=True, exclude_none=True).decode()


class AccessList(BaseModel):
    """Ergebnis der ACL-Auflösung.

    ``is_synchronizing`` ist gesetzt, solange noch nie ein Snapshot erzeugt
    wurde; der Benutzer hat dann nicht "keinen Zugriff".
    """
    allowed_accounts: AllowedAccounts = Field(default_factory=dict)
    is_synchronizing: bool = False

    @property
    def account_ids(self) -> list[int]:
        return [int(key) for key in self.allowed_accounts]


__all__ = [
    "AccessList",
    "AllowedAccount",
    "AllowedAccounts",
    "AllowedRepositories",
    "allowed_accounts_adapter",
    "dump_allowed_accounts",
    "parse_allowed_accounts",
]
