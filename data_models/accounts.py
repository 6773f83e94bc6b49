# data_models/accounts.py
"""Account-, Abo- und Benutzer-Modelle der Core Data API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .enums import GitProvider, SystemUserRoleName, UserRoleName


class CoreApiModel(BaseModel):
    """Basis für Modelle, die camelCase-JSON der Core API lesen."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class Plan(CoreApiModel):
    """Abo-Plan."""
    id_plan: int | None = None
    code: str
    name: str = ""


class Subscription(CoreApiModel):
    """Abo eines Accounts."""
    id_subscription: int | None = None
    status: str | None = None
    plan: Plan | None = None


class Account(CoreApiModel):
    """Tenant (Organisation oder Einzelbenutzer) der Core Data API.

    Unterscheidet sich ``id_root_account`` von ``id_account``, wird der Plan
    für Berechtigungen über den Root-Account aufgelöst.
    """
    id_account: int
    fk_parent_account: int | None = None
    id_root_account: int | None = None
    login: str = ""
    provider: GitProvider | None = None
    provider_internal_id: str | None = None
    subscription: Subscription | None = None

    @property
    def has_distinct_root(self) -> bool:
        return bool(self.id_root_account) and self.id_root_account != self.id_account


class UserRole(CoreApiModel):
    """Direkte Rolle eines Benutzers auf einem Account."""
    id_role: int | None = None
    name: UserRoleName | SystemUserRoleName
    description: str = ""


class User(CoreApiModel):
    """Benutzer-Datensatz (``userInDb``), pro Account mit Rolle aufgelöst."""
    id_user: str
    login: str = ""
    provider: GitProvider | None = None
    provider_internal_id: str | None = None
    acl: str | None = None
    role: UserRole | None = None


class RequestUser(BaseModel):
    """Benutzer aus der Session (von der Auth-Middleware gesetzt).

    Die Session liefert den Provider kleingeschrieben (``github``).
    """
    provider: GitProvider
    login: str
    provider_internal_id: str = Field(default="")

    @field_validator("provider", mode="before")
    @classmethod
    def normalize_provider(cls, v: object) -> object:
        return v.upper() if isinstance(v, str) else v

    @property
    def session_provider(self) -> str:
        """Provider-Name in Session-Schreibweise, z. B. für Cache-Schlüssel."""
        return self.provider.value.lower()


__all__ = [
    "Account",
    "CoreApiModel",
    "Plan",
    "RequestUser",
    "Subscription",
    "User",
    "UserRole",
]
