# services/permissions/subscription.py
"""Auflösung des effektiven Abo-Plans eines Accounts."""

from __future__ import annotations

from typing import TYPE_CHECKING

from data_models import ACTIVE_SUBSCRIPTION_STATUSES, PlanCode, SpecialPlanCode
from gateway_logging import get_logger

if TYPE_CHECKING:
    from config.settings import Settings
    from data_models import Account, EffectivePlanCode, Subscription

logger = get_logger(__name__)


def is_subscription_active(subscription: Subscription | None) -> bool:
    """Prüft, ob das Abo aktiv ist (``active`` oder ``trialing``)."""
    if subscription is None or not subscription.status:
        return False
    return subscription.status in ACTIVE_SUBSCRIPTION_STATUSES


def get_account_plan_code(account: Account) -> PlanCode:
    """Gibt den Plan-Code eines aktiven Abos zurück, sonst ``FREE``.

    Unbekannte Plan-Codes fallen mit einer Warnung ebenfalls auf ``FREE`` zurück.
    """
    subscription = account.subscription
    if not is_subscription_active(subscription) or subscription.plan is None:
        return PlanCode.FREE

    try:
        return PlanCode(subscription.plan.code)
    except ValueError:
        logger.warning({
            "event": "unknown_plan_code",
            "account_id": account.id_account,
            "plan_code": subscription.plan.code,
        })
        return PlanCode.FREE


def resolve_effective_plan_code(account: Account, settings: Settings) -> EffectivePlanCode:
    """Im On-Premise-Betrieb gilt immer ``ONPREMISE``, unabhängig vom Abo."""
    if settings.is_onpremise:
        return SpecialPlanCode.ONPREMISE
    return get_account_plan_code(account)


__all__ = [
    "get_account_plan_code",
    "is_subscription_active",
    "resolve_effective_plan_code",
]
