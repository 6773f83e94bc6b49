# services/permissions/tests/test_subscription.py
"""Tests für die Auflösung des Abo-Plans."""

from unittest.mock import patch

from config.settings import create_test_settings
from data_models import PlanCode, SpecialPlanCode, Subscription
from services.permissions import subscription as subscription_module
from services.permissions.subscription import (
    get_account_plan_code,
    is_subscription_active,
    resolve_effective_plan_code,
)


class TestSubscription:
    """Tests für Abo-Status und Plan-Code."""

    def test_active_statuses(self) -> None:
        """Prüft, dass active und trialing als aktiv gelten."""
        assert is_subscription_active(Subscription(status="active"))
        assert is_subscription_active(Subscription(status="trialing"))
        assert not is_subscription_active(Subscription(status="past_due"))
        assert not is_subscription_active(Subscription())
        assert not is_subscription_active(None)

    def test_plan_code_of_active_subscription(self, account_factory) -> None:
        """Prüft, dass der Plan eines aktiven Abos verwendet wird."""
        assert get_account_plan_code(account_factory("GR_BUSINESS", status="active")) is PlanCode.BUSINESS

    def test_free_without_active_subscription(self, account_factory) -> None:
        """Prüft, dass ohne aktives Abo FREE gilt."""
        assert get_account_plan_code(account_factory("STANDARD")) is PlanCode.FREE

    def test_unknown_plan_code_is_free(self, account_factory) -> None:
        """Prüft, dass unbekannte Plan-Codes auf FREE fallen."""
        assert get_account_plan_code(account_factory("LEGACY_GOLD", status="active")) is PlanCode.FREE

    def test_unknown_plan_code_is_logged(self, account_factory) -> None:
        """Prüft, dass der Rückfall auf FREE als Warnung protokolliert wird."""
        account = account_factory("LEGACY_GOLD", status="active")

        with patch.object(subscription_module.logger, "warning") as warning:
            get_account_plan_code(account)

        warning.assert_called_once()
        payload = warning.call_args.args[0]
        assert payload["event"] == "unknown_plan_code"
        assert payload["plan_code"] == "LEGACY_GOLD"
        assert payload["account_id"] == account.id_account

    def test_known_plan_code_is_not_logged(self, account_factory) -> None:
        """Prüft, dass bekannte Plan-Codes keine Warnung erzeugen."""
        with patch.object(subscription_module.logger, "warning") as warning:
            get_account_plan_code(account_factory("GR_BUSINESS", status="active"))

        warning.assert_not_called()

    def test_onpremise(self, account_factory) -> None:
        """Prüft, dass On-Premise unabhängig vom Abo ONPREMISE liefert."""
        settings = create_test_settings(environment="onpremise")

        assert resolve_effective_plan_code(account_factory(), settings) is SpecialPlanCode.ONPREMISE

    def test_cloud_uses_subscription(self, account_factory, settings) -> None:
        """Prüft, dass außerhalb von On-Premise das Abo entscheidet."""
        account = account_factory("GR_STARTUP", status="active")

        assert resolve_effective_plan_code(account, settings) is PlanCode.STARTUP
