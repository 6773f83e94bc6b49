# config/tests/test_settings.py
"""Tests für die Gateway-Settings."""

import pytest
from pydantic import ValidationError

from config.settings import create_test_settings


class TestSettings:
    """Tests für Defaults, Validierung und Ableitungen."""

    def test_defaults(self, monkeypatch) -> None:
        """Prüft die Defaults ohne Umgebungsvariablen."""
        for key in ("ENVIRONMENT", "CACHE_PROVIDER", "ACL_CACHE_EXPIRE_TIME"):
            monkeypatch.delenv(key, raising=False)

        settings = create_test_settings()

        assert settings.environment == "development"
        assert settings.cache_provider == "default"
        assert settings.acl_cache_expire_time == 3600
        assert not settings.is_onpremise

    def test_environment_from_env(self, monkeypatch) -> None:
        """Prüft, dass Umgebungsvariablen gelesen werden."""
        monkeypatch.setenv("ENVIRONMENT", "ONPREMISE")
        monkeypatch.setenv("ACL_WRITE_ACCESS_REPOS_MODE", "true")

        settings = create_test_settings()

        assert settings.is_onpremise
        assert settings.acl_write_access_repos_mode

    def test_invalid_environment(self) -> None:
        """Prüft, dass unbekannte Environments abgelehnt werden."""
        with pytest.raises(ValidationError):
            create_test_settings(environment="moon")

    def test_negative_ttl_rejected(self) -> None:
        """Prüft, dass negative TTLs abgelehnt werden."""
        with pytest.raises(ValidationError):
            create_test_settings(acl_cache_expire_time=-1)

    def test_config_summary(self) -> None:
        """Prüft die Übersicht ohne sensible Werte."""
        summary = create_test_settings(cache_provider="redis").get_config_summary()

        assert summary["cache"]["provider"] == "redis"
        assert "redis_url" not in summary
