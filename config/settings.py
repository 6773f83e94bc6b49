# config/settings.py
"""Anwendungskonfiguration für das VCS-Gateway.

Stellt eine typsichere, auf Umgebungsvariablen basierende Konfiguration bereit.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import (
    ALLOWED_ENVIRONMENTS,
    ALLOWED_LOG_LEVELS,
    CACHE_PROVIDER_DEFAULT,
    DEFAULT_ACL_CACHE_EXPIRE_TIME,
    DEFAULT_CORE_API_TIMEOUT_SECONDS,
    DEFAULT_CORE_API_URI,
    DEFAULT_ENVIRONMENT,
    DEFAULT_LOG_LEVEL,
    DEFAULT_REDIS_URL,
    IPV6_REDIS_HOST,
    ONPREMISE_ENVIRONMENT,
)

_ENV_CANDIDATES: list[Path] = [
    Path(".env"),
    Path("../.env"),
]


def _load_env_file() -> Path | None:
    """Lädt die erste gefundene .env-Datei aus Standardpfaden.

    Returns:
        Pfad zur geladenen Datei oder None, wenn keine .env gefunden wurde.
    """
    for env_path in _ENV_CANDIDATES:
        if env_path.exists():
            load_dotenv(env_path, override=False)
            return env_path
    return None


class Settings(BaseSettings):
    """Konfiguration des Gateways.

    Alle Felder lassen sich über Umgebungsvariablen überschreiben.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False
    )

    # Core Settings
    environment: str = Field(default=DEFAULT_ENVIRONMENT)
    log_level: str = Field(default=DEFAULT_LOG_LEVEL)

    # Core Data API
    core_api_uri: str = Field(default=DEFAULT_CORE_API_URI, description="Basis-URL der Core Data API")
    core_api_timeout_seconds: float = Field(default=DEFAULT_CORE_API_TIMEOUT_SECONDS, gt=0)

    # Cache
    cache_provider: str = Field(default=CACHE_PROVIDER_DEFAULT, description="default, memory oder redis")
    redis_url: str = Field(default=DEFAULT_REDIS_URL)
    ipv6: bool = Field(default=False, description="Verbindet Redis über IPv6 mit festem Host")
    redis_host: str = Field(default=IPV6_REDIS_HOST)

    # ACL Snapshot
    acl_cache_expire_time: int = Field(default=DEFAULT_ACL_CACHE_EXPIRE_TIME, ge=0, description="TTL des ACL-Snapshots in Sekunden")
    acl_write_access_repos_mode: bool = Field(default=False, description="Synchronisiert nur Repositories mit Schreibzugriff")

    @field_validator("environment")
    def validate_environment(cls, v: str) -> str:
        """Validiert Environment-Werte."""
        if v.lower() not in ALLOWED_ENVIRONMENTS:
            raise ValueError(f"Environment muss einer von {sorted(ALLOWED_ENVIRONMENTS)} sein")
        return v.lower()

    @field_validator("log_level")
    def validate_log_level(cls, v: str) -> str:
        """Validiert Log-Level."""
        if v.upper() not in ALLOWED_LOG_LEVELS:
            raise ValueError(f"Log Level muss einer von {sorted(ALLOWED_LOG_LEVELS)} sein")
        return v.upper()

    @field_validator("cache_provider")
    def normalize_cache_provider(cls, v: str) -> str:
        """Normalisiert den Cache-Provider-Namen."""
        return (v or CACHE_PROVIDER_DEFAULT).strip().lower()

    @property
    def is_onpremise(self) -> bool:
        """Prüft ob Self-Hosted-Deployment (On-Premise)."""
        return self.environment == ONPREMISE_ENVIRONMENT

    def get_config_summary(self) -> dict[str, Any]:
        """Gibt eine Konfigurationsübersicht ohne sensible Werte zurück."""
        return {
            "environment": self.environment,
            "log_level": self.log_level,
            "core_api_uri_set": bool(self.core_api_uri),
            "cache": {
                "provider": self.cache_provider,
                "ipv6": self.ipv6,
            },
            "acl": {
                "cache_expire_time": self.acl_cache_expire_time,
                "write_access_repos_mode": self.acl_write_access_repos_mode,
            },
        }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Singleton-Factory für Settings."""
    _load_env_file()
    return Settings()


def create_test_settings(**overrides: Any) -> Settings:
    """Erstellt Test-Settings mit Overrides, ohne den Singleton zu verändern."""
    return Settings(_env_file=None, **overrides)


__all__ = [
    "Settings",
    "create_test_settings",
    "get_settings",
]
