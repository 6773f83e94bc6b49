"""Konfigurationskonstanten für das Gateway."""

from __future__ import annotations

from typing import Final

# Environment
DEFAULT_ENVIRONMENT: Final[str] = "development"
ONPREMISE_ENVIRONMENT: Final[str] = "onpremise"
ALLOWED_ENVIRONMENTS: Final[frozenset[str]] = frozenset(
    {"development", "staging", "production", "testing", ONPREMISE_ENVIRONMENT}
)

# Logging
DEFAULT_LOG_LEVEL: Final[str] = "INFO"
ALLOWED_LOG_LEVELS: Final[frozenset[str]] = frozenset(
    {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
)

# Core Data API
DEFAULT_CORE_API_URI: Final[str] = "http://localhost:4000"
DEFAULT_CORE_API_TIMEOUT_SECONDS: Final[float] = 30.0

# Cache
CACHE_PROVIDER_DEFAULT: Final[str] = "default"
CACHE_PROVIDER_MEMORY: Final[str] = "memory"
CACHE_PROVIDER_REDIS: Final[str] = "redis"
DEFAULT_REDIS_URL: Final[str] = "redis://localhost:6379/0"
IPV6_REDIS_HOST: Final[str] = "redis"

# ACL Snapshot
DEFAULT_ACL_CACHE_EXPIRE_TIME: Final[int] = 3600


__all__ = [
    "ALLOWED_ENVIRONMENTS",
    "ALLOWED_LOG_LEVELS",
    "CACHE_PROVIDER_DEFAULT",
    "CACHE_PROVIDER_MEMORY",
    "CACHE_PROVIDER_REDIS",
    "DEFAULT_ACL_CACHE_EXPIRE_TIME",
    "DEFAULT_CORE_API_TIMEOUT_SECONDS",
    "DEFAULT_CORE_API_URI",
    "DEFAULT_ENVIRONMENT",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_REDIS_URL",
    "IPV6_REDIS_HOST",
    "ONPREMISE_ENVIRONMENT",
]
