# config/__init__.py
"""Konfigurationsmanagement für das VCS-Gateway."""

from .constants import (
    CACHE_PROVIDER_DEFAULT,
    CACHE_PROVIDER_MEMORY,
    CACHE_PROVIDER_REDIS,
    ONPREMISE_ENVIRONMENT,
)
from .settings import Settings, create_test_settings, get_settings

__all__ = [
    "CACHE_PROVIDER_DEFAULT",
    "CACHE_PROVIDER_MEMORY",
    "CACHE_PROVIDER_REDIS",
    "ONPREMISE_ENVIRONMENT",
    "Settings",
    "create_test_settings",
    "get_settings",
]
