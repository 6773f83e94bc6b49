"""Dependency Injection Container für die Autorisierung.

Wird einmal beim Start erstellt und in ``app.state.container`` abgelegt.
Hält Settings, Cache-Factory, Core-API-Client und optional den
ACL-Synchronizer und löst daraus die Berechtigungs-Services auf.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeVar

from fastapi import Request

from config.settings import Settings, get_settings
from gateway_logging import get_logger
from services.clients.core_api import CoreApiClient
from services.permissions.acl import AccessListService, AccessListSynchronizer
from services.permissions.resolution import PolicyResolutionService
from storage.client_factory import CacheClientFactory

if TYPE_CHECKING:
    from collections.abc import Callable

logger = get_logger(__name__)

T = TypeVar("T")


@dataclass
class ServiceDescriptor:
    """Beschreibt eine Service-Registrierung im Container."""

    factory: Callable[[Container], Any]
    singleton: bool = True
    instance: Any | None = None


class Container:
    """Einfacher DI-Container mit Singleton- und Factory-Support."""

    def __init__(self) -> None:
        self._registry: dict[Any, ServiceDescriptor] = {}

    def register(self, interface: Any, factory: Callable[[Container], Any], *, singleton: bool = True) -> None:
        """Registriert eine Factory für ein Interface.

        Args:
            interface: Interface- oder Basisklasse.
            factory: Factory-Funktion, die die Implementierung erstellt.
            singleton: Ob als Singleton gecached wird.
        """
        self._registry[interface] = ServiceDescriptor(factory=factory, singleton=singleton)

    def register_instance(self, interface: Any, instance: Any) -> None:
        """Registriert eine bereits erzeugte Instanz als Singleton."""
        self._registry[interface] = ServiceDescriptor(factory=lambda _: instance, instance=instance)

    def resolve(self, interface: type[T]) -> T:
        """Löst eine Implementierung für ein Interface auf.

        Führt Lazy-Instanziierung durch und cached bei Singleton.
        """
        if interface not in self._registry:
            raise KeyError(f"Kein Service für Interface {interface} registriert")

        desc = self._registry[interface]
        if desc.singleton and desc.instance is not None:
            return desc.instance  # type: ignore[return-value]

        instance = desc.factory(self)
        if desc.singleton:
            desc.instance = instance
        return instance  # type: ignore[return-value]

    def is_registered(self, interface: Any) -> bool:
        return interface in self._registry


class AuthorizationContainer(Container):
    """Container mit den Standard-Registrierungen der Autorisierung.

    Args:
        settings: Konfiguration, Default ``get_settings()``
        synchronizer: Optionaler ACL-Synchronizer für ``renew``
        core_api: Optionaler vorkonfigurierter Core-API-Client
        cache_factory: Optionale vorkonfigurierte Cache-Factory
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        synchronizer: AccessListSynchronizer | None = None,
        core_api: CoreApiClient | None = None,
        cache_factory: CacheClientFactory | None = None,
    ) -> None:
        super().__init__()
        self.settings = settings or get_settings()
        self.synchronizer = synchronizer

        self.register_instance(Settings, self.settings)

        if cache_factory is not None:
            self.register_instance(CacheClientFactory, cache_factory)
        else:
            self.register(CacheClientFactory, lambda c: CacheClientFactory(c.resolve(Settings)))

        if core_api is not None:
            self.register_instance(CoreApiClient, core_api)
        else:
            self.register(CoreApiClient, lambda c: CoreApiClient(c.resolve(Settings)))

        self.register(AccessListService, lambda c: AccessListService(
            c.resolve(CacheClientFactory).get_client(),
            c.resolve(CoreApiClient),
            c.resolve(Settings),
            self.synchronizer,
        ))
        self.register(PolicyResolutionService, lambda c: PolicyResolutionService(
            c.resolve(CoreApiClient),
            c.resolve(Settings),
            c.resolve(AccessListService),
        ))

        logger.debug({
            "event": "authorization_container_created",
            "config": self.settings.get_config_summary(),
            "synchronizer": synchronizer is not None,
        })

    def access_list_service(self) -> AccessListService:
        return self.resolve(AccessListService)

    def policy_resolution_service(self) -> PolicyResolutionService:
        return self.resolve(PolicyResolutionService)

    def core_api(self) -> CoreApiClient:
        return self.resolve(CoreApiClient)

    async def close(self) -> None:
        """Schließt Cache-Clients und Core-API-Client, sofern sie erzeugt wurden."""
        cache_desc = self._registry.get(CacheClientFactory)
        if cache_desc is not None and cache_desc.instance is not None:
            await cache_desc.instance.close_all_clients()

        core_desc = self._registry.get(CoreApiClient)
        if core_desc is not None and core_desc.instance is not None:
            await core_desc.instance.aclose()

        logger.info("🔌 Autorisierungs-Container geschlossen")


def get_container(request: Request) -> AuthorizationContainer:
    """FastAPI-Dependency: liefert den beim Start abgelegten Container."""
    container = getattr(request.app.state, "container", None)
    if container is None:
        raise RuntimeError("AuthorizationContainer ist nicht in app.state registriert")
    return container


__all__ = [
    "AuthorizationContainer",
    "Container",
    "ServiceDescriptor",
    "get_container",
]
