"""Concurrency-safe name-to-provider registries populated during bootstrap."""

from __future__ import annotations

import logging
import threading
from types import MappingProxyType
from typing import Generic, Mapping, TypeVar

from .interfaces import ReadinessProviderPort, StatusProviderPort

logger = logging.getLogger(__name__)

ProviderT = TypeVar("ProviderT")


class ComponentRegistry(Generic[ProviderT]):
    """Name-to-provider mapping with lock-free reads.

    Writers copy the current snapshot, apply the change, and publish a new
    read-only snapshot under a lock. Readers only dereference the published
    snapshot, so lookups never wait on other lookups or on registration.
    """

    def __init__(self, capability: str):
        """Initialize an empty registry.

        Args:
            capability: Capability label used in diagnostics (`status`, `ready`).

        Raises:
            ValueError: Raised when capability is blank.
        """

        if not capability.strip():
            raise ValueError("capability must not be blank")
        self._capability = capability.strip()
        self._write_lock = threading.Lock()
        self._snapshot: Mapping[str, ProviderT] = MappingProxyType({})

    @property
    def capability(self) -> str:
        """Return the capability label of this registry."""

        return self._capability

    def registry_register(self, name: str, provider: ProviderT) -> None:
        """Insert or overwrite the provider registered under a name.

        Args:
            name: Component registration key.
            provider: Provider implementing the registry capability.

        Raises:
            ValueError: Raised when provider is None.
        """

        if provider is None:
            raise ValueError("provider must not be None")
        with self._write_lock:
            updated = dict(self._snapshot)
            replaced = name in updated
            updated[name] = provider
            self._snapshot = MappingProxyType(updated)
        if replaced:
            logger.info("replaced %s provider for component %r", self._capability, name)
        else:
            logger.debug("registered %s provider for component %r", self._capability, name)

    def registry_lookup(self, name: str) -> ProviderT | None:
        """Resolve a provider by name.

        Args:
            name: Component registration key.

        Returns:
            ProviderT | None: Registered provider, or None when absent.
        """

        return self._snapshot.get(name)

    def registry_names(self) -> tuple[str, ...]:
        """Return registered names in registration order."""

        return tuple(self._snapshot)

    def registry_providers(self) -> tuple[ProviderT, ...]:
        """Return registered providers in registration order."""

        return tuple(self._snapshot.values())

    def __len__(self) -> int:
        return len(self._snapshot)

    def __contains__(self, name: object) -> bool:
        return name in self._snapshot


class ComponentRegistries:
    """Status and readiness registries owned by one service instance."""

    def __init__(self) -> None:
        """Initialize empty status and readiness registries."""

        self.status_registry: ComponentRegistry[StatusProviderPort] = ComponentRegistry("status")
        self.ready_registry: ComponentRegistry[ReadinessProviderPort] = ComponentRegistry("ready")

    def registries_register_component(self, component: object) -> tuple[str, ...]:
        """Register a component under every capability it implements.

        Components implementing neither capability are accepted and stay
        invisible to aggregation.

        Args:
            component: Component instance exposing `name()` plus `status()`
                and/or `ready()`.

        Returns:
            tuple[str, ...]: Capability labels the component was registered for.

        Raises:
            ValueError: Raised when component is None.
        """

        if component is None:
            raise ValueError("component must not be None")

        registered: list[str] = []
        if isinstance(component, StatusProviderPort):
            self.status_registry.registry_register(component.name(), component)
            registered.append(self.status_registry.capability)
        if isinstance(component, ReadinessProviderPort):
            self.ready_registry.registry_register(component.name(), component)
            registered.append(self.ready_registry.capability)
        if not registered:
            logger.warning("component %r implements no status capability", component)
        return tuple(registered)

    def registries_close_components(self) -> int:
        """Close every registered component that owns releasable resources.

        Components registered under both capabilities are closed once.
        Components without a `close()` method are left untouched.

        Returns:
            int: Number of components closed.

        Raises:
            Exception: Propagates the first failure raised by a component.
        """

        closed_ids: set[int] = set()
        providers = (*self.status_registry.registry_providers(), *self.ready_registry.registry_providers())
        for provider in providers:
            if id(provider) in closed_ids:
                continue
            close = getattr(provider, "close", None)
            if not callable(close):
                continue
            close()
            closed_ids.add(id(provider))
        logger.info("closed %d components", len(closed_ids))
        return len(closed_ids)
