"""Single-component side-channel queries for tooling outside the check endpoints."""

from __future__ import annotations

from status_service.domain import StatusReport
from status_service.registry import ComponentRegistries

from .errors import ComponentNotFoundError, ProviderInvocationError


class ComponentQueryService:
    """Query one registered component directly, without aggregation."""

    def __init__(self, registries: ComponentRegistries):
        """Initialize query service.

        Args:
            registries: Shared status and readiness registries.

        Raises:
            ValueError: Raised when registries is None.
        """

        if registries is None:
            raise ValueError("registries must not be None")
        self._registries = registries

    def query_status(self, name: str) -> StatusReport | None:
        """Return the current status report of one component.

        Args:
            name: Component registration key.

        Returns:
            StatusReport | None: Provider report, None when unavailable.

        Raises:
            ComponentNotFoundError: Raised when no status provider is registered.
            ProviderInvocationError: Raised when the provider fails.
        """

        provider = self._registries.status_registry.registry_lookup(name)
        if provider is None:
            raise ComponentNotFoundError(f"no such plugin: {name}", component_name=name)
        try:
            return provider.status(None)
        except Exception as error:
            raise ProviderInvocationError(
                f"status check for component {name} failed: {error}",
                component_name=name,
            ) from error

    def query_ready(self, name: str) -> StatusReport | None:
        """Return the current readiness report of one component.

        Args:
            name: Component registration key.

        Returns:
            StatusReport | None: Provider report, None when unavailable.

        Raises:
            ComponentNotFoundError: Raised when no readiness provider is registered.
            ProviderInvocationError: Raised when the provider fails.
        """

        provider = self._registries.ready_registry.registry_lookup(name)
        if provider is None:
            raise ComponentNotFoundError(f"no such plugin: {name}", component_name=name)
        try:
            return provider.ready()
        except Exception as error:
            raise ProviderInvocationError(
                f"ready check for component {name} failed: {error}",
                component_name=name,
            ) from error
