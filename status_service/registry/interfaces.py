"""Typed capability contracts implemented by status-reporting components."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from fastapi import Request

from status_service.domain import StatusReport


@runtime_checkable
class StatusProviderPort(Protocol):
    """Capability for components that report their general health."""

    def name(self) -> str:
        """Return the registration key of the component.

        Returns:
            str: Unique component name.
        """

    def status(self, request: Request | None) -> StatusReport | None:
        """Report the current component health.

        Args:
            request: Triggering HTTP request, or None for side-channel queries.
                Providers may consult it to observe client disconnects.

        Returns:
            StatusReport | None: Fresh status report, or None when the
                component is present but currently unavailable.

        Raises:
            Exception: Any provider failure aborts the enclosing aggregation.
        """


@runtime_checkable
class ReadinessProviderPort(Protocol):
    """Capability for components whose worker or resource pool can accept work."""

    def name(self) -> str:
        """Return the registration key of the component.

        Returns:
            str: Unique component name.
        """

    def ready(self) -> StatusReport | None:
        """Report whether the component is ready to accept new work.

        Returns:
            StatusReport | None: Fresh readiness report, or None when the
                component is present but currently unavailable.

        Raises:
            Exception: Any provider failure aborts the enclosing aggregation.
        """
