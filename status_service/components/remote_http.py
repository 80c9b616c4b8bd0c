"""Remote component checked over HTTP, relaying the upstream status code."""

from __future__ import annotations

import logging

import httpx
from fastapi import Request

from status_service.domain import StatusReport

logger = logging.getLogger(__name__)


class RemoteHttpComponent:
    """Component whose health is the HTTP status of a remote endpoint.

    Transport failures (connection refused, timeouts) are reported as an
    absent report, which aggregation treats as unavailable.
    """

    def __init__(
        self,
        component_name: str,
        url: str,
        timeout_seconds: float = 2.0,
        client: httpx.Client | None = None,
    ):
        """Initialize remote HTTP component.

        Args:
            component_name: Registration key of the component.
            url: Absolute URL checked with GET.
            timeout_seconds: Per-check request timeout.
            client: Optional preconfigured HTTP client.

        Raises:
            ValueError: Raised when the name or URL is blank or timeout is not positive.
        """

        if not component_name.strip():
            raise ValueError("component_name must not be blank")
        if not url.strip():
            raise ValueError("url must not be blank")
        if timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be > 0")
        self._component_name = component_name.strip()
        self._url = url.strip()
        self._client = client or httpx.Client(timeout=timeout_seconds)

    def name(self) -> str:
        """Return the registration key of the component.

        Returns:
            str: Component name configured for the remote target.
        """

        return self._component_name

    def status(self, request: Request | None) -> StatusReport | None:
        """Report the HTTP status of the remote endpoint.

        Args:
            request: Triggering HTTP request; unused by this component.

        Returns:
            StatusReport | None: Upstream status code, or None when the
                endpoint cannot be reached.

        Raises:
            httpx.HTTPError: Raised for client errors other than transport failures.
        """

        _ = request
        return self._remote_check()

    def ready(self) -> StatusReport | None:
        """Report whether the remote endpoint answers right now.

        Returns:
            StatusReport | None: Upstream status code, or None when the
                endpoint cannot be reached.

        Raises:
            httpx.HTTPError: Raised for client errors other than transport failures.
        """

        return self._remote_check()

    def close(self) -> None:
        """Release pooled connections of the underlying HTTP client."""

        self._client.close()

    def _remote_check(self) -> StatusReport | None:
        try:
            response = self._client.get(self._url)
        except httpx.TransportError as error:
            logger.warning("remote check %s (%s) failed: %s", self._component_name, self._url, error)
            return None
        return StatusReport(code=response.status_code, metadata={"url": self._url})
