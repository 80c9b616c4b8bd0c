"""Aggregation engine folding per-component reports into one check decision.

Evaluation is sequential and ordered. The first unavailable component (a
missing report or a code of 500 or above) stops evaluation, so components
later in the request are never queried once failure is certain.
"""

from __future__ import annotations

import logging
from typing import Callable, Sequence, TypeVar

from fastapi import Request, status

from status_service.domain import AggregateResult, AggregationOutcome, ComponentOutcome, StatusReport
from status_service.registry import ComponentRegistry, ReadinessProviderPort, StatusProviderPort

from .errors import ProviderInvocationError

logger = logging.getLogger(__name__)

ProviderT = TypeVar("ProviderT")

UNAVAILABLE_CODE_THRESHOLD = 500


class AggregationEngine:
    """Resolve requested components, query them, and fold the outcomes."""

    def __init__(self, unavailable_status_code: int = status.HTTP_503_SERVICE_UNAVAILABLE):
        """Initialize aggregation engine.

        Args:
            unavailable_status_code: Overall code reported on short-circuit.

        Raises:
            ValueError: Raised when the code is outside the 100-599 range.
        """

        if not 100 <= unavailable_status_code <= 599:
            raise ValueError("unavailable_status_code must be within 100-599")
        self._unavailable_status_code = unavailable_status_code

    @property
    def unavailable_status_code(self) -> int:
        """Return the overall code used for unavailable outcomes."""

        return self._unavailable_status_code

    def aggregation_evaluate_status(
        self,
        requested_names: Sequence[str],
        registry: ComponentRegistry[StatusProviderPort],
        request: Request | None = None,
    ) -> AggregateResult:
        """Aggregate health reports for the requested components.

        Args:
            requested_names: Component names in caller order, duplicates kept.
            registry: Status provider registry.
            request: Triggering HTTP request forwarded to providers.

        Returns:
            AggregateResult: Folded per-component report and overall decision.

        Raises:
            ProviderInvocationError: Raised when a provider fails.
        """

        return self._aggregation_fold(
            requested_names,
            registry,
            lambda provider: provider.status(request),
        )

    def aggregation_evaluate_readiness(
        self,
        requested_names: Sequence[str],
        registry: ComponentRegistry[ReadinessProviderPort],
    ) -> AggregateResult:
        """Aggregate readiness reports for the requested components.

        Args:
            requested_names: Component names in caller order, duplicates kept.
            registry: Readiness provider registry.

        Returns:
            AggregateResult: Folded per-component report and overall decision.

        Raises:
            ProviderInvocationError: Raised when a provider fails.
        """

        return self._aggregation_fold(
            requested_names,
            registry,
            lambda provider: provider.ready(),
        )

    def _aggregation_fold(
        self,
        requested_names: Sequence[str],
        registry: ComponentRegistry[ProviderT],
        invoke: Callable[[ProviderT], StatusReport | None],
    ) -> AggregateResult:
        if not requested_names:
            return AggregateResult(
                components=(),
                outcome=AggregationOutcome.BAD_REQUEST,
                overall_code=status.HTTP_400_BAD_REQUEST,
            )

        components: list[ComponentOutcome] = []
        for name in requested_names:
            provider = registry.registry_lookup(name)
            if provider is None:
                components.append(ComponentOutcome(name=name, found=False, code=None))
                continue

            try:
                report = invoke(provider)
            except Exception as error:
                logger.error("%s provider for component %r failed: %s", registry.capability, name, error)
                raise ProviderInvocationError(
                    f"{registry.capability} check for component {name} failed: {error}",
                    component_name=name,
                ) from error

            if report is None or report.code >= UNAVAILABLE_CODE_THRESHOLD:
                reported_code = None if report is None else report.code
                logger.warning(
                    "%s check short-circuited by component %r (code=%s)",
                    registry.capability,
                    name,
                    reported_code,
                )
                return AggregateResult(
                    components=tuple(components),
                    outcome=AggregationOutcome.UNAVAILABLE,
                    overall_code=self._unavailable_status_code,
                    unavailable_component=name,
                )

            components.append(ComponentOutcome(name=name, found=True, code=report.code))

        return AggregateResult(
            components=tuple(components),
            outcome=AggregationOutcome.OK,
            overall_code=status.HTTP_200_OK,
        )
