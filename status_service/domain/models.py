"""Typed domain models shared across runtime layers.

This module provides the data contracts exchanged between component providers,
the aggregation engine, and the HTTP surfaces.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping


@dataclass(frozen=True)
class StatusReport:
    """Status payload produced by a component on every query.

    Attributes:
        code: HTTP-like status code in the 100-599 range.
        metadata: Opaque provider-specific details.
    """

    code: int
    metadata: Mapping[str, Any] = field(default_factory=dict)


class AggregationOutcome(str, Enum):
    """Overall decision of one aggregation run."""

    OK = "ok"
    BAD_REQUEST = "bad_request"
    UNAVAILABLE = "unavailable"


@dataclass(frozen=True)
class ComponentOutcome:
    """Per-component line of an aggregation report.

    Attributes:
        name: Requested component name.
        found: Whether the name resolved to a registered provider.
        code: Reported status code, or None when the component was not found.
    """

    name: str
    found: bool
    code: int | None

    def outcome_render_line(self) -> str:
        """Render the text report line for this component.

        Returns:
            str: `Service: <name>: Status: <code>` line for found components,
                `Service: <name> not found` otherwise.
        """

        if not self.found:
            return f"Service: {self.name} not found"
        return f"Service: {self.name}: Status: {self.code}\n"


@dataclass(frozen=True)
class AggregateResult:
    """Folded result of querying an ordered list of components.

    Attributes:
        components: Report lines for every processed name, in request order.
        outcome: Overall decision derived from the components.
        overall_code: HTTP status code that corresponds to the outcome.
        unavailable_component: Name that triggered the short-circuit, if any.
    """

    components: tuple[ComponentOutcome, ...]
    outcome: AggregationOutcome
    overall_code: int
    unavailable_component: str | None = None

    def result_render_body(self) -> str:
        """Concatenate report lines into the plain-text response body.

        Returns:
            str: Response body text.
        """

        return "".join(component.outcome_render_line() for component in self.components)
