"""Project-native typed exceptions for aggregation and side-channel queries."""

from __future__ import annotations


class AggregationError(Exception):
    """Base exception for aggregation-level failures.

    Attributes:
        component_name: Component involved in the failure.
    """

    def __init__(self, message: str, component_name: str):
        super().__init__(message)
        self.component_name = component_name


class ProviderInvocationError(AggregationError, RuntimeError):
    """Provider raised while reporting status or readiness."""


class ComponentNotFoundError(AggregationError, LookupError):
    """Single-component query named an unregistered component."""
