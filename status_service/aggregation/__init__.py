"""Aggregation package for check evaluation and single-component queries."""

from .engine import AggregationEngine
from .errors import AggregationError, ComponentNotFoundError, ProviderInvocationError
from .query_service import ComponentQueryService

__all__ = [
    "AggregationEngine",
    "AggregationError",
    "ComponentNotFoundError",
    "ComponentQueryService",
    "ProviderInvocationError",
]
