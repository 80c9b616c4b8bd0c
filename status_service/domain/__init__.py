"""Domain models used across service layer boundaries."""

from .models import AggregateResult, AggregationOutcome, ComponentOutcome, StatusReport

__all__ = ["AggregateResult", "AggregationOutcome", "ComponentOutcome", "StatusReport"]
