"""Component status service: registry, aggregation, and HTTP check endpoints."""
