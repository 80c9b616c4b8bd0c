"""Component registry package for provider contracts and name lookup."""

from .interfaces import ReadinessProviderPort, StatusProviderPort
from .registry import ComponentRegistries, ComponentRegistry

__all__ = ["ComponentRegistries", "ComponentRegistry", "ReadinessProviderPort", "StatusProviderPort"]
