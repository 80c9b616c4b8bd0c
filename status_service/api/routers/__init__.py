"""API router package for endpoint composition."""

from .checks import api_create_check_router
from .rpc import api_create_rpc_router

__all__ = ["api_create_check_router", "api_create_rpc_router"]
