"""FastAPI application factory for the status service.

This module composes check and side-channel routers around one shared set of
component registries.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse

from status_service.aggregation import AggregationEngine, ComponentQueryService, ProviderInvocationError
from status_service.config import AppSettings
from status_service.registry import ComponentRegistries

from .routers import api_create_check_router, api_create_rpc_router

logger = logging.getLogger(__name__)


def create_api_application(settings: AppSettings, registries: ComponentRegistries) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated application settings used for runtime metadata.
        registries: Status and readiness registries shared by all handlers.

    Returns:
        FastAPI: Framework application instance with check routes.

    Raises:
        ValueError: Raised when dependencies are invalid.
    """

    if settings is None:
        raise ValueError("settings must not be None")
    if registries is None:
        raise ValueError("registries must not be None")

    @asynccontextmanager
    async def api_lifespan(_application: FastAPI) -> AsyncIterator[None]:
        """Release component resources once the server stops serving."""

        yield
        registries.registries_close_components()

    application = FastAPI(title="Component Status Service", lifespan=api_lifespan)
    engine = AggregationEngine(unavailable_status_code=settings.status_unavailable_status_code)

    @application.get("/", tags=["foundation"])
    def foundation_index() -> dict[str, Any]:
        """Return service identity and the registered component names.

        Returns:
            dict[str, Any]: Minimal response for bootstrap verification.
        """

        return {
            "service": "component-status-service",
            "environment": settings.environment_name,
            "status_components": list(registries.status_registry.registry_names()),
            "ready_components": list(registries.ready_registry.registry_names()),
        }

    @application.exception_handler(ProviderInvocationError)
    def api_handle_provider_invocation_error(_request: Request, error: ProviderInvocationError) -> PlainTextResponse:
        """Map provider failures to a generic 500 response without a partial report.

        Args:
            _request: Request whose aggregation failed.
            error: Provider failure raised by the aggregation layer.

        Returns:
            PlainTextResponse: 500 response carrying the failure message.
        """

        logger.error("request aborted by component %r", error.component_name, exc_info=error)
        return PlainTextResponse(content=str(error), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    application.include_router(api_create_check_router(registries=registries, engine=engine))
    application.include_router(api_create_rpc_router(query_service=ComponentQueryService(registries)))

    return application
