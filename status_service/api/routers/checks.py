"""Check endpoint router composition for aggregated health and readiness checks."""

from __future__ import annotations

from fastapi import APIRouter, Query, Request, status
from fastapi.responses import PlainTextResponse

from status_service.aggregation import AggregationEngine
from status_service.domain import AggregateResult
from status_service.registry import ComponentRegistries

USAGE_HINT_TEMPLATE = (
    "No plugins provided in query. Query should be in form of: {route}?plugin=plugin1&plugin=plugin2 \n"
)


def api_create_check_router(registries: ComponentRegistries, engine: AggregationEngine) -> APIRouter:
    """Create router exposing `/health` and `/ready` aggregation endpoints.

    Args:
        registries: Shared status and readiness registries.
        engine: Aggregation engine configured with the unavailable code.

    Returns:
        APIRouter: Router exposing check endpoints.

    Raises:
        ValueError: Raised when dependencies are invalid.
    """

    if registries is None:
        raise ValueError("registries must not be None")
    if engine is None:
        raise ValueError("engine must not be None")

    router = APIRouter(tags=["checks"])

    @router.get("/health", response_class=PlainTextResponse)
    def api_check_health(request: Request, plugin: list[str] = Query(default=[])) -> PlainTextResponse:
        """Aggregate status of the requested components.

        Args:
            request: Triggering request forwarded to status providers.
            plugin: Requested component names, repeated keys kept in order.

        Returns:
            PlainTextResponse: One line per processed component.

        Raises:
            ProviderInvocationError: Raised when a status provider fails.
        """

        if not plugin:
            return _api_check_usage_response("health")
        result = engine.aggregation_evaluate_status(plugin, registries.status_registry, request)
        return _api_check_render(result)

    @router.get("/ready", response_class=PlainTextResponse)
    def api_check_ready(plugin: list[str] = Query(default=[])) -> PlainTextResponse:
        """Aggregate readiness of the requested components.

        Args:
            plugin: Requested component names, repeated keys kept in order.

        Returns:
            PlainTextResponse: One line per processed component.

        Raises:
            ProviderInvocationError: Raised when a readiness provider fails.
        """

        if not plugin:
            return _api_check_usage_response("ready")
        result = engine.aggregation_evaluate_readiness(plugin, registries.ready_registry)
        return _api_check_render(result)

    return router


def _api_check_usage_response(route: str) -> PlainTextResponse:
    return PlainTextResponse(
        content=USAGE_HINT_TEMPLATE.format(route=route),
        status_code=status.HTTP_400_BAD_REQUEST,
    )


def _api_check_render(result: AggregateResult) -> PlainTextResponse:
    return PlainTextResponse(content=result.result_render_body(), status_code=result.overall_code)
