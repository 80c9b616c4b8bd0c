"""Side-channel router for querying one component without aggregation."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from status_service.aggregation import ComponentNotFoundError, ComponentQueryService
from status_service.domain import StatusReport


def api_create_rpc_router(query_service: ComponentQueryService) -> APIRouter:
    """Create router exposing single-component status and readiness lookups.

    Args:
        query_service: Side-channel query service.

    Returns:
        APIRouter: Router exposing `/rpc/status/{name}` and `/rpc/ready/{name}`; names may contain `/`.

    Raises:
        ValueError: Raised when query_service is invalid.
    """

    if query_service is None:
        raise ValueError("query_service must not be None")

    router = APIRouter(prefix="/rpc", tags=["rpc"])

    @router.get("/status/{name:path}")
    def api_rpc_status(name: str) -> JSONResponse:
        """Return the status report of one component.

        Args:
            name: Component registration key.

        Returns:
            JSONResponse: Report payload, or 404 error envelope for unknown names.

        Raises:
            ProviderInvocationError: Raised when the provider fails.
        """

        try:
            report = query_service.query_status(name)
        except ComponentNotFoundError as error:
            return _api_rpc_not_found(error)
        return JSONResponse(content=_api_rpc_payload(name, report), status_code=status.HTTP_200_OK)

    @router.get("/ready/{name:path}")
    def api_rpc_ready(name: str) -> JSONResponse:
        """Return the readiness report of one component.

        Args:
            name: Component registration key.

        Returns:
            JSONResponse: Report payload, or 404 error envelope for unknown names.

        Raises:
            ProviderInvocationError: Raised when the provider fails.
        """

        try:
            report = query_service.query_ready(name)
        except ComponentNotFoundError as error:
            return _api_rpc_not_found(error)
        return JSONResponse(content=_api_rpc_payload(name, report), status_code=status.HTTP_200_OK)

    return router


def _api_rpc_payload(name: str, report: StatusReport | None) -> dict[str, Any]:
    if report is None:
        return {"name": name, "available": False, "code": None, "metadata": {}}
    return {
        "name": name,
        "available": report.code < 500,
        "code": report.code,
        "metadata": jsonable_encoder(dict(report.metadata)),
    }


def _api_rpc_not_found(error: ComponentNotFoundError) -> JSONResponse:
    payload = {
        "status": "error",
        "code": "COMPONENT_NOT_FOUND",
        "message": str(error),
    }
    return JSONResponse(content=payload, status_code=status.HTTP_404_NOT_FOUND)
