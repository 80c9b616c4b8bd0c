"""Tests for the side-channel CLI client and bootstrap wiring."""

from __future__ import annotations

import httpx
import pytest
from fastapi.testclient import TestClient

from status_service.bootstrap import bootstrap_create_application, bootstrap_create_registries
from status_service.config import AppSettings, StatusServiceDisabledError
import status_service.main as main_module
from status_service.main import main, main_query_component


def _build_client(handler) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


def test_main_query_component_returns_report_payload() -> None:
    """Return the decoded report for a registered component."""

    seen_paths: list[str] = []

    def _handler(request: httpx.Request) -> httpx.Response:
        seen_paths.append(request.url.path)
        return httpx.Response(200, json={"name": "kv", "available": True, "code": 200, "metadata": {}})

    payload = main_query_component("http://127.0.0.1:2114/", "ready", "kv", client=_build_client(_handler))

    assert payload["available"] is True
    assert seen_paths == ["/rpc/ready/kv"]


def test_main_query_component_maps_not_found_to_unavailable() -> None:
    """Mark unknown components unavailable with the server message."""

    def _handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            404,
            json={"status": "error", "code": "COMPONENT_NOT_FOUND", "message": "no such plugin: kv"},
        )

    payload = main_query_component("http://127.0.0.1:2114", "status", "kv", client=_build_client(_handler))

    assert payload == {"name": "kv", "available": False, "code": None, "error": "no such plugin: kv"}


def test_main_query_component_rejects_unknown_capability() -> None:
    """Reject capabilities other than status and ready."""

    with pytest.raises(ValueError, match="capability"):
        main_query_component("http://127.0.0.1:2114", "metrics", "kv", client=_build_client(lambda _r: None))


def test_bootstrap_registers_configured_components() -> None:
    """Register database and remote components from settings."""

    settings = AppSettings(
        database_url="sqlite://",
        status_remote_targets={"billing": "http://billing:8080/health"},
    )

    registries = bootstrap_create_registries(settings)

    assert registries.status_registry.registry_names() == ("database", "billing")
    assert registries.ready_registry.registry_names() == ("database", "billing")


def test_bootstrap_application_serves_database_component() -> None:
    """Serve the database component through the health endpoint."""

    application = bootstrap_create_application(settings=AppSettings(database_url="sqlite://"))
    client = TestClient(application)

    response = client.get("/health?plugin=database")

    assert response.status_code == 200
    assert response.text == "Service: database: Status: 200\n"


def test_bootstrap_disabled_service_raises_disabled_signal() -> None:
    """Refuse to build the application when the service is disabled."""

    with pytest.raises(StatusServiceDisabledError):
        bootstrap_create_application(settings=AppSettings(status_enabled=False))


def test_main_query_component_encodes_names_with_slash() -> None:
    """Percent-encode the component name as one path segment."""

    seen_raw_paths: list[bytes] = []

    def _handler(request: httpx.Request) -> httpx.Response:
        seen_raw_paths.append(request.url.raw_path)
        return httpx.Response(200, json={"name": "queue/jobs", "available": True, "code": 200, "metadata": {}})

    payload = main_query_component("http://127.0.0.1:2114", "status", "queue/jobs", client=_build_client(_handler))

    assert payload["name"] == "queue/jobs"
    assert seen_raw_paths == [b"/rpc/status/queue%2Fjobs"]


def test_main_api_passes_listener_settings_to_uvicorn(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start uvicorn with the configured bind address and unchanged timeouts.

    Args:
        monkeypatch: Pytest monkeypatch fixture.

    Returns:
        None: Assertions validate server launch arguments.
    """

    captured_runs: list[dict[str, object]] = []

    def _capture_run(application: object, **kwargs: object) -> None:
        captured_runs.append({"application": application, **kwargs})

    monkeypatch.setattr(main_module.uvicorn, "run", _capture_run)
    monkeypatch.setenv("STATUS_ADDRESS", "0.0.0.0:8181")
    monkeypatch.setenv("STATUS_KEEP_ALIVE_TIMEOUT_SECONDS", "2")
    monkeypatch.setenv("STATUS_SHUTDOWN_TIMEOUT_SECONDS", "11")

    main(["api"])

    assert len(captured_runs) == 1
    launch = captured_runs[0]
    assert launch["host"] == "0.0.0.0"
    assert launch["port"] == 8181
    assert launch["timeout_keep_alive"] == 2
    assert launch["timeout_graceful_shutdown"] == 11
    assert launch["log_config"] is None


def test_main_api_disabled_service_does_not_start_listener(monkeypatch: pytest.MonkeyPatch) -> None:
    """Return without starting uvicorn when the service is disabled.

    Args:
        monkeypatch: Pytest monkeypatch fixture.

    Returns:
        None: Assertions validate that no server is launched.
    """

    captured_runs: list[object] = []
    monkeypatch.setattr(main_module.uvicorn, "run", lambda application, **_kwargs: captured_runs.append(application))
    monkeypatch.setenv("STATUS_ENABLED", "false")

    main(["api"])

    assert captured_runs == []
