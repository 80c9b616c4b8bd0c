"""Main module entrypoint for local runtime execution.

This module validates startup configuration and launches the FastAPI service,
or queries one component of a running service through the side channel.
"""

import argparse
import json
import logging
from urllib.parse import quote

import httpx
import uvicorn

from status_service.bootstrap import bootstrap_create_application
from status_service.config import (
    StatusServiceDisabledError,
    config_configure_logging,
    config_load_settings,
    config_parse_listen_address,
)

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    """Run selected runtime command with validated startup configuration.

    Args:
        argv: Optional argument list; defaults to process arguments.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
        SystemExit: Raised with code 1 when a queried component is unavailable.
    """

    argument_parser = argparse.ArgumentParser(description="Component status service runtime entrypoint")
    argument_parser.add_argument(
        "command",
        nargs="?",
        default="api",
        choices=("api", "status", "ready"),
        help="Runtime command: `api` starts server, `status`/`ready` query one component of a running server",
        type=str,
    )
    argument_parser.add_argument("name", nargs="?", type=str, help="Component name for `status` and `ready`")
    argument_parser.add_argument(
        "--base-url",
        dest="base_url",
        type=str,
        help="Base URL of a running server; defaults to STATUS_ADDRESS",
    )
    parsed_arguments = argument_parser.parse_args(argv)

    settings = config_load_settings()
    config_configure_logging(settings.log_level)

    if parsed_arguments.command in ("status", "ready"):
        if not parsed_arguments.name:
            argument_parser.error(f"`{parsed_arguments.command}` requires a component name")
        host, port = config_parse_listen_address(settings.status_address)
        base_url = parsed_arguments.base_url or f"http://{_main_client_host(host)}:{port}"
        payload = main_query_component(base_url, parsed_arguments.command, parsed_arguments.name)
        print(json.dumps(payload, indent=2, sort_keys=True))
        if not payload.get("available", False):
            raise SystemExit(1)
        return

    try:
        application = bootstrap_create_application(settings=settings)
    except StatusServiceDisabledError as error:
        logger.warning("%s", error)
        return

    host, port = config_parse_listen_address(settings.status_address)
    uvicorn.run(
        application,
        host=host,
        port=port,
        timeout_keep_alive=settings.status_keep_alive_timeout_seconds,
        timeout_graceful_shutdown=settings.status_shutdown_timeout_seconds,
        log_config=None,
    )


def main_query_component(
    base_url: str,
    capability: str,
    name: str,
    client: httpx.Client | None = None,
) -> dict[str, object]:
    """Query one component through the side-channel endpoints of a running server.

    Args:
        base_url: Server base URL.
        capability: `status` or `ready`.
        name: Component name.
        client: Optional HTTP client; a short-lived one is created when omitted.

    Returns:
        dict[str, object]: Decoded report payload, with `available` false for
            unknown components and failed queries.

    Raises:
        ValueError: Raised when capability is unsupported.
        httpx.TransportError: Raised when the server cannot be reached.
    """

    if capability not in ("status", "ready"):
        raise ValueError(f"unsupported capability: {capability}")

    url = f"{base_url.rstrip('/')}/rpc/{capability}/{quote(name, safe='')}"
    if client is None:
        with httpx.Client(timeout=10.0) as owned_client:
            response = owned_client.get(url)
    else:
        response = client.get(url)

    if response.status_code == 200:
        return response.json()
    if response.status_code == 404:
        payload = response.json()
        return {"name": name, "available": False, "code": None, "error": payload.get("message")}
    return {"name": name, "available": False, "code": None, "error": response.text}


def _main_client_host(host: str) -> str:
    if host in ("0.0.0.0", "::", ""):
        return "127.0.0.1"
    if ":" in host:
        return f"[{host}]"
    return host


if __name__ == "__main__":
    main()
