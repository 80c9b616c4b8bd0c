"""Application bootstrap wiring for startup validation and component registration."""

import logging

from fastapi import FastAPI

from status_service.api import create_api_application
from status_service.components import DatabaseComponent, RemoteHttpComponent, db_create_engine
from status_service.config import AppSettings, config_load_settings, config_require_enabled
from status_service.registry import ComponentRegistries

logger = logging.getLogger(__name__)


def bootstrap_create_registries(settings: AppSettings) -> ComponentRegistries:
    """Build registries and register every configured built-in component.

    Args:
        settings: Validated runtime settings.

    Returns:
        ComponentRegistries: Registries populated before serving begins.

    Raises:
        ValueError: Raised when a configured component is invalid.
    """

    registries = ComponentRegistries()
    if settings.database_url is not None:
        database_component = DatabaseComponent(engine=db_create_engine(database_url=settings.database_url))
        registries.registries_register_component(database_component)
    for target_name, target_url in settings.status_remote_targets.items():
        registries.registries_register_component(
            RemoteHttpComponent(
                component_name=target_name,
                url=target_url,
                timeout_seconds=settings.status_remote_timeout_seconds,
            )
        )

    logger.info(
        "registered %d status and %d readiness components",
        len(registries.status_registry),
        len(registries.ready_registry),
    )
    return registries


def bootstrap_create_application(
    settings: AppSettings | None = None,
    registries: ComponentRegistries | None = None,
) -> FastAPI:
    """Assemble the runtime application after validating startup configuration.

    Args:
        settings: Optional preloaded settings; loaded from the environment when omitted.
        registries: Optional prebuilt registries, for hosts that register their
            own components before serving.

    Returns:
        FastAPI: Fully initialized FastAPI application instance.

    Raises:
        SettingsLoadError: Raised when startup configuration validation fails.
        StatusServiceDisabledError: Raised when the service is disabled.
    """

    resolved_settings = config_require_enabled(settings or config_load_settings())
    resolved_registries = registries or bootstrap_create_registries(resolved_settings)
    return create_api_application(settings=resolved_settings, registries=resolved_registries)
