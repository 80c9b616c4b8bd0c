"""Configuration package for runtime settings and startup validation."""

from .logging_setup import config_configure_logging
from .settings import (
    AppSettings,
    SettingsLoadError,
    StatusServiceDisabledError,
    config_load_settings,
    config_parse_listen_address,
    config_require_enabled,
)

__all__ = [
    "AppSettings",
    "SettingsLoadError",
    "StatusServiceDisabledError",
    "config_configure_logging",
    "config_load_settings",
    "config_parse_listen_address",
    "config_require_enabled",
]
