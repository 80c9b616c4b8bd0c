"""Typed runtime settings with dotenv support and startup validation."""

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class StatusServiceDisabledError(SettingsLoadError):
    """Raised when the status service is switched off by configuration."""


class AppSettings(BaseSettings):
    """Application settings for the status service runtime.

    Environment variable names map directly to field names in uppercase.
    Example: `status_address` reads from `STATUS_ADDRESS`.

    Attributes:
        environment_name: Runtime environment label.
        status_enabled: Whether the status service should start at all.
        status_address: `host:port` bind address of the status listener.
        status_unavailable_status_code: HTTP code returned when a check short-circuits.
        status_keep_alive_timeout_seconds: Idle connection timeout of the listener, whole seconds.
        status_shutdown_timeout_seconds: Graceful shutdown deadline of the listener, whole seconds.
        status_remote_targets: Remote components checked over HTTP, keyed by name.
        status_remote_timeout_seconds: Request timeout for each remote check.
        database_url: Optional SQLAlchemy URL registered as the `database` component.
        log_level: Standard logging level name.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    environment_name: str = Field(default="development")
    status_enabled: bool = Field(default=True)
    status_address: str = Field(default="127.0.0.1:2114")
    status_unavailable_status_code: int = Field(default=503, ge=500, le=599)
    status_keep_alive_timeout_seconds: int = Field(default=5, ge=1)
    status_shutdown_timeout_seconds: int = Field(default=5, ge=1)
    status_remote_targets: dict[str, str] = Field(default_factory=dict)
    status_remote_timeout_seconds: float = Field(default=2.0, gt=0)
    database_url: str | None = Field(default=None)
    log_level: str = Field(default="INFO")

    @field_validator("status_address")
    @classmethod
    def _validate_status_address(cls, value: str) -> str:
        stripped_value = value.strip()
        config_parse_listen_address(stripped_value)
        return stripped_value

    @field_validator("status_remote_targets")
    @classmethod
    def _validate_remote_targets(cls, value: dict[str, str]) -> dict[str, str]:
        normalized_targets: dict[str, str] = {}
        for name, url in value.items():
            if not name.strip():
                raise ValueError("remote target name must not be blank")
            if not url.strip().startswith(("http://", "https://")):
                raise ValueError(f"remote target {name} must use an http(s) URL")
            normalized_targets[name.strip()] = url.strip()
        return normalized_targets

    @field_validator("database_url")
    @classmethod
    def _validate_database_url(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        return value.strip()

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized_value = value.strip().upper()
        if normalized_value not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"unsupported log level: {value}")
        return normalized_value


def config_parse_listen_address(address: str) -> tuple[str, int]:
    """Split a `host:port` bind address.

    Args:
        address: Address such as `127.0.0.1:2114` or `:2114`.

    Returns:
        tuple[str, int]: Host (defaults to `0.0.0.0` when omitted) and port.

    Raises:
        ValueError: Raised when the address has no valid port.
    """

    host, separator, port_text = address.strip().rpartition(":")
    if not separator or not port_text.isdigit():
        raise ValueError(f"address must be in host:port form, got {address!r}")
    port = int(port_text)
    if not 1 <= port <= 65535:
        raise ValueError(f"port must be within 1-65535, got {port}")
    return (host.strip("[]") or "0.0.0.0", port)


def config_load_settings() -> AppSettings:
    """Load and validate runtime settings from environment and dotenv.

    Returns:
        AppSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when required settings are missing or invalid.
    """

    try:
        return AppSettings()
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error


def config_require_enabled(settings: AppSettings) -> AppSettings:
    """Reject settings that switch the status service off.

    Args:
        settings: Validated runtime settings.

    Returns:
        AppSettings: The same settings when the service is enabled.

    Raises:
        StatusServiceDisabledError: Raised when `status_enabled` is false.
    """

    if not settings.status_enabled:
        raise StatusServiceDisabledError("Status service is disabled by configuration (STATUS_ENABLED=false).")
    return settings
