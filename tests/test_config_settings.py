"""Tests for runtime settings validation and listen address parsing."""

from __future__ import annotations

import pytest

from status_service.config import (
    AppSettings,
    SettingsLoadError,
    StatusServiceDisabledError,
    config_load_settings,
    config_parse_listen_address,
    config_require_enabled,
)


def test_config_defaults_match_service_contract() -> None:
    """Load defaults with a 503 unavailable code and local bind address."""

    settings = config_load_settings()

    assert settings.status_enabled is True
    assert settings.status_unavailable_status_code == 503
    assert settings.status_address == "127.0.0.1:2114"
    assert settings.status_remote_targets == {}
    assert settings.database_url is None


def test_config_reads_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    """Read settings from uppercase environment variables."""

    monkeypatch.setenv("STATUS_ADDRESS", "0.0.0.0:8081")
    monkeypatch.setenv("STATUS_UNAVAILABLE_STATUS_CODE", "500")
    monkeypatch.setenv("STATUS_REMOTE_TARGETS", '{"billing": "http://billing:8080/health"}')
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = config_load_settings()

    assert settings.status_address == "0.0.0.0:8081"
    assert settings.status_unavailable_status_code == 500
    assert settings.status_remote_targets == {"billing": "http://billing:8080/health"}
    assert settings.log_level == "DEBUG"


def test_config_invalid_unavailable_code_raises_settings_error(monkeypatch: pytest.MonkeyPatch) -> None:
    """Raise SettingsLoadError for unavailable codes outside 5xx."""

    monkeypatch.setenv("STATUS_UNAVAILABLE_STATUS_CODE", "200")

    with pytest.raises(SettingsLoadError, match="Startup configuration validation failed"):
        config_load_settings()


def test_config_invalid_address_raises_settings_error(monkeypatch: pytest.MonkeyPatch) -> None:
    """Raise SettingsLoadError for bind addresses without a port."""

    monkeypatch.setenv("STATUS_ADDRESS", "localhost")

    with pytest.raises(SettingsLoadError):
        config_load_settings()


def test_config_remote_target_requires_http_url() -> None:
    """Reject remote targets that are not http(s) URLs."""

    with pytest.raises(ValueError, match="http"):
        AppSettings(status_remote_targets={"billing": "billing:8080"})


@pytest.mark.parametrize(
    ("address", "expected"),
    [
        ("127.0.0.1:2114", ("127.0.0.1", 2114)),
        (":2114", ("0.0.0.0", 2114)),
        ("[::1]:9000", ("::1", 9000)),
    ],
)
def test_config_parse_listen_address(address: str, expected: tuple[str, int]) -> None:
    """Split host and port, defaulting the host to all interfaces."""

    assert config_parse_listen_address(address) == expected


def test_config_parse_listen_address_rejects_bad_port() -> None:
    """Reject ports outside the TCP range."""

    with pytest.raises(ValueError, match="port"):
        config_parse_listen_address("127.0.0.1:70000")


def test_config_require_enabled_signals_disabled_service() -> None:
    """Raise the disabled signal when the service is switched off."""

    with pytest.raises(StatusServiceDisabledError):
        config_require_enabled(AppSettings(status_enabled=False))


def test_config_listener_timeouts_are_whole_seconds(monkeypatch: pytest.MonkeyPatch) -> None:
    """Load listener timeouts as whole seconds and reject sub-second values."""

    monkeypatch.setenv("STATUS_KEEP_ALIVE_TIMEOUT_SECONDS", "2")
    monkeypatch.setenv("STATUS_SHUTDOWN_TIMEOUT_SECONDS", "9")

    settings = config_load_settings()

    assert settings.status_keep_alive_timeout_seconds == 2
    assert settings.status_shutdown_timeout_seconds == 9

    monkeypatch.setenv("STATUS_KEEP_ALIVE_TIMEOUT_SECONDS", "0.5")

    with pytest.raises(SettingsLoadError):
        config_load_settings()
