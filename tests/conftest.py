"""Pytest fixtures shared by the status service tests."""

from pathlib import Path

import pytest

from status_service.config import AppSettings


@pytest.fixture(autouse=True)
def isolated_settings_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Run each test from an empty directory without settings variables.

    Args:
        monkeypatch: Pytest monkeypatch fixture.
        tmp_path: Pytest temporary directory fixture.

    Returns:
        None: Environment is isolated as a side effect.
    """

    monkeypatch.chdir(tmp_path)
    for field_name in AppSettings.model_fields:
        monkeypatch.delenv(field_name.upper(), raising=False)
