"""Unit tests for application settings."""

import logging

import pytest
from pydantic import ValidationError

from src.settings import AppSettings, get_settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("DRIVE_FILES_PATH", "LOG_LEVEL", "JSON_LOGS"):
        monkeypatch.delenv(name, raising=False)


class TestAppSettings:
    """Tests for AppSettings."""

    def test_defaults(self) -> None:
        """Defaults apply when the environment is empty."""
        settings = AppSettings(_env_file=None)
        assert settings.drive_files_path == "/google-drive/files"
        assert settings.log_level == "INFO"
        assert settings.log_level_value == logging.INFO
        assert settings.json_logs is True

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Environment variables override defaults."""
        monkeypatch.setenv("DRIVE_FILES_PATH", "/api/files")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("JSON_LOGS", "false")
        settings = get_settings()
        assert settings.drive_files_path == "/api/files"
        assert settings.log_level == "DEBUG"
        assert settings.log_level_value == logging.DEBUG
        assert settings.json_logs is False

    def test_invalid_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Unknown log levels are rejected."""
        monkeypatch.setenv("LOG_LEVEL", "chatty")
        with pytest.raises(ValidationError):
            AppSettings(_env_file=None)

    def test_relative_files_path_rejected(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """The listing path must be absolute."""
        monkeypatch.setenv("DRIVE_FILES_PATH", "google-drive/files")
        with pytest.raises(ValidationError):
            AppSettings(_env_file=None)
