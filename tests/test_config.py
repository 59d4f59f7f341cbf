"""Tests for LoggingSettings."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from otlog.config import LoggingSettings
from otlog.severity import Severity

pytestmark = pytest.mark.usefixtures("clean_env")


class TestLoggingSettings:
    """Tests for the LoggingSettings class."""

    def test_default_settings(self) -> None:
        settings = LoggingSettings()

        assert settings.level == "INFO"
        assert settings.threshold is Severity.INFO
        assert settings.service_name == ""
        assert settings.json_format is False
        assert settings.include_timestamp is True
        assert settings.console_enabled is True
        assert settings.file_enabled is False
        assert settings.file_path is None

    def test_override_settings(self) -> None:
        settings = LoggingSettings(
            level="DEBUG3",
            service_name="orders",
            json_format=True,
            file_enabled=True,
            file_path="/tmp/otlog.txt",
        )

        assert settings.level == "DEBUG3"
        assert settings.threshold == 7
        assert settings.service_name == "orders"
        assert settings.json_format is True
        assert settings.file_path == "/tmp/otlog.txt"

    def test_severity_member_as_level(self) -> None:
        assert LoggingSettings(level=Severity.WARN2).level == "WARN2"

    @pytest.mark.parametrize("level", ["info", "WARNING", "CRITICAL", '"INFO"', ""])
    def test_invalid_level(self, level: str) -> None:
        """Levels must be exact canonical severity names."""
        with pytest.raises(ValidationError):
            LoggingSettings(level=level)

    def test_non_string_level(self) -> None:
        with pytest.raises(ValidationError):
            LoggingSettings(level=3.5)

    def test_load_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OTLOG_LEVEL", "ERROR")
        monkeypatch.setenv("OTLOG_SERVICE_NAME", "payments")
        monkeypatch.setenv("OTLOG_JSON_FORMAT", "true")
        monkeypatch.setenv("OTLOG_FILE_ENABLED", "true")
        monkeypatch.setenv("OTLOG_FILE_PATH", "/var/log/otlog.log")

        settings = LoggingSettings.load()

        assert settings.threshold is Severity.ERROR
        assert settings.service_name == "payments"
        assert settings.json_format is True
        assert settings.file_enabled is True
        assert settings.file_path == "/var/log/otlog.log"

    def test_invalid_level_from_environment(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("OTLOG_LEVEL", "verbose")
        with pytest.raises(ValidationError):
            LoggingSettings.load()
