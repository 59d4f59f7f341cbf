# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: otlog
"""
Configuration for the default log engine.

Settings load from ``OTLOG_*`` environment variables.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from otlog.errors import SeverityNameError
from otlog.severity import Severity, severity_from_name


class LoggingSettings(BaseSettings):
    """
    Configuration settings for StdlibLogEngine.
    Loads from environment variables using Pydantic v2's env support.
    """

    model_config = SettingsConfigDict(
        env_prefix="OTLOG_",
        extra="ignore",
        case_sensitive=False,
        frozen=False,
    )

    level: str = Field(
        default=Severity.INFO.name, description="Lowest severity emitted"
    )
    service_name: str = Field(default="", description="OpenTelemetry service.name")
    json_format: bool = Field(default=False, description="Enable JSON log format")
    include_timestamp: bool = Field(
        default=True, description="Include timestamp in logs"
    )
    console_enabled: bool = Field(default=True, description="Enable console logging")
    file_enabled: bool = Field(default=False, description="Enable file logging")
    file_path: str | None = Field(default=None, description="Path to log file")

    @field_validator("level", mode="before")
    @classmethod
    def validate_level(cls, v: Any) -> str:
        """Accept a canonical severity name or a Severity member."""
        if isinstance(v, Severity):
            return v.name
        if not isinstance(v, str):
            raise ValueError(f"Log level must be a string, got {type(v).__name__}")
        try:
            return severity_from_name(v).name
        except SeverityNameError:
            raise ValueError(f"Invalid log level: {v}")

    @property
    def threshold(self) -> Severity:
        """The configured level as a Severity."""
        return severity_from_name(self.level)

    @classmethod
    def load(cls) -> LoggingSettings:
        """
        Load logging settings from environment variables or defaults.
        Returns:
            LoggingSettings: Loaded and validated settings instance.
        """
        return cls()
