"""Top-level pytest configuration for otlog."""

from __future__ import annotations

import os
from typing import Any

import pytest

from otlog import telemetry
from otlog.record import TelemetrySDK

TEST_VERSION = "1.2.3"


class RecordingEngine:
    """Log engine that keeps every call for later inspection."""

    def __init__(self) -> None:
        self.calls: list[tuple[Any, ...]] = []

    def log(self, level: int, args: tuple[Any, ...]) -> None:
        self.calls.append(("log", level, args))

    def logf(self, level: int, format: str, args: tuple[Any, ...]) -> None:
        self.calls.append(("logf", level, format, args))


@pytest.fixture
def engine() -> RecordingEngine:
    """Return a fresh recording engine."""
    return RecordingEngine()


@pytest.fixture(autouse=True)
def reset_telemetry(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear the cached telemetry descriptor around every test."""
    monkeypatch.setattr(telemetry, "_telemetry_sdk", None)


@pytest.fixture
def installed_version(monkeypatch: pytest.MonkeyPatch) -> str:
    """Make distribution metadata report TEST_VERSION for otlog."""

    real_version = telemetry.metadata.version

    def fake_version(distribution: str) -> str:
        if distribution == telemetry.DISTRIBUTION_NAME:
            return TEST_VERSION
        return real_version(distribution)

    monkeypatch.setattr(telemetry.metadata, "version", fake_version)
    return TEST_VERSION


@pytest.fixture
def telemetry_sdk(installed_version: str) -> TelemetrySDK:
    """Return an initialized telemetry descriptor."""
    return telemetry.initialize()


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove OTLOG_* variables so settings fall back to defaults."""
    for key in list(os.environ):
        if key.startswith("OTLOG_"):
            monkeypatch.delenv(key)
