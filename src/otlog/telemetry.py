# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: otlog
"""
One-time resolution of the telemetry descriptor.

Nothing here runs at import. Hosts call initialize() once during startup;
get_telemetry_sdk() falls back to initializing lazily on first use.
"""

from __future__ import annotations

import logging
import threading
from importlib import metadata

from otlog.errors import VersionResolutionError
from otlog.record import SDK_NAME, TelemetrySDK

DISTRIBUTION_NAME = "otlog"

logger = logging.getLogger(__name__)

_lock = threading.Lock()
_telemetry_sdk: TelemetrySDK | None = None


def _resolve_version(distribution: str) -> str:
    try:
        version = metadata.version(distribution)
    except metadata.PackageNotFoundError as e:
        raise VersionResolutionError(distribution) from e
    if not version:
        raise VersionResolutionError(distribution)
    return version


def initialize() -> TelemetrySDK:
    """Resolve the SDK version and build the process-wide descriptor.

    Safe to call repeatedly and from several threads; resolution happens
    once and later calls return the cached descriptor.

    Returns:
        The telemetry descriptor

    Raises:
        VersionResolutionError: If the installed version cannot be read
    """
    global _telemetry_sdk

    if _telemetry_sdk is not None:
        return _telemetry_sdk

    with _lock:
        if _telemetry_sdk is None:
            version = _resolve_version(DISTRIBUTION_NAME)
            _telemetry_sdk = TelemetrySDK(name=SDK_NAME, version=version)
            logger.debug("Resolved %s version %s", SDK_NAME, version)
        return _telemetry_sdk


def get_telemetry_sdk() -> TelemetrySDK:
    """Return the telemetry descriptor, initializing it if needed."""
    if _telemetry_sdk is not None:
        return _telemetry_sdk
    return initialize()


def is_initialized() -> bool:
    return _telemetry_sdk is not None
