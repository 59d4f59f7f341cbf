# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: otlog

"""
Public API for otlog.

otlog provides the OpenTelemetry severity scale (1-24 in six bands) and a
logger whose methods are keyed to it, delegating emission to a log engine.
"""

from __future__ import annotations

from otlog.config import LoggingSettings
from otlog.engine import StdlibLogEngine, StructuredFormatter
from otlog.errors import ErrorCode, OtlogError, SeverityNameError, VersionResolutionError
from otlog.logger import OTLogger, get_logger
from otlog.protocols import LogEngineProtocol
from otlog.record import OTRecord, TelemetrySDK
from otlog.severity import (
    Severity,
    SeverityBand,
    band_of,
    is_debug_severity,
    is_error_severity,
    is_fatal_severity,
    is_info_severity,
    is_trace_severity,
    is_warn_severity,
    severity_from_name,
    severity_from_string,
    severity_to_string,
    should_not_ignore,
)
from otlog.telemetry import get_telemetry_sdk, initialize

__all__ = [
    # Severity scale
    "Severity",
    "SeverityBand",
    "severity_from_string",
    "severity_from_name",
    "severity_to_string",
    "is_trace_severity",
    "is_debug_severity",
    "is_info_severity",
    "is_warn_severity",
    "is_error_severity",
    "is_fatal_severity",
    "should_not_ignore",
    "band_of",
    # Logging
    "LogEngineProtocol",
    "OTLogger",
    "StdlibLogEngine",
    "StructuredFormatter",
    "get_logger",
    # Telemetry
    "OTRecord",
    "TelemetrySDK",
    "initialize",
    "get_telemetry_sdk",
    # Settings
    "LoggingSettings",
    # Errors
    "ErrorCode",
    "OtlogError",
    "SeverityNameError",
    "VersionResolutionError",
]
