# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: otlog
"""
Severity-keyed logging API.

OTLogger forwards every call to its log engine together with a fixed
severity number. The named methods (``info``, ``warn3``, ``errorf2``, ...)
are generated from the Severity table: for each member there is an
unformatted method named after it in lower case and a formatted one with
``f`` inserted before the sub-level digit (``TRACE`` -> ``tracef``,
``WARN3`` -> ``warnf3``).
"""

from __future__ import annotations

from functools import partialmethod
from typing import Any, TypeVar

from otlog.config import LoggingSettings
from otlog.engine import StdlibLogEngine
from otlog.protocols import LogEngineProtocol
from otlog.record import OTRecord
from otlog.severity import Severity

T = TypeVar("T", bound=type)


def method_names(severity: Severity) -> tuple[str, str]:
    """Return the (unformatted, formatted) method names for a severity."""
    band = severity.band.name.lower()
    suffix = "" if severity.sub_level == 1 else str(severity.sub_level)
    return f"{band}{suffix}", f"{band}f{suffix}"


def severity_methods(cls: T) -> T:
    """Class decorator adding one log and one logf alias per severity."""
    for severity in Severity:
        plain, formatted = method_names(severity)
        setattr(cls, plain, partialmethod(cls.log, severity))
        setattr(cls, formatted, partialmethod(cls.logf, severity))
    return cls


@severity_methods
class OTLogger:
    """OpenTelemetry logger delegating emission to a log engine.

    No validation or transformation happens here: each call results in
    exactly one engine call, and any error handling is the engine's.
    """

    def __init__(self, engine: LogEngineProtocol) -> None:
        self._engine = engine

    @property
    def engine(self) -> LogEngineProtocol:
        return self._engine

    def log(self, severity: int, *args: Any) -> None:
        """Forward unformatted arguments at the given severity."""
        self._engine.log(int(severity), args)

    def logf(self, severity: int, format: str, *args: Any) -> None:
        """Forward a format string and its arguments at the given severity."""
        self._engine.logf(int(severity), format, args)


def get_logger(
    name: str,
    settings: LoggingSettings | None = None,
    record: OTRecord | None = None,
) -> OTLogger:
    """Get a logger writing through the standard logging module.

    Args:
        name: Logger name (typically __name__)
        settings: Engine settings (loads from environment if None)
        record: OpenTelemetry fields attached to every record; when omitted
            one is built carrying the configured service name

    Returns:
        Configured logger instance
    """
    settings = settings or LoggingSettings.load()
    if record is None:
        record = OTRecord(service_name=settings.service_name)
    return OTLogger(StdlibLogEngine(name, settings=settings, record=record))
