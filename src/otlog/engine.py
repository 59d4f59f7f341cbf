# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: otlog
"""
Default log engine backed by Python's standard logging module.

Severity numbers are used directly as stdlib levels on a dedicated,
non-propagating logger, so the 1-24 ordering is preserved. The canonical
severity text and the OpenTelemetry record fields travel on each LogRecord
as ``extra`` attributes for StructuredFormatter to render.
"""

from __future__ import annotations

import json
import logging
import sys
from logging import StreamHandler
from typing import Any

from otlog.config import LoggingSettings
from otlog.record import OTRecord
from otlog.severity import severity_to_string

SEVERITY_TEXT_ATTR = "severity_text"
SEVERITY_NUMBER_ATTR = "severity_number"
OTEL_FIELDS_ATTR = "otel_fields"
# Engine loggers are named otlog.engine.<name>; host loggers are never touched.
LOGGER_NAMESPACE = "otlog.engine"


class StructuredFormatter(logging.Formatter):
    """Formatter that renders severity text and OpenTelemetry fields."""

    def __init__(
        self,
        json_format: bool = False,
        include_timestamp: bool = True,
    ) -> None:
        """Initialize a structured formatter.

        Args:
            json_format: Whether to format logs as JSON
            include_timestamp: Whether to include timestamps in logs
        """
        self.json_format = json_format
        self.include_timestamp = include_timestamp

        fmt = "%(message)s"
        if include_timestamp:
            fmt = "%(asctime)s " + fmt

        super().__init__(fmt=fmt, datefmt="%Y-%m-%d %H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        severity_text = getattr(
            record, SEVERITY_TEXT_ATTR, severity_to_string(record.levelno)
        )
        fields: dict[str, Any] = getattr(record, OTEL_FIELDS_ATTR, None) or {}

        if self.json_format:
            return self._format_json(record, severity_text, fields)
        message = super().format(record)
        return self._format_text(message, severity_text, fields)

    def _format_json(
        self, record: logging.LogRecord, severity_text: str, fields: dict[str, Any]
    ) -> str:
        log_data: dict[str, Any] = {
            "message": record.getMessage(),
            "severity_text": severity_text,
            "severity_number": record.levelno,
        }
        if self.include_timestamp:
            log_data["timestamp"] = self.formatTime(record, self.datefmt)
        log_data.update(fields)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str, ensure_ascii=False)

    def _format_text(
        self, message: str, severity_text: str, fields: dict[str, Any]
    ) -> str:
        line = f"{message} [{severity_text}]"
        if not fields:
            return line
        ctx_str = " ".join(f"{k}={self._format_value(v)}" for k, v in fields.items())
        return f"{line} {ctx_str}"

    def _format_value(self, value: Any) -> str:
        if isinstance(value, str):
            # Quote strings that contain spaces
            if " " in value or not value:
                return f'"{value}"'
            return value
        return str(value)


class StdlibLogEngine:
    """LogEngineProtocol implementation writing through a stdlib logger."""

    def __init__(
        self,
        name: str,
        settings: LoggingSettings | None = None,
        record: OTRecord | None = None,
    ) -> None:
        """
        Initialize a new engine.

        Args:
            name: Suffix of the underlying stdlib logger name
            settings: Engine settings (loads from environment if None)
            record: OpenTelemetry fields attached to every emitted record
        """
        self.name = name
        self._settings = settings or LoggingSettings.load()
        self._record = record
        self._fields = record.to_dict() if record is not None else {}

        self.logger_name = f"{LOGGER_NAMESPACE}.{name}"
        self._logger = logging.getLogger(self.logger_name)
        self._configure()

    @property
    def settings(self) -> LoggingSettings:
        return self._settings

    @property
    def record(self) -> OTRecord | None:
        return self._record

    def _configure(self) -> None:
        self._logger.setLevel(int(self._settings.threshold))

        for handler in list(self._logger.handlers):
            self._logger.removeHandler(handler)
            handler.close()

        formatter = StructuredFormatter(
            json_format=self._settings.json_format,
            include_timestamp=self._settings.include_timestamp,
        )

        if self._settings.console_enabled:
            console = StreamHandler(sys.stdout)
            console.setFormatter(formatter)
            console.setLevel(logging.NOTSET)
            self._logger.addHandler(console)

        if self._settings.file_enabled and self._settings.file_path:
            file_handler = logging.FileHandler(
                self._settings.file_path, encoding="utf-8"
            )
            file_handler.setFormatter(formatter)
            self._logger.addHandler(file_handler)

        if not self._logger.handlers:
            self._logger.addHandler(logging.NullHandler())

        # Severity numbers are not stdlib levels; keep them off ancestor handlers.
        self._logger.propagate = False

    def _extra(self, level: int) -> dict[str, Any]:
        return {
            SEVERITY_TEXT_ATTR: severity_to_string(level),
            SEVERITY_NUMBER_ATTR: level,
            OTEL_FIELDS_ATTR: self._fields,
        }

    def log(self, level: int, args: tuple[Any, ...]) -> None:
        """Emit the space-joined string form of ``args``."""
        if not self._logger.isEnabledFor(level):
            return
        message = " ".join(str(arg) for arg in args)
        # Pass the message as an argument so '%' in it is never interpreted.
        self._logger.log(level, "%s", message, extra=self._extra(level))

    def logf(self, level: int, format: str, args: tuple[Any, ...]) -> None:
        """Emit ``format % args`` using stdlib's deferred %-formatting."""
        if not self._logger.isEnabledFor(level):
            return
        self._logger.log(level, format, *args, extra=self._extra(level))
