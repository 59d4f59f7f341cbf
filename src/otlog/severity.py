# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: otlog
"""
OpenTelemetry severity scale.

The data model for an OpenTelemetry log record can be found at
https://opentelemetry.io/docs/specs/otel/logs/data-model/

Severities run from 1 (TRACE) to 24 (FATAL4) in six bands of four
sub-levels. Higher values are more severe. Enum member names are the
canonical severity strings.
"""

from __future__ import annotations

from enum import IntEnum
from types import MappingProxyType
from typing import Mapping

from otlog.errors import SeverityNameError


class SeverityBand(IntEnum):
    """The six severity bands, valued by the first severity in each band."""

    TRACE = 1
    DEBUG = 5
    INFO = 9
    WARN = 13
    ERROR = 17
    FATAL = 21


BAND_WIDTH = 4


class Severity(IntEnum):
    """OpenTelemetry log severity number."""

    TRACE = 1
    TRACE2 = 2
    TRACE3 = 3
    TRACE4 = 4
    DEBUG = 5
    DEBUG2 = 6
    DEBUG3 = 7
    DEBUG4 = 8
    INFO = 9
    INFO2 = 10
    INFO3 = 11
    INFO4 = 12
    WARN = 13
    WARN2 = 14
    WARN3 = 15
    WARN4 = 16
    ERROR = 17
    ERROR2 = 18
    ERROR3 = 19
    ERROR4 = 20
    FATAL = 21
    FATAL2 = 22
    FATAL3 = 23
    FATAL4 = 24

    def __str__(self) -> str:
        return severity_to_string(self)

    @property
    def band(self) -> SeverityBand:
        """Band this severity belongs to."""
        return SeverityBand(_band_start(self))

    @property
    def sub_level(self) -> int:
        """Position within the band, 1 to 4."""
        return (self - 1) % BAND_WIDTH + 1

    def is_trace(self) -> bool:
        return is_trace_severity(self)

    def is_debug(self) -> bool:
        return is_debug_severity(self)

    def is_info(self) -> bool:
        return is_info_severity(self)

    def is_warn(self) -> bool:
        return is_warn_severity(self)

    def is_error(self) -> bool:
        return is_error_severity(self)

    def is_fatal(self) -> bool:
        return is_fatal_severity(self)

    def should_not_ignore(self) -> bool:
        return should_not_ignore(self)


MIN_SEVERITY = Severity.TRACE
MAX_SEVERITY = Severity.FATAL4

_SEVERITY_TO_STR: Mapping[int, str] = MappingProxyType(
    {int(severity): severity.name for severity in Severity}
)
# Keys carry their JSON quotes, e.g. '"INFO"'.
_STR_TO_SEVERITY: Mapping[str, Severity] = MappingProxyType(
    {f'"{severity.name}"': severity for severity in Severity}
)
_NAME_TO_SEVERITY: Mapping[str, Severity] = MappingProxyType(
    {severity.name: severity for severity in Severity}
)


def _band_start(value: int) -> int:
    return (value - 1) // BAND_WIDTH * BAND_WIDTH + 1


def severity_from_string(text: str) -> Severity:
    """Look up a severity by its quoted canonical name.

    The input is expected exactly as it appears inside a JSON document,
    quote characters included: ``'"INFO"'`` resolves to ``Severity.INFO``.
    Matching is exact; no case folding or whitespace trimming is applied.

    Args:
        text: Quoted canonical severity name

    Returns:
        The matching Severity

    Raises:
        SeverityNameError: If the string does not name a severity
    """
    try:
        return _STR_TO_SEVERITY[text]
    except (KeyError, TypeError):
        raise SeverityNameError(text) from None


def severity_from_name(name: str) -> Severity:
    """Look up a severity by its bare canonical name, e.g. ``"DEBUG3"``.

    Raises:
        SeverityNameError: If the name does not match exactly
    """
    try:
        return _NAME_TO_SEVERITY[name]
    except (KeyError, TypeError):
        raise SeverityNameError(name) from None


def severity_to_string(value: int) -> str:
    """Return the canonical name of a severity value.

    Values outside 1..24 never raise: a placeholder naming the offending
    value is returned so that a corrupted record can still be printed.
    Non-integers, bools included, also get the placeholder rather than
    being truncated.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return f"**INVALID OpenTelemetry log Severity value - {value!r}**"
    if value < MIN_SEVERITY or value > MAX_SEVERITY:
        return f"**INVALID OpenTelemetry log Severity value - {int(value)}**"
    return _SEVERITY_TO_STR[int(value)]


def is_trace_severity(value: int) -> bool:
    return Severity.TRACE <= value <= Severity.TRACE4


def is_debug_severity(value: int) -> bool:
    # DEBUG4 is excluded; kept as released.
    return Severity.DEBUG <= value < Severity.DEBUG4


def is_info_severity(value: int) -> bool:
    return Severity.INFO <= value <= Severity.INFO4


def is_warn_severity(value: int) -> bool:
    return Severity.WARN <= value <= Severity.WARN4


def is_error_severity(value: int) -> bool:
    return Severity.ERROR <= value <= Severity.ERROR4


def is_fatal_severity(value: int) -> bool:
    return Severity.FATAL <= value <= Severity.FATAL4


def should_not_ignore(value: int) -> bool:
    """Any severity of 17 or above indicates an error that must be handled."""
    return value >= Severity.ERROR


def band_of(value: int) -> SeverityBand | None:
    """Return the band of a valid severity value, or None when out of range."""
    if value < MIN_SEVERITY or value > MAX_SEVERITY:
        return None
    return SeverityBand(_band_start(value))
