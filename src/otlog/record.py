# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: otlog
"""
Log record fields required by OpenTelemetry that a generic logging engine
does not provide.
"""

from __future__ import annotations

from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

SDK_NAME: Final = "otlog"
SDK_LANGUAGE: Final = "python"
ID_LENGTH: Final = 16


class TelemetrySDK(BaseModel):
    """Identifies the library that produced a record."""

    model_config = ConfigDict(frozen=True)

    name: str = SDK_NAME
    language: str = SDK_LANGUAGE
    version: str

    def to_dict(self) -> dict[str, str]:
        """Serialize with the OpenTelemetry semantic-convention keys.

        The keys are ``telemetry.sdk.*``, not the ``telemetry.language.*``
        tags used by the Go otlog package; consumers keyed on the Go output
        must map them.
        """
        return {
            "telemetry.sdk.name": self.name,
            "telemetry.sdk.language": self.language,
            "telemetry.sdk.version": self.version,
        }


def _default_telemetry_sdk() -> TelemetrySDK:
    from otlog.telemetry import get_telemetry_sdk  # avoid circular import

    return get_telemetry_sdk()


class OTRecord(BaseModel):
    """
    Per-record correlation data.

    Span and trace identifiers are optional but must be exactly 16 bytes
    when given. The telemetry descriptor defaults to the process-wide one.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    span_id: bytes | None = Field(default=None, alias="spanId")
    trace_id: bytes | None = Field(default=None, alias="traceId")
    service_name: str = Field(default="", alias="service.name")
    telemetry_sdk: TelemetrySDK = Field(default_factory=_default_telemetry_sdk)

    @field_validator("span_id", "trace_id")
    @classmethod
    def validate_id_length(cls, v: bytes | None) -> bytes | None:
        """Identifiers are fixed width."""
        if v is not None and len(v) != ID_LENGTH:
            raise ValueError(f"identifier must be {ID_LENGTH} bytes, got {len(v)}")
        return v

    def to_dict(self) -> dict[str, Any]:
        """Serialize to OpenTelemetry attribute names.

        Identifiers are rendered as lower-case hex and omitted when absent.
        """
        data: dict[str, Any] = {}
        if self.span_id:
            data["spanId"] = self.span_id.hex()
        if self.trace_id:
            data["traceId"] = self.trace_id.hex()
        data["service.name"] = self.service_name
        data.update(self.telemetry_sdk.to_dict())
        return data
