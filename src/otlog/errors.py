# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: otlog
"""
Error classes for otlog.

Every exception raised by the library derives from OtlogError, which carries
an error code, a human-readable message and contextual information.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any, Final


class ErrorCode:
    """Identifier for a class of library errors."""

    def __init__(self, code: str, category: str = "OTLOG") -> None:
        """Initialize a new error code.

        Args:
            code: Unique identifier for this error code
            category: Name of the category the code belongs to
        """
        self.code = code
        self.category = category

    def __str__(self) -> str:
        return self.code

    def __repr__(self) -> str:
        return f"ErrorCode({self.code!r}, {self.category!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ErrorCode):
            return False
        return self.code == other.code

    def __hash__(self) -> int:
        return hash(self.code)


SEVERITY_NAME_INVALID: Final = ErrorCode("SEVERITY_NAME_INVALID", "SEVERITY")
VERSION_UNRESOLVED: Final = ErrorCode("VERSION_UNRESOLVED", "TELEMETRY")


class OtlogError(Exception):
    """
    Base error class for otlog errors.
    Should only be subclassed, not instantiated directly.
    """

    message: str
    code: ErrorCode
    context: dict[str, Any]
    timestamp: datetime

    def __new__(cls, *args: Any, **kwargs: Any) -> "OtlogError":
        if cls is OtlogError:
            raise TypeError(
                "Do not instantiate OtlogError directly; subclass it for specific errors."
            )
        return super().__new__(cls)

    def __init__(
        self,
        message: str,
        code: ErrorCode,
        context: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        """Initialize a new OtlogError.

        Args:
            message: Human-readable error message
            code: ErrorCode identifying the failure
            context: Additional contextual information
            **kwargs: Extra context keys
        """
        if not isinstance(code, ErrorCode):
            raise TypeError("code must be an ErrorCode instance, not a string")

        full_context = dict(context or {})
        full_context.update(kwargs)

        super().__init__(message)
        self.message = message
        self.code = code
        self.context = full_context
        self.timestamp = datetime.now(UTC)

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """Return a dictionary representation of the error."""
        return {
            "code": self.code.code,
            "category": self.code.category,
            "message": self.message,
            "context": self.context,
            "timestamp": self.timestamp.isoformat(),
        }


class SeverityNameError(OtlogError, ValueError):
    """Raised when a string does not name a known severity."""

    def __init__(self, name: str, **kwargs: Any) -> None:
        super().__init__(
            f"invalid OpenTelemetry log Severity name - {name}",
            code=SEVERITY_NAME_INVALID,
            name=name,
            **kwargs,
        )


class VersionResolutionError(OtlogError):
    """Raised when the installed otlog version cannot be determined.

    The version is embedded in every record's telemetry descriptor, so hosts
    should treat this as fatal at startup.
    """

    def __init__(self, distribution: str, **kwargs: Any) -> None:
        super().__init__(
            f"unable to retrieve module version number for {distribution!r}",
            code=VERSION_UNRESOLVED,
            distribution=distribution,
            **kwargs,
        )
