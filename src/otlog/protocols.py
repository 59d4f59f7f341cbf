# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: otlog

"""
Interface definitions for otlog.

OTLogger never emits records itself; it hands a severity number and the
caller's arguments to a log engine satisfying LogEngineProtocol.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class LogEngineProtocol(Protocol):
    """
    Contract for the engine that formats and emits log records.

    ``level`` is the plain severity integer (1-24); engines must treat higher
    values as more severe.
    """

    def log(self, level: int, args: tuple[Any, ...]) -> None:
        """Emit a record built from unformatted arguments."""
        ...

    def logf(self, level: int, format: str, args: tuple[Any, ...]) -> None:
        """Emit a record built from a format string and its arguments."""
        ...
