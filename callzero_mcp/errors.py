"""
Exceptions raised by the CallZero MCP server.

Everything except `ConfigurationError` and `UnknownToolError` is caught at the
tool handler boundary and reported to the caller as a text payload.
"""

from __future__ import annotations

from typing import Any, Optional


class CallZeroError(Exception):
    """Base class for all CallZero MCP errors."""


class ConfigurationError(CallZeroError):
    """Bad credential or backend address; fatal at startup."""


class RateLimitError(CallZeroError):
    """Outbound request quota exceeded; raised before any network I/O."""


class BackendError(CallZeroError):
    """The backend answered with a non-success status or an unusable body."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class BackendTimeoutError(BackendError):
    """The backend did not answer within the configured timeout."""


class BackendConnectionError(BackendError):
    """The backend could not be reached."""


class UnknownToolError(CallZeroError, LookupError):
    def __init__(self, name: str) -> None:
        super().__init__(f'Tool "{name}" not found')
        self.name = name
