"""Error types for the JSON-RPC client.

Fatal errors (configuration and invalid responses) are funnelled through the
fatal-error reporter. Protocol errors belong to the caller.
"""

from __future__ import annotations

from typing import Any


class FatalRpcError(Exception):
    """Unrecoverable client-side error for one invocation."""

    def __init__(self, message: str, url: str | None = None, method: str | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.method = method


class ConfigurationError(FatalRpcError):
    """The client cannot send: no transport registered, or no running event loop."""

    def __init__(self, url: str | None = None, method: str | None = None, reason: str | None = None) -> None:
        super().__init__(reason or "No registered transport hook for JSON-RPC client", url, method)


class InvalidResponseError(FatalRpcError):
    """Transport failed or returned something that is not a JSON-RPC response."""

    def __init__(self, url: str, method: str, reason: str | None = None) -> None:
        message = f"Call failed to {url}::{method}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message, url, method)
        self.reason = reason


class TransportError(Exception):
    """Raised by transports on network failures, bad status or non-JSON bodies."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class JSONRPCErrorException(Exception):
    """Exception with JSON-RPC error code."""

    def __init__(self, code: int, message: str, data: Any = None, id: int | str | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.data = data
        self.id = id


__all__ = [
    "ConfigurationError",
    "FatalRpcError",
    "InvalidResponseError",
    "JSONRPCErrorException",
    "TransportError",
]
