"""Envelope construction and response dispatch.

The transport-independent half of the client: id generation, building call
and notification envelopes, and routing a decoded response to exactly one
callback.
"""

from __future__ import annotations

from typing import Any

from loguru import logger

from jsonrpc_http.rpc.types import (
    DispatchMode,
    FailureCallback,
    JSONRPCNotification,
    JSONRPCRequest,
    JSONRPCResponse,
    RequestId,
    SuccessCallback,
)


class IdGenerator:
    """Monotonically increasing call ids, first id is 1."""

    def __init__(self) -> None:
        self._last_id = 0

    @property
    def last_id(self) -> int:
        return self._last_id

    def next_id(self) -> int:
        self._last_id += 1
        return self._last_id


def build_call(method: str, id: RequestId, params: Any = None) -> JSONRPCRequest:
    """Build a call envelope. ``params`` is passed through untouched."""
    return JSONRPCRequest(method=method, id=id, params=params)


def build_notification(method: str, params: Any = None) -> JSONRPCNotification:
    """Build a notification envelope (no id)."""
    return JSONRPCNotification(method=method, params=params)


def dispatch_response(
    response: JSONRPCResponse,
    on_success: SuccessCallback | None,
    on_failure: FailureCallback | None,
    mode: DispatchMode = "presence",
) -> Any:
    """Route a response to one callback and return what the callback returned.

    Order matters, first match wins:
    1. error   -> on_failure(id, error)
    2. result  -> on_success(id, result)
    3. neither -> on_success(id)

    With ``mode="truthy"`` a falsy result (0, "", False) counts as
    absent and lands in the void branch.
    """
    if response.has_error(mode):
        if on_failure is None:
            logger.debug("rpc.dispatch.no_failure_callback id={}", response.id)
            return None
        return on_failure(response.id, response.error)

    if on_success is None:
        logger.debug("rpc.dispatch.no_success_callback id={}", response.id)
        return None
    if response.has_result(mode):
        return on_success(response.id, response.result)
    return on_success(response.id)


__all__ = [
    "IdGenerator",
    "build_call",
    "build_notification",
    "dispatch_response",
]
