"""JSON-RPC 2.0 type definitions.

Envelopes sent by the client, the polymorphic response object it receives,
and the protocols a transport or listener has to satisfy.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Literal, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict

from jsonrpc_http.rpc.errors import FatalRpcError

JSONRPC_VERSION = "2.0"

RequestId = int | str
DispatchMode = Literal["presence", "truthy"]

# on_success(id) for void results, on_success(id, result) otherwise
SuccessCallback = Callable[..., Any]
FailureCallback = Callable[[RequestId | None, Any], Any]
FatalErrorReporter = Callable[[FatalRpcError], None]


class JSONRPCRequest(BaseModel):
    """A JSON-RPC call that expects a correlated response."""

    jsonrpc: Literal["2.0"] = JSONRPC_VERSION
    method: str
    id: RequestId
    params: Any = None

    model_config = ConfigDict(extra="forbid", frozen=True)


class JSONRPCNotification(BaseModel):
    """A JSON-RPC notification which does not expect a response."""

    jsonrpc: Literal["2.0"] = JSONRPC_VERSION
    method: str
    params: Any = None

    model_config = ConfigDict(extra="forbid", frozen=True)


JSONRPCEnvelope = JSONRPCRequest | JSONRPCNotification


class ErrorData(BaseModel):
    """Error information for JSON-RPC error responses."""

    code: int
    message: str
    data: Any = None


class JSONRPCResponse(BaseModel):
    """Decoded response: ``{id, error}``, ``{id, result}`` or just ``{id}``.

    Which keys were actually sent is kept in ``model_fields_set`` so the
    dispatcher can tell an absent ``result`` from a falsy one.
    """

    jsonrpc: str | None = None
    id: RequestId | None = None
    result: Any = None
    error: Any = None

    model_config = ConfigDict(extra="allow")

    def has_error(self, mode: DispatchMode = "presence") -> bool:
        if mode == "truthy":
            return _js_truthy(self.error)
        return "error" in self.model_fields_set and self.error is not None

    def has_result(self, mode: DispatchMode = "presence") -> bool:
        if mode == "truthy":
            return _js_truthy(self.result)
        return "result" in self.model_fields_set and self.result is not None


def _js_truthy(value: Any) -> bool:
    """Browser truthiness for decoded JSON: only null, false, 0, NaN and "" are falsy."""
    if value is None or value is False or value == "":
        return False
    if isinstance(value, int | float):
        return value == value and value != 0
    return True


@runtime_checkable
class Transport(Protocol):
    """Protocol for the transport hook.

    Posts the envelope to ``url`` and returns the decoded JSON body, or
    ``None`` for an empty body. Raises ``TransportError`` when the exchange
    fails or the body is not JSON.
    """

    async def post(self, url: str, request: JSONRPCEnvelope) -> Any:
        """Send the envelope and return the decoded response body."""
        ...


@runtime_checkable
class RequestListener(Protocol):
    """Observes envelopes and responses passing through the client."""

    def on_before_request_sent(self, request: JSONRPCEnvelope) -> None:
        """Called before the envelope is handed to the transport."""
        ...

    def on_before_response_processed(self, response: JSONRPCResponse) -> None:
        """Called after a response is decoded, before it is dispatched."""
        ...


@dataclass
class InvocationOptions:
    """Everything one in-flight exchange needs; dropped after dispatch."""

    url: str
    request: JSONRPCEnvelope
    on_success: SuccessCallback | None = None
    on_failure: FailureCallback | None = None

    @property
    def method(self) -> str:
        return self.request.method

    @property
    def is_notification(self) -> bool:
        return isinstance(self.request, JSONRPCNotification)


__all__ = [
    "JSONRPC_VERSION",
    "DispatchMode",
    "ErrorData",
    "FailureCallback",
    "FatalErrorReporter",
    "InvocationOptions",
    "JSONRPCEnvelope",
    "JSONRPCNotification",
    "JSONRPCRequest",
    "JSONRPCResponse",
    "RequestId",
    "RequestListener",
    "SuccessCallback",
    "Transport",
]
