"""RPC package.

Envelope types, response dispatch and the callback-style client.
"""

from jsonrpc_http.rpc.client import CallFunction, JSONRPCClient, NotifyFunction
from jsonrpc_http.rpc.config import RpcConfig, raise_fatal_error
from jsonrpc_http.rpc.errors import (
    ConfigurationError,
    FatalRpcError,
    InvalidResponseError,
    JSONRPCErrorException,
    TransportError,
)
from jsonrpc_http.rpc.protocol import IdGenerator, build_call, build_notification, dispatch_response
from jsonrpc_http.rpc.types import (
    ErrorData,
    InvocationOptions,
    JSONRPCNotification,
    JSONRPCRequest,
    JSONRPCResponse,
    RequestId,
    RequestListener,
    Transport,
)

__all__ = [
    "CallFunction",
    "ConfigurationError",
    "ErrorData",
    "FatalRpcError",
    "IdGenerator",
    "InvalidResponseError",
    "InvocationOptions",
    "JSONRPCClient",
    "JSONRPCErrorException",
    "JSONRPCNotification",
    "JSONRPCRequest",
    "JSONRPCResponse",
    "NotifyFunction",
    "RequestId",
    "RequestListener",
    "RpcConfig",
    "Transport",
    "TransportError",
    "build_call",
    "build_notification",
    "dispatch_response",
    "raise_fatal_error",
]
