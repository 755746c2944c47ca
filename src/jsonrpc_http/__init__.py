"""Callback-style JSON-RPC 2.0 client over a pluggable async transport."""

from jsonrpc_http.config import ClientSettings, load_settings
from jsonrpc_http.rpc import (
    CallFunction,
    ConfigurationError,
    FatalRpcError,
    IdGenerator,
    InvalidResponseError,
    JSONRPCClient,
    JSONRPCErrorException,
    JSONRPCNotification,
    JSONRPCRequest,
    JSONRPCResponse,
    NotifyFunction,
    RpcConfig,
    TransportError,
    build_call,
    build_notification,
    dispatch_response,
)
from jsonrpc_http.transport import HttpTransport, register_http_transport

__all__ = [
    "CallFunction",
    "ClientSettings",
    "ConfigurationError",
    "FatalRpcError",
    "HttpTransport",
    "IdGenerator",
    "InvalidResponseError",
    "JSONRPCClient",
    "JSONRPCErrorException",
    "JSONRPCNotification",
    "JSONRPCRequest",
    "JSONRPCResponse",
    "NotifyFunction",
    "RpcConfig",
    "TransportError",
    "build_call",
    "build_notification",
    "dispatch_response",
    "load_settings",
    "register_http_transport",
]
