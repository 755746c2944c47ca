"""Transport bindings."""

from jsonrpc_http.transport.http import HttpTransport, register_http_transport

__all__ = ["HttpTransport", "register_http_transport"]
