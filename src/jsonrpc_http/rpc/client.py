"""Callback-style JSON-RPC client.

``call`` and ``notify`` never block: they schedule the exchange on the
running event loop and hand back the task. Responses are routed to the
caller's callbacks; configuration problems and broken responses go to the
fatal-error reporter instead.
"""

from __future__ import annotations

import asyncio
import inspect
from dataclasses import dataclass
from typing import Any

from loguru import logger
from pydantic import ValidationError

from jsonrpc_http.rpc.config import RpcConfig
from jsonrpc_http.rpc.errors import ConfigurationError, InvalidResponseError, JSONRPCErrorException, TransportError
from jsonrpc_http.rpc.protocol import build_call, build_notification, dispatch_response
from jsonrpc_http.rpc.types import (
    ErrorData,
    FailureCallback,
    InvocationOptions,
    JSONRPCResponse,
    RequestId,
    SuccessCallback,
    Transport,
)


class JSONRPCClient:
    """JSON-RPC 2.0 client over the transport registered in ``config``."""

    def __init__(self, config: RpcConfig | None = None) -> None:
        self._config = config or RpcConfig()
        self._pending: set[asyncio.Task[None]] = set()

    @property
    def config(self) -> RpcConfig:
        return self._config

    @property
    def pending(self) -> int:
        return len(self._pending)

    def call(
        self,
        url: str,
        method: str,
        id: RequestId,
        params: Any = None,
        on_success: SuccessCallback | None = None,
        on_failure: FailureCallback | None = None,
    ) -> asyncio.Task[None] | None:
        """Send a call with a caller-supplied id.

        Must be called with an event loop running; otherwise a
        ``ConfigurationError`` goes to the fatal reporter.
        """
        request = build_call(method, id, params)
        return self._post(InvocationOptions(url, request, on_success, on_failure))

    def notify(
        self,
        url: str,
        method: str,
        params: Any = None,
        on_success: SuccessCallback | None = None,
        on_failure: FailureCallback | None = None,
    ) -> asyncio.Task[None] | None:
        """Send a notification.

        No response is expected, the callbacks are kept in case the server
        answers anyway.
        """
        request = build_notification(method, params)
        return self._post(InvocationOptions(url, request, on_success, on_failure))

    def create_call_function(self, url: str, method: str) -> CallFunction:
        return CallFunction(self, url, method)

    def create_notify_function(self, url: str, method: str) -> NotifyFunction:
        return NotifyFunction(self, url, method)

    async def request(self, url: str, method: str, params: Any = None, id: RequestId | None = None) -> Any:
        """Send a call and wait for its result.

        Returns the result, or ``None`` for a void response. Raises
        ``JSONRPCErrorException`` when the server answers with an error.
        """
        if id is None:
            id = self._config.next_id()
        options = InvocationOptions(url, build_call(method, id, params))
        transport = self._require_transport(options)
        if transport is None:
            return None

        response = await self._send(transport, options)
        if response is None:
            return None

        mode = self._config.dispatch_mode
        if response.has_error(mode):
            raise _to_exception(response)
        if response.has_result(mode):
            return response.result
        return None

    async def join(self) -> None:
        """Wait for every in-flight exchange to finish.

        The first failure is re-raised only once nothing is left in flight.
        """
        first_error: BaseException | None = None
        while self._pending:
            results = await asyncio.gather(*list(self._pending), return_exceptions=True)
            if first_error is None:
                first_error = next((r for r in results if isinstance(r, BaseException)), None)
        if first_error is not None:
            raise first_error

    async def aclose(self) -> None:
        """Wait for this client's in-flight exchanges.

        The transport belongs to the config and may serve other clients;
        close it with ``RpcConfig.aclose()``.
        """
        await self.join()

    async def __aenter__(self) -> JSONRPCClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    def _require_transport(self, options: InvocationOptions) -> Transport | None:
        transport = self._config.transport
        if transport is None:
            self._config.report_fatal(ConfigurationError(options.url, options.method))
        return transport

    def _post(self, options: InvocationOptions) -> asyncio.Task[None] | None:
        transport = self._require_transport(options)
        if transport is None:
            return None
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            self._config.report_fatal(
                ConfigurationError(options.url, options.method, "call and notify need a running event loop")
            )
            return None

        logger.debug(
            "rpc.client.post url={} method={} id={}",
            options.url,
            options.method,
            getattr(options.request, "id", None),
        )
        task = loop.create_task(self._exchange(transport, options))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def _exchange(self, transport: Transport, options: InvocationOptions) -> None:
        response = await self._send(transport, options)
        if response is None:
            return

        outcome = dispatch_response(
            response,
            options.on_success,
            options.on_failure,
            self._config.dispatch_mode,
        )
        if inspect.isawaitable(outcome):
            await outcome

    async def _send(self, transport: Transport, options: InvocationOptions) -> JSONRPCResponse | None:
        """Run one exchange and validate what came back.

        Returns ``None`` when there is nothing to dispatch, either because a
        notification got an empty answer or because the fatal reporter was
        invoked and chose not to raise.
        """
        listener = self._config.request_listener
        if listener is not None:
            listener.on_before_request_sent(options.request)

        try:
            body = await transport.post(options.url, options.request)
        except TransportError as e:
            logger.warning(
                "rpc.client.transport_failed url={} method={} status={} error={}",
                options.url,
                options.method,
                e.status_code,
                e,
            )
            self._config.report_fatal(InvalidResponseError(options.url, options.method, str(e)))
            return None

        if body is None and options.is_notification:
            logger.debug("rpc.client.notified url={} method={}", options.url, options.method)
            return None

        if not isinstance(body, dict):
            self._config.report_fatal(
                InvalidResponseError(options.url, options.method, "response is not a JSON object")
            )
            return None

        try:
            response = JSONRPCResponse.model_validate(body)
        except ValidationError as e:
            self._config.report_fatal(InvalidResponseError(options.url, options.method, str(e)))
            return None

        if listener is not None:
            listener.on_before_response_processed(response)
        return response


def _to_exception(response: JSONRPCResponse) -> JSONRPCErrorException:
    try:
        error = ErrorData.model_validate(response.error)
    except ValidationError:
        return JSONRPCErrorException(-32603, str(response.error), id=response.id)
    return JSONRPCErrorException(error.code, error.message, error.data, response.id)


@dataclass(frozen=True)
class CallFunction:
    """A call bound to one url and method; every invocation gets a fresh id."""

    client: JSONRPCClient
    url: str
    method: str

    def invoke(
        self,
        params: Any = None,
        on_success: SuccessCallback | None = None,
        on_failure: FailureCallback | None = None,
    ) -> asyncio.Task[None] | None:
        id = self.client.config.next_id()
        return self.client.call(self.url, self.method, id, params, on_success, on_failure)

    __call__ = invoke


@dataclass(frozen=True)
class NotifyFunction:
    """A notification bound to one url and method."""

    client: JSONRPCClient
    url: str
    method: str

    def invoke(
        self,
        params: Any = None,
        on_success: SuccessCallback | None = None,
        on_failure: FailureCallback | None = None,
    ) -> asyncio.Task[None] | None:
        return self.client.notify(self.url, self.method, params, on_success, on_failure)

    __call__ = invoke


__all__ = [
    "CallFunction",
    "JSONRPCClient",
    "NotifyFunction",
]
