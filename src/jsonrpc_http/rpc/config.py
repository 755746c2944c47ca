"""Replaceable hook points shared by one or more clients."""

from __future__ import annotations

from typing import TYPE_CHECKING

from loguru import logger

from jsonrpc_http.rpc.errors import FatalRpcError
from jsonrpc_http.rpc.protocol import IdGenerator
from jsonrpc_http.rpc.types import DispatchMode, FatalErrorReporter, RequestListener, Transport

if TYPE_CHECKING:
    from jsonrpc_http.config.settings import ClientSettings


def raise_fatal_error(error: FatalRpcError) -> None:
    """Default reporter: log the error and abort the current operation."""
    logger.error("rpc.fatal url={} method={} error={}", error.url, error.method, error)
    raise error


class RpcConfig:
    """Registry of the transport hook, fatal-error reporter and id counter.

    Each slot can be replaced at any time, last writer wins. Clients sharing
    one config share its id sequence.
    """

    def __init__(
        self,
        transport: Transport | None = None,
        fatal_error_reporter: FatalErrorReporter | None = None,
        request_listener: RequestListener | None = None,
        id_generator: IdGenerator | None = None,
        dispatch_mode: DispatchMode = "presence",
    ) -> None:
        self.transport = transport
        self.fatal_error_reporter: FatalErrorReporter = fatal_error_reporter or raise_fatal_error
        self.request_listener = request_listener
        self.id_generator = id_generator or IdGenerator()
        self.dispatch_mode: DispatchMode = dispatch_mode

    @classmethod
    def from_settings(cls, settings: ClientSettings) -> RpcConfig:
        return cls(dispatch_mode=settings.dispatch_mode)

    def register_transport(self, transport: Transport) -> None:
        if self.transport is not None and self.transport is not transport:
            logger.debug(
                "rpc.config.transport_replaced old={} new={}",
                type(self.transport).__name__,
                type(transport).__name__,
            )
        self.transport = transport

    def set_fatal_error_reporter(self, reporter: FatalErrorReporter) -> None:
        self.fatal_error_reporter = reporter

    def set_request_listener(self, listener: RequestListener | None) -> None:
        self.request_listener = listener

    def next_id(self) -> int:
        return self.id_generator.next_id()

    def report_fatal(self, error: FatalRpcError) -> None:
        self.fatal_error_reporter(error)

    async def aclose(self) -> None:
        """Close the registered transport, if it can be closed.

        Clients sharing this config must be joined first.
        """
        close = getattr(self.transport, "aclose", None)
        if close is not None:
            await close()

    async def __aenter__(self) -> RpcConfig:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


__all__ = ["RpcConfig", "raise_fatal_error"]
