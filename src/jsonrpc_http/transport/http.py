"""HTTP transport built on httpx."""

from __future__ import annotations

from typing import Any

import httpx
from loguru import logger

from jsonrpc_http.config.settings import ClientSettings
from jsonrpc_http.rpc.config import RpcConfig
from jsonrpc_http.rpc.errors import TransportError
from jsonrpc_http.rpc.types import JSONRPCEnvelope

CONTENT_TYPE = "application/json"


class HttpTransport:
    """POSTs envelopes as JSON and decodes the JSON reply."""

    def __init__(
        self,
        settings: ClientSettings | None = None,
        headers: dict[str, str] | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.settings = settings or ClientSettings()
        self._headers = {**self.settings.headers, **(headers or {})}
        self._client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(
                self.settings.read_timeout_seconds,
                connect=self.settings.connect_timeout_seconds,
            ),
        )

    def _request_headers(self) -> dict[str, str]:
        return {
            **self._headers,
            "Content-Type": CONTENT_TYPE,
            "Accept": CONTENT_TYPE,
        }

    async def post(self, url: str, request: JSONRPCEnvelope) -> Any:
        body = request.model_dump_json()
        try:
            response = await self._client.post(url, content=body, headers=self._request_headers())
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise TransportError(str(e), status_code=e.response.status_code) from e
        except httpx.HTTPError as e:
            raise TransportError(str(e)) from e

        if not response.content.strip():
            return None
        try:
            return response.json()
        except ValueError as e:
            logger.debug("rpc.http.invalid_json url={} status={}", url, response.status_code)
            raise TransportError(f"response body is not JSON: {e}", status_code=response.status_code) from e

    async def aclose(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()


def register_http_transport(
    config: RpcConfig,
    settings: ClientSettings | None = None,
    headers: dict[str, str] | None = None,
    client: httpx.AsyncClient | None = None,
) -> HttpTransport:
    """Create an ``HttpTransport`` and register it as the config's transport."""
    transport = HttpTransport(settings, headers=headers, client=client)
    config.register_transport(transport)
    return transport


__all__ = ["HttpTransport", "register_http_transport"]
