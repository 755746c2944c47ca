"""Configuration package."""

from jsonrpc_http.config.settings import ClientSettings, load_settings

__all__ = [
    "ClientSettings",
    "load_settings",
]
