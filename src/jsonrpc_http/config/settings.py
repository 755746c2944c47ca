"""Client settings."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    """HTTP transport and dispatch settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="JSONRPC_HTTP_",
        case_sensitive=False,
        extra="ignore",
    )

    connect_timeout_seconds: float = Field(default=60.0, gt=0)
    read_timeout_seconds: float = Field(default=120.0, gt=0)
    headers: dict[str, str] = Field(default_factory=dict)
    dispatch_mode: Literal["presence", "truthy"] = Field(default="presence")


def load_settings(**overrides: Any) -> ClientSettings:
    """Load settings from the environment with optional overrides."""
    return ClientSettings(**overrides)
