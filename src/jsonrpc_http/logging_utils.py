"""Runtime logging helpers."""

from __future__ import annotations

import inspect
import logging
import os
import sys

from loguru import logger

_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<7} | {name}:{function}:{line} | {message}"
_CONFIGURED = False


class InterceptHandler(logging.Handler):
    """Handler that forwards stdlib logging messages to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = inspect.currentframe(), 0
        while frame:
            filename = frame.f_code.co_filename
            is_logging = filename == logging.__file__
            is_frozen = "importlib" in filename and "_bootstrap" in filename
            if depth > 0 and not (is_logging or is_frozen):
                break
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def parse_log_filter(value: str | None = None) -> tuple[str, dict[str | None, str | int | bool]]:
    """Parse JSONRPC_HTTP_LOG_FILTER.

    Format: "level" or "level,module=level,..."
    Examples:
        - "info" - global INFO level
        - "debug,httpx=warning" - global DEBUG, httpx at WARNING
        - "info,jsonrpc_http.rpc=false" - global INFO, jsonrpc_http.rpc disabled

    Returns:
        (global_level, module_filter_dict)
    """
    if value is None:
        value = os.getenv("JSONRPC_HTTP_LOG_FILTER", "info")
    parts = [p.strip() for p in value.lower().split(",") if p.strip()]

    filter_dict: dict[str | None, str | int | bool] = {}
    global_level = "info"

    for part in parts:
        if "=" in part:
            module, level = part.split("=", 1)
            module = module.strip()
            level = level.strip()
            filter_dict[module] = False if level == "false" else level.upper()
        else:
            global_level = part

    return global_level, filter_dict


def _setup_stdlib_intercept() -> None:
    """Forward stdlib logging to loguru, keeping the host's own handlers."""
    root_logger = logging.getLogger()
    if not any(isinstance(h, InterceptHandler) for h in root_logger.handlers):
        root_logger.addHandler(InterceptHandler())


def configure_logging(force: bool = False) -> None:
    """Configure process-level logging once.

    Replaces loguru's default sink with a stderr sink filtered by
    JSONRPC_HTTP_LOG_FILTER and routes stdlib logging (httpx, httpcore)
    through loguru.
    """
    global _CONFIGURED
    if _CONFIGURED and not force:
        return

    global_level, module_filter = parse_log_filter()

    logger.remove()
    logger.add(
        sys.stderr,
        level=global_level.upper(),
        format=_FORMAT,
        backtrace=False,
        diagnose=False,
        filter=module_filter,
    )
    _setup_stdlib_intercept()

    _CONFIGURED = True
