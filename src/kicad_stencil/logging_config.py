"""Logging setup for stencil generation.

Log records carry the stencil side (top/bottom) currently being written,
so messages from both layer runs can be told apart.
"""

from __future__ import annotations

import logging
import os
import sys
from contextvars import ContextVar
from typing import Any

side_ctx: ContextVar[str | None] = ContextVar("stencil_side", default=None)


def get_side() -> str | None:
    """Get the stencil side currently being generated, if any."""
    return side_ctx.get()


def setup_logging(
    level: int | str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """Configure logging for the application.

    Args:
        level: Logging level (e.g., 'DEBUG', 'INFO', 'ERROR').
               Defaults to LOGGING_LEVEL env var or 'INFO'.
        format_string: Custom log format string.

    Returns:
        The root logger configured for the application.
    """
    if level is None:
        level = os.environ.get("LOGGING_LEVEL", "INFO")

    if format_string is None:
        format_string = "%(asctime)s [%(levelname)s] [%(name)s] [side=%(side)s] %(message)s"

    logger = logging.getLogger()
    logger.setLevel(level)
    logger.handlers.clear()

    # MCP speaks over stdout, keep logs on stderr
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(format_string, defaults={"side": "-"}))
    logger.addHandler(console_handler)

    logging.getLogger("asyncio").setLevel("WARNING")
    logging.getLogger("asyncio").propagate = False

    return logger


class SideLoggerAdapter(logging.LoggerAdapter[Any]):
    """Logger adapter that adds the current stencil side to log records."""

    def process(self, msg: str, kwargs: Any) -> tuple[str, Any]:
        extra = kwargs.get("extra")
        if extra is None:
            extra = {}
        side = get_side()
        if side is not None:
            extra["side"] = side
        kwargs["extra"] = extra
        return msg, kwargs


def create_logger(name: str) -> SideLoggerAdapter:
    """Create and return a logger for a module.

    Args:
        name: The module name (typically __name__).
    """
    return SideLoggerAdapter(logging.getLogger(name), {})
