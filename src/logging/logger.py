# src/logging/logger.py - v3
"""Formatters and setup for the ``linksync`` logger tree.

Every record carries the active view, page and operation from
``logging.context`` so merges and votes can be traced to the cached page
they touched.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

from linksync.logging.context import get_context

if TYPE_CHECKING:
    from linksync.config.settings import Settings

ROOT_LOGGER = "linksync"


class JsonFormatter(logging.Formatter):
    """One JSON object per line; context fields sit next to the message."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **get_context().as_dict(),
        }
        if record.exc_info and record.exc_info[1] is not None:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class TextFormatter(logging.Formatter):
    """Single-line format for the CLI: ``time LEVEL logger [view p2] (op) - msg``."""

    def format(self, record: logging.LogRecord) -> str:
        ctx = get_context()
        stamp = datetime.fromtimestamp(record.created, timezone.utc).strftime("%H:%M:%S")
        line = f"{stamp} {record.levelname:<7} {record.name}"
        if ctx.view:
            page = f" p{ctx.page}" if ctx.page is not None else ""
            line += f" [{ctx.view}{page}]"
        if ctx.operation:
            line += f" ({ctx.operation})"
        return f"{line} - {record.getMessage()}"


def setup_logging(
    level: str = "INFO",
    log_format: str = "json",
    log_file: str | None = None,
    rotation: str = "10MB",
    retention: int = 30,
) -> logging.Logger:
    """Attach console (and optional rotating file) handlers to ``linksync``.

    Re-running replaces the handlers instead of stacking them.
    """
    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()

    formatter: logging.Formatter = JsonFormatter() if log_format == "json" else TextFormatter()
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        from linksync.logging.handlers import create_rotating_handler

        handlers.append(create_rotating_handler(log_file, rotation=rotation, retention=retention))

    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
    return root


def setup_logging_from_settings(
    settings: Settings, level: str | None = None, log_format: str | None = None
) -> logging.Logger:
    """``setup_logging`` driven by ``Settings``; arguments override it."""
    return setup_logging(
        level=level or settings.log_level,
        log_format=log_format or settings.log_format,
        log_file=settings.log_file or None,
        rotation=settings.log_rotation,
        retention=settings.log_retention,
    )
