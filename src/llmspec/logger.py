"""
Logging setup for build runs.

Modules log through ``logging.getLogger(__name__)``; this module installs a
single handler on the ``llmspec`` logger. Two formats are supported:

- ``text``: ``[warn] message`` lines on stderr, coloured when attached to a TTY
- ``json``: one JSON object per line, for CI log shipping

Usage:
    from llmspec.logger import configure_logging

    configure_logging(level="info", fmt="text")
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional, TextIO

import click

ROOT_LOGGER_NAME = "llmspec"

_LEVEL_TAGS = {
    logging.DEBUG: ("debug", "blue"),
    logging.INFO: ("info", "cyan"),
    logging.WARNING: ("warn", "yellow"),
    logging.ERROR: ("error", "red"),
    logging.CRITICAL: ("error", "red"),
}


class ConsoleFormatter(logging.Formatter):
    """Render ``[warn] message`` with an optional coloured tag."""

    def __init__(self, color: bool = False):
        super().__init__()
        self.color = color

    def format(self, record: logging.LogRecord) -> str:
        tag, colour = _LEVEL_TAGS.get(record.levelno, ("log", None))
        prefix = f"[{tag}]"
        if self.color and colour:
            prefix = click.style(prefix, fg=colour)
        message = f"{prefix} {record.getMessage()}"
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        return message


class JsonFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False)


def configure_logging(
    level: str = "info",
    fmt: str = "text",
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Configure the ``llmspec`` logger.

    Replaces any handler installed by a previous call, so it is safe to call
    once per CLI invocation.
    """
    stream = stream or sys.stderr
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    for existing in list(logger.handlers):
        if getattr(existing, "_llmspec_handler", False):
            logger.removeHandler(existing)

    handler = logging.StreamHandler(stream)
    if fmt == "json":
        handler.setFormatter(JsonFormatter())
    else:
        isatty = getattr(stream, "isatty", None)
        handler.setFormatter(ConsoleFormatter(color=bool(isatty and isatty())))
    handler._llmspec_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.propagate = False
    return logger
