"""Structured logging for pogo_ratings."""
from __future__ import annotations

import json
import logging
import threading
from datetime import datetime, timezone
from typing import Any, Dict

from .errors import sanitize_context

__all__ = [
    "StructuredLogFormatter",
    "configure_logging",
    "get_logger",
]


_STANDARD_ATTRS = set(logging.LogRecord("", 0, "", 0, "", (), None).__dict__.keys())
_LOGGER_NAME = "pogo_ratings"
_CONFIGURED = False
_LOCK = threading.Lock()


class StructuredLogFormatter(logging.Formatter):
    """Format log records as single-line JSON documents."""

    def format(self, record: logging.LogRecord) -> str:
        event = getattr(record, "event", None) or "log"
        payload: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "event": event,
            "message": record.getMessage(),
        }

        extras = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _STANDARD_ATTRS and key not in {"message", "asctime", "event"}
        }
        if extras:
            payload["context"] = sanitize_context(extras)
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, sort_keys=True, default=str)


def configure_logging(level: int | str | None = None) -> logging.Logger:
    """Install the structured handler once and return the package logger."""

    global _CONFIGURED
    with _LOCK:
        logger = logging.getLogger(_LOGGER_NAME)
        if not _CONFIGURED:
            handler = logging.StreamHandler()
            handler.setFormatter(StructuredLogFormatter())
            logger.addHandler(handler)
            logger.propagate = False
            _CONFIGURED = True
        if level is not None:
            logger.setLevel(level if isinstance(level, int) else logging.getLevelName(level))
        elif logger.level == logging.NOTSET:
            logger.setLevel(logging.WARNING)
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the package logger or one of its children.

    Library modules call this at import time, so it only names the logger;
    handlers are attached by :func:`configure_logging` when the embedding
    application asks for them.
    """

    if name:
        return logging.getLogger(f"{_LOGGER_NAME}.{name}")
    return logging.getLogger(_LOGGER_NAME)
