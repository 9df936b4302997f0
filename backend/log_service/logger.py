"""
log-service — Structured Console Logging
========================================

What:  Builds the single logger used by the middleware, handlers and server.
How:   Structured fields travel on each record through `extra=`; the
       ConsoleFormatter renders them after the message in insertion order.

Console format:
    2024-01-15T12:00:00+00:00 INF request completed component=http request_id=a1b2c3d4e5f6a7b8 ...

    - timestamp: RFC3339, local offset, second precision
    - level:     DBG / INF / WRN / ERR / FTL
    - fields:    key=value, values with spaces or quotes are quoted

Usage:
    logger = build_logger(logging.INFO)
    logger.info("starting work", extra={"component": "worker", "task": "simulate"})
"""

import json
import logging
import sys
from datetime import datetime
from typing import IO, Any, Dict, Optional

LOGGER_NAME = "log_service"

LEVEL_ABBREVIATIONS = {
    logging.DEBUG: "DBG",
    logging.INFO: "INF",
    logging.WARNING: "WRN",
    logging.ERROR: "ERR",
    logging.CRITICAL: "FTL",
}

# Attributes every LogRecord carries; anything else came in through `extra=`.
_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__
) | {"message", "asctime", "taskName"}


def record_fields(record: logging.LogRecord) -> Dict[str, Any]:
    """Return the structured fields attached to a record, in insertion order."""
    return {
        key: value
        for key, value in record.__dict__.items()
        if key not in _RESERVED_ATTRS and not key.startswith("_")
    }


def _render_value(value: Any) -> str:
    if value is None:
        return ""
    text = str(value)
    if text == "" or any(ch.isspace() or ch in "\"=" for ch in text):
        return json.dumps(text)
    return text


class ConsoleFormatter(logging.Formatter):
    """Human-readable formatter for structured records."""

    def formatTime(self, record: logging.LogRecord, datefmt: Optional[str] = None) -> str:
        return datetime.fromtimestamp(record.created).astimezone().isoformat(timespec="seconds")

    def format(self, record: logging.LogRecord) -> str:
        level = LEVEL_ABBREVIATIONS.get(record.levelno, record.levelname[:3].upper())
        parts = [self.formatTime(record), level, record.getMessage()]
        parts.extend(
            f"{key}={_render_value(value)}" for key, value in record_fields(record).items()
        )
        line = " ".join(parts)
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def build_logger(
    level: int = logging.INFO,
    stream: Optional[IO[str]] = None,
    name: str = LOGGER_NAME,
) -> logging.Logger:
    """
    Create (or reset) the named logger with a single console handler.

    The logger does not propagate to the root logger, so uvicorn and
    third-party logging configuration never duplicate its records.
    """
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setFormatter(ConsoleFormatter())
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
