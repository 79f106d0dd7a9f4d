"""
Logging for the governance core.

Every module logs through a child of the ``toolgate`` logger and passes
structured context with ``extra=``; the formatter below picks out the
governance fields (inspector, request, verdict, counters) and renders
them either as one JSON object per line or as a ``key=value`` tail.

    logger = get_logger("toolgate.inspection")
    logger.warning("Repeated tool call denied", extra={"tool_name": "fetch_user", "repeat_count": 6})

The ``toolgate`` logger writes to stderr and does not propagate, so an
application's root configuration does not duplicate its output.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

ROOT_LOGGER = "toolgate"

LOG_LEVELS: dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

_CONTEXT_FIELDS = (
    "inspector_name",
    "tool_request_id",
    "tool_name",
    "action",
    "mode",
    "tool_count",
    "result_count",
    "repeat_count",
    "error",
)


def context_fields(record: logging.LogRecord) -> dict[str, Any]:
    """Governance context attached to ``record``, in a fixed order.

    Fields that were not passed are left out; falsy values such as a
    zero count are kept.
    """
    return {
        key: getattr(record, key)
        for key in _CONTEXT_FIELDS
        if getattr(record, key, None) is not None
    }


class ToolgateFormatter(logging.Formatter):
    """Renders records as JSON lines or as ``time level logger: message | k=v``."""

    def __init__(self, json_output: bool = False):
        super().__init__()
        self._json_output = json_output

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat()
        message = record.getMessage()
        context = context_fields(record)
        exc_text = self.formatException(record.exc_info) if record.exc_info else None

        if self._json_output:
            payload: dict[str, Any] = {
                "timestamp": timestamp,
                "level": record.levelname,
                "logger": record.name,
                "message": message,
                **context,
            }
            if exc_text:
                payload["exception"] = exc_text
            return json.dumps(payload, default=str)

        line = f"{timestamp} {record.levelname:<8} {record.name}: {message}"
        if context:
            line += " | " + " ".join(f"{key}={value}" for key, value in context.items())
        if exc_text:
            line += "\n" + exc_text
        return line


def configure_logging(level: str = "INFO", json_output: bool = False) -> logging.Logger:
    """(Re)install the stderr handler on the ``toolgate`` logger.

    Unrecognised level names fall back to INFO. Handlers added by other
    code, such as test capture handlers, are left in place.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(LOG_LEVELS.get(level.strip().upper(), logging.INFO))

    for handler in list(logger.handlers):
        if handler.get_name() == ROOT_LOGGER:
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(ROOT_LOGGER)
    handler.setFormatter(ToolgateFormatter(json_output=json_output))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    return logging.getLogger(name)


configure_logging()
