"""Centralized JSON formatter and handler setup for structured logging."""

import json
import logging
import sys
from datetime import datetime
from typing import Any, Dict, Union

# LogRecord attributes that are not user-supplied ``extra=`` fields
_RESERVED_ATTRS = {
    "msg", "args", "levelname", "levelno", "pathname", "filename",
    "module", "exc_info", "exc_text", "stack_info", "lineno",
    "funcName", "created", "msecs", "relativeCreated", "thread",
    "threadName", "processName", "process", "name", "message",
    "taskName",
}


class JsonFormatter(logging.Formatter):
    """Emit log records as single-line JSON objects.

    Merges any `extra=` kwargs directly into the payload, so a failed
    year logged with ``extra={"year": 2014}`` can be filtered on ``year``.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created).isoformat() + "Z",
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)

        for key, value in getattr(record, "__dict__", {}).items():
            if key not in _RESERVED_ATTRS:
                payload[key] = value

        # safe fallback for non-serializable objects
        return json.dumps(payload, default=str)


def configure_logging(
    level: Union[int, str] = logging.INFO,
    json_output: bool = False,
) -> logging.Handler:
    """Attach a single stderr handler to the ``fars`` logger.

    Calling this again replaces the previously installed handler rather
    than stacking a second one.

    Args:
        level: Logging level name or number for the ``fars`` logger.
        json_output: Use :class:`JsonFormatter` instead of plain text.

    Returns:
        The installed handler.
    """
    if isinstance(level, str):
        level = level.upper()

    logger = logging.getLogger("fars")
    logger.setLevel(level)

    for existing in list(logger.handlers):
        if getattr(existing, "_fars_handler", False):
            logger.removeHandler(existing)

    handler = logging.StreamHandler(sys.stderr)
    if json_output:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(levelname)s %(name)s: %(message)s")
        )
    handler._fars_handler = True
    logger.addHandler(handler)
    return handler
