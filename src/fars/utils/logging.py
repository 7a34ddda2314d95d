"""Centralized logging setup and JSON formatter for structured logging."""

import json
import logging
from datetime import datetime
from typing import Any, Dict, Union

_PLAIN_FORMAT = "%(levelname)s %(name)s: %(message)s"

# Attributes every LogRecord carries; anything else came in via extra=
_RECORD_ATTRS = frozenset({
    "msg", "args", "levelname", "levelno", "pathname", "filename",
    "module", "exc_info", "exc_text", "stack_info", "lineno",
    "funcName", "created", "msecs", "relativeCreated", "thread",
    "threadName", "processName", "process", "name", "message",
    "taskName",
})


class JsonFormatter(logging.Formatter):
    """Emit log records as single-line JSON objects.

    Merges any `extra=` kwargs (year, state, path, ...) directly into the
    payload.
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
            if key not in _RECORD_ATTRS:
                payload[key] = value

        # safe fallback for non-serializable objects
        return json.dumps(payload, default=str)


def configure_logging(
    level: Union[int, str] = logging.WARNING,
    json_format: bool = False,
) -> logging.Handler:
    """Install a single stderr handler on the root logger.

    Replaces handlers left by a previous call so repeated CLI invocations
    in one process do not duplicate output.

    Args:
        level: Logging level name or number.
        json_format: Use ``JsonFormatter`` instead of the plain format.

    Returns:
        The installed handler.
    """
    if isinstance(level, str):
        name = level.upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {name}")

    handler = logging.StreamHandler()
    handler.setFormatter(
        JsonFormatter() if json_format else logging.Formatter(_PLAIN_FORMAT)
    )

    root = logging.getLogger()
    for existing in list(root.handlers):
        if getattr(existing, "_fars_handler", False):
            root.removeHandler(existing)
    handler._fars_handler = True  # type: ignore[attr-defined]
    root.addHandler(handler)
    root.setLevel(level)
    return handler
