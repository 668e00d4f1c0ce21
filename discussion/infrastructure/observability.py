"""Structured Logging — JSON formatter and setup for the board's loggers.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (post_id, reply_id, thread_name, viewer, error_code) surfaced when present
    - JSON format for machines, human-readable text for the console

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - setup_logging called once by the entry point; library code only gets loggers
    - Replaces (not appends) handlers it installed before: safe to call twice
"""

import json
import logging
from datetime import datetime, timezone

_EXTRA_KEYS = ("post_id", "reply_id", "thread_name", "viewer", "error_code")
_HANDLER_NAME = "discussion"


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_KEYS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "text") -> logging.Handler:
    """Configure root logging for the application. Returns the installed handler."""
    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
