"""Structured Logging — JSON formatter and setup for production observability.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (user_id, film_id, error_code, path) surfaced when present
    - JSON format in production, human-readable in development
    - setup_logging is idempotent: repeated create_app() calls never stack handlers

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - setup_logging called once on startup via lifespan
"""

import logging
import json
from datetime import datetime, timezone

EXTRA_KEYS = ("user_id", "film_id", "friend_id", "error_code", "path")


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in EXTRA_KEYS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


class _FilmorateHandler(logging.StreamHandler):
    """Marker type so setup_logging can find its own handler."""


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure logging for the application."""
    handler = next(
        (h for h in logging.root.handlers if isinstance(h, _FilmorateHandler)),
        None,
    )
    if handler is None:
        handler = _FilmorateHandler()
        logging.root.addHandler(handler)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
