"""Structured Logging — JSON formatter fields and idempotent setup."""

import json
import logging

from filmorate.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra):
    record = logging.LogRecord(
        "filmorate.core.film_catalog", logging.INFO, __file__, 1,
        "User %s liked film %s", (3, 7), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_emits_core_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "filmorate.core.film_catalog"
    assert log["message"] == "User 3 liked film 7"
    assert "timestamp" in log


def test_json_formatter_surfaces_extra_keys():
    log = json.loads(JSONFormatter().format(_record(film_id=7, user_id=3)))
    assert log["film_id"] == 7
    assert log["user_id"] == 3
    assert "friend_id" not in log


def test_setup_logging_does_not_stack_handlers():
    setup_logging("DEBUG", "json")
    after_first = len(logging.root.handlers)
    setup_logging("INFO", "text")
    assert len(logging.root.handlers) == after_first
    assert logging.root.level == logging.INFO
