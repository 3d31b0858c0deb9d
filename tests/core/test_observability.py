"""Structured logging."""

import json
import logging

from pm_api.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "pm_api.test", logging.INFO, __file__, 1, "Task %s created", ("t1",), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_core_fields():
    payload = json.loads(JSONFormatter().format(_record()))
    assert payload["level"] == "INFO"
    assert payload["logger"] == "pm_api.test"
    assert payload["message"] == "Task t1 created"


def test_json_formatter_surfaces_known_extras_only():
    payload = json.loads(JSONFormatter().format(
        _record(resource="Task", duration_ms=12, unrelated="x"),
    ))
    assert payload["resource"] == "Task"
    assert payload["duration_ms"] == 12
    assert "unrelated" not in payload


def test_setup_logging_does_not_stack_handlers():
    root = logging.getLogger()
    previous_level = root.level
    try:
        first = setup_logging("DEBUG", "json")
        second = setup_logging("WARNING", "text")
        assert first not in root.handlers
        assert second in root.handlers
        assert root.level == logging.WARNING
    finally:
        root.removeHandler(second)
        root.setLevel(previous_level)
