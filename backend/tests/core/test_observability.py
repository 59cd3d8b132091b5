"""Structured Logging: JSONFormatter output shape."""

import json
import logging

from defense_desk.infrastructure.observability import JSONFormatter


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "defense_desk.test", logging.INFO, __file__, 1, "hello %s", ("world",), None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formats_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "INFO"
    assert log["logger"] == "defense_desk.test"
    assert log["message"] == "hello world"
    assert "timestamp" in log


def test_surfaces_known_extra_fields_only():
    log = json.loads(JSONFormatter().format(
        _record(session_id="7", registration_count=4, unrelated="x"),
    ))
    assert log["session_id"] == "7"
    assert log["registration_count"] == 4
    assert "unrelated" not in log
