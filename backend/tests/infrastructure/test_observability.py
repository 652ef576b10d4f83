"""Structured Logging — JSONFormatter output and setup_logging idempotence."""

import json
import logging

from albums_api.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "albums_api.test", logging.WARNING, __file__, 1, "Album %s missing", ("9",), None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_core_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "WARNING"
    assert log["logger"] == "albums_api.test"
    assert log["message"] == "Album 9 missing"
    assert "timestamp" in log


def test_json_formatter_surfaces_extras_when_present():
    log = json.loads(JSONFormatter().format(
        _record(album_id="9", error_code="ALBUM_NOT_FOUND", path="/albums/9"),
    ))
    assert log["album_id"] == "9"
    assert log["error_code"] == "ALBUM_NOT_FOUND"
    assert log["path"] == "/albums/9"
    assert "method" not in log


def test_setup_logging_is_idempotent():
    before = list(logging.root.handlers)
    first = setup_logging("DEBUG", "json")
    second = setup_logging("INFO", "text")
    try:
        assert first not in logging.root.handlers
        assert second in logging.root.handlers
        assert isinstance(second.formatter, logging.Formatter)
        assert not isinstance(second.formatter, JSONFormatter)
        assert logging.root.level == logging.INFO
    finally:
        logging.root.removeHandler(second)
        assert logging.root.handlers == before
