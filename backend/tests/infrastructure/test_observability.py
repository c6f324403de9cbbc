"""JSONFormatter — structured log lines with surfaced extras."""

import json
import logging
import sys

from signo_connect.infrastructure.observability import JSONFormatter


def _record(msg="hello", **extra):
    record = logging.LogRecord("signo.test", logging.WARNING, __file__, 1, msg, None, None)
    record.__dict__.update(extra)
    return record


def test_base_fields_present():
    line = json.loads(JSONFormatter().format(_record()))
    assert line["level"] == "WARNING"
    assert line["logger"] == "signo.test"
    assert line["message"] == "hello"
    assert "timestamp" in line


def test_known_extras_surfaced_unknown_dropped():
    line = json.loads(JSONFormatter().format(
        _record(status_code=404, path="/api/jobs", secret="x"),
    ))
    assert line["status_code"] == 404
    assert line["path"] == "/api/jobs"
    assert "secret" not in line


def test_exception_is_formatted():
    try:
        raise ValueError("boom")
    except ValueError:
        record = _record()
        record.exc_info = sys.exc_info()
    line = json.loads(JSONFormatter().format(record))
    assert "ValueError: boom" in line["exception"]
