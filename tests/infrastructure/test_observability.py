"""Structured Logging: verifies context fields, error summaries, and handler setup."""

import json
import logging
import sys

import pytest

from numcheck.core.errors import ErrorContext, ResultTooHighError
from numcheck.infrastructure.observability import (
    HANDLER_NAME, JSONFormatter, TextFormatter, setup_logging,
)


def _record(exc=None, **extra):
    exc_info = (type(exc), exc, None) if exc is not None else None
    record = logging.LogRecord(
        "numcheck.test", logging.WARNING, __file__, 1, "Rejected number %s", (2,), exc_info,
    )
    for k, v in extra.items():
        setattr(record, k, v)
    return record


def test_json_formatter_includes_core_fields():
    out = json.loads(JSONFormatter().format(_record()))
    assert out["level"] == "WARNING"
    assert out["logger"] == "numcheck.test"
    assert out["message"] == "Rejected number 2"
    assert "timestamp" in out


def test_json_formatter_surfaces_context_fields():
    out = json.loads(JSONFormatter().format(
        _record(record_id=2, error_code="RESULT_TOO_HIGH"),
    ))
    assert out["record_id"] == 2
    assert out["error_code"] == "RESULT_TOO_HIGH"
    assert "value" not in out


def test_numcheck_error_summarized_without_traceback():
    exc = ResultTooHighError(24, 10, ErrorContext(record_id=2))
    out = json.loads(JSONFormatter().format(_record(exc)))
    assert out["error_code"] == "RESULT_TOO_HIGH"
    assert out["error_category"] == "validation"
    assert out["record_id"] == 2
    assert "exception" not in out


def test_unexpected_exception_keeps_traceback():
    out = json.loads(JSONFormatter().format(_record(ConnectionResetError("gone"))))
    assert "ConnectionResetError: gone" in out["exception"]


def test_text_formatter_appends_context():
    line = TextFormatter().format(_record(record_id=2, value=24))
    assert line.endswith("numcheck.test: Rejected number 2 [record_id=2 value=24]")


def test_text_formatter_plain_without_context():
    assert TextFormatter().format(_record()).endswith("WARNING numcheck.test: Rejected number 2")


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    level, handlers = root.level, list(root.handlers)
    yield
    root.setLevel(level)
    root.handlers[:] = handlers


@pytest.mark.parametrize("fmt, formatter_type", [
    ("json", JSONFormatter), ("text", TextFormatter),
])
def test_setup_logging_installs_stderr_handler(restore_root_logger, fmt, formatter_type):
    handler = setup_logging("debug", fmt)
    assert handler in logging.getLogger().handlers
    assert type(handler.formatter) is formatter_type
    assert handler.stream is sys.stderr
    assert logging.getLogger().level == logging.DEBUG


def test_setup_logging_replaces_its_own_handler(restore_root_logger):
    first = setup_logging("info", "text")
    second = setup_logging("warning", "json")
    named = [h for h in logging.getLogger().handlers if h.get_name() == HANDLER_NAME]
    assert named == [second]
    assert first not in logging.getLogger().handlers
