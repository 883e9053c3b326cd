"""Structured Logging: formatters that surface number-check context.

Invariants:
    - Every line carries timestamp, level, logger name, and message
    - record_id, value, error_code and operation are emitted whenever a call site
      passed them via extra=
    - A NumCheckError in exc_info is summarized by code and category; only
      unexpected exceptions get a full traceback
    - Logs go to stderr so CLI verdicts on stdout stay machine-readable
    - setup_logging is idempotent: a second call replaces the handler it installed

Design Decisions:
    - Stdlib logging with custom formatters, no logging dependency
    - JSON for log shippers, key=value suffixes for terminals
"""

import logging
import json
import sys
from datetime import datetime, timezone

from numcheck.core.errors import NumCheckError

HANDLER_NAME = "numcheck"
CONTEXT_FIELDS = ("record_id", "value", "error_code", "operation")


def _context(record: logging.LogRecord) -> dict:
    fields = {
        key: record.__dict__[key]
        for key in CONTEXT_FIELDS
        if record.__dict__.get(key) is not None
    }
    exc = record.exc_info[1] if record.exc_info else None
    if isinstance(exc, NumCheckError):
        fields.setdefault("error_code", exc.code)
        fields["error_category"] = exc.category.value
        if exc.context.record_id is not None:
            fields.setdefault("record_id", exc.context.record_id)
    return fields


def _is_expected(record: logging.LogRecord) -> bool:
    return bool(record.exc_info) and isinstance(record.exc_info[1], NumCheckError)


class JSONFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **_context(record),
        }
        if record.exc_info and not _is_expected(record):
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


class TextFormatter(logging.Formatter):
    """Human-readable line with context appended as key=value pairs."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().formatMessage(self._prepare(record))
        fields = _context(record)
        if fields:
            line += " [" + " ".join(f"{k}={v}" for k, v in fields.items()) + "]"
        if record.exc_info and not _is_expected(record):
            line += "\n" + self.formatException(record.exc_info)
        return line

    def _prepare(self, record: logging.LogRecord) -> logging.LogRecord:
        record.message = record.getMessage()
        record.asctime = self.formatTime(record, self.datefmt)
        return record


def setup_logging(level: str = "INFO", fmt: str = "text") -> logging.Handler:
    """Install (or replace) the numcheck stderr handler on the root logger."""
    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
        root.removeHandler(existing)
    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(JSONFormatter() if fmt == "json" else TextFormatter())
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
