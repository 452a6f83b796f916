"""Structured logging - JSON formatter fields and handler setup."""

import json
import logging
import sys

import pytest

from docuvault.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "docuvault.services.document_store", logging.WARNING,
        __file__, 1, "Could not save documents", None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "WARNING"
    assert log["logger"] == "docuvault.services.document_store"
    assert log["message"] == "Could not save documents"
    assert "timestamp" in log


def test_json_formatter_surfaces_extras():
    log = json.loads(JSONFormatter().format(
        _record(error_code="STORAGE_ERROR", backend="file", operation="write"),
    ))
    assert log["error_code"] == "STORAGE_ERROR"
    assert log["backend"] == "file"
    assert log["operation"] == "write"
    assert "document_id" not in log


def test_json_formatter_includes_exception():
    try:
        raise ValueError("boom")
    except ValueError:
        record = _record()
        record.exc_info = sys.exc_info()
    log = json.loads(JSONFormatter().format(record))
    assert "ValueError: boom" in log["exception"]


@pytest.fixture
def restore_root_logging():
    handlers = list(logging.root.handlers)
    level = logging.root.level
    yield
    logging.root.handlers = handlers
    logging.root.setLevel(level)


def test_setup_logging_is_idempotent(restore_root_logging):
    setup_logging("DEBUG", "json")
    handler = setup_logging("WARNING", "text")
    ours = [h for h in logging.root.handlers if h.get_name() == "docuvault"]
    assert ours == [handler]
    assert logging.root.level == logging.WARNING
    assert not isinstance(handler.formatter, JSONFormatter)


def test_setup_logging_unknown_level_falls_back_to_info(restore_root_logging):
    setup_logging("chatty", "json")
    assert logging.root.level == logging.INFO
