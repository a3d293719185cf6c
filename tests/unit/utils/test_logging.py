"""Unit tests for logging initialization in logging.py

Test coverage includes:

1. JSON formatting
   - Standard fields, `extra` fields and exception information.
   - Built-in LogRecord attributes never leak into the output.

2. Initialization
   - Root log level resolution from argument, LOG_LEVEL and the INFO default.
"""

import sys
import json
import logging

import pytest

from linkshortener.utils import initialize_logging
from linkshortener.utils.logging import JsonFormatter


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    level, handlers = root.level, root.handlers[:]
    yield
    root.setLevel(level)
    root.handlers[:] = handlers


def make_record(msg: str, **extra) -> logging.LogRecord:
    record = logging.LogRecord('linkshortener.test', logging.INFO, __file__, 1, msg, None, None)
    record.created = 1760529600.0  # 2025-10-15T12:00:00Z
    for key, value in extra.items():
        setattr(record, key, value)
    return record


# -------------------------------
# 1. JSON formatting
# -------------------------------


def test_json_formatter_standard_fields():
    log = json.loads(JsonFormatter().format(make_record('Short URL created.')))
    assert log == {
        'timestamp': '2025-10-15T12:00:00.000Z',
        'level': 'INFO',
        'logger': 'linkshortener.test',
        'message': 'Short URL created.',
    }


def test_json_formatter_includes_extras():
    log = json.loads(JsonFormatter().format(make_record('Short URL created.', shortcode='abc123', clicks=3)))
    assert log['shortcode'] == 'abc123'
    assert log['clicks'] == 3


def test_json_formatter_skips_record_attributes():
    record = make_record('Short URL created.', shortcode='abc123')
    record.taskName = 'worker-1'

    log = json.loads(JsonFormatter().format(record))

    assert set(log) == {'timestamp', 'level', 'logger', 'message', 'shortcode'}


def test_json_formatter_keeps_fixed_fields_over_extras():
    log = json.loads(JsonFormatter().format(make_record('Short URL created.', level='custom')))
    assert log['level'] == 'INFO'


def test_json_formatter_serializes_non_json_extras():
    log = json.loads(JsonFormatter().format(make_record('Short URL expired.', expiresAt=object)))
    assert isinstance(log['expiresAt'], str)


def test_json_formatter_includes_exception():
    try:
        raise RuntimeError('boom')
    except RuntimeError:
        record = logging.LogRecord('linkshortener.test', logging.ERROR, __file__, 1, 'failed', None, sys.exc_info())

    log = json.loads(JsonFormatter().format(record))
    assert 'RuntimeError: boom' in log['exception']


# -------------------------------
# 2. Initialization
# -------------------------------


def test_initialize_logging_with_explicit_level():
    initialize_logging('debug')
    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert any(isinstance(handler.formatter, JsonFormatter) for handler in root.handlers)


def test_initialize_logging_from_environment(monkeypatch):
    monkeypatch.setenv('LOG_LEVEL', 'warning')
    initialize_logging()
    assert logging.getLogger().level == logging.WARNING


def test_initialize_logging_defaults_to_info(monkeypatch):
    monkeypatch.delenv('LOG_LEVEL', raising=False)
    initialize_logging()
    assert logging.getLogger().level == logging.INFO
