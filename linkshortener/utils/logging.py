"""Structured logging for the shortener

`initialize_logging()` routes the root logger to stdout and renders every
record as a single JSON object. Fields passed through `extra=` become top
level keys next to the fixed ones:

    {"timestamp": "2025-10-15T12:00:00.000Z", "level": "INFO",
     "logger": "linkshortener.dao.memory.short_url_memory_dao",
     "message": "Short URL created.", "shortcode": "abc123"}

Values that JSON can't represent (datetimes, for instance) are written
through str().

Call `initialize_logging()` once when the process starts. `create_shortener()`
in linkshortener.service does so with the configured level.
"""

import os
import json
import time
import logging
import logging.config
from typing import Any

from linkshortener.utils.constants import LOG_LEVEL_ENV


# Attributes every LogRecord carries, plus the ones Formatter.format() adds
_RECORD_ATTRS = frozenset(vars(logging.LogRecord('', logging.NOTSET, '', 0, '', None, None))) | {'message', 'asctime'}


class JsonFormatter(logging.Formatter):
    """Render log records as one-line JSON documents"""

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        seconds = time.strftime('%Y-%m-%dT%H:%M:%S', time.gmtime(record.created))
        return f'{seconds}.{int(record.created % 1 * 1000):03d}Z'

    def format(self, record: logging.LogRecord) -> str:
        document: dict[str, Any] = {
            'timestamp': self.formatTime(record),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }
        if record.exc_info:
            document['exception'] = self.formatException(record.exc_info)

        extras = {key: value for key, value in vars(record).items() if key not in _RECORD_ATTRS}
        for key, value in extras.items():
            document.setdefault(key, value)

        return json.dumps(document, default=str)


def _logging_config(level: str) -> dict[str, Any]:
    return {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {'json': {'()': JsonFormatter}},
        'handlers': {
            'stdout': {
                'class': 'logging.StreamHandler',
                'formatter': 'json',
                'stream': 'ext://sys.stdout',
            }
        },
        'root': {'level': level, 'handlers': ['stdout']},
    }


def initialize_logging(level: str | None = None) -> None:
    """Send JSON log lines from the root logger to stdout

    Args:
        level (Optional[str]):
            Level name, case-insensitive. When omitted, LOG_LEVEL is used,
            then 'INFO'.
    """
    level = level or os.getenv(LOG_LEVEL_ENV) or 'INFO'
    logging.config.dictConfig(_logging_config(level.upper()))
