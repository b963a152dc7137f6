"""Logging setup.

Lines are prefixed with a ``YYYY/MM/DD HH:MM:SS`` timestamp.

  stderr   progress lines and errors, always shown
  stdout   the final result line (``swagoas.result`` logger), dropped in quiet mode
"""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "swagoas"
RESULT_LOGGER_NAME = "swagoas.result"
LOG_FORMAT = "%(asctime)s %(message)s"
DATE_FORMAT = "%Y/%m/%d %H:%M:%S"

_handlers: list[logging.Handler] = []


def _is_result(record: logging.LogRecord) -> bool:
    return record.name == RESULT_LOGGER_NAME or record.name.startswith(RESULT_LOGGER_NAME + ".")


def configure(quiet: bool = False) -> logging.Logger:
    """Point the package logger at the current stdout/stderr.

    Safe to call more than once; the previous handlers are replaced.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in _handlers:
        logger.removeHandler(handler)
    _handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)

    progress = logging.StreamHandler(sys.stderr)
    progress.addFilter(lambda record: not _is_result(record))

    result = logging.StreamHandler(sys.stdout)
    result.addFilter(_is_result)
    result.setLevel(logging.WARNING if quiet else logging.INFO)

    for handler in (progress, result):
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        _handlers.append(handler)

    logger.setLevel(logging.INFO)
    return logger
