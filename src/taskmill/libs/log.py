# Project: taskmill
# Filename: libs/log.py
#
# File Description: setup logging with some customizations
#
# By: Bast
"""This module sets up logging for taskmill.

Every module logs through ``logging.getLogger(__name__)``; this module only
configures the root logger: a coloured console handler on stderr and an
optional rotating log file.
"""

# Standard Library
import datetime
import logging
import logging.handlers
import sys
from pathlib import Path

# Third Party

# Project
from taskmill.libs.settings import Settings

LOG_FORMAT = "%(asctime)s : %(levelname)-9s - %(name)-22s - %(message)s"


def formatTime_RFC3339_UTC(self, record, datefmt=None):
    """Format a record timestamp as RFC3339 in UTC.

    Args:
        record: The record object containing the timestamp.
        datefmt: Not used, but required by the logging module.

    """
    return (
        datetime.datetime.fromtimestamp(record.created)
        .astimezone(datetime.UTC)
        .isoformat()
    )


def formatTime_RFC3339(self, record, datefmt=None):
    """Format a record timestamp as RFC3339 in the local timezone.

    Args:
        record: The record object containing the timestamp.
        datefmt: Not used, but required by the logging module.

    """
    return datetime.datetime.fromtimestamp(record.created).astimezone().isoformat()


class CustomColorFormatter(logging.Formatter):
    """Logging colored formatter, adapted from https://stackoverflow.com/a/56944256/3638629."""

    error = "\x1b[38;5;136m"
    warning = "\x1b[33m"
    info = "\x1b[37m"
    debug = "\x1b[38;5;246m"
    critical = "\x1b[31m"
    reset = "\x1b[0m"

    def __init__(self, fmt: str):
        super().__init__()
        self.fmt = fmt
        self.FORMATS = {
            logging.DEBUG: self.debug + self.fmt + self.reset,
            logging.INFO: self.info + self.fmt + self.reset,
            logging.WARNING: self.warning + self.fmt + self.reset,
            logging.ERROR: self.error + self.fmt + self.reset,
            logging.CRITICAL: self.critical + self.fmt + self.reset,
        }

    def format(self, record: logging.LogRecord):
        log_fmt = self.FORMATS.get(record.levelno, self.fmt)
        formatter = logging.Formatter(log_fmt)
        return formatter.format(record)


class CustomConsoleHandler(logging.StreamHandler):
    def __init__(self, stream=None):
        super().__init__(stream=stream or sys.stderr)
        self.setLevel(logging.DEBUG)

    def emit(self, record):
        if Settings.QUIET and record.levelno < logging.ERROR:
            return
        super().emit(record)


def reset_logging():
    """Reset logging handlers and filters."""
    rootlogger = logging.getLogger()
    while rootlogger.handlers:
        handler = rootlogger.handlers[0]
        handler.acquire()
        try:
            handler.flush()
            handler.close()
        except (OSError, ValueError):
            pass
        finally:
            handler.release()
        rootlogger.removeHandler(handler)
    list(map(rootlogger.removeFilter, rootlogger.filters[:]))


def setup_loggers(log_level: int, log_file: Path | None = None):
    """Configure the root logger.

    Args:
        log_level: The level for the root logger.
        log_file: If given, also log to this file, rotated at midnight.

    """
    reset_logging()
    rootlogger = logging.getLogger()
    rootlogger.setLevel(log_level)

    console_handler = CustomConsoleHandler()
    console_handler.formatter = CustomColorFormatter(LOG_FORMAT)
    rootlogger.addHandler(console_handler)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.TimedRotatingFileHandler(
            filename=log_file, when="midnight"
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.formatter = logging.Formatter(LOG_FORMAT)
        rootlogger.addHandler(file_handler)

    if Settings.LOG_IN_UTC_TZ:
        logging.Formatter.formatTime = formatTime_RFC3339_UTC
    else:
        logging.Formatter.formatTime = formatTime_RFC3339
