# Project: taskmill
# Filename: libs/settings.py
#
# File Description: process wide settings
#
# By: Bast
"""Process wide settings for taskmill.

Settings are class attributes on `Settings`, read by the rest of the code
directly. Defaults live here, `Settings.load_env` overrides them from the
environment and the command line overrides them again.

Environment variables:
    - TASKMILL_LOG_LEVEL: a logging level name (DEBUG, INFO, ...).
    - TASKMILL_LOG_UTC: "1"/"true" to log timestamps in UTC.
    - TASKMILL_QUIET: "1"/"true" to silence console logging.

"""

# Standard Library
import logging
import os
from collections.abc import Mapping

# 3rd Party

# Project
from taskmill.libs.exceptions import InvalidSettingError

TRUE_VALUES = ("1", "true", "yes", "on")
FALSE_VALUES = ("0", "false", "no", "off", "")


def parse_bool(name: str, value: str) -> bool:
    """Convert an environment string to a bool.

    Raises:
        InvalidSettingError: If the value is not a recognised boolean.

    """
    lowered = value.strip().lower()
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False
    raise InvalidSettingError(f"{name}: {value!r} is not a boolean")


def parse_log_level(value: str | int) -> int:
    """Convert a level name or number into a logging level.

    Raises:
        InvalidSettingError: If the level is unknown.

    """
    if isinstance(value, int):
        return value
    level = logging.getLevelName(value.strip().upper())
    if not isinstance(level, int):
        raise InvalidSettingError(f"unknown log level {value!r}")
    return level


class Settings:
    """Settings shared by the whole process."""

    PROJECT_FILE = "taskmill.toml"
    TASKS_NAMESPACE = "taskmill.tasks"
    LOG_LEVEL = logging.WARNING
    LOG_IN_UTC_TZ = True
    QUIET = False

    @classmethod
    def load_env(cls, environ: Mapping[str, str] | None = None) -> None:
        """Override the defaults from environment variables."""
        environ = os.environ if environ is None else environ
        if "TASKMILL_LOG_LEVEL" in environ:
            cls.LOG_LEVEL = parse_log_level(environ["TASKMILL_LOG_LEVEL"])
        if "TASKMILL_LOG_UTC" in environ:
            cls.LOG_IN_UTC_TZ = parse_bool(
                "TASKMILL_LOG_UTC", environ["TASKMILL_LOG_UTC"]
            )
        if "TASKMILL_QUIET" in environ:
            cls.QUIET = parse_bool("TASKMILL_QUIET", environ["TASKMILL_QUIET"])

    @classmethod
    def reset(cls) -> None:
        """Restore the defaults."""
        cls.LOG_LEVEL = logging.WARNING
        cls.LOG_IN_UTC_TZ = True
        cls.QUIET = False
