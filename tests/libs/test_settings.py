# Project: taskmill
# Filename: tests/libs/test_settings.py
#
# File Description: Tests for process settings
#
# By: Bast
"""Tests for process settings."""

import logging

import pytest

from taskmill.libs.exceptions import InvalidSettingError
from taskmill.libs.settings import Settings, parse_bool, parse_log_level


class TestParsing:
    """Test value parsing."""

    @pytest.mark.parametrize("value", ["1", "true", "YES", " on "])
    def test_true_values(self, value: str) -> None:
        """Test strings read as True."""
        assert parse_bool("X", value) is True

    @pytest.mark.parametrize("value", ["0", "false", "No", ""])
    def test_false_values(self, value: str) -> None:
        """Test strings read as False."""
        assert parse_bool("X", value) is False

    def test_bad_bool(self) -> None:
        """Test that other strings raise InvalidSettingError."""
        with pytest.raises(InvalidSettingError, match="X"):
            parse_bool("X", "maybe")

    def test_log_levels(self) -> None:
        """Test level names and numbers."""
        assert parse_log_level("debug") == logging.DEBUG
        assert parse_log_level("INFO") == logging.INFO
        assert parse_log_level(5) == 5

    def test_bad_log_level(self) -> None:
        """Test that an unknown level raises InvalidSettingError."""
        with pytest.raises(InvalidSettingError):
            parse_log_level("loud")


class TestSettings:
    """Test loading settings from the environment."""

    def test_defaults(self) -> None:
        """Test the default values."""
        assert Settings.PROJECT_FILE == "taskmill.toml"
        assert Settings.TASKS_NAMESPACE == "taskmill.tasks"
        assert Settings.LOG_LEVEL == logging.WARNING
        assert Settings.QUIET is False

    def test_load_env(self) -> None:
        """Test overriding from environment variables."""
        Settings.load_env(
            {
                "TASKMILL_LOG_LEVEL": "debug",
                "TASKMILL_LOG_UTC": "false",
                "TASKMILL_QUIET": "1",
            }
        )

        assert Settings.LOG_LEVEL == logging.DEBUG
        assert Settings.LOG_IN_UTC_TZ is False
        assert Settings.QUIET is True

    def test_load_env_ignores_unset(self) -> None:
        """Test that missing variables keep the defaults."""
        Settings.load_env({})

        assert Settings.LOG_LEVEL == logging.WARNING

    def test_reset(self) -> None:
        """Test restoring the defaults."""
        Settings.QUIET = True
        Settings.reset()
        assert Settings.QUIET is False
