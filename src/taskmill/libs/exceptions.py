# Project: taskmill
# Filename: libs/exceptions.py
#
# File Description: custom exception hierarchy
#
# By: Bast
"""Custom exception hierarchy for taskmill.

This module provides a structured hierarchy of exceptions used throughout
taskmill. All custom exceptions inherit from TaskmillError, making it easy
to catch every taskmill error while still allowing fine-grained handling of
specific cases.

Key Components:
    - TaskmillError: Base exception for all taskmill errors.
    - TaskException: Task lookup errors (not found, not a task).
    - ProjectException: Project context and project file errors.
    - ConfigurationException: Settings errors.

Usage:
    - Raise specific exceptions for different error conditions.
    - Catch TaskmillError to handle all taskmill errors.
    - Errors raised by a task's own ``run`` are never wrapped in these.

Classes:
    - `TaskmillError`: Base exception class for all taskmill errors.
    - `TaskException`: Exception for task lookup errors.
    - `NoTaskError`: Exception when no task matches a name.
    - `InvalidTaskError`: Exception when a module is found but is not a task.
    - `TaskUsageError`: Exception for bad arguments given to a task.
    - `ProjectException`: Exception for project related errors.
    - `ProjectConfigError`: Exception for an unreadable project file.
    - `ConfigurationException`: Exception for configuration errors.
    - `InvalidSettingError`: Exception for invalid setting values.

"""


class TaskmillError(Exception):
    """Base exception class for all taskmill errors."""


# ============================================================================
# Task Exceptions
# ============================================================================


class TaskException(TaskmillError):
    """Base exception for task lookup errors.

    The name that was looked up is kept in ``task`` so the caller facing
    layer can build its own message.

    """

    def __init__(self, task: str, message: str | None = None) -> None:
        """Initialize the exception with the task name that failed.

        Args:
            task: The task name as it was requested.
            message: An optional message, a default one is built otherwise.

        """
        self.task = task
        super().__init__(message or self.default_message(task))

    @staticmethod
    def default_message(task: str) -> str:
        return f"task {task!r} failed"


class NoTaskError(TaskException):
    """Exception raised when no loadable task matches the requested name."""

    @staticmethod
    def default_message(task: str) -> str:
        return f"The task {task!r} could not be found"


class InvalidTaskError(TaskException):
    """Exception raised when a module was loaded but is not a valid task.

    A valid task defines a callable ``run`` accepting a single positional
    argument.

    """

    @staticmethod
    def default_message(task: str) -> str:
        return f"The task {task!r} does not define a run(args) function"


class TaskUsageError(TaskmillError):
    """Exception raised by a task when it is given arguments it cannot use."""


# ============================================================================
# Project Exceptions
# ============================================================================


class ProjectException(TaskmillError):
    """Base exception for all project related errors."""


class ProjectConfigError(ProjectException):
    """Exception raised when a project file cannot be read or is invalid."""


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigurationException(TaskmillError):
    """Base exception for all configuration related errors."""


class InvalidSettingError(ConfigurationException):
    """Exception raised when a setting has an invalid value."""
