# Project: taskmill
# Filename: libs/tasks/taskinfo.py
#
# File Description: read the metadata a task module declares
#
# By: Bast
"""Read the metadata declared by a task module.

A task module declares its metadata as module attributes::

    \"\"\"Fetch all dependencies.

    Longer help text shown by ``taskmill help deps.get``.
    \"\"\"

    SHORTDOC = "Fetch all dependencies"
    RECURSIVE = True

    def run(args):
        ...

A task without ``SHORTDOC`` is hidden from ``taskmill help`` but can still
be run. ``RECURSIVE`` defaults to False.
"""

# Standard Library
import inspect
from dataclasses import dataclass
from types import ModuleType

# 3rd Party

# Project
from taskmill.libs.settings import Settings
from taskmill.libs.tasks.naming import module_name_to_command


def _check_module(module: ModuleType) -> None:
    if not isinstance(module, ModuleType):
        raise TypeError(f"expected a task module, got {module!r}")


def moduledoc(module: ModuleType) -> str | None:
    """Return the cleaned module docstring, or None."""
    _check_module(module)
    if doc := module.__doc__:
        return inspect.cleandoc(doc)
    return None


def shortdoc(module: ModuleType) -> str | None:
    """Return the short description, None means the task is hidden."""
    _check_module(module)
    value = getattr(module, "SHORTDOC", None)
    return value if isinstance(value, str) and value else None


def recursive(module: ModuleType) -> bool:
    """Return True if the task runs once per sub-project of an umbrella."""
    _check_module(module)
    return getattr(module, "RECURSIVE", False) is True


def task_name(module: ModuleType, namespace: str | None = None) -> str:
    """Return the command name of a task module."""
    _check_module(module)
    namespace = namespace or Settings.TASKS_NAMESPACE
    return module_name_to_command(module.__name__, len(namespace.split(".")))


@dataclass(frozen=True)
class TaskInfo:
    """Everything a listing needs to know about one task."""

    name: str
    module: ModuleType
    moduledoc: str | None
    shortdoc: str | None
    recursive: bool

    @property
    def hidden(self) -> bool:
        return self.shortdoc is None

    @classmethod
    def from_module(cls, module: ModuleType, namespace: str | None = None) -> "TaskInfo":
        return cls(
            name=task_name(module, namespace),
            module=module,
            moduledoc=moduledoc(module),
            shortdoc=shortdoc(module),
            recursive=recursive(module),
        )
