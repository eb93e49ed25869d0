# Project: taskmill
# Filename: libs/tasks/naming.py
#
# File Description: mapping between task module names and command names
#
# By: Bast
"""Convert between task module names and the names used on the command line.

A task living in the module ``taskmill.tasks.deps.get`` is called
``deps.get``: the namespace segments are dropped and the rest is kept as is.
The conversion is invertible for every module name under the namespace.

Functions:
    - `module_name_to_command`: ``taskmill.tasks.deps.get`` -> ``deps.get``.
    - `command_to_module_name`: ``deps.get`` -> ``taskmill.tasks.deps.get``.
    - `to_task_name`: normalize a str or enum member into a task name.

"""

# Standard Library
import enum
import keyword

# 3rd Party

# Project
from taskmill.libs.settings import Settings


def is_task_segment(segment: str) -> bool:
    """Return True if a dotted segment may be part of a task name."""
    return (
        segment.isidentifier()
        and not segment.startswith("_")
        and not keyword.iskeyword(segment)
    )


def module_name_to_command(module_name: str, nesting: int = 2) -> str:
    """Return the command name for a fully qualified task module name.

    Args:
        module_name: The module's ``__name__``.
        nesting: The number of leading segments that make up the namespace.

    Raises:
        ValueError: If the name has no segments past the namespace.

    """
    segments = module_name.split(".")
    if len(segments) <= nesting:
        raise ValueError(f"{module_name!r} has nothing past its namespace")
    return ".".join(segments[nesting:])


def command_to_module_name(command: str, namespace: str | None = None) -> str | None:
    """Return the module name a command maps to, or None if it cannot map.

    Args:
        command: The command name, e.g. ``deps.get``.
        namespace: The tasks namespace, `Settings.TASKS_NAMESPACE` if None.

    """
    namespace = namespace or Settings.TASKS_NAMESPACE
    segments = command.split(".")
    if not all(is_task_segment(segment) for segment in segments):
        return None
    return f"{namespace}.{command}"


def to_task_name(task: str | enum.Enum) -> str:
    """Normalize a task name given as a string or an enum member.

    Raises:
        TypeError: For anything else.

    """
    if isinstance(task, enum.Enum):
        task = task.value
    if not isinstance(task, str):
        raise TypeError(f"task names must be str or enum members, got {task!r}")
    return str(task)
