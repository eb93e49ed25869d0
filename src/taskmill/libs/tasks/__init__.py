# Project: taskmill
# Filename: libs/tasks/__init__.py
#
# File Description: task discovery, lookup and execution
#
# By: Bast
"""Task discovery, lookup and execution.

Tasks call each other through the module level functions::

    from taskmill.libs import tasks

    def run(args):
        tasks.run("deps.get")
"""

__all__ = [
    "NOOP",
    "ModuleLoader",
    "RecursionController",
    "RecursionGuard",
    "TaskInfo",
    "TaskLedger",
    "TaskRunner",
    "all_modules",
    "clear",
    "ensure_task",
    "get",
    "get_or_raise",
    "get_runner",
    "is_task",
    "load_all",
    "load_tasks",
    "moduledoc",
    "recursive",
    "reenable",
    "rerun",
    "run",
    "set_runner",
    "shortdoc",
    "task_name",
]

from .discovery import all_modules, ensure_task, is_task, load_all, load_tasks
from .imputils import ModuleLoader
from .ledger import TaskLedger
from .recursion import RecursionController, RecursionGuard
from .runner import (
    NOOP,
    TaskRunner,
    clear,
    get,
    get_or_raise,
    get_runner,
    reenable,
    rerun,
    run,
    set_runner,
)
from .taskinfo import TaskInfo, moduledoc, recursive, shortdoc, task_name
