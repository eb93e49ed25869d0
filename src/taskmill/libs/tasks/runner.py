# Project: taskmill
# Filename: libs/tasks/runner.py
#
# File Description: resolve task names and run tasks at most once
#
# By: Bast
"""Module for looking up and running tasks.

This module provides the `TaskRunner` class, the entry point used by the
command line and by tasks that run other tasks. A runner owns the ledger of
started tasks, the project stack and the recursion controller.

Key Components:
    - TaskRunner: lookup (`get`, `get_or_raise`, `lookup`) and execution
        (`run`, `rerun`, `reenable`, `clear`).
    - NOOP: returned by `TaskRunner.run` when the task already ran.
    - get_runner / set_runner: the runner of the current process, plus
        module level shortcuts that delegate to it.

Features:
    - A task runs at most once per project until it is reenabled or the
        ledger is cleared, even if it raised the first time.
    - Recursive tasks run once per sub-project when started in an umbrella.

Usage:
    - ``runner.run("compile", ["--force"])``
    - from inside a task: ``from taskmill.libs import tasks; tasks.run("deps.get")``

Classes:
    - `TaskRunner`: Represents the task lookup and execution engine.

"""

# Standard Library
import enum
import logging
import threading
from types import ModuleType
from typing import Any

# 3rd Party

# Project
from taskmill.libs.exceptions import InvalidTaskError, NoTaskError
from taskmill.libs.projects import Project, ProjectStack
from taskmill.libs.tasks.discovery import ensure_task
from taskmill.libs.tasks.imputils import ModuleLoader
from taskmill.libs.tasks.ledger import TaskLedger
from taskmill.libs.tasks.naming import command_to_module_name, to_task_name
from taskmill.libs.tasks.recursion import (
    PROCESS_GUARD,
    RecursionController,
    RecursionGuard,
)

logger = logging.getLogger(__name__)

TaskName = str | enum.Enum


class _Noop:
    """The result of running a task that already ran."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOOP"


NOOP = _Noop()


class TaskRunner:
    """Resolve task names and run tasks at most once per project."""

    def __init__(
        self,
        projects: ProjectStack | None = None,
        loader: ModuleLoader | None = None,
        ledger: TaskLedger | None = None,
        guard: RecursionGuard | None = None,
    ) -> None:
        self.projects = projects if projects is not None else ProjectStack()
        self.loader = loader if loader is not None else ModuleLoader()
        self.ledger = ledger if ledger is not None else TaskLedger()
        self.recursion = RecursionController(
            self.projects, guard if guard is not None else PROCESS_GUARD
        )

    # lookup

    def lookup(self, task: TaskName) -> tuple[str, ModuleType | None]:
        """Resolve a task name without raising.

        Returns:
            ``("ok", module)``, ``("not_found", None)`` or ``("invalid", None)``.

        """
        name = to_task_name(task)
        module_name = command_to_module_name(name, self.loader.namespace)
        if module_name is None:
            return "not_found", None
        module = self.loader.ensure_loaded(module_name)
        if module is None:
            return "not_found", None
        if not ensure_task(module):
            return "invalid", None
        return "ok", module

    def get(self, task: TaskName) -> ModuleType:
        """Return the task module for a name.

        Raises:
            NoTaskError: If no module maps to the name.
            InvalidTaskError: If the module exists but is not a task.

        """
        status, module = self.lookup(task)
        if status == "not_found":
            raise NoTaskError(to_task_name(task))
        if status == "invalid":
            raise InvalidTaskError(to_task_name(task))
        return module  # type: ignore[return-value]

    get_or_raise = get

    # execution

    def current_project(self) -> Project | None:
        return self.projects.current()

    def run(self, task: TaskName, args: list[str] | None = None) -> Any:
        """Run a task unless it already ran in the active project.

        Args:
            task: The task name.
            args: The arguments passed to the task's ``run``.

        Returns:
            `NOOP` if the task already ran, the task's result otherwise, or a
            list of results (one per sub-project) for a recursive task started
            in an umbrella.

        Raises:
            NoTaskError: If no module maps to the name.
            InvalidTaskError: If the module exists but is not a task.

        """
        name = to_task_name(task)
        args = list(args or [])
        module = self.get(name)
        project = self.current_project()

        if not self.ledger.try_start(name, project):
            return NOOP

        def invoke(active: Project | None) -> Any:
            if active != project and not self.ledger.try_start(name, active):
                return NOOP
            logger.debug("running %s in %s", name, active)
            return module.run(args)

        return self.recursion.dispatch(module, project, invoke)

    def rerun(self, task: TaskName, args: list[str] | None = None) -> Any:
        """Reenable a task and run it again."""
        self.reenable(task)
        return self.run(task, args)

    def reenable(self, task: TaskName) -> None:
        """Make a task runnable again in the active project.

        In an umbrella, a recursive task is also reenabled in every
        sub-project.

        Raises:
            NoTaskError: If no module maps to the name.
            InvalidTaskError: If the module exists but is not a task.

        """
        name = to_task_name(task)
        module = self.get(name)
        project = self.current_project()
        self.ledger.delete(name, project)
        self.recursion.dispatch(
            module, project, lambda active: self.ledger.delete(name, active)
        )
        logger.debug("reenabled %s", name)

    def clear(self) -> None:
        """Forget every task that ran, in every project."""
        self.ledger.clear()


_runner_lock = threading.Lock()
_runner: TaskRunner | None = None


def get_runner() -> TaskRunner:
    """Return the runner of this process, creating it on first use."""
    global _runner
    with _runner_lock:
        if _runner is None:
            _runner = TaskRunner()
        return _runner


def set_runner(runner: TaskRunner | None) -> None:
    """Replace the runner of this process, None drops it."""
    global _runner
    with _runner_lock:
        _runner = runner


def run(task: TaskName, args: list[str] | None = None) -> Any:
    return get_runner().run(task, args)


def rerun(task: TaskName, args: list[str] | None = None) -> Any:
    return get_runner().rerun(task, args)


def reenable(task: TaskName) -> None:
    get_runner().reenable(task)


def clear() -> None:
    get_runner().clear()


def get(task: TaskName) -> ModuleType:
    return get_runner().get(task)


def get_or_raise(task: TaskName) -> ModuleType:
    return get_runner().get_or_raise(task)
