# Project: taskmill
# Filename: libs/tasks/recursion.py
#
# File Description: run recursive tasks in every sub-project of an umbrella
#
# By: Bast
"""Module for fanning a recursive task out over an umbrella's sub-projects.

Key Components:
    - RecursionGuard: a process wide flag held while a fan-out is in
        progress. A recursive task started while it is held runs once in the
        active project instead of fanning out again.
    - RecursionController: decides between one call in the active project
        and one call per sub-project.

"""

# Standard Library
import logging
import threading
from collections.abc import Callable
from types import ModuleType
from typing import Any

# 3rd Party

# Project
from taskmill.libs.projects import Project, ProjectStack
from taskmill.libs.tasks.taskinfo import recursive

logger = logging.getLogger(__name__)

# keys an umbrella never hands down to its sub-projects
EXCLUDED_INHERITED_KEYS = ("deps_path",)


class RecursionGuard:
    """A flag that at most one fan-out can hold at a time."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._active = False

    def acquire(self) -> bool:
        """Set the flag.

        Returns:
            True if the flag was set by this call, False if it was already set.

        """
        with self._lock:
            if self._active:
                return False
            self._active = True
            return True

    def release(self) -> None:
        with self._lock:
            self._active = False

    @property
    def active(self) -> bool:
        with self._lock:
            return self._active


# shared by every runner that is not given its own guard
PROCESS_GUARD = RecursionGuard()


class RecursionController:
    """Run a task callback once, or once per sub-project of an umbrella."""

    def __init__(self, projects: ProjectStack, guard: RecursionGuard | None = None) -> None:
        self.projects = projects
        self.guard = guard if guard is not None else RecursionGuard()

    def inherited_config(self) -> dict[str, Any]:
        config = self.projects.deps_config()
        for key in EXCLUDED_INHERITED_KEYS:
            config.pop(key, None)
        return config

    def dispatch(
        self,
        module: ModuleType,
        project: Project | None,
        invoke: Callable[[Project | None], Any],
    ) -> Any:
        """Call ``invoke`` for the active project or for each sub-project.

        When the active project is an umbrella, the task is recursive and no
        fan-out is already in progress, ``invoke`` is called once per
        sub-project with that sub-project active, and the list of results is
        returned in sub-project order. Otherwise ``invoke(project)`` is called
        once and its result returned as is.

        Exceptions from ``invoke`` propagate; the guard is released either way.

        """
        if (
            self.projects.is_umbrella()
            and recursive(module)
            and self.guard.acquire()
        ):
            try:
                config = self.inherited_config()
                results = []
                for child in self.projects.umbrella_children():
                    logger.debug("running %s in %s", module.__name__, child.app)
                    results.append(
                        self.projects.in_project(child.app, child.path, config, invoke)
                    )
                return results
            finally:
                self.guard.release()

        return invoke(project)
