# Project: taskmill
# Filename: libs/projects/stack.py
#
# File Description: the stack of active projects
#
# By: Bast
"""Module for tracking the active project.

This module provides the `ProjectStack` class. The project on top of the
stack is the active one; entering a sub-project pushes it and leaving pops
it, so nested work always sees the innermost project.

Key Components:
    - ProjectStack: push/pop/peek of projects plus the umbrella helpers used
        by recursive tasks.
    - ChildProject: a sub-project of an umbrella as listed by
        `ProjectStack.umbrella_children`.

Usage:
    - ``stack.push(Project.load("."))`` at startup.
    - ``stack.in_project(app, path, config, fun)`` to run ``fun`` with a
        sub-project active.

Classes:
    - `ChildProject`: Represents one sub-project of an umbrella.
    - `ProjectStack`: Represents the stack of active projects.

"""

# Standard Library
import contextlib
import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, TypeVar

# 3rd Party

# Project
from taskmill.libs.projects.project import PATH_KEYS, Project
from taskmill.libs.settings import Settings

logger = logging.getLogger(__name__)

T = TypeVar("T")

# the configuration an umbrella hands down to its sub-projects
INHERITED_KEYS = ("build_path", "deps_path", "lockfile")


@dataclass(frozen=True)
class ChildProject:
    """A sub-project of an umbrella."""

    app: str
    path: Path
    opts: dict[str, Any] = field(default_factory=dict, compare=False, hash=False)


class ProjectStack:
    """The stack of active projects, the innermost on top."""

    def __init__(self, project: Project | None = None) -> None:
        self._lock = threading.RLock()
        self._stack: list[Project] = []
        if project is not None:
            self.push(project)

    def push(self, project: Project) -> None:
        with self._lock:
            self._stack.append(project)
        logger.debug("entered project %s (%s)", project.app, project.path)

    def pop(self) -> Project | None:
        with self._lock:
            project = self._stack.pop() if self._stack else None
        if project is not None:
            logger.debug("left project %s", project.app)
        return project

    def peek(self) -> Project | None:
        with self._lock:
            return self._stack[-1] if self._stack else None

    def clear(self) -> None:
        with self._lock:
            self._stack.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._stack)

    def current(self) -> Project | None:
        """Return the identity of the active project, None if there is none."""
        return self.peek()

    def is_umbrella(self) -> bool:
        project = self.peek()
        return project is not None and project.umbrella

    def umbrella_children(self) -> list[ChildProject]:
        """Return the sub-projects of the active umbrella, sorted by app name.

        A sub-project is a directory below the umbrella's ``apps_path`` that
        holds its own project file.

        """
        project = self.peek()
        if project is None or not project.umbrella:
            return []
        apps_path = project.resolve_path("apps_path")
        if apps_path is None or not apps_path.is_dir():
            logger.debug("umbrella %s has no apps directory", project.app)
            return []

        children = []
        for app_dir in sorted(apps_path.iterdir()):
            if not (app_dir / Settings.PROJECT_FILE).is_file():
                continue
            child = Project.load(app_dir)
            children.append(
                ChildProject(
                    app=child.app,
                    path=child.path,
                    opts={"path": child.path, "in_umbrella": True},
                )
            )
        return sorted(children, key=lambda child: child.app)

    def deps_config(self) -> dict[str, Any]:
        """Return the configuration sub-projects inherit from the active one.

        Path settings are made absolute so they keep pointing inside the
        umbrella once a sub-project is active.

        """
        project = self.peek()
        if project is None:
            return {}
        config: dict[str, Any] = {}
        for key in INHERITED_KEYS:
            if key not in project.config:
                continue
            if key in PATH_KEYS:
                config[key] = project.resolve_path(key)
            else:
                config[key] = project.config[key]
        return config

    def in_project(
        self,
        app: str,
        path: Path | str,
        config: dict[str, Any],
        fun: Callable[[Project], T],
    ) -> T:
        """Run ``fun`` with a sub-project active.

        The sub-project is loaded from ``path`` with ``config`` overriding its
        own project file, pushed, and the working directory is changed to it
        for the duration of the call. Both are restored even if ``fun``
        raises.

        """
        project = Project.load(path, {**config, "app": app})
        self.push(project)
        try:
            with contextlib.chdir(project.path):
                return fun(project)
        finally:
            self.pop()
