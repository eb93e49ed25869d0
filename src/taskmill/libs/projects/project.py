# Project: taskmill
# Filename: libs/projects/project.py
#
# File Description: a project and its configuration
#
# By: Bast
"""Projects and their ``taskmill.toml`` file.

A project is a directory, optionally holding a ``taskmill.toml``::

    [project]
    app = "shop"
    version = "0.1.0"
    apps_path = "apps"
    build_path = "_build"
    deps_path = "deps"
    lockfile = "taskmill.lock"

A project with an ``apps_path`` is an umbrella: every directory below
``apps_path`` with its own ``taskmill.toml`` is one of its sub-projects.
"""

# Standard Library
import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

# 3rd Party

# Project
from taskmill.libs.exceptions import ProjectConfigError
from taskmill.libs.settings import Settings

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "version": "0.0.0",
    "build_path": "_build",
    "deps_path": "deps",
    "lockfile": "taskmill.lock",
}

PATH_KEYS = ("apps_path", "build_path", "deps_path", "lockfile")


def read_project_file(project_file: Path) -> dict[str, Any]:
    """Return the ``[project]`` table of a project file.

    Raises:
        ProjectConfigError: If the file is not valid TOML or the table is
            not a table.

    """
    try:
        with project_file.open("rb") as fileh:
            data = tomllib.load(fileh)
    except tomllib.TOMLDecodeError as exc:
        raise ProjectConfigError(f"{project_file}: {exc}") from exc
    table = data.get("project", {})
    if not isinstance(table, dict):
        raise ProjectConfigError(f"{project_file}: [project] must be a table")
    return table


@dataclass(frozen=True)
class Project:
    """A project, identified by its app name and directory.

    Two Project objects for the same app and directory compare equal, so
    they can key run records. The configuration is not part of the identity.

    """

    app: str
    path: Path
    config: dict[str, Any] = field(default_factory=dict, compare=False, hash=False)

    @classmethod
    def load(cls, path: Path | str, config: dict[str, Any] | None = None) -> "Project":
        """Load the project in a directory.

        Args:
            path: The project directory.
            config: Configuration that overrides the project file, used for
                sub-projects inheriting from their umbrella.

        Raises:
            ProjectConfigError: If the project file is invalid.

        """
        path = Path(path).resolve()
        project_file = path / Settings.PROJECT_FILE
        merged = dict(DEFAULT_CONFIG)
        if project_file.is_file():
            merged.update(read_project_file(project_file))
        else:
            logger.debug("no %s in %s, using defaults", Settings.PROJECT_FILE, path)
        if config:
            merged.update(config)
        app = merged.pop("app", None) or path.name
        if not isinstance(app, str):
            raise ProjectConfigError(f"{project_file}: app must be a string")
        return cls(app=app, path=path, config=merged)

    @property
    def umbrella(self) -> bool:
        return bool(self.config.get("apps_path"))

    def resolve_path(self, key: str) -> Path | None:
        """Return a path setting made absolute against the project directory."""
        value = self.config.get(key)
        if value is None:
            return None
        return (self.path / value).resolve()

    def __str__(self) -> str:
        return self.app
