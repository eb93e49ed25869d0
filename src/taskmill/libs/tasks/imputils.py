# Project: taskmill
# Filename: libs/tasks/imputils.py
#
# File Description: import utility functions
#
# By: Bast
"""Module loading for task discovery and resolution.

This module provides `ModuleLoader`, the only place where taskmill touches the
import system. Discovery and resolution go through it, so tests can swap in a
loader that serves modules from memory.

Key Components:
    - ModuleLoader: lists the task locations, lists the entries of a location,
        imports a module by name and reports on the loaded module table.

Features:
    - Task locations are the directories on the tasks namespace package
        ``__path__``; `ModuleLoader.add_path` adds one.
    - Import failures are reported as None and logged, never raised.

Usage:
    - ``ModuleLoader().ensure_loaded("taskmill.tasks.help")``
    - ``ModuleLoader().code_paths()``

Classes:
    - `ModuleLoader`: Import and module table access for one namespace.

"""

# Standard Library
import importlib
import logging
import sys
from importlib import import_module
from pathlib import Path
from types import ModuleType

# 3rd Party

# Project
from taskmill.libs.settings import Settings

logger = logging.getLogger(__name__)


def is_missing(exc: ModuleNotFoundError, full_import_location: str) -> bool:
    """Check if the import failed because the module itself does not exist.

    A ModuleNotFoundError raised for some other module, such as a missing
    dependency imported by the task, is not the task being absent.

    """
    if not exc.name:
        return True
    return full_import_location == exc.name or full_import_location.startswith(
        f"{exc.name}."
    )


class ModuleLoader:
    """Import modules below a tasks namespace."""

    def __init__(self, namespace: str | None = None) -> None:
        """Initialize the loader.

        Args:
            namespace: The dotted package holding the tasks, defaults to
                `Settings.TASKS_NAMESPACE`.

        """
        self.namespace: str = namespace or Settings.TASKS_NAMESPACE

    @property
    def nesting(self) -> int:
        """The number of dotted segments in the namespace."""
        return len(self.namespace.split("."))

    def namespace_package(self) -> ModuleType | None:
        return self.ensure_loaded(self.namespace)

    def code_paths(self) -> list[Path]:
        """Return every directory tasks are loaded from."""
        package = self.namespace_package()
        if package is None:
            return []
        return [Path(item) for item in getattr(package, "__path__", [])]

    def add_path(self, location: Path | str) -> bool:
        """Add a directory to the tasks namespace ``__path__``.

        Returns:
            True if the directory was added, False if it was already there or
            the namespace package cannot be imported.

        """
        package = self.namespace_package()
        if package is None:
            return False
        location = str(Path(location).resolve())
        if location in package.__path__:
            return False
        package.__path__.append(location)
        importlib.invalidate_caches()
        logger.debug("added task location %s", location)
        return True

    def remove_path(self, location: Path | str) -> bool:
        """Remove a directory previously added with `add_path`."""
        package = self.namespace_package()
        location = str(Path(location).resolve())
        if package is None or location not in package.__path__:
            return False
        package.__path__.remove(location)
        importlib.invalidate_caches()
        return True

    def list_dir(self, location: Path | str) -> list[str] | None:
        """Return the entry names at a location, None if it cannot be listed."""
        try:
            return sorted(entry.name for entry in Path(location).iterdir())
        except OSError:
            logger.debug("could not list task location %s", location)
            return None

    def is_package_dir(self, location: Path | str, entry: str) -> bool:
        return (Path(location) / entry / "__init__.py").is_file()

    def ensure_loaded(self, full_import_location: str) -> ModuleType | None:
        """Import a single module.

        Returns:
            The module, or None if it does not exist or failed to import.

        """
        if full_import_location in sys.modules:
            return sys.modules[full_import_location]

        try:
            return import_module(full_import_location)
        except ModuleNotFoundError as exc:
            if not is_missing(exc, full_import_location):
                logger.warning(
                    "%s could not be imported", full_import_location, exc_info=True
                )
            return None
        except Exception:
            logger.warning(
                "%s could not be imported", full_import_location, exc_info=True
            )
            return None

    def is_loaded(self, full_import_location: str) -> bool:
        return full_import_location in sys.modules

    def all_loaded(self) -> list[str]:
        """Return the names of every module already imported."""
        return list(sys.modules)

    def get_loaded(self, full_import_location: str) -> ModuleType | None:
        return sys.modules.get(full_import_location)

    def unload(self, full_import_location: str) -> list[str]:
        """Drop a module and its submodules from the module table.

        Returns:
            The names that were removed.

        """
        removed = [
            name
            for name in list(sys.modules)
            if name == full_import_location
            or name.startswith(f"{full_import_location}.")
        ]
        for name in removed:
            del sys.modules[name]
        return removed
