# Project: taskmill
# Filename: libs/tasks/discovery.py
#
# File Description: find and validate task modules
#
# By: Bast
"""Module for finding task modules.

A task is a module below the tasks namespace that defines a callable
``run`` taking one positional argument, the list of command line arguments.

Key Components:
    - load_tasks: import every task found in a list of locations.
    - load_all: `load_tasks` over every location of the namespace.
    - all_modules: tasks that are already imported, without importing more.
    - is_task / ensure_task: the validity checks.

Features:
    - Entries that do not look like a task module are skipped silently.
    - Subpackages are descended into, ``deps/get.py`` is the task
        ``deps.get``.
    - Discovery never records anything as run.

"""

# Standard Library
import inspect
import logging
import re
from collections.abc import Iterable
from pathlib import Path
from types import ModuleType

# 3rd Party

# Project
from taskmill.libs.tasks.imputils import ModuleLoader
from taskmill.libs.tasks.naming import is_task_segment

logger = logging.getLogger(__name__)

MODULE_FILE_RE = re.compile(r"^(?P<name>[A-Za-z][A-Za-z0-9_]*)\.py$")


def accepts_one_argument(func) -> bool:
    """Check that a callable can be called with a single positional argument."""
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        # builtins without signature metadata, trust them
        return True
    try:
        signature.bind(None)
    except TypeError:
        return False
    return True


def ensure_task(module: ModuleType | None) -> bool:
    """Return True if a loaded module defines a valid ``run(args)``."""
    if not isinstance(module, ModuleType):
        return False
    run = getattr(module, "run", None)
    return callable(run) and accepts_one_argument(run)


def is_task(module: ModuleType | None, namespace: str) -> bool:
    """Return True if a module lives below the namespace and is a valid task."""
    if not isinstance(module, ModuleType):
        return False
    return module.__name__.startswith(f"{namespace}.") and ensure_task(module)


def task_from_entry(
    loader: ModuleLoader, location: Path, entry: str, prefix: str
) -> tuple[str | None, bool]:
    """Parse a directory entry into a candidate module name.

    Returns:
        The candidate name (None when the entry does not parse) and whether
        the entry is a package to descend into.

    """
    if match := MODULE_FILE_RE.match(entry):
        name = match.group("name")
        if is_task_segment(name):
            return f"{prefix}{name}", False
        return None, False
    if is_task_segment(entry) and loader.is_package_dir(location, entry):
        return f"{prefix}{entry}", True
    return None, False


def _scan_location(
    loader: ModuleLoader, location: Path, prefix: str, found: dict[str, ModuleType]
) -> None:
    entries = loader.list_dir(location)
    if entries is None:
        return
    for entry in entries:
        candidate, is_package = task_from_entry(loader, location, entry, prefix)
        if candidate is None:
            continue
        module = loader.ensure_loaded(candidate)
        if ensure_task(module):
            found[candidate] = module  # type: ignore[assignment]
        elif module is None:
            logger.debug("skipping %s, it could not be loaded", candidate)
        if is_package and module is not None:
            _scan_location(loader, location / entry, f"{candidate}.", found)


def load_tasks(
    locations: Iterable[Path | str], loader: ModuleLoader | None = None
) -> list[ModuleType]:
    """Import and return every task found in the given locations.

    Args:
        locations: Directories that are part of the tasks namespace.
        loader: The loader to use, a default `ModuleLoader` otherwise.

    Returns:
        The task modules, without duplicates, sorted by module name.

    """
    loader = loader if loader is not None else ModuleLoader()
    found: dict[str, ModuleType] = {}
    for location in locations:
        _scan_location(loader, Path(location), f"{loader.namespace}.", found)
    logger.debug("found %d tasks", len(found))
    return [found[name] for name in sorted(found)]


def load_all(loader: ModuleLoader | None = None) -> list[ModuleType]:
    """Import and return every task in every location of the namespace."""
    loader = loader if loader is not None else ModuleLoader()
    return load_tasks(loader.code_paths(), loader)


def all_modules(loader: ModuleLoader | None = None) -> list[ModuleType]:
    """Return the task modules that are already loaded.

    Modules that are not loaded yet do not show up, use `load_all` to import
    every task first.

    """
    loader = loader if loader is not None else ModuleLoader()
    modules = []
    for name in sorted(loader.all_loaded()):
        module = loader.get_loaded(name)
        if is_task(module, loader.namespace):
            modules.append(module)
    return modules
