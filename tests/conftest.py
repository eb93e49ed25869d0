# Project: taskmill
# Filename: tests/conftest.py
#
# File Description: Pytest configuration and shared fixtures
#
# By: Bast
"""Pytest configuration and shared fixtures for taskmill tests.

Key Fixtures:
    - task_dir: a temporary directory on the tasks namespace, with a helper to
        write task modules into it.
    - runner: a fresh `TaskRunner` installed as the process runner.
    - make_project: writes a ``taskmill.toml`` into a directory.
    - umbrella: an umbrella project with the sub-projects a, b and c.

"""

import importlib
import sys
import textwrap
from pathlib import Path

import pytest

# Ensure src/ is on the import path so taskmill.* imports resolve when running tests directly.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from taskmill.libs.projects import Project, ProjectStack  # noqa: E402
from taskmill.libs.settings import Settings  # noqa: E402
from taskmill.libs.tasks import ModuleLoader, TaskRunner, set_runner  # noqa: E402


class TaskDir:
    """A temporary task location and the task modules written to it."""

    def __init__(self, path: Path, loader: ModuleLoader) -> None:
        self.path = path
        self.loader = loader
        self.module_names: list[str] = []

    def write(self, name: str, source: str) -> str:
        """Write the task module ``name`` (dotted for nested tasks).

        Returns:
            The fully qualified module name.

        """
        *packages, leaf = name.split(".")
        directory = self.path
        for package in packages:
            directory = directory / package
            directory.mkdir(exist_ok=True)
            init = directory / "__init__.py"
            if not init.exists():
                init.write_text("")
        (directory / f"{leaf}.py").write_text(textwrap.dedent(source))
        importlib.invalidate_caches()
        module_name = f"{self.loader.namespace}.{name}"
        self.module_names.append(module_name)
        return module_name

    def cleanup(self) -> None:
        for module_name in self.module_names:
            top = module_name.split(".")[: self.loader.nesting + 1]
            self.loader.unload(".".join(top))
        self.loader.remove_path(self.path)


@pytest.fixture
def task_dir(tmp_path):
    """Provide a task location registered on the tasks namespace."""
    path = tmp_path / "tasks"
    path.mkdir()
    loader = ModuleLoader()
    loader.add_path(path)
    tdir = TaskDir(path, loader)
    yield tdir
    tdir.cleanup()


@pytest.fixture
def runner():
    """Provide a fresh runner with no active project."""
    task_runner = TaskRunner(ProjectStack())
    set_runner(task_runner)
    yield task_runner
    set_runner(None)


@pytest.fixture(autouse=True)
def _reset_settings():
    yield
    Settings.reset()


def write_project(path: Path, **config) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    lines = ["[project]"]
    for key, value in config.items():
        lines.append(f"{key} = {value!r}".replace("'", '"'))
    (path / Settings.PROJECT_FILE).write_text("\n".join(lines) + "\n")
    return path


@pytest.fixture
def make_project():
    """Provide a function writing a project file into a directory."""
    return write_project


@pytest.fixture
def umbrella(tmp_path):
    """Provide an umbrella project with the sub-projects a, b and c.

    The sub-project directories are created out of alphabetical order to
    check that enumeration is sorted.

    """
    root = write_project(tmp_path / "umbrella", app="umbrella", apps_path="apps")
    for app in ("c", "a", "b"):
        write_project(root / "apps" / app, app=app, deps_path="own_deps")
    (root / "apps" / "not_a_project").mkdir()
    return Project.load(root)
