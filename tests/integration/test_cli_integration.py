# Project: taskmill
# Filename: tests/integration/test_cli_integration.py
#
# File Description: Integration tests for the taskmill command
#
# By: Bast
"""Integration tests for the taskmill command.

These tests run ``python -m taskmill`` in a subprocess against projects
written to a temporary directory.

"""

import os
import subprocess
import sys
from pathlib import Path

import pytest

pytestmark = pytest.mark.integration

SRC = Path(__file__).resolve().parents[2] / "src"

COUNTER_TASK = '''
"""Count invocations of itself."""

from taskmill.libs import tasks

SHORTDOC = "Count"
CALLS = []


def run(args):
    CALLS.append(tasks.get_runner().current_project().app)
    print("calls:", len(CALLS))
    tasks.run("counter")
    return len(CALLS)
'''


def run_taskmill(*args: str, cwd: Path) -> subprocess.CompletedProcess:
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(
        [str(SRC), str(cwd / "tasks_src")] + ([env["PYTHONPATH"]] if env.get("PYTHONPATH") else [])
    )
    env["NO_COLOR"] = "1"
    return subprocess.run(
        [sys.executable, "-m", "taskmill", *args],
        cwd=cwd,
        env=env,
        capture_output=True,
        text=True,
        timeout=60,
    )


@pytest.fixture
def project(tmp_path: Path) -> Path:
    (tmp_path / "taskmill.toml").write_text('[project]\napp = "demo"\n')
    return tmp_path


class TestCommand:
    """Test the installed command end to end."""

    def test_help_lists_tasks(self, project: Path) -> None:
        """Test that help lists the built-in tasks."""
        result = run_taskmill("help", cwd=project)

        assert result.returncode == 0, result.stderr
        assert "taskmill clean" in result.stdout
        assert "taskmill project.info" in result.stdout

    def test_project_info(self, project: Path) -> None:
        """Test that project.info reads the project file."""
        result = run_taskmill("project.info", cwd=project)

        assert result.returncode == 0, result.stderr
        assert "==> demo" in result.stdout

    def test_unknown_task_exit_code(self, project: Path) -> None:
        """Test that an unknown task exits with 1."""
        result = run_taskmill("no.such.task", cwd=project)

        assert result.returncode == 1
        assert "could not be found" in result.stderr

    def test_bad_option_exit_code(self, project: Path) -> None:
        """Test that an unknown option exits with 2."""
        result = run_taskmill("--no-such-option", cwd=project)

        assert result.returncode == 2

    def test_task_from_extra_path_runs_once(self, project: Path) -> None:
        """Test that a task on the namespace path runs once even if it reruns itself."""
        tasks_dir = project / "tasks_src" / "taskmill" / "tasks"
        tasks_dir.mkdir(parents=True)
        (tasks_dir / "counter.py").write_text(COUNTER_TASK)

        result = run_taskmill("counter", cwd=project)

        assert result.returncode == 0, result.stderr
        assert result.stdout.count("calls:") == 1
