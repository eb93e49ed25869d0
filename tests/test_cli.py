# Project: taskmill
# Filename: tests/test_cli.py
#
# File Description: Tests for the taskmill command line
#
# By: Bast
"""Tests for the taskmill command line.

Test Classes:
    - `TestParser`: command line parsing.
    - `TestSuggest`: "did you mean" suggestions.
    - `TestMain`: running tasks and exit codes.

"""

import logging

import pytest

from taskmill import __version__
from taskmill.cli import build_parser, main, suggest
from taskmill.libs.projects import ProjectStack
from taskmill.libs.tasks import TaskRunner, get_runner, set_runner

RAISING_TASK = """
SHORTDOC = "Always fails"

def run(args):
    raise RuntimeError("boom")
"""


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    handlers = root.handlers[:]
    for handler in handlers:
        root.removeHandler(handler)
    level = root.level
    format_time = logging.Formatter.formatTime
    yield
    for handler in root.handlers[:]:
        handler.close()
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)
    logging.Formatter.formatTime = format_time


class TestParser:
    """Test command line parsing."""

    def test_defaults(self) -> None:
        """Test that no arguments runs help in the current directory."""
        options = build_parser().parse_args([])

        assert options.task == "help"
        assert options.args == []
        assert options.project_dir == "."
        assert not options.quiet

    def test_task_arguments_passed_through(self) -> None:
        """Test that options after the task belong to the task."""
        options = build_parser().parse_args(["-q", "clean", "--all"])

        assert options.quiet
        assert options.task == "clean"
        assert options.args == ["--all"]

    def test_version(self, capsys) -> None:
        """Test that --version prints the version and exits."""
        with pytest.raises(SystemExit) as excinfo:
            build_parser().parse_args(["--version"])

        assert excinfo.value.code == 0
        assert __version__ in capsys.readouterr().out


class TestSuggest:
    """Test suggestions for unknown task names."""

    def test_close_name(self) -> None:
        """Test that a misspelled name suggests the real task."""
        assert suggest("halp", TaskRunner(ProjectStack())) == "help"

    def test_nothing_close(self) -> None:
        """Test that an unrelated name suggests nothing."""
        assert suggest("zzzzzzzz", TaskRunner(ProjectStack())) is None


class TestMain:
    """Test running the command line."""

    def test_runs_task(self, tmp_path, make_project, capsys) -> None:
        """Test that a task runs in the given project."""
        path = make_project(tmp_path / "app", app="myapp")

        assert main(["--project-dir", str(path), "project.info"]) == 0
        assert "==> myapp" in capsys.readouterr().out

    def test_default_task_is_help(self, tmp_path, capsys) -> None:
        """Test that help runs without a task name."""
        assert main(["--project-dir", str(tmp_path)]) == 0
        assert "taskmill clean" in capsys.readouterr().out

    def test_unknown_task(self, tmp_path, capsys) -> None:
        """Test that an unknown task exits with 1 and a suggestion."""
        assert main(["--project-dir", str(tmp_path), "halp"]) == 1

        err = capsys.readouterr().err
        assert "The task 'halp' could not be found" in err
        assert "Did you mean 'help'?" in err

    def test_invalid_task(self, tmp_path, task_dir, capsys) -> None:
        """Test that a module without run(args) exits with 1."""
        task_dir.write("helper", "VALUE = 1\n")

        assert main(["--project-dir", str(tmp_path), "helper"]) == 1
        assert "not a valid task" in capsys.readouterr().err

    def test_task_usage_error(self, tmp_path, capsys) -> None:
        """Test that a task's usage error exits with 1."""
        assert main(["--project-dir", str(tmp_path), "help", "a", "b"]) == 1
        assert "Unexpected arguments" in capsys.readouterr().err

    def test_task_exception_propagates(self, tmp_path, task_dir) -> None:
        """Test that errors raised by a task itself are not hidden."""
        task_dir.write("fails", RAISING_TASK)

        with pytest.raises(RuntimeError, match="boom"):
            main(["--project-dir", str(tmp_path), "fails"])

    def test_bad_project_file(self, tmp_path, capsys) -> None:
        """Test that an unreadable project file exits with 1."""
        (tmp_path / "taskmill.toml").write_text("[project\n")

        assert main(["--project-dir", str(tmp_path)]) == 1
        assert "taskmill.toml" in capsys.readouterr().err

    def test_bad_option(self, capsys) -> None:
        """Test that an unknown option exits with 2."""
        assert main(["--no-such-option"]) == 2
        assert "unrecognized arguments" in capsys.readouterr().err

    def test_bad_log_level(self, capsys) -> None:
        """Test that an unknown log level exits with 2."""
        assert main(["--log-level", "loud"]) == 2
        assert "unknown log level" in capsys.readouterr().err

    def test_runner_dropped_afterwards(self, tmp_path) -> None:
        """Test that the process runner does not outlive the command."""
        main(["--project-dir", str(tmp_path), "project.info"])

        assert get_runner().current_project() is None
        set_runner(None)
