# Project: taskmill
# Filename: cli.py
#
# File Description: the taskmill command line
#
# By: Bast
"""Module for the ``taskmill`` command line.

    taskmill [options] [TASK [ARGS...]]

The project in ``--project-dir`` (the current directory by default) is made
the active project, then TASK runs with ARGS. Without a TASK, ``help`` runs.

Exit codes:
    - 0: the task ran, or had already run.
    - 1: the task could not be found, is not a task, or reported an error.
    - 2: the command line could not be parsed.

"""

# Standard Library
import contextlib
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

# 3rd Party
from rapidfuzz import fuzz, process
from rich.console import Console
from rich.markup import escape

# Project
from taskmill import __version__
from taskmill.libs.argp import REMAINDER, ArgumentError, ArgumentParser, CustomFormatter
from taskmill.libs.exceptions import (
    InvalidTaskError,
    NoTaskError,
    TaskmillError,
)
from taskmill.libs.log import setup_loggers
from taskmill.libs.projects import Project, ProjectStack
from taskmill.libs.settings import Settings, parse_log_level
from taskmill.libs.tasks import TaskRunner, load_all, set_runner, task_name

logger = logging.getLogger(__name__)

SUGGESTION_CUTOFF = 70


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="taskmill",
        description="Run a task in the current project.\n"
        "Use `taskmill help` to list the available tasks.",
        formatter_class=CustomFormatter,
    )
    parser.add_argument(
        "--project-dir",
        default=".",
        help="the project directory",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="logging level, overrides TASKMILL_LOG_LEVEL",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="also log to this file",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="only log errors to the console",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument("task", nargs="?", default="help", help="the task to run")
    parser.add_argument("args", nargs=REMAINDER, help="arguments for the task")
    return parser


def suggest(name: str, runner: TaskRunner) -> str | None:
    """Return the known task name closest to ``name``, if one is close enough."""
    names = [task_name(module, runner.loader.namespace) for module in load_all(runner.loader)]
    if match := process.extractOne(
        name, names, scorer=fuzz.ratio, score_cutoff=SUGGESTION_CUTOFF
    ):
        return match[0]
    return None


def report_error(console: Console, message: str) -> None:
    console.print(
        f"[bold red]** (taskmill)[/bold red] {escape(message)}", soft_wrap=True
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return the exit code."""
    console = Console(stderr=True)
    try:
        Settings.load_env()
        options = build_parser().parse_args(argv)
        if options.log_level:
            Settings.LOG_LEVEL = parse_log_level(options.log_level)
    except ArgumentError as exc:
        report_error(console, str(exc))
        return 2
    except TaskmillError as exc:
        report_error(console, str(exc))
        return 2

    if options.quiet:
        Settings.QUIET = True
    setup_loggers(Settings.LOG_LEVEL, Path(options.log_file) if options.log_file else None)

    try:
        project = Project.load(options.project_dir)
    except TaskmillError as exc:
        report_error(console, str(exc))
        return 1

    runner = TaskRunner(ProjectStack(project))
    set_runner(runner)
    try:
        with contextlib.chdir(project.path):
            runner.run(options.task, options.args)
    except NoTaskError as exc:
        message = f"The task {exc.task!r} could not be found"
        if suggestion := suggest(exc.task, runner):
            message += f". Did you mean {suggestion!r}?"
        report_error(console, message)
        return 1
    except InvalidTaskError as exc:
        report_error(
            console,
            f"The task {exc.task!r} does not define run(args), it is not a valid task",
        )
        return 1
    except TaskmillError as exc:
        report_error(console, str(exc))
        return 1
    finally:
        set_runner(None)
    return 0


if __name__ == "__main__":
    sys.exit(main())
