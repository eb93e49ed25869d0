# Project: taskmill
# Filename: tasks/help.py
#
# File Description: list tasks and show their documentation
#
# By: Bast
"""Print help information for tasks.

Without arguments, lists every task that has a short description:

    taskmill help

With a task name, prints the full documentation of that task:

    taskmill help deps.get
"""

# Standard Library

# 3rd Party
from rich.console import Console
from rich.markdown import Markdown
from rich.table import Table

# Project
from taskmill.libs import tasks
from taskmill.libs.exceptions import TaskUsageError
from taskmill.libs.tasks import TaskInfo

SHORTDOC = "Print help information for tasks"


def list_tasks(console: Console) -> list[str]:
    runner = tasks.get_runner()
    infos = [
        TaskInfo.from_module(module, runner.loader.namespace)
        for module in tasks.load_all(runner.loader)
    ]
    visible = [info for info in infos if not info.hidden]

    table = Table(box=None, show_header=False, pad_edge=False)
    table.add_column("task", style="bold cyan", no_wrap=True)
    table.add_column("description")
    for info in visible:
        table.add_row(f"taskmill {info.name}", f"# {info.shortdoc}")
    console.print(table)
    return [info.name for info in visible]


def show_task(console: Console, name: str) -> str:
    module = tasks.get_runner().get(name)
    doc = tasks.moduledoc(module) or "There is no documentation for this task"
    console.print(Markdown(f"# taskmill {name}\n\n{doc}"))
    return name


def run(args):
    console = Console()
    if not args:
        return list_tasks(console)
    if len(args) == 1:
        return show_task(console, args[0])
    raise TaskUsageError(
        "Unexpected arguments, expected `taskmill help` or `taskmill help TASK`"
    )
