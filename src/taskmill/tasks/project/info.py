# Project: taskmill
# Filename: tasks/project/info.py
#
# File Description: show the active project
#
# By: Bast
"""Print the app name, directory and configuration of the current project.

In an umbrella the information of every sub-project is printed instead.
"""

# Standard Library

# 3rd Party
from rich.console import Console
from rich.table import Table

# Project
from taskmill.libs import tasks
from taskmill.libs.exceptions import ProjectException, TaskUsageError

SHORTDOC = "Print information about the current project"
RECURSIVE = True


def run(args):
    if args:
        raise TaskUsageError("project.info takes no arguments")
    project = tasks.get_runner().current_project()
    if project is None:
        raise ProjectException("project.info must be run inside a project")

    table = Table(title=f"==> {project.app}", show_header=False, box=None)
    table.add_column("key", style="bold")
    table.add_column("value")
    table.add_row("path", str(project.path))
    for key, value in sorted(project.config.items()):
        table.add_row(key, str(value))
    Console().print(table)
    return {"app": project.app, "path": project.path, **project.config}
