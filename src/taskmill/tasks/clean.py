# Project: taskmill
# Filename: tasks/clean.py
#
# File Description: remove build artifacts
#
# By: Bast
"""Delete the build artifacts of the current project.

Build output for an app lives in ``<build_path>/lib/<app>``; this task
removes that directory. In an umbrella it runs once for every sub-project.

    taskmill clean          # remove this project's build output
    taskmill clean --all    # remove the whole build_path directory
"""

# Standard Library
import logging
import shutil

# 3rd Party

# Project
from taskmill.libs import tasks
from taskmill.libs.argp import ArgumentParser
from taskmill.libs.exceptions import ProjectException

logger = logging.getLogger(__name__)

SHORTDOC = "Delete generated application files"
RECURSIVE = True


def run(args):
    parser = ArgumentParser(prog="taskmill clean", add_help=False)
    parser.add_argument("--all", action="store_true", dest="clean_all")
    options = parser.parse_args(args)

    project = tasks.get_runner().current_project()
    if project is None:
        raise ProjectException("clean must be run inside a project")

    build_path = project.resolve_path("build_path")
    if build_path is None:
        return None
    target = build_path if options.clean_all else build_path / "lib" / project.app
    if not target.exists():
        logger.debug("nothing to clean in %s", target)
        return None
    shutil.rmtree(target)
    logger.info("removed %s", target)
    return target
