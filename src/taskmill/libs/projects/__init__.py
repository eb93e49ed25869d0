# Project: taskmill
# Filename: libs/projects/__init__.py
#
# File Description: project context
#
# By: Bast
"""Project context: what the active project is and how to enter a sub-project."""

__all__ = ["ChildProject", "Project", "ProjectStack"]

from .project import Project
from .stack import ChildProject, ProjectStack
