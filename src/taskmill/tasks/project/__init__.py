# Project: taskmill
# Filename: tasks/project/__init__.py
#
# File Description: project related tasks
#
# By: Bast
