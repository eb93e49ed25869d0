# Project: taskmill
# Filename: libs/__init__.py
#
# File Description: taskmill libraries
#
# By: Bast
