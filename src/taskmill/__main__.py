# Project: taskmill
# Filename: __main__.py
#
# File Description: allow running with python -m taskmill
#
# By: Bast
import sys

from taskmill.cli import main

sys.exit(main())
