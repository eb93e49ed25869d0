# Project: taskmill
# Filename: tasks/__init__.py
#
# File Description: the tasks namespace
#
# By: Bast
"""Every module below this package that defines ``run(args)`` is a task.

Other distributions can ship tasks by providing their own
``taskmill/tasks`` directory; this package extends its search path so they
all share one namespace.
"""

from __future__ import annotations

import pkgutil

__path__ = pkgutil.extend_path(__path__, __name__)
