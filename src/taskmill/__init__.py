# Project: taskmill
# Filename: __init__.py
#
# File Description: package metadata
#
# By: Bast
"""taskmill, a task registry and run-once dispatch engine for build tools."""

from __future__ import annotations

import pkgutil

# let other distributions contribute taskmill/tasks directories
__path__ = pkgutil.extend_path(__path__, __name__)

__version__ = "0.1.0"
