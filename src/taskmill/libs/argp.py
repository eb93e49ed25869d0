# Project: taskmill
# Filename: libs/argp.py
#
# File Description: argument parser with some customizations
#
# By: Bast
"""Argument parser customizations for the taskmill command line.

Key Components:
    - ArgumentParser: raises `ArgumentError` instead of exiting, so the command
        line front end decides how to report the problem and which exit code
        to use.
    - CustomFormatter: keeps the line breaks of descriptions, wraps each line
        at `WRAP_WIDTH` characters and appends defaults to option help.

"""

# Standard Library
import argparse
import textwrap as _textwrap
from typing import NoReturn

# Third Party

# Project

WRAP_WIDTH = 73

SUPPRESS = argparse.SUPPRESS
OPTIONAL = argparse.OPTIONAL
ZERO_OR_MORE = argparse.ZERO_OR_MORE
REMAINDER = argparse.REMAINDER
ArgumentError = argparse.ArgumentError


class ArgumentParser(argparse.ArgumentParser):
    """An argparse.ArgumentParser that raises instead of exiting on errors."""

    def error(self, message: str) -> NoReturn:
        """Raise ArgumentError with the parser's message.

        Raises:
            ArgumentError: Always.

        """
        raise ArgumentError(None, message)


class CustomFormatter(argparse.RawTextHelpFormatter):
    """Help formatter that wraps every description line and shows defaults."""

    def _fill_text(self, text: str, width: int = 0, indent: str = "") -> str:
        text = _textwrap.dedent(text)
        lines = text.splitlines() if text else [""]
        return "\n".join(
            _textwrap.fill(line, WRAP_WIDTH, initial_indent=indent) for line in lines
        )

    def _get_help_string(self, action: argparse.Action) -> str | None:
        temp_help: str | None = action.help
        # add the default value to the argument help
        if (
            temp_help
            and "%(default)" not in temp_help
            and "(default: " not in temp_help
            and action.default is not SUPPRESS
            and action.default not in ("", None)
            and (action.option_strings or action.nargs in (OPTIONAL, ZERO_OR_MORE))
        ):
            temp_help += " (default: %(default)s)"

        return temp_help
