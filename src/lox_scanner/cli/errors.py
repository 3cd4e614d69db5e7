"""
CLI Error Handling
==================

Maps exceptions to messages and exit codes for the command-line tools.
Exit codes follow the BSD sysexits convention used by the reference
Lox tools.
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click


class ExitCode(IntEnum):
    """Standard exit codes for CLI tools."""
    SUCCESS = 0
    USAGE = 64           # Wrong number of arguments or bad option
    DATA_ERROR = 65      # Script file missing or unreadable
    INTERNAL_ERROR = 70  # Unexpected internal error


def handle_cli_exception(error: Exception, verbose: bool = False) -> NoReturn:
    """
    Report an exception raised by a CLI command and exit.

    Usage errors never get here: Click reports them while parsing
    arguments, before the command body runs.

    Args:
        error: The exception that was raised
        verbose: If True, print full traceback for internal errors

    Raises:
        SystemExit: Always exits with an appropriate exit code
    """
    from lox_scanner.errors import LoxError, ScriptFileError

    if isinstance(error, ScriptFileError):
        click.echo(str(error), err=True)
        sys.exit(ExitCode.DATA_ERROR)

    elif isinstance(error, LoxError):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.DATA_ERROR)

    else:
        click.echo(f"Internal error: {error}", err=True)
        if verbose:
            traceback.print_exc()
        sys.exit(ExitCode.INTERNAL_ERROR)
