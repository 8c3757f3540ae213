"""
Unified CLI Error Handling
==========================

Provides consistent error reporting and exit codes for the CLI.
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click


class ExitCode(IntEnum):
    """Standard exit codes for the CLI."""
    SUCCESS = 0
    TRANSLATION_ERROR = 1   # Syntax error or resource limit exceeded
    INVALID_ARGS = 2        # Invalid arguments or files that cannot be opened
    INTERNAL_ERROR = 3      # Unexpected internal error


def handle_cli_exception(error: Exception, verbose: bool = False) -> NoReturn:
    """
    Report an exception on stderr and exit with the matching code.

    Args:
        error: The exception that was raised
        verbose: If True, print full traceback for internal errors

    Raises:
        SystemExit: Always
    """
    from pasfix.errors import PasfixError

    if isinstance(error, PasfixError):
        # Already formatted as "line N: message"
        click.echo(str(error), err=True)
        sys.exit(ExitCode.TRANSLATION_ERROR)

    elif isinstance(error, OSError):
        # Missing file, permission denied, output directory missing, ...
        click.echo(f"Error opening file: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    else:
        click.echo(f"Internal error: {error}", err=True)
        if verbose:
            traceback.print_exc()
        sys.exit(ExitCode.INTERNAL_ERROR)
