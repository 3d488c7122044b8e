"""CLI error handling for solbuild-cli.

Maps solbuild-core exceptions onto user-facing messages and exit codes.
"""

from __future__ import annotations

from typing import NoReturn

import click

from solbuild_cli.output import error
from solbuild_core.errors import (
    CompilationError,
    CompilerInvocationError,
    ConfigurationError,
    SolbuildError,
)

# Exit codes following sysexits.h convention
EXIT_USER_ERROR = 1  # Compilation diagnostics, invalid input
EXIT_SYSTEM_ERROR = 2  # Missing files, compiler unavailable, bad config


class CLIError(click.ClickException):
    """CLI-specific exception with exit code support.

    Attributes:
        message: User-facing error message.
        exit_code: Exit code for the CLI (default: 1).
    """

    def __init__(self, message: str, exit_code: int = EXIT_USER_ERROR) -> None:
        super().__init__(message)
        self.exit_code = exit_code

    def show(self, file: object = None) -> None:
        """Display the error message using Rich formatting."""
        error(self.format_message())


def handle_solbuild_error(err: SolbuildError) -> NoReturn:
    """Translate a solbuild-core exception into a CLIError.

    Args:
        err: Exception raised by the pipeline or options loading.

    Raises:
        CLIError: Always, with the exit code matching the error kind.
    """
    if isinstance(err, CompilationError):
        raise CLIError(f"Compilation failed:\n{err.errors}", exit_code=EXIT_USER_ERROR)

    if isinstance(err, (CompilerInvocationError, ConfigurationError)):
        raise CLIError(err.user_message, exit_code=EXIT_SYSTEM_ERROR)

    raise CLIError(err.user_message)


def handle_file_not_found(message: str) -> NoReturn:
    """Handle missing source files.

    Args:
        message: Message of the FileNotFoundError, naming the path.

    Raises:
        CLIError: Always raises with the message and a system error exit code.
    """
    raise CLIError(message, exit_code=EXIT_SYSTEM_ERROR)
