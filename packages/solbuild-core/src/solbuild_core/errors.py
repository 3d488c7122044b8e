"""Custom exception hierarchy for solbuild-core.

This module defines the exception classes raised by the compilation pipeline:
- SolbuildError: Base exception for all solbuild errors
- CompilerInvocationError: Raised when the external compiler call fails
- CompilationError: Raised when the compiler reports blocking diagnostics
- LinkReferenceError: Raised when a library placeholder cannot be spliced
- ConfigurationError: Raised when compile options cannot be loaded

User-facing messages are safe to display. Technical details (raw compiler
output, tracebacks) are logged internally via structlog.
"""

from __future__ import annotations

import structlog

logger = structlog.get_logger(__name__)


class SolbuildError(Exception):
    """Base exception for solbuild.

    All solbuild exceptions inherit from this class. User-facing messages
    are safe to display; technical details are logged internally.

    Args:
        user_message: Safe message to display to the user.
        internal_details: Optional technical details for logging. This is
            logged internally but never exposed through ``str(error)``.

    Example:
        >>> raise SolbuildError(
        ...     "Compiler returned malformed output",
        ...     internal_details="Expecting value: line 1 column 1 (char 0)",
        ... )
    """

    def __init__(
        self,
        user_message: str,
        *,
        internal_details: str | None = None,
    ) -> None:
        """Initialize SolbuildError with user message and optional internal details.

        Args:
            user_message: Safe message to display to the user.
            internal_details: Technical details for internal logging only.
        """
        super().__init__(user_message)
        self.user_message = user_message

        if internal_details:
            logger.error(
                "solbuild_error",
                error_type=self.__class__.__name__,
                user_message=user_message,
                internal_details=internal_details,
            )


class CompilerInvocationError(SolbuildError):
    """Raised when the external compiler cannot be invoked.

    Use this exception when:
    - The compiler supplier fails to load a compiler
    - The compiler call itself raises
    - The compiler response is not valid JSON or not standard-JSON shaped

    Never retried: malformed compiler output is fatal for the run.
    """

    pass


class CompilationError(SolbuildError):
    """Raised when compilation produced blocking diagnostics.

    The aggregated diagnostic text is kept on ``errors`` so callers can
    display it verbatim. No structured per-diagnostic object is exposed.

    Attributes:
        errors: Joined formatted messages of every blocking diagnostic.

    Example:
        >>> raise CompilationError(
        ...     "ParserError: Expected ';' but got '}'\\n",
        ... )
    """

    def __init__(
        self,
        errors: str,
        *,
        user_message: str | None = None,
        internal_details: str | None = None,
    ) -> None:
        """Initialize CompilationError with the joined diagnostics.

        Args:
            errors: Joined formatted diagnostic messages.
            user_message: Optional override for the displayed message.
                Defaults to the diagnostics themselves.
            internal_details: Technical details for internal logging only.
        """
        super().__init__(user_message or errors, internal_details=internal_details)
        self.errors = errors


class LinkReferenceError(CompilationError):
    """Raised when a link reference points outside the bytecode.

    A placeholder is always 40 hex characters wide; a reference whose slot
    does not fit inside the bytecode would change its length.

    Attributes:
        library_name: Library the reference belongs to.
        start: Byte offset reported by the compiler.
    """

    def __init__(self, library_name: str, start: int, bytecode_length: int) -> None:
        """Initialize LinkReferenceError.

        Args:
            library_name: Library the reference belongs to.
            start: Byte offset reported by the compiler.
            bytecode_length: Length of the bytecode in hex characters.
        """
        message = (
            f"Link reference for library '{library_name}' at byte offset {start} "
            f"does not fit in bytecode of {bytecode_length // 2} bytes"
        )
        super().__init__(message)
        self.library_name = library_name
        self.start = start


class ConfigurationError(SolbuildError):
    """Raised when a compile options file cannot be parsed or validated.

    Attributes:
        file_path: Path to the configuration file (if known).
        field_path: Dot-separated path to the invalid field (e.g., "compilers.solc.version").

    Example:
        >>> raise ConfigurationError(
        ...     "Invalid optimizer runs",
        ...     file_path="solbuild.yaml",
        ...     field_path="compilers.solc.settings.optimizer.runs",
        ... )
    """

    def __init__(
        self,
        user_message: str,
        *,
        file_path: str | None = None,
        field_path: str | None = None,
        internal_details: str | None = None,
    ) -> None:
        """Initialize ConfigurationError with context.

        Args:
            user_message: Safe message to display to the user.
            file_path: Path to the configuration file (optional).
            field_path: Dot-separated path to the field (optional).
            internal_details: Technical details for internal logging only.
        """
        context_parts: list[str] = []
        if file_path:
            context_parts.append(f"in {file_path}")
        if field_path:
            context_parts.append(f"field '{field_path}'")

        if context_parts:
            full_message = f"{user_message} ({', '.join(context_parts)})"
        else:
            full_message = user_message

        super().__init__(full_message, internal_details=internal_details)

        self.file_path = file_path
        self.field_path = field_path
