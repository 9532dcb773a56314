# topmark:header:start
#
#   project      : Undent
#   file         : errors.py
#   file_relpath : src/undent/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the Undent CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. The formatting library itself never raises them.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from undent.cli.exit_codes import ExitCode


class UndentError(click.ClickException):
    """Base class for all Undent CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        obj: Any = ctx.obj if ctx is not None else None
        console: Any = obj.get("console") if isinstance(obj, dict) else None
        if console is not None:
            console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
            return
        super().show(file)


class UndentUsageError(UndentError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class UndentConfigError(UndentError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class UndentFileNotFoundError(UndentError):
    """Error when the input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class UndentPermissionDeniedError(UndentError):
    """Error when the input path cannot be read."""

    exit_code = ExitCode.PERMISSION_DENIED


class UndentIOError(UndentError):
    """Error for I/O errors reading the input."""

    exit_code = ExitCode.IO_ERROR


class UndentEncodingError(UndentError):
    """Error for text decoding errors (e.g., UnicodeDecodeError)."""

    exit_code = ExitCode.ENCODING_ERROR
