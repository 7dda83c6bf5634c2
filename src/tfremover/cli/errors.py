# topmark:header:start
#
#   project      : tfremover
#   file         : errors.py
#   file_relpath : src/tfremover/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 tfremover contributors
#
# topmark:header:end

"""Exceptions for the tfremover CLI.

Raise these in commands to exit with a standardized message and exit code.
When a project console is present in the Click context, errors are printed
through it; otherwise Click's default error display is used.
"""

from __future__ import annotations

from typing import IO, Any

import click

from tfremover.core.exit_codes import ExitCode


class TfremoverError(click.ClickException):
    """Base class for all tfremover CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colors are applied in `show`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        console: Any = ctx.obj.get("console") if ctx is not None and isinstance(ctx.obj, dict) else None
        if console is None:
            super().show(file)
            return
        console.error(f"Error: {self.format_message()}")


class TfremoverUsageError(TfremoverError):
    """Invalid flags or arguments."""

    exit_code = ExitCode.USAGE_ERROR


class TfremoverConfigError(TfremoverError):
    """Missing, invalid or malformed configuration."""

    exit_code = ExitCode.CONFIG_ERROR


class TfremoverFileNotFoundError(TfremoverError):
    """An input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND
