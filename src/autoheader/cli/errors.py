# topmark:header:start
#
#   project      : auto-header
#   file         : errors.py
#   file_relpath : src/autoheader/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 auto-header contributors
#
# topmark:header:end

"""Exceptions for the auto-header CLI.

Raise these from commands to exit with a standardized message and exit code.
They print through the project console when one is present in the Click
context, and fall back to Click's default error display otherwise.
"""

from __future__ import annotations

from typing import IO, Any

import click

from autoheader.cli.exit_codes import ExitCode


class AutoHeaderCliError(click.ClickException):
    """Base class for all auto-header CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colors are applied in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        console = ctx.obj.get("console") if ctx is not None and isinstance(ctx.obj, dict) else None
        if console is not None:
            console.error(self.format_message())
            return
        super().show(file)


class AutoHeaderUsageError(AutoHeaderCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class AutoHeaderConfigError(AutoHeaderCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class AutoHeaderIOError(AutoHeaderCliError):
    """Error for files that could not be read or written."""

    exit_code = ExitCode.IO_ERROR


class AutoHeaderInstallError(AutoHeaderCliError):
    """Error for a failed ``install`` step."""

    exit_code = ExitCode.FAILURE
