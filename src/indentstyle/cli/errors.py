# topmark:header:start
#
#   project      : IndentStyle
#   file         : errors.py
#   file_relpath : src/indentstyle/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the IndentStyle CLI.

Raise these in CLI commands to signal errors with standardized messages and exit
codes. Errors are shown through the project console when one is present in the
Click context, and fall back to Click's default display otherwise.
"""

from __future__ import annotations

from typing import IO, Any

import click

from indentstyle.cli.exit_codes import ExitCode


class IndentstyleError(click.ClickException):
    """Base class for all IndentStyle CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (coloring happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class IndentstyleUsageError(IndentstyleError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class IndentstyleConfigError(IndentstyleError):
    """Error for configuration errors (invalid values, unknown style names)."""

    exit_code = ExitCode.CONFIG_ERROR


class IndentstyleFileNotFoundError(IndentstyleError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND
