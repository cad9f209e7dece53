# topmark:header:start
#
#   project      : IndentStyle
#   file         : main.py
#   file_relpath : src/indentstyle/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""IndentStyle command-line entry point.

Group-level options (verbosity, color) are resolved once and placed into
``ctx.obj`` so that every subcommand shares the same console and verbosity.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from indentstyle.cli.commands.detect import detect_command
from indentstyle.cli.commands.dump_config import dump_config_command
from indentstyle.cli.commands.settings import settings_command
from indentstyle.cli.commands.styles import styles_command
from indentstyle.cli.commands.version import version_command
from indentstyle.cli.console import ClickConsole
from indentstyle.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from indentstyle.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from indentstyle.cli.console import ConsoleLike
    from indentstyle.config.logging import IndentstyleLogger

logger: IndentstyleLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging, color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; ``obj`` and ``color`` are set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color``.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is driven by the environment, not by -v/-q.
    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_mode: ColorMode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color: bool = resolve_color_mode(cli_mode=effective_mode, output_format=None)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="IndentStyle: detect the indentation style of source files.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the IndentStyle CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'indentstyle detect [PATHS...]' to classify files.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(detect_command)

cli.add_command(styles_command)

cli.add_command(settings_command)

cli.add_command(dump_config_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
