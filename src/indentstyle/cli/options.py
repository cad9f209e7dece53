# topmark:header:start
#
#   project      : IndentStyle
#   file         : options.py
#   file_relpath : src/indentstyle/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, color, configuration,
classifier tuning, file filters, output format) and their resolution logic, so
commands and groups can stay thin.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import Callable, ParamSpec, TypeVar

import click
from click.core import ParameterSource

from indentstyle.cli.cli_types import EnumChoiceParam, StyleListParam
from indentstyle.cli.errors import IndentstyleUsageError
from indentstyle.rendering.formats import OutputFormat, SettingsFlavor

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity from ``-v``/``-q`` counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        ``verbose_count`` (0..2) when verbose, ``-1`` when quiet, ``0`` otherwise.

    Raises:
        IndentstyleUsageError: If both verbose and quiet flags are used simultaneously.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise IndentstyleUsageError(
            "The '--verbose' and '--quiet' options are mutually exclusive."
        )
    if quiet_count > 0:
        return -1
    return min(verbose_count, 2)


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add -v/--verbose and -q/--quiet (mutually exclusive, counted)."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only report errors.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    output_format: OutputFormat | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Behavior:
        Disables color for JSON/NDJSON output formats.
        Honors --color and --no-color CLI flags.
        Honors FORCE_COLOR and NO_COLOR environment variables.
        Defaults to enabling color if stdout is a TTY.
    """
    if output_format in (OutputFormat.JSON, OutputFormat.NDJSON):
        return False
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add --color {auto,always,never} and --no-color."""
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def trap_underscored_option(ctx: click.Context, param: click.Parameter, _value: object) -> None:
    """Raise a helpful error for underscored long options (e.g., --max_lines)."""
    name = getattr(param, "name", None)
    src = ctx.get_parameter_source(name) if name else None
    if src is not ParameterSource.COMMANDLINE:
        return
    bad = param.opts[0] if param.opts else "--?"
    raise click.UsageError(f"Unknown option: {bad}. Did you mean {bad.replace('_', '-')}?")


def underscored_trap_option(*names: str) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Register hidden underscored spellings that raise a helpful error.

    The hidden option gets a unique destination name so Click's parameter source
    tracking does not overlap with the real option's destination.
    """
    if not names:
        raise ValueError("underscored_trap_option requires at least one option name")

    dest = f"_trap_{names[0].lstrip('-').replace('-', '_')}"
    return click.option(
        *names,
        dest,
        hidden=True,
        expose_value=False,
        is_eager=True,
        multiple=True,
        callback=trap_underscored_option,
    )


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add --no-config and --config FILE (repeatable)."""
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore project config files (only use defaults and --config).",
    )(f)
    f = underscored_trap_option("--no_config")(f)
    f = click.option(
        "--config",
        "config_paths",
        multiple=True,
        metavar="FILE",
        type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True),
        help="Additional config file(s) to load and merge.",
    )(f)
    return f


def common_classifier_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add classifier tuning options (line limit, threshold, preference, comments)."""
    f = click.option(
        "--max-lines",
        "max_lines",
        type=click.IntRange(min=0),
        default=None,
        help="Examine at most this many leading lines per file (0 = all).",
    )(f)
    f = underscored_trap_option("--max_lines")(f)
    f = click.option(
        "--threshold",
        type=click.FloatRange(min=0, max=1, min_open=True),
        default=None,
        help="Fraction of the best score a style needs to stay in contention.",
    )(f)
    f = click.option(
        "--prefer",
        "preference",
        type=StyleListParam(),
        default=None,
        metavar="STYLE,...",
        help="Tie-break order, most preferred first (must list every style).",
    )(f)
    f = click.option(
        "--strip-comments/--no-strip-comments",
        "strip_comments",
        default=None,
        help="Remove C-style block comments before classifying (default: on).",
    )(f)
    f = underscored_trap_option("--no_strip_comments", "--strip_comments")(f)
    return f


def common_file_filtering_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add --include/-i and --exclude/-e gitwildmatch filters."""
    f = click.option(
        "--include",
        "-i",
        "include_patterns",
        multiple=True,
        help="Filter: keep only files matching these patterns (intersection).",
    )(f)
    f = click.option(
        "--exclude",
        "-e",
        "exclude_patterns",
        multiple=True,
        help="Filter: remove files matching these patterns (subtraction).",
    )(f)
    return f


def common_output_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add --format and --emit."""
    f = click.option(
        "--format",
        "output_format",
        type=EnumChoiceParam(OutputFormat),
        default=None,
        help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
    )(f)
    f = click.option(
        "--emit",
        "emit",
        type=EnumChoiceParam(SettingsFlavor),
        default=None,
        help=f"Also print editor settings ({', '.join(v.value for v in SettingsFlavor)}).",
    )(f)
    return f
