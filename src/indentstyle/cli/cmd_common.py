# topmark:header:start
#
#   project      : IndentStyle
#   file         : cmd_common.py
#   file_relpath : src/indentstyle/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

Small plumbing helpers shared by several commands: verbosity lookup, config
resolution from CLI options, and surfacing config diagnostics.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from indentstyle.cli.errors import IndentstyleConfigError
from indentstyle.config.logging import get_logger
from indentstyle.config.model import MutableConfig

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from indentstyle.cli.console import ConsoleLike
    from indentstyle.config.logging import IndentstyleLogger
    from indentstyle.config.model import Config

logger: IndentstyleLogger = get_logger(__name__)


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity stored by the group (0 if unset)."""
    obj: dict[str, Any] = ctx.obj or {}
    return int(obj.get("verbosity_level", 0))


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the context by the CLI group."""
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    return console


def build_config_common(
    *,
    input_paths: Iterable[str],
    no_config: bool,
    config_paths: Iterable[str],
    overrides: Mapping[str, Any],
) -> Config:
    """Discover, merge and validate the effective configuration.

    Discovery is anchored at the first literal input path (or the CWD).

    Args:
        input_paths (Iterable[str]): Positional paths; ``-`` and globs are skipped as anchors.
        no_config (bool): Skip project discovery.
        config_paths (Iterable[str]): Explicit ``--config`` files.
        overrides (Mapping[str, Any]): CLI overrides keyed by TOML key name.

    Returns:
        Config: The frozen configuration.

    Raises:
        IndentstyleConfigError: If the merged configuration is invalid.
    """
    anchors: list[Path] = [
        Path(p) for p in input_paths if p != "-" and not any(ch in p for ch in "*?[")
    ]
    draft: MutableConfig = MutableConfig.load_merged(
        input_paths=anchors[:1],
        extra_config_files=[Path(p) for p in config_paths],
        no_config=no_config,
    )
    draft.apply_cli_args(overrides)
    try:
        config: Config = draft.freeze()
    except ValueError as exc:
        raise IndentstyleConfigError(f"Invalid configuration: {exc}") from exc
    logger.trace("Effective config: %s", config)
    return config


def report_diagnostics(console: ConsoleLike, config: Config, *, verbosity: int) -> None:
    """Print config diagnostics to stderr unless output is quiet."""
    if verbosity < 0:
        return
    for diag in config.diagnostics:
        console.warn(f"[{diag.level.value}] {diag.message}")
