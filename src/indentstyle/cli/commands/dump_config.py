# topmark:header:start
#
#   project      : IndentStyle
#   file         : dump_config.py
#   file_relpath : src/indentstyle/cli/commands/dump_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""IndentStyle `dump-config` command.

Emits the effective configuration as TOML after applying defaults, discovered
project files, explicit ``--config`` files and CLI overrides. The TOML is
wrapped between `# === BEGIN ===` and `# === END ===` markers for easy parsing
in tests or tooling.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from indentstyle.cli.cmd_common import (
    build_config_common,
    get_console,
    get_effective_verbosity,
    report_diagnostics,
)
from indentstyle.cli.options import (
    common_classifier_options,
    common_config_options,
    common_file_filtering_options,
)
from indentstyle.config.keys import Toml
from indentstyle.config.logging import get_logger

if TYPE_CHECKING:
    from indentstyle.cli.console import ConsoleLike
    from indentstyle.config.logging import IndentstyleLogger
    from indentstyle.config.model import Config
    from indentstyle.styles import StyleName

logger: IndentstyleLogger = get_logger(__name__)


@click.command(
    name="dump-config",
    help="Dump the final merged IndentStyle configuration as TOML.",
    epilog="Output is wrapped between '# === BEGIN ===' and '# === END ===' markers.",
)
@common_config_options
@common_classifier_options
@common_file_filtering_options
def dump_config_command(
    *,
    no_config: bool,
    config_paths: tuple[str, ...],
    max_lines: int | None,
    threshold: float | None,
    preference: list[StyleName] | None,
    strip_comments: bool | None,
    include_patterns: tuple[str, ...],
    exclude_patterns: tuple[str, ...],
) -> None:
    """Dump the final merged configuration as TOML.

    Args:
        no_config: If True, skip loading project configuration files.
        config_paths: Additional TOML config files to merge.
        max_lines: Line limit override.
        threshold: Threshold override.
        preference: Preference order override.
        strip_comments: Comment stripping override.
        include_patterns: Include pattern override.
        exclude_patterns: Exclude pattern override.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    config: Config = build_config_common(
        input_paths=(),
        no_config=no_config,
        config_paths=config_paths,
        overrides={
            Toml.KEY_MAX_LINES: max_lines,
            Toml.KEY_THRESHOLD: threshold,
            Toml.KEY_PREFERENCE: [s.value for s in preference] if preference else None,
            Toml.KEY_STRIP_COMMENTS: strip_comments,
            Toml.KEY_INCLUDE_PATTERNS: list(include_patterns),
            Toml.KEY_EXCLUDE_PATTERNS: list(exclude_patterns),
        },
    )
    report_diagnostics(console, config, verbosity=vlevel)
    logger.trace("Config after merging CLI and discovered config: %s", config)

    if vlevel > 0:
        sources: str = ", ".join(str(p) for p in config.config_files)
        console.print(f"# Merged from: {sources}")
    console.print("# === BEGIN ===")
    console.print(config.to_toml().rstrip("\n"))
    console.print("# === END ===")
