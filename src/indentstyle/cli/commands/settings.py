# topmark:header:start
#
#   project      : IndentStyle
#   file         : settings.py
#   file_relpath : src/indentstyle/cli/commands/settings.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""IndentStyle `settings` command.

Prints the settings a style resolves to, after configuration overrides.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from indentstyle.api import resolve_settings
from indentstyle.cli.cli_types import EnumChoiceParam
from indentstyle.cli.cmd_common import build_config_common, get_console
from indentstyle.cli.errors import IndentstyleUsageError
from indentstyle.cli.options import common_config_options
from indentstyle.rendering.formats import OutputFormat, SettingsFlavor
from indentstyle.rendering.settings import render_settings
from indentstyle.styles import StyleName

if TYPE_CHECKING:
    from indentstyle.cli.console import ConsoleLike
    from indentstyle.config.model import Config
    from indentstyle.styles import StyleSettings


@click.command(
    name="settings",
    help="Show the settings for STYLE (configuration overrides applied).",
)
@click.argument("style")
@common_config_options
@click.option(
    "--emit",
    "emit",
    type=EnumChoiceParam(SettingsFlavor),
    default=None,
    help=f"Render as editor settings ({', '.join(v.value for v in SettingsFlavor)}).",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help="Output format (default or json; ignored with --emit).",
)
def settings_command(
    *,
    style: str,
    no_config: bool,
    config_paths: tuple[str, ...],
    emit: SettingsFlavor | None,
    output_format: OutputFormat | None,
) -> None:
    """Show resolved settings for one style.

    Args:
        style (str): Style name, e.g. ``spaces-4``.
        no_config (bool): Skip project config discovery.
        config_paths (tuple[str, ...]): Explicit config files to merge.
        emit (SettingsFlavor | None): Render as editor directives instead.
        output_format (OutputFormat | None): Output format.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    config: Config = build_config_common(
        input_paths=(), no_config=no_config, config_paths=config_paths, overrides={}
    )
    try:
        name: StyleName = StyleName.parse(style)
    except ValueError as exc:
        raise IndentstyleUsageError(str(exc)) from exc
    settings: StyleSettings = resolve_settings(name, config)

    if emit is not None:
        console.print(render_settings(settings, emit))
        return

    if output_format in (OutputFormat.JSON, OutputFormat.NDJSON):
        console.print(json.dumps({"style": name.value, **settings.as_dict()}))
        return

    for key, value in settings.as_dict().items():
        shown: str = str(value).lower() if isinstance(value, bool) else str(value)
        console.print(f"{key} = {shown}")
