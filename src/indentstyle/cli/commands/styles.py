# topmark:header:start
#
#   project      : IndentStyle
#   file         : styles.py
#   file_relpath : src/indentstyle/cli/commands/styles.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""IndentStyle `styles` command.

Lists the style catalogue in the effective preference order, together with the
recognition pattern and the settings each style resolves to (configuration
overrides applied).
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from indentstyle.cli.cli_types import EnumChoiceParam
from indentstyle.cli.cmd_common import build_config_common, get_console, get_effective_verbosity
from indentstyle.cli.options import common_config_options
from indentstyle.constants import INDENTSTYLE_VERSION
from indentstyle.rendering.formats import OutputFormat
from indentstyle.rendering.markdown import render_markdown_table
from indentstyle.styles import STYLES

if TYPE_CHECKING:
    from indentstyle.cli.console import ConsoleLike
    from indentstyle.config.model import Config
    from indentstyle.styles import IndentStyle


def _serialize(style: IndentStyle, config: Config, rank: int) -> dict[str, Any]:
    return {
        "name": style.name.value,
        "rank": rank,
        "pattern": style.pattern.pattern,
        "description": style.description,
        "settings": config.settings_for(style.name).as_dict(),
    }


@click.command(
    name="styles",
    help="List the known indentation styles in preference order.",
)
@common_config_options
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def styles_command(
    *,
    no_config: bool,
    config_paths: tuple[str, ...],
    output_format: OutputFormat | None = None,
) -> None:
    """List known styles.

    Args:
        no_config (bool): Skip project config discovery.
        config_paths (tuple[str, ...]): Explicit config files to merge.
        output_format (OutputFormat | None): Output format to use.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    config: Config = build_config_common(
        input_paths=(), no_config=no_config, config_paths=config_paths, overrides={}
    )
    ordered: list[IndentStyle] = [STYLES[name] for name in config.preference]

    if fmt == OutputFormat.JSON:
        console.print(
            json.dumps([_serialize(s, config, i + 1) for i, s in enumerate(ordered)], indent=2)
        )
        return
    if fmt == OutputFormat.NDJSON:
        for i, s in enumerate(ordered):
            console.print(json.dumps(_serialize(s, config, i + 1)))
        return

    if fmt == OutputFormat.MARKDOWN:
        console.print("# Indentation styles\n")
        console.print(
            f"IndentStyle version **{INDENTSTYLE_VERSION}** knows the following styles, "
            "most preferred first:\n"
        )
        rows: list[list[str]] = []
        for i, s in enumerate(ordered):
            st = config.settings_for(s.name)
            rows.append(
                [
                    str(i + 1),
                    f"`{s.name.value}`",
                    f"`{s.pattern.pattern}`",
                    str(st.indent_width),
                    str(st.tab_width),
                    str(st.soft_tab_stop),
                    "yes" if st.expand_tabs else "no",
                    s.description,
                ]
            )
        console.print(
            render_markdown_table(
                [
                    "Rank",
                    "Style",
                    "Pattern",
                    "Indent",
                    "Tab width",
                    "Soft tab",
                    "Expand tabs",
                    "Description",
                ],
                rows,
                align={0: "right", 3: "right", 4: "right", 5: "right"},
            )
        )
        return

    width: int = max(len(s.name.value) for s in ordered)
    for s in ordered:
        line: str = f"{console.styled(s.name.value.ljust(width), bold=True)}  {s.description}"
        console.print(line)
        if vlevel > 0:
            st = config.settings_for(s.name)
            console.print(f"    pattern: {s.pattern.pattern!r}")
            console.print(
                f"    indent_width={st.indent_width} tab_width={st.tab_width} "
                f"soft_tab_stop={st.soft_tab_stop} expand_tabs={str(st.expand_tabs).lower()}"
            )
