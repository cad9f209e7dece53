# topmark:header:start
#
#   project      : IndentStyle
#   file         : version.py
#   file_relpath : src/indentstyle/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""IndentStyle `version` command.

Prints the IndentStyle version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from indentstyle.cli.cli_types import EnumChoiceParam
from indentstyle.cli.cmd_common import get_console, get_effective_verbosity
from indentstyle.constants import INDENTSTYLE_VERSION
from indentstyle.rendering.formats import OutputFormat

if TYPE_CHECKING:
    from indentstyle.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of IndentStyle.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of IndentStyle.

    Args:
        output_format (OutputFormat | None): Optional output format.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    if fmt in (OutputFormat.JSON, OutputFormat.NDJSON):
        console.print(json.dumps({"version": INDENTSTYLE_VERSION}))
    elif fmt == OutputFormat.MARKDOWN:
        console.print("# IndentStyle Version\n")
        console.print(f"**IndentStyle version: {INDENTSTYLE_VERSION}**")
    elif vlevel > 0:
        console.print(console.styled("IndentStyle version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(INDENTSTYLE_VERSION, bold=True)}")
    else:
        console.print(console.styled(INDENTSTYLE_VERSION, bold=True))
