# topmark:header:start
#
#   project      : IndentStyle
#   file         : detect.py
#   file_relpath : src/indentstyle/cli/commands/detect.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""IndentStyle `detect` command.

Classifies the indentation style of each input file and reports one result per
file. A file without usable indentation is reported as ``none``; this only
affects the exit code when ``--strict`` is given.

Input modes supported:
  * **Paths**: files, directories (recursive) and globs, filtered by
    ``--include``/``--exclude``.
  * **Content on STDIN**: ``-`` as a PATH, reported as ``<stdin>``.

Examples:
  Classify a source tree:

    $ indentstyle detect src

  Emit vim settings for a single buffer read from STDIN:

    $ cat foo.c | indentstyle detect --emit vim -

  Emit NDJSON (one object per file):

    $ indentstyle detect --format=ndjson src
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from indentstyle.api import FileDetection, detect_files, detect_stream_text
from indentstyle.cli.cmd_common import (
    build_config_common,
    get_console,
    get_effective_verbosity,
    report_diagnostics,
)
from indentstyle.cli.errors import IndentstyleFileNotFoundError, IndentstyleUsageError
from indentstyle.cli.exit_codes import ExitCode
from indentstyle.cli.options import (
    common_classifier_options,
    common_config_options,
    common_file_filtering_options,
    common_output_options,
)
from indentstyle.config.keys import Toml
from indentstyle.config.logging import get_logger
from indentstyle.constants import STDIN_LABEL, STDIN_PATH
from indentstyle.file_resolver import missing_paths, resolve_file_list
from indentstyle.rendering.formats import OutputFormat, SettingsFlavor
from indentstyle.rendering.markdown import render_markdown_table
from indentstyle.rendering.settings import editorconfig_section, render_settings

if TYPE_CHECKING:
    from pathlib import Path

    from indentstyle.cli.console import ConsoleLike
    from indentstyle.config.logging import IndentstyleLogger
    from indentstyle.config.model import Config
    from indentstyle.styles import StyleName

logger: IndentstyleLogger = get_logger(__name__)


def _section_for(detection: FileDetection) -> str:
    """EditorConfig section header for a detection (``*`` for STDIN)."""
    if isinstance(detection.path, str):
        return "*"
    return editorconfig_section(detection.path)


def _rendered(detection: FileDetection, emit: SettingsFlavor | None) -> str | None:
    if emit is None or detection.settings is None:
        return None
    return render_settings(detection.settings, emit, section=_section_for(detection))


def _ordered_scores(detection: FileDetection, config: Config) -> list[tuple[StyleName, int]]:
    """Scores of one detection, in preference order."""
    if detection.result is None:
        return []
    scores = detection.result.scores
    return [(s, scores[s]) for s in config.preference if s in scores]


def _payload(detection: FileDetection, emit: SettingsFlavor | None) -> dict[str, Any]:
    data: dict[str, Any] = detection.to_dict()
    if emit is not None:
        data["emit"] = {"flavor": emit.value, "text": _rendered(detection, emit)}
    return data


def _emit_default(
    console: ConsoleLike,
    detections: list[FileDetection],
    *,
    config: Config,
    emit: SettingsFlavor | None,
    vlevel: int,
) -> None:
    for det in detections:
        if det.error is not None:
            console.error(f"{det.path}: error: {det.error}")
            continue
        if vlevel < 0:
            continue
        style: StyleName | None = det.style
        label: str = (
            console.styled(style.value, fg="green", bold=True)
            if style is not None
            else console.styled("none", fg="yellow")
        )
        console.print(f"{det.path}: {label}")
        if vlevel > 0 and det.result is not None:
            scores: str = ", ".join(f"{s.value}={n}" for s, n in _ordered_scores(det, config))
            console.print(f"    usable lines: {det.result.usable_lines}")
            console.print(f"    scores: {scores or '-'}")
            console.print(
                f"    contenders: {', '.join(s.value for s in det.result.contenders) or '-'}"
            )
            if vlevel > 1:
                runs: str = ", ".join(
                    f"{run!r}={n}" for run, n in sorted(det.result.tally.items())
                )
                console.print(f"    tally: {runs or '-'}")
        rendered: str | None = _rendered(det, emit)
        if rendered is not None:
            console.print(rendered)


def _emit_markdown(
    console: ConsoleLike,
    detections: list[FileDetection],
    *,
    emit: SettingsFlavor | None,
) -> None:
    console.print("# Indentation styles\n")
    rows: list[list[str]] = []
    for det in detections:
        if det.error is not None:
            rows.append([f"`{det.path}`", "**error**", "", det.error])
            continue
        style: StyleName | None = det.style
        max_score: int = det.result.max_score if det.result is not None else 0
        contenders: str = (
            ", ".join(f"`{s.value}`" for s in det.result.contenders)
            if det.result is not None
            else ""
        )
        rows.append(
            [
                f"`{det.path}`",
                f"`{style.value}`" if style is not None else "none",
                str(max_score),
                contenders,
            ]
        )
    console.print(
        render_markdown_table(
            ["File", "Style", "Best score", "Contenders"], rows, align={2: "right"}
        )
    )
    if emit is None:
        return
    for det in detections:
        rendered: str | None = _rendered(det, emit)
        if rendered is None:
            continue
        lang: str = "vim" if emit is SettingsFlavor.VIM else "ini"
        console.print(f"## `{det.path}`\n")
        console.print(f"```{lang}\n{rendered}\n```\n")


@click.command(
    name="detect",
    help="Detect the indentation style of files (use '-' to read content from STDIN).",
    epilog=(
        "Exit codes: 0 success; 2 some file undetermined (with --strict); "
        "66 missing path; 74 unreadable file; 78 invalid configuration."
    ),
)
@click.argument("paths", nargs=-1, metavar="[PATHS]...")
@common_config_options
@common_classifier_options
@common_file_filtering_options
@common_output_options
@click.option(
    "--strict",
    is_flag=True,
    help="Exit with status 2 if the style of any file cannot be determined.",
)
def detect_command(
    *,
    paths: tuple[str, ...],
    # config
    no_config: bool,
    config_paths: tuple[str, ...],
    # classifier
    max_lines: int | None,
    threshold: float | None,
    preference: list[StyleName] | None,
    strip_comments: bool | None,
    # filtering
    include_patterns: tuple[str, ...],
    exclude_patterns: tuple[str, ...],
    # output
    output_format: OutputFormat | None,
    emit: SettingsFlavor | None,
    strict: bool,
) -> None:
    """Detect the indentation style of each input.

    Args:
        paths (tuple[str, ...]): Files, directories, globs, or ``-`` for STDIN.
        no_config (bool): Skip project config discovery.
        config_paths (tuple[str, ...]): Explicit config files to merge.
        max_lines (int | None): Leading lines examined per file.
        threshold (float | None): Relative selection cutoff.
        preference (list[StyleName] | None): Tie-break order.
        strip_comments (bool | None): Whether block comments are removed first.
        include_patterns (tuple[str, ...]): Include filters.
        exclude_patterns (tuple[str, ...]): Exclude filters.
        output_format (OutputFormat | None): Output format.
        emit (SettingsFlavor | None): Also print editor settings in this flavor.
        strict (bool): Treat undetermined files as a failure.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    if not paths:
        raise IndentstyleUsageError(
            "No input given. Pass one or more PATHS, or '-' to read from STDIN."
        )
    if paths.count(STDIN_PATH) > 1:
        raise IndentstyleUsageError("'-' (STDIN) may be given at most once.")

    file_args: list[str] = [p for p in paths if p != STDIN_PATH]
    missing: list[str] = missing_paths(file_args)
    if missing:
        raise IndentstyleFileNotFoundError(f"No such file or directory: {', '.join(missing)}")

    config: Config = build_config_common(
        input_paths=paths,
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

    detections: list[FileDetection] = []
    if STDIN_PATH in paths:
        text: str = click.get_text_stream("stdin").read()
        detections.append(detect_stream_text(STDIN_LABEL, text, config))
    if file_args:
        files: list[Path] = resolve_file_list(file_args, config)
        if not files and vlevel >= 0:
            console.warn("No files to process after filtering.")
        logger.debug("Classifying %d file(s)", len(files))
        detections.extend(detect_files(files, config))

    if fmt == OutputFormat.JSON:
        console.print(json.dumps([_payload(d, emit) for d in detections], indent=2))
    elif fmt == OutputFormat.NDJSON:
        for det in detections:
            console.print(json.dumps(_payload(det, emit)))
    elif fmt == OutputFormat.MARKDOWN:
        _emit_markdown(console, detections, emit=emit)
    else:
        _emit_default(console, detections, config=config, emit=emit, vlevel=vlevel)

    if any(d.error is not None for d in detections):
        ctx.exit(ExitCode.IO_ERROR)
    if strict and any(d.error is None and d.style is None for d in detections):
        ctx.exit(ExitCode.UNDETERMINED)
