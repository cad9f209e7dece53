# topmark:header:start
#
#   project      : IndentStyle
#   file         : markdown.py
#   file_relpath : src/indentstyle/rendering/markdown.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Markdown helpers shared by the CLI commands (Click-free)."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence


def _separator(width: int, alignment: str) -> str:
    width = max(3, width)
    if alignment == "right":
        return "-" * (width - 1) + ":"
    if alignment == "center":
        return ":" + "-" * (width - 2) + ":"
    return "-" * width


def render_markdown_table(
    headers: Sequence[str],
    rows: Sequence[Sequence[object]],
    *,
    align: Mapping[int, str] | None = None,
) -> str:
    """Render a GitHub-flavoured Markdown table with padded columns.

    Args:
        headers: Column headers.
        rows: Row sequences, each as long as ``headers``.
        align: Optional column index -> ``"left"`` (default), ``"right"`` or ``"center"``.

    Returns:
        The table text, newline-terminated; empty if there are no headers.

    Raises:
        ValueError: If a row does not have one cell per header.
    """
    if not headers:
        return ""
    cells: list[list[str]] = [[str(c) for c in row] for row in rows]
    if any(len(row) != len(headers) for row in cells):
        raise ValueError("All rows must have the same number of columns as headers")

    widths: list[int] = [max(3, len(h)) for h in headers]
    for row in cells:
        widths = [max(w, len(c)) for w, c in zip(widths, row)]

    def _line(values: Sequence[str]) -> str:
        return "| " + " | ".join(f"{v:<{w}}" for v, w in zip(values, widths)) + " |"

    separators: list[str] = [
        _separator(w, (align or {}).get(i, "left").lower()) for i, w in enumerate(widths)
    ]
    out: list[str] = [_line(headers), _line(separators)]
    out.extend(_line(row) for row in cells)
    return "\n".join(out) + "\n"
