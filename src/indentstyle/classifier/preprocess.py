# topmark:header:start
#
#   project      : IndentStyle
#   file         : preprocess.py
#   file_relpath : src/indentstyle/classifier/preprocess.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""Line preprocessing: drop lines that carry no indentation signal.

Two passes:

1. Remove C-style block comments (``/*`` through the nearest ``*/``, across line
   boundaries). This is a language-agnostic heuristic, not a tokenizer: it knows
   nothing about nested comments or ``/*`` inside string literals.
2. Drop blank lines, lines starting with ``\t* +\t`` (a space before a tab) and
   lines without leading whitespace.
"""

from __future__ import annotations

import io
import re
from typing import TYPE_CHECKING, Final

from indentstyle.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

    from indentstyle.config.logging import IndentstyleLogger

logger: IndentstyleLogger = get_logger(__name__)

BLOCK_COMMENT_RE: Final[re.Pattern[str]] = re.compile(r"/\*.*?\*/", re.DOTALL)
SPACE_BEFORE_TAB_RE: Final[re.Pattern[str]] = re.compile(r"\t* +\t")


def split_lines(text: str) -> list[str]:
    r"""Split ``text`` the way a file opened in text mode is read.

    Only ``\n``, ``\r\n`` and ``\r`` end a line. Unlike `str.splitlines`, form
    feeds and the other Unicode separators stay inside their line, so
    content classifies the same whether it comes from a file or from a string.
    """
    return [ln.rstrip("\n") for ln in io.StringIO(text, newline=None)]


def strip_block_comments(text: str) -> str:
    """Remove every non-overlapping ``/* ... */`` span from ``text``."""
    return BLOCK_COMMENT_RE.sub("", text)


def is_usable(line: str) -> bool:
    """Return True if ``line`` can contribute to indentation inference.

    Args:
        line (str): A single line without its line terminator.

    Returns:
        bool: False for blank lines, space-before-tab lines and unindented lines.
    """
    if not line.strip():
        return False
    if line[0] not in " \t":
        return False
    return SPACE_BEFORE_TAB_RE.match(line) is None


def preprocess(lines: Iterable[str], *, strip_comments: bool = True) -> list[str]:
    """Return the lines that are usable for indentation inference, in order.

    Args:
        lines (Iterable[str]): Input lines; trailing line terminators are tolerated.
        strip_comments (bool): Remove C-style block comments before filtering.

    Returns:
        list[str]: The surviving lines.
    """
    text: str = "\n".join(line.rstrip("\r\n") for line in lines)
    if strip_comments:
        text = strip_block_comments(text)
    candidates: list[str] = text.split("\n")
    usable: list[str] = [ln for ln in candidates if is_usable(ln)]
    logger.trace("preprocess: %d of %d line(s) usable", len(usable), len(candidates))
    return usable
