# topmark:header:start
#
#   project      : IndentStyle
#   file         : tally.py
#   file_relpath : src/indentstyle/classifier/tally.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Count leading whitespace runs.

Runs are keyed by their exact character sequence: ``"  \\t"`` and ``"\\t  "``
are distinct keys even though they have the same length.
"""

from __future__ import annotations

import re
from collections import Counter
from typing import TYPE_CHECKING, Final

from indentstyle.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

    from indentstyle.config.logging import IndentstyleLogger

logger: IndentstyleLogger = get_logger(__name__)

LEADING_RUN_RE: Final[re.Pattern[str]] = re.compile(r"[ \t]+")


def leading_run(line: str) -> str:
    """Return the maximal leading run of spaces and tabs (may be empty)."""
    m: re.Match[str] | None = LEADING_RUN_RE.match(line)
    return m.group(0) if m else ""


def tally(lines: Iterable[str]) -> Counter[str]:
    """Count occurrences of each literal leading whitespace run.

    Lines without leading whitespace are skipped; after
    [`preprocess`][indentstyle.classifier.preprocess.preprocess] there are none.

    Args:
        lines (Iterable[str]): Preprocessed lines.

    Returns:
        Counter[str]: Occurrences per run.
    """
    counts: Counter[str] = Counter()
    for line in lines:
        run: str = leading_run(line)
        if run:
            counts[run] += 1
    logger.trace("tally: %d distinct run(s): %r", len(counts), dict(counts))
    return counts
