# topmark:header:start
#
#   project      : IndentStyle
#   file         : matcher.py
#   file_relpath : src/indentstyle/classifier/matcher.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Score styles against a tally of leading whitespace runs.

Every run is tested against every style predicate and contributes its count to
each style it matches. A run may therefore count towards several styles at once
(for example ``"\\t"`` matches ``tabs`` and all three ``emacs-*`` styles); the
selector resolves that overlap.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from indentstyle.config.logging import get_logger
from indentstyle.styles import STYLES

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from indentstyle.config.logging import IndentstyleLogger
    from indentstyle.styles import IndentStyle, StyleName

logger: IndentstyleLogger = get_logger(__name__)


def matching_styles(run: str, styles: Iterable[IndentStyle] | None = None) -> list[StyleName]:
    """Return the names of all styles whose predicate accepts ``run``.

    Args:
        run (str): A leading whitespace run.
        styles (Iterable[IndentStyle] | None): Styles to test; defaults to the catalogue.

    Returns:
        list[StyleName]: Matching style names in catalogue order.
    """
    candidates: Iterable[IndentStyle] = STYLES.values() if styles is None else styles
    return [s.name for s in candidates if s.matches(run)]


def score(
    counts: Mapping[str, int],
    styles: Iterable[IndentStyle] | None = None,
) -> dict[StyleName, int]:
    """Accumulate a weighted count per style.

    Args:
        counts (Mapping[str, int]): Occurrences per leading whitespace run.
        styles (Iterable[IndentStyle] | None): Styles to test; defaults to the catalogue.

    Returns:
        dict[StyleName, int]: Score per style. Styles that matched nothing are absent.
    """
    catalogue: list[IndentStyle] = list(STYLES.values() if styles is None else styles)
    scores: dict[StyleName, int] = {}
    for run, count in counts.items():
        for name in matching_styles(run, catalogue):
            scores[name] = scores.get(name, 0) + count
    logger.trace("score: %r", {s.value: n for s, n in scores.items()})
    return scores
