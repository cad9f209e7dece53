# topmark:header:start
#
#   project      : IndentStyle
#   file         : engine.py
#   file_relpath : src/indentstyle/classifier/engine.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Run the classifier stages: preprocess, tally, score, select.

Each stage is a pure function; `classify` allocates only call-local data and can
be called concurrently for different inputs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from indentstyle.classifier.matcher import score
from indentstyle.classifier.model import DEFAULT_POLICY, ClassificationResult
from indentstyle.classifier.preprocess import preprocess, split_lines
from indentstyle.classifier.selector import select
from indentstyle.classifier.tally import tally
from indentstyle.config.logging import get_logger

if TYPE_CHECKING:
    from collections import Counter
    from collections.abc import Iterable

    from indentstyle.classifier.model import SelectionPolicy
    from indentstyle.config.logging import IndentstyleLogger
    from indentstyle.styles import StyleName

logger: IndentstyleLogger = get_logger(__name__)


def classify(
    lines: Iterable[str],
    *,
    policy: SelectionPolicy = DEFAULT_POLICY,
    strip_comments: bool = True,
) -> ClassificationResult:
    """Determine the predominant indentation style of ``lines``.

    Args:
        lines (Iterable[str]): Source lines. Truncating very large inputs is the
            caller's job.
        policy (SelectionPolicy): Threshold and preference order for selection.
        strip_comments (bool): Remove C-style block comments before inference.

    Returns:
        ClassificationResult: The selected style (None when undetermined) plus
            the intermediate tables.
    """
    usable: list[str] = preprocess(lines, strip_comments=strip_comments)
    counts: Counter[str] = tally(usable)
    scores: dict[StyleName, int] = score(counts)
    style, ranked = select(scores, policy)

    result = ClassificationResult(
        style=style,
        scores=scores,
        contenders=ranked,
        tally=dict(counts),
        usable_lines=len(usable),
        max_score=max(scores.values(), default=0),
        policy=policy,
    )
    logger.debug(
        "classify: %d usable line(s) -> %s",
        result.usable_lines,
        style.value if style else "none",
    )
    return result


def classify_text(
    text: str,
    *,
    policy: SelectionPolicy = DEFAULT_POLICY,
    strip_comments: bool = True,
) -> ClassificationResult:
    """Split ``text`` into lines and [`classify`][indentstyle.classifier.engine.classify] them."""
    return classify(split_lines(text), policy=policy, strip_comments=strip_comments)
