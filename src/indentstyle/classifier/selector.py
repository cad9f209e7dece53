# topmark:header:start
#
#   project      : IndentStyle
#   file         : selector.py
#   file_relpath : src/indentstyle/classifier/selector.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pick the winning style from a score table.

Selection policy:

* A style is a *contender* when its score reaches ``threshold`` times the best
  score. The comparison is done on integers (``score * 1000 >= best * 850`` for
  the default threshold) so exact boundary ties always qualify.
* Contenders are ordered by the policy's preference list and the first one wins.

The default preference order puts larger space blocks before smaller ones
(every ``spaces-8`` run is also a ``spaces-4`` and ``spaces-2`` run) and ``tabs``
before the ``emacs-*`` styles (which all accept tab-only runs).

An empty score table selects nothing. That is a normal outcome, not an error.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from indentstyle.classifier.model import DEFAULT_POLICY, THRESHOLD_SCALE
from indentstyle.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Mapping

    from indentstyle.classifier.model import SelectionPolicy
    from indentstyle.config.logging import IndentstyleLogger
    from indentstyle.styles import StyleName

logger: IndentstyleLogger = get_logger(__name__)


def passes_cutoff(value: int, max_score: int, policy: SelectionPolicy = DEFAULT_POLICY) -> bool:
    """Return True if ``value`` reaches the policy threshold relative to ``max_score``."""
    return value * THRESHOLD_SCALE >= max_score * policy.threshold_permille


def contenders(
    scores: Mapping[StyleName, int],
    policy: SelectionPolicy = DEFAULT_POLICY,
) -> tuple[StyleName, ...]:
    """Return the styles that pass the cutoff, in preference order.

    Args:
        scores (Mapping[StyleName, int]): Score per style.
        policy (SelectionPolicy): Threshold and preference order.

    Returns:
        tuple[StyleName, ...]: Qualifying styles, most preferred first; empty if
            ``scores`` is empty.
    """
    if not scores:
        return ()
    max_score: int = max(scores.values())
    qualified: list[StyleName] = [
        s for s, n in scores.items() if passes_cutoff(n, max_score, policy)
    ]
    return tuple(sorted(qualified, key=policy.rank))


def select(
    scores: Mapping[StyleName, int],
    policy: SelectionPolicy = DEFAULT_POLICY,
) -> tuple[StyleName | None, tuple[StyleName, ...]]:
    """Select the winning style.

    Args:
        scores (Mapping[StyleName, int]): Score per style.
        policy (SelectionPolicy): Threshold and preference order.

    Returns:
        tuple[StyleName | None, tuple[StyleName, ...]]: The winner (None if
            ``scores`` is empty) and the ordered contenders.
    """
    ranked: tuple[StyleName, ...] = contenders(scores, policy)
    winner: StyleName | None = ranked[0] if ranked else None
    logger.trace(
        "select: contenders=%s winner=%s",
        [s.value for s in ranked],
        winner.value if winner else None,
    )
    return winner, ranked
