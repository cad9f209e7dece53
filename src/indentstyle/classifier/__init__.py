# topmark:header:start
#
#   project      : IndentStyle
#   file         : __init__.py
#   file_relpath : src/indentstyle/classifier/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Indentation style classifier.

Data flows strictly Preprocessor -> Tally -> Matcher -> Selector. Each stage
lives in its own module:

- [`preprocess`][indentstyle.classifier.preprocess.preprocess]: strip block
  comments, drop lines without indentation signal.
- [`tally`][indentstyle.classifier.tally.tally]: count literal leading runs.
- [`score`][indentstyle.classifier.matcher.score]: weighted count per style.
- [`select`][indentstyle.classifier.selector.select]: threshold cutoff plus
  preference order.

[`classify`][indentstyle.classifier.engine.classify] wires the stages and
returns a [`ClassificationResult`][indentstyle.classifier.model.ClassificationResult].
"""

from __future__ import annotations

from indentstyle.classifier.engine import classify, classify_text
from indentstyle.classifier.matcher import score
from indentstyle.classifier.model import (
    DEFAULT_POLICY,
    DEFAULT_THRESHOLD,
    ClassificationResult,
    SelectionPolicy,
)

__all__ = [
    "DEFAULT_POLICY",
    "DEFAULT_THRESHOLD",
    "ClassificationResult",
    "SelectionPolicy",
    "classify",
    "classify_text",
    "score",
]
