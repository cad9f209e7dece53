# topmark:header:start
#
#   project      : IndentStyle
#   file         : model.py
#   file_relpath : src/indentstyle/classifier/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Value types shared by the classifier stages.

`SelectionPolicy` holds the two tuning constants of the selector (relative
threshold and preference order). `ClassificationResult` is the value returned by
[`classify`][indentstyle.classifier.engine.classify]; it carries the chosen style
together with the intermediate tables for diagnostics.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Final

from indentstyle.styles import DEFAULT_PREFERENCE, STYLES, StyleName, StyleSettings

DEFAULT_THRESHOLD: Final[float] = 0.85

# Threshold comparisons are done on integers scaled by this factor.
THRESHOLD_SCALE: Final[int] = 1000


@dataclass(frozen=True, slots=True)
class SelectionPolicy:
    """Tuning constants for style selection.

    Attributes:
        threshold (float): Fraction of the best score a style needs to stay in
            contention. Must lie in ``(0, 1]`` and be a multiple of
            ``1 / THRESHOLD_SCALE`` (at most three decimals).
        preference (tuple[StyleName, ...]): Total order used to break ties among
            contenders, most preferred first. Must list every catalogue style once.
    """

    threshold: float = DEFAULT_THRESHOLD
    preference: tuple[StyleName, ...] = DEFAULT_PREFERENCE

    def __post_init__(self) -> None:
        if not 0 < self.threshold <= 1:
            raise ValueError(f"Threshold must be in (0, 1], got {self.threshold}")
        scaled: float = self.threshold * THRESHOLD_SCALE
        if abs(scaled - round(scaled)) > 1e-6:
            raise ValueError(
                f"Threshold must have at most three decimals, got {self.threshold}"
            )
        if len(set(self.preference)) != len(self.preference):
            raise ValueError("Preference order lists a style more than once")
        missing: list[str] = [s.value for s in STYLES if s not in self.preference]
        if missing:
            raise ValueError(f"Preference order is missing style(s): {', '.join(missing)}")

    @property
    def threshold_permille(self) -> int:
        """Threshold as an exact integer on the `THRESHOLD_SCALE` scale (0.85 -> 850)."""
        return round(self.threshold * THRESHOLD_SCALE)

    def rank(self, style: StyleName) -> int:
        """Return the position of ``style`` in the preference order (0 is best)."""
        return self.preference.index(style)


DEFAULT_POLICY: Final[SelectionPolicy] = SelectionPolicy()


@dataclass(frozen=True, slots=True)
class ClassificationResult:
    """Outcome of one classification call.

    Attributes:
        style (StyleName | None): Winning style, or None when no usable
            indentation was found.
        scores (Mapping[StyleName, int]): Weighted count per matching style.
        contenders (tuple[StyleName, ...]): Styles that passed the cutoff, in
            preference order.
        tally (Mapping[str, int]): Occurrences per literal leading whitespace run.
        usable_lines (int): Number of lines that survived preprocessing.
        max_score (int): Best score, 0 if nothing matched.
        policy (SelectionPolicy): Policy the selection was made with.
    """

    style: StyleName | None
    scores: Mapping[StyleName, int] = field(default_factory=lambda: {})
    contenders: tuple[StyleName, ...] = ()
    tally: Mapping[str, int] = field(default_factory=lambda: {})
    usable_lines: int = 0
    max_score: int = 0
    policy: SelectionPolicy = DEFAULT_POLICY

    @property
    def determined(self) -> bool:
        """True if a style was selected."""
        return self.style is not None

    def settings(
        self,
        overrides: Mapping[StyleName, StyleSettings] | None = None,
    ) -> StyleSettings | None:
        """Return the settings to apply for the selected style.

        Args:
            overrides (Mapping[StyleName, StyleSettings] | None): Optional
                caller-supplied table that takes precedence over the catalogue
                defaults.

        Returns:
            StyleSettings | None: The settings, or None when undetermined.
        """
        if self.style is None:
            return None
        if overrides and self.style in overrides:
            return overrides[self.style]
        return STYLES[self.style].settings

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly representation of the result."""
        return {
            "style": self.style.value if self.style is not None else None,
            "usable_lines": self.usable_lines,
            "max_score": self.max_score,
            "scores": {s.value: n for s, n in self.scores.items()},
            "contenders": [s.value for s in self.contenders],
        }
