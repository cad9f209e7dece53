# topmark:header:start
#
#   project      : IndentStyle
#   file         : styles.py
#   file_relpath : src/indentstyle/styles.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Catalogue of recognized indentation styles.

Each style owns a recognition pattern (a full-match regular expression over the
leading whitespace of a line) and a default `StyleSettings` bundle that a host
can apply to an editor or formatter.

The catalogue is fixed and immutable. Predicates overlap on purpose (every
``spaces-8`` run is also a ``spaces-4`` and ``spaces-2`` run, and tab-only runs
satisfy every ``emacs-*`` predicate); the overlap is resolved by the selection
policy in [`indentstyle.classifier.selector`][], not here.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Final


class StyleName(str, Enum):
    """Identifiers of the recognized indentation conventions."""

    TABS = "tabs"
    SPACES_2 = "spaces-2"
    SPACES_4 = "spaces-4"
    SPACES_8 = "spaces-8"
    EMACS_2_4 = "emacs-2-4"
    EMACS_2_8 = "emacs-2-8"
    EMACS_4_8 = "emacs-4-8"

    @classmethod
    def parse(cls, value: str | StyleName) -> StyleName:
        """Return the member for ``value`` (case-insensitive, surrounding blanks ignored).

        Args:
            value (str | StyleName): Style name or member.

        Returns:
            StyleName: The matching member.

        Raises:
            ValueError: If ``value`` does not name a known style.
        """
        if isinstance(value, StyleName):
            return value
        key: str = value.strip().lower()
        for member in cls:
            if member.value == key:
                return member
        known: str = ", ".join(m.value for m in cls)
        raise ValueError(f"Unknown indentation style '{value}'. Must be one of: {known}")


@dataclass(frozen=True, slots=True)
class StyleSettings:
    """Editor settings that correspond to an indentation style.

    Attributes:
        indent_width (int): Columns per indentation level (vim ``shiftwidth``).
        tab_width (int): Display width of a tab character (vim ``tabstop``).
        soft_tab_stop (int): Columns inserted by the Tab key, 0 to disable
            (vim ``softtabstop``).
        expand_tabs (bool): Whether indentation is written with spaces only.
    """

    indent_width: int
    tab_width: int
    soft_tab_stop: int
    expand_tabs: bool

    def as_dict(self) -> dict[str, int | bool]:
        """Return the settings as a plain dict (TOML/JSON friendly)."""
        return {
            "indent_width": self.indent_width,
            "tab_width": self.tab_width,
            "soft_tab_stop": self.soft_tab_stop,
            "expand_tabs": self.expand_tabs,
        }

    def with_overrides(self, values: Mapping[str, object]) -> StyleSettings:
        """Return a copy with the given fields replaced.

        Unknown keys and values of the wrong type raise `ValueError` so that
        configuration mistakes surface early.

        Args:
            values (Mapping[str, object]): Partial settings keyed by field name.

        Returns:
            StyleSettings: The updated settings.

        Raises:
            ValueError: If a key is unknown or a value has the wrong type or range.
        """
        merged: dict[str, int | bool] = self.as_dict()
        for key, value in values.items():
            if key not in merged:
                raise ValueError(f"Unknown style setting '{key}'")
            if key == "expand_tabs":
                if not isinstance(value, bool):
                    raise ValueError(f"Setting '{key}' must be a boolean, got {value!r}")
            else:
                # bool is an int subclass; reject it for numeric settings
                if isinstance(value, bool) or not isinstance(value, int):
                    raise ValueError(f"Setting '{key}' must be an integer, got {value!r}")
                if value < 0 or (value == 0 and key != "soft_tab_stop"):
                    raise ValueError(f"Setting '{key}' is out of range: {value}")
            merged[key] = value
        return StyleSettings(
            indent_width=int(merged["indent_width"]),
            tab_width=int(merged["tab_width"]),
            soft_tab_stop=int(merged["soft_tab_stop"]),
            expand_tabs=bool(merged["expand_tabs"]),
        )


@dataclass(frozen=True, slots=True)
class IndentStyle:
    """A named indentation convention.

    Attributes:
        name (StyleName): Style identifier.
        pattern (re.Pattern[str]): Full-match recognition pattern over a leading
            whitespace run.
        description (str): Short human-readable description.
        settings (StyleSettings): Default settings a host may apply.
    """

    name: StyleName
    pattern: re.Pattern[str]
    description: str
    settings: StyleSettings

    def matches(self, run: str) -> bool:
        """Return True if the leading whitespace ``run`` is consistent with this style."""
        return self.pattern.fullmatch(run) is not None


def _style(
    name: StyleName,
    regex: str,
    description: str,
    *,
    indent_width: int,
    tab_width: int,
    soft_tab_stop: int,
    expand_tabs: bool,
) -> IndentStyle:
    return IndentStyle(
        name=name,
        pattern=re.compile(regex),
        description=description,
        settings=StyleSettings(
            indent_width=indent_width,
            tab_width=tab_width,
            soft_tab_stop=soft_tab_stop,
            expand_tabs=expand_tabs,
        ),
    )


# Predicates are matched with ``fullmatch``; the alphabet is {tab, space}.
STYLES: Final[Mapping[StyleName, IndentStyle]] = {
    s.name: s
    for s in (
        _style(
            StyleName.TABS,
            r"\t+",
            "Pure tab indentation",
            indent_width=8,
            tab_width=8,
            soft_tab_stop=0,
            expand_tabs=False,
        ),
        _style(
            StyleName.SPACES_2,
            r"(?:  )+",
            "Spaces in blocks of 2",
            indent_width=2,
            tab_width=8,
            soft_tab_stop=2,
            expand_tabs=True,
        ),
        _style(
            StyleName.SPACES_4,
            r"(?:    )+",
            "Spaces in blocks of 4",
            indent_width=4,
            tab_width=8,
            soft_tab_stop=4,
            expand_tabs=True,
        ),
        _style(
            StyleName.SPACES_8,
            r"(?:        )+",
            "Spaces in blocks of 8",
            indent_width=8,
            tab_width=8,
            soft_tab_stop=8,
            expand_tabs=True,
        ),
        _style(
            StyleName.EMACS_2_4,
            r"\t*(?:  )?",
            "Tabs of 4 columns with one optional 2-space remainder",
            indent_width=2,
            tab_width=4,
            soft_tab_stop=2,
            expand_tabs=False,
        ),
        _style(
            StyleName.EMACS_2_8,
            r"\t*(?:  ){0,3}",
            "Tabs of 8 columns with up to three 2-space remainders",
            indent_width=2,
            tab_width=8,
            soft_tab_stop=2,
            expand_tabs=False,
        ),
        _style(
            StyleName.EMACS_4_8,
            r"\t*(?:    )?",
            "Tabs of 8 columns with one optional 4-space remainder",
            indent_width=4,
            tab_width=8,
            soft_tab_stop=4,
            expand_tabs=False,
        ),
    )
}

# Most specific first: larger space blocks before smaller ones, tabs before the
# looser mixed styles.
DEFAULT_PREFERENCE: Final[tuple[StyleName, ...]] = (
    StyleName.SPACES_8,
    StyleName.SPACES_4,
    StyleName.SPACES_2,
    StyleName.TABS,
    StyleName.EMACS_2_4,
    StyleName.EMACS_4_8,
    StyleName.EMACS_2_8,
)


def get_style(name: str | StyleName) -> IndentStyle:
    """Look up a style by name.

    Args:
        name (str | StyleName): Style name or member.

    Returns:
        IndentStyle: The catalogue entry.

    Raises:
        ValueError: If ``name`` does not name a known style.
    """
    return STYLES[StyleName.parse(name)]
