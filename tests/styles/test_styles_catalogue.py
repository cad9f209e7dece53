# topmark:header:start
#
#   project      : IndentStyle
#   file         : test_styles_catalogue.py
#   file_relpath : tests/styles/test_styles_catalogue.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the style catalogue, style names and settings overrides."""

from __future__ import annotations

import pytest

from indentstyle.styles import DEFAULT_PREFERENCE, STYLES, StyleName, StyleSettings, get_style
from tests.conftest import parametrize


def test_catalogue_covers_every_style_name() -> None:
    assert set(STYLES) == set(StyleName)
    assert set(DEFAULT_PREFERENCE) == set(StyleName)
    assert len(DEFAULT_PREFERENCE) == len(StyleName)


@parametrize(
    "name, expected",
    [
        (StyleName.TABS, (8, 8, 0, False)),
        (StyleName.SPACES_2, (2, 8, 2, True)),
        (StyleName.SPACES_4, (4, 8, 4, True)),
        (StyleName.SPACES_8, (8, 8, 8, True)),
        (StyleName.EMACS_2_4, (2, 4, 2, False)),
        (StyleName.EMACS_2_8, (2, 8, 2, False)),
        (StyleName.EMACS_4_8, (4, 8, 4, False)),
    ],
)
def test_default_settings(name: StyleName, expected: tuple[int, int, int, bool]) -> None:
    s: StyleSettings = STYLES[name].settings
    assert (s.indent_width, s.tab_width, s.soft_tab_stop, s.expand_tabs) == expected


def test_parse_is_case_insensitive() -> None:
    assert StyleName.parse(" Spaces-4 ") is StyleName.SPACES_4
    assert StyleName.parse(StyleName.TABS) is StyleName.TABS
    assert get_style("emacs-2-8").name is StyleName.EMACS_2_8


def test_parse_rejects_unknown_names() -> None:
    with pytest.raises(ValueError, match="Unknown indentation style"):
        StyleName.parse("spaces-3")


def test_matches_requires_the_whole_run() -> None:
    spaces_4 = STYLES[StyleName.SPACES_4]
    assert spaces_4.matches("    ")
    assert spaces_4.matches("        ")
    assert not spaces_4.matches("      ")
    assert not spaces_4.matches("    \t")


def test_with_overrides_is_partial() -> None:
    base: StyleSettings = STYLES[StyleName.SPACES_4].settings
    changed = base.with_overrides({"tab_width": 4})
    assert changed.tab_width == 4
    assert changed.indent_width == base.indent_width
    assert base.tab_width == 8


@parametrize(
    "values, message",
    [
        ({"shift": 4}, "Unknown style setting"),
        ({"tab_width": True}, "must be an integer"),
        ({"tab_width": "4"}, "must be an integer"),
        ({"expand_tabs": 1}, "must be a boolean"),
        ({"indent_width": 0}, "out of range"),
        ({"soft_tab_stop": -1}, "out of range"),
    ],
)
def test_with_overrides_rejects_bad_values(values: dict[str, object], message: str) -> None:
    with pytest.raises(ValueError, match=message):
        STYLES[StyleName.TABS].settings.with_overrides(values)


def test_soft_tab_stop_may_be_zero() -> None:
    s = STYLES[StyleName.SPACES_2].settings.with_overrides({"soft_tab_stop": 0})
    assert s.soft_tab_stop == 0
