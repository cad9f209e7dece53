# topmark:header:start
#
#   project      : IndentStyle
#   file         : test_render_settings.py
#   file_relpath : tests/rendering/test_render_settings.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for rendering style settings as editor directives and Markdown tables."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from indentstyle.rendering import (
    SettingsFlavor,
    editorconfig_section,
    render_editorconfig,
    render_settings,
    render_vim,
)
from indentstyle.rendering.markdown import render_markdown_table
from indentstyle.styles import STYLES, StyleName

if TYPE_CHECKING:
    from pathlib import Path


def test_render_vim_spaces() -> None:
    assert render_vim(STYLES[StyleName.SPACES_4].settings) == (
        "setlocal shiftwidth=4 tabstop=8 softtabstop=4 expandtab"
    )


def test_render_vim_tabs() -> None:
    assert render_vim(STYLES[StyleName.TABS].settings) == (
        "setlocal shiftwidth=8 tabstop=8 softtabstop=0 noexpandtab"
    )


def test_render_editorconfig_pure_tabs_uses_tab_size() -> None:
    assert render_editorconfig(STYLES[StyleName.TABS].settings) == (
        "[*]\nindent_style = tab\nindent_size = tab\ntab_width = 8\n"
    )


def test_render_editorconfig_mixed_style_keeps_numeric_size() -> None:
    text: str = render_editorconfig(STYLES[StyleName.EMACS_4_8].settings, section="*.c")
    assert text.splitlines() == [
        "[*.c]",
        "indent_style = tab",
        "indent_size = 4",
        "tab_width = 8",
    ]


def test_render_settings_dispatches_on_flavor() -> None:
    settings = STYLES[StyleName.SPACES_2].settings
    assert render_settings(settings, SettingsFlavor.VIM) == render_vim(settings)
    assert render_settings(settings, SettingsFlavor.EDITORCONFIG, section="x") == (
        "[x]\nindent_style = space\nindent_size = 2\ntab_width = 8"
    )


def test_render_markdown_table() -> None:
    table: str = render_markdown_table(["A", "Score"], [["x", 1], ["long", 22]], align={1: "right"})
    assert table.splitlines() == [
        "| A    | Score |",
        "| ---- | ----: |",
        "| x    | 1     |",
        "| long | 22    |",
    ]


def test_render_markdown_table_rejects_ragged_rows() -> None:
    with pytest.raises(ValueError, match="same number of columns"):
        render_markdown_table(["A", "B"], [["only one"]])
    assert render_markdown_table([], []) == ""


def test_editorconfig_section_is_anchored_relative_to_base(tmp_path: Path) -> None:
    assert editorconfig_section(tmp_path / "src" / "a" / "foo.c", tmp_path) == "/src/a/foo.c"
    assert editorconfig_section(tmp_path / "foo.c", tmp_path) == "/foo.c"


def test_editorconfig_section_escapes_glob_characters(tmp_path: Path) -> None:
    assert editorconfig_section(tmp_path / "x[1]{a}*.c", tmp_path) == r"/x\[1\]\{a\}\*.c"


def test_editorconfig_section_outside_base_uses_basename(tmp_path: Path) -> None:
    assert editorconfig_section(tmp_path / "other" / "foo.c", tmp_path / "proj") == "foo.c"
