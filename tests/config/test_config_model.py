# topmark:header:start
#
#   project      : IndentStyle
#   file         : test_config_model.py
#   file_relpath : tests/config/test_config_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the configuration model: defaults, validation, merging and CLI overrides."""

from __future__ import annotations

import pytest
import tomlkit

from indentstyle.classifier.model import DEFAULT_THRESHOLD
from indentstyle.config.diagnostics import DiagnosticLevel
from indentstyle.config.keys import Toml
from indentstyle.config.model import Config, MutableConfig
from indentstyle.constants import DEFAULT_MAX_LINES
from indentstyle.styles import DEFAULT_PREFERENCE, STYLES, StyleName
from tests.conftest import make_config, parametrize


def test_defaults() -> None:
    cfg: Config = Config.from_defaults()
    assert cfg.max_lines == DEFAULT_MAX_LINES
    assert cfg.threshold == DEFAULT_THRESHOLD
    assert cfg.preference == DEFAULT_PREFERENCE
    assert cfg.strip_comments is True
    assert cfg.include_patterns == ()
    assert cfg.overrides == {}
    assert cfg.config_files == ("<defaults>",)
    assert cfg.policy.threshold_permille == 850


def test_unset_scalars_fall_back_to_defaults() -> None:
    cfg: Config = MutableConfig().freeze()
    assert cfg.max_lines == DEFAULT_MAX_LINES
    assert cfg.preference == DEFAULT_PREFERENCE


def test_from_toml_dict_reads_all_sections() -> None:
    data = tomlkit.parse(
        """
[classifier]
max_lines = 200
threshold = 0.9
strip_comments = false
preference = ["tabs", "spaces-8", "spaces-4", "spaces-2", "emacs-2-4", "emacs-4-8", "emacs-2-8"]

[files]
include_patterns = ["*.c"]
exclude_patterns = ["vendor/"]

[overrides.tabs]
tab_width = 4
"""
    ).unwrap()
    cfg: Config = MutableConfig.from_toml_dict(data).freeze()
    assert cfg.max_lines == 200
    assert cfg.threshold == 0.9
    assert cfg.strip_comments is False
    assert cfg.preference[0] is StyleName.TABS
    assert cfg.include_patterns == ("*.c",)
    assert cfg.exclude_patterns == ("vendor/",)
    assert cfg.settings_for(StyleName.TABS).tab_width == 4
    assert cfg.settings_for(StyleName.TABS).indent_width == 8
    assert cfg.settings_for(StyleName.SPACES_2) == STYLES[StyleName.SPACES_2].settings


def test_wrong_types_become_diagnostics() -> None:
    draft = MutableConfig.from_toml_dict(
        {
            Toml.SECTION_CLASSIFIER: {Toml.KEY_MAX_LINES: "many", Toml.KEY_STRIP_COMMENTS: 1},
            Toml.SECTION_FILES: {Toml.KEY_INCLUDE_PATTERNS: ["ok", 3]},
        }
    )
    assert draft.max_lines is None
    assert draft.strip_comments is None
    assert draft.include_patterns == ["ok"]
    levels = {d.level for d in draft.diagnostics}
    assert levels == {DiagnosticLevel.WARNING}
    assert len(draft.diagnostics) == 3


@parametrize(
    "field, value, message",
    [
        ("threshold", 0.0, "Threshold"),
        ("threshold", 1.5, "Threshold"),
        ("max_lines", -1, "max_lines"),
        ("preference", ["tabs"], "missing"),
        ("preference", ["spaces-3"], "Unknown indentation style"),
        ("overrides", {"tabs": {"tab_width": 0}}, "overrides.tabs"),
        ("overrides", {"nope": {"tab_width": 4}}, "Unknown indentation style"),
    ],
)
def test_freeze_rejects_invalid_values(field: str, value: object, message: str) -> None:
    with pytest.raises(ValueError, match=message):
        make_config(**{field: value})


def test_merge_with_precedence() -> None:
    base = MutableConfig(max_lines=10, threshold=0.9, include_patterns=["*.py"])
    base.overrides = {"tabs": {"tab_width": 4}}
    other = MutableConfig(threshold=0.8, exclude_patterns=["build/"])
    other.overrides = {"tabs": {"indent_width": 4}, "spaces-2": {"tab_width": 2}}

    merged = base.merge_with(other)
    assert merged.max_lines == 10
    assert merged.threshold == 0.8
    assert merged.include_patterns == ["*.py"]
    assert merged.exclude_patterns == ["build/"]
    assert merged.overrides == {
        "tabs": {"tab_width": 4, "indent_width": 4},
        "spaces-2": {"tab_width": 2},
    }
    # Inputs are left untouched.
    assert base.overrides == {"tabs": {"tab_width": 4}}


def test_apply_cli_args_skips_unset_values() -> None:
    draft = MutableConfig.from_defaults()
    draft.apply_cli_args(
        {
            Toml.KEY_MAX_LINES: 0,
            Toml.KEY_THRESHOLD: None,
            Toml.KEY_STRIP_COMMENTS: False,
            Toml.KEY_INCLUDE_PATTERNS: [],
            Toml.KEY_EXCLUDE_PATTERNS: ["*.min.js"],
        }
    )
    cfg = draft.freeze()
    assert cfg.max_lines == 0
    assert cfg.threshold == DEFAULT_THRESHOLD
    assert cfg.strip_comments is False
    assert cfg.include_patterns == ()
    assert cfg.exclude_patterns == ("*.min.js",)


def test_thaw_freeze_round_trip() -> None:
    cfg = make_config(threshold=0.75, overrides={"spaces-4": {"tab_width": 4}})
    assert cfg.thaw().freeze() == cfg


def test_to_toml_is_parseable_and_complete() -> None:
    cfg = make_config(overrides={"spaces-4": {"tab_width": 4}})
    parsed = tomlkit.parse(cfg.to_toml()).unwrap()
    assert parsed[Toml.SECTION_CLASSIFIER][Toml.KEY_THRESHOLD] == DEFAULT_THRESHOLD
    assert parsed[Toml.SECTION_CLASSIFIER][Toml.KEY_PREFERENCE][0] == "spaces-8"
    assert parsed[Toml.SECTION_OVERRIDES]["spaces-4"]["tab_width"] == 4
    assert parsed[Toml.SECTION_OVERRIDES]["spaces-4"]["expand_tabs"] is True


def test_non_table_override_is_dropped_with_diagnostic() -> None:
    draft = MutableConfig.from_toml_dict({Toml.SECTION_OVERRIDES: {"tabs": 4, "spaces-4": {}}})
    assert list(draft.overrides) == ["spaces-4"]
    assert [d.message for d in draft.diagnostics] == [
        "Expected table in overrides.tabs, got int: 4"
    ]


def test_to_toml_writes_long_arrays_one_item_per_line() -> None:
    text: str = Config.from_defaults().to_toml()
    assert '    "spaces-8",\n' in text
    assert "include_patterns = []" in text
