# topmark:header:start
#
#   project      : IndentStyle
#   file         : test_config_discovery.py
#   file_relpath : tests/config/test_config_discovery.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for config file loading and upward discovery."""

from __future__ import annotations

from typing import TYPE_CHECKING

from indentstyle.config.diagnostics import DiagnosticLevel
from indentstyle.config.io import load_toml_dict
from indentstyle.config.model import MutableConfig

if TYPE_CHECKING:
    from pathlib import Path


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_load_toml_dict_returns_empty_on_malformed_file(tmp_path: Path) -> None:
    bad = _write(tmp_path / "indentstyle.toml", "[classifier\nthreshold = ")
    assert load_toml_dict(bad) == {}


def test_load_toml_dict_returns_empty_on_missing_file(tmp_path: Path) -> None:
    assert load_toml_dict(tmp_path / "absent.toml") == {}


def test_pyproject_without_tool_section_is_ignored(tmp_path: Path) -> None:
    pyproject = _write(tmp_path / "pyproject.toml", '[project]\nname = "x"\n')
    assert MutableConfig.from_toml_file(pyproject) is None


def test_pyproject_tool_section_is_read(tmp_path: Path) -> None:
    pyproject = _write(
        tmp_path / "pyproject.toml",
        "[tool.indentstyle.classifier]\nmax_lines = 42\n",
    )
    draft = MutableConfig.from_toml_file(pyproject)
    assert draft is not None
    assert draft.max_lines == 42
    assert draft.config_files == [pyproject]


def test_discovery_order_and_root_stop(tmp_path: Path) -> None:
    outer = _write(tmp_path / "indentstyle.toml", "[classifier]\nmax_lines = 7\n")
    root = _write(
        tmp_path / "repo" / "indentstyle.toml",
        "root = true\n[classifier]\nmax_lines = 50\nthreshold = 0.8\n",
    )
    pyproject = _write(
        tmp_path / "repo" / "pkg" / "pyproject.toml",
        "[tool.indentstyle.classifier]\nthreshold = 0.9\n",
    )
    nearest = _write(
        tmp_path / "repo" / "pkg" / "indentstyle.toml",
        "[classifier]\nthreshold = 0.95\n",
    )
    start = tmp_path / "repo" / "pkg" / "src"
    start.mkdir()

    found = MutableConfig.discover_local_config_files(start)
    assert found == [root.resolve(), pyproject.resolve(), nearest.resolve()]
    assert outer.resolve() not in found

    cfg = MutableConfig.load_merged(input_paths=[start]).freeze()
    assert cfg.max_lines == 50
    assert cfg.threshold == 0.95
    assert cfg.config_files[0] == "<defaults>"


def test_no_config_skips_discovery_but_keeps_explicit_files(tmp_path: Path) -> None:
    _write(tmp_path / "indentstyle.toml", "root = true\n[classifier]\nmax_lines = 5\n")
    extra = _write(tmp_path / "extra.toml", "[classifier]\nthreshold = 0.5\n")

    cfg = MutableConfig.load_merged(
        input_paths=[tmp_path], extra_config_files=[extra], no_config=True
    ).freeze()
    assert cfg.max_lines != 5
    assert cfg.threshold == 0.5


def test_explicit_pyproject_without_section_adds_diagnostic(tmp_path: Path) -> None:
    _write(tmp_path / "indentstyle.toml", "root = true\n")
    extra = _write(tmp_path / "sub" / "pyproject.toml", '[project]\nname = "x"\n')
    draft = MutableConfig.load_merged(input_paths=[tmp_path], extra_config_files=[extra])
    assert any("No IndentStyle configuration" in d.message for d in draft.diagnostics)


def test_malformed_config_file_records_error_diagnostic(tmp_path: Path) -> None:
    bad = _write(tmp_path / "indentstyle.toml", "[classifier\nthreshold = ")
    draft = MutableConfig.from_toml_file(bad)
    assert draft is not None
    assert draft.config_files == [bad]
    assert [d.level for d in draft.diagnostics] == [DiagnosticLevel.ERROR]
    assert "Invalid TOML" in draft.diagnostics.items[0].message


def test_unreadable_explicit_config_survives_merge_as_error(tmp_path: Path) -> None:
    _write(tmp_path / "indentstyle.toml", "root = true\n")
    missing = tmp_path / "nope.toml"
    draft = MutableConfig.load_merged(input_paths=[tmp_path], extra_config_files=[missing])
    errors = [d for d in draft.diagnostics if d.level is DiagnosticLevel.ERROR]
    assert len(errors) == 1
    assert "Cannot read" in errors[0].message
    assert draft.freeze().threshold == 0.85
