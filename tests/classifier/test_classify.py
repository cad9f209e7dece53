# topmark:header:start
#
#   project      : IndentStyle
#   file         : test_classify.py
#   file_relpath : tests/classifier/test_classify.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""End-to-end tests for `classify` on small, hand-written inputs."""

from __future__ import annotations

from indentstyle.classifier import ClassificationResult, SelectionPolicy, classify, classify_text
from indentstyle.styles import STYLES, StyleName
from tests.conftest import mark_classifier


@mark_classifier
def test_empty_input_is_undetermined() -> None:
    result: ClassificationResult = classify([])
    assert result.style is None
    assert not result.determined
    assert result.usable_lines == 0
    assert result.max_score == 0
    assert result.settings() is None


@mark_classifier
def test_unindented_and_blank_lines_are_undetermined() -> None:
    result = classify(["int main()", "{", "", "   ", "}"])
    assert result.style is None
    assert result.scores == {}


@mark_classifier
def test_tab_indented_file() -> None:
    result = classify(["int main()", "{", "\treturn 0;", "}"])
    assert result.style is StyleName.TABS
    assert result.settings() == STYLES[StyleName.TABS].settings


@mark_classifier
def test_two_space_runs_dominate() -> None:
    result = classify(["def f():", "  a = 1", "  b = 2", "    c = 3"])
    assert result.style is StyleName.SPACES_2
    assert result.scores[StyleName.SPACES_2] == 3
    assert result.scores[StyleName.EMACS_2_8] == 3


@mark_classifier
def test_four_space_python() -> None:
    text = "class A:\n    def f(self):\n        return 1\n    x = 2\n"
    result = classify_text(text)
    assert result.style is StyleName.SPACES_4
    assert result.contenders == (StyleName.SPACES_4, StyleName.SPACES_2)


@mark_classifier
def test_eight_space_blocks_at_exact_threshold() -> None:
    """17 eight-space lines and 3 four-space lines: spaces-8 scores exactly 85%."""
    lines: list[str] = ["        deep"] * 17 + ["    shallow"] * 3
    result = classify(lines)
    assert result.scores[StyleName.SPACES_2] == 20
    assert result.scores[StyleName.SPACES_4] == 20
    assert result.scores[StyleName.SPACES_8] == 17
    assert result.style is StyleName.SPACES_8


@mark_classifier
def test_tab_example_end_to_end() -> None:
    """Tab-only runs tie tabs with the emacs styles; preference picks tabs."""
    lines: list[str] = ["\tfoo", "\tbar", "\t\tbaz", "", "   noindent-mixed \t x", "qux"]
    result = classify(lines)
    assert result.style is StyleName.TABS
    assert result.tally["\t"] == 2
    assert result.tally["\t\t"] == 1
    # The space-before-tab filter only looks at the leading run, and "   n" has no
    # tab there, so the line is kept; its run matches no style.
    assert result.tally["   "] == 1
    assert result.usable_lines == 4
    for name in (StyleName.TABS, StyleName.EMACS_2_4, StyleName.EMACS_2_8, StyleName.EMACS_4_8):
        assert result.scores[name] == 3
    assert result.contenders[0] is StyleName.TABS


@mark_classifier
def test_commented_space_lines_do_not_contribute() -> None:
    lines: list[str] = [
        "/*",
        "    * documented with spaces",
        "    * more",
        "        * and more",
        "*/",
        "int f(void)",
        "{",
        "\treturn 1;",
        "}",
    ]
    result = classify(lines)
    assert result.style is StyleName.TABS
    assert set(result.tally) == {"\t"}

    unstripped = classify(lines, strip_comments=False)
    assert unstripped.style is not StyleName.TABS


@mark_classifier
def test_classify_is_idempotent() -> None:
    lines: list[str] = ["\tfoo", "  bar", "    baz"]
    assert classify(lines) == classify(lines)


@mark_classifier
def test_policy_is_recorded_and_applied() -> None:
    policy = SelectionPolicy(threshold=1.0)
    result = classify(["  a", "  b", "    c"], policy=policy)
    assert result.policy is policy
    assert result.style is StyleName.SPACES_2
    assert result.contenders == (StyleName.SPACES_2, StyleName.EMACS_2_8)


@mark_classifier
def test_result_to_dict() -> None:
    data = classify(["\tx"]).to_dict()
    assert data["style"] == "tabs"
    assert data["usable_lines"] == 1
    assert data["max_score"] == 1
    assert data["contenders"] == ["tabs", "emacs-2-4", "emacs-4-8", "emacs-2-8"]


@mark_classifier
def test_result_settings_prefer_overrides() -> None:
    result = classify(["\tx"])
    custom = STYLES[StyleName.TABS].settings.with_overrides({"tab_width": 4, "indent_width": 4})
    assert result.settings({StyleName.TABS: custom}) == custom


@mark_classifier
def test_classify_text_keeps_form_feeds_inside_lines() -> None:
    text = "f()\n{\n\tx;\x0c  y;\n\ty;\x0b  z;\n}\n"
    result = classify_text(text)
    assert result.style is StyleName.TABS
    assert dict(result.tally) == {"\t": 2}
