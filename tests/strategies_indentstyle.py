# topmark:header:start
#
#   project      : IndentStyle
#   file         : strategies_indentstyle.py
#   file_relpath : tests/strategies_indentstyle.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Hypothesis strategies for generating indented source-like lines.

Bodies never contain ``/``, ``*`` or line breaks, so comment stripping and line
splitting leave generated lines untouched.
"""

from __future__ import annotations

from hypothesis import strategies as st

BODY_HEAD: str = "abcdefxyz_({}"
BODY_TAIL: str = "abcdefxyz_(){};=+-,. \t"

# Leading runs drawn from the alphabet {tab, space}, including shapes no style accepts.
s_indent_run: st.SearchStrategy[str] = st.text(alphabet=" \t", min_size=0, max_size=12)

s_body: st.SearchStrategy[str] = st.builds(
    lambda head, tail: head + tail,
    st.sampled_from(BODY_HEAD),
    st.text(alphabet=BODY_TAIL, max_size=20),
)

s_line: st.SearchStrategy[str] = st.one_of(
    st.builds(lambda run, body: run + body, s_indent_run, s_body),
    st.just(""),
)

s_lines: st.SearchStrategy[list[str]] = st.lists(s_line, max_size=60)

s_unindented_line: st.SearchStrategy[str] = st.one_of(st.just(""), s_body)


def s_uniform_lines(unit: str, max_depth: int = 4) -> st.SearchStrategy[list[str]]:
    """Non-empty lists of lines indented by 1..max_depth repetitions of ``unit``."""
    return st.lists(
        st.builds(
            lambda depth, body: unit * depth + body,
            st.integers(min_value=1, max_value=max_depth),
            s_body,
        ),
        min_size=1,
        max_size=40,
    )
