# topmark:header:start
#
#   project      : IndentStyle
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the TRACE-aware logging setup and the `-v`/`-q` flags."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from indentstyle.config.logging import (
    LOG_LEVEL_ENV,
    TRACE_LEVEL,
    IndentstyleLogger,
    get_logger,
    resolve_env_log_level,
)
from tests.cli.conftest import assert_SUCCESS, run_cli
from tests.conftest import mark_cli, parametrize

if TYPE_CHECKING:
    from click.testing import Result


@parametrize(
    "raw, expected",
    [
        ("TRACE", TRACE_LEVEL),
        ("debug", logging.DEBUG),
        (" warn ", logging.WARNING),
        ("10", 10),
        ("bogus", None),
        ("", None),
    ],
)
def test_resolve_env_log_level(
    monkeypatch: pytest.MonkeyPatch, raw: str, expected: int | None
) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV, raw)
    assert resolve_env_log_level() == expected


def test_resolve_env_log_level_unset() -> None:
    assert resolve_env_log_level() is None


def test_get_logger_supports_trace(caplog: pytest.LogCaptureFixture) -> None:
    log = get_logger("indentstyle.tests.trace")
    assert isinstance(log, IndentstyleLogger)
    with caplog.at_level(TRACE_LEVEL, logger="indentstyle.tests.trace"):
        log.trace("tally has %d runs", 3)
    assert any(r.levelno == TRACE_LEVEL and "3 runs" in r.getMessage() for r in caplog.records)


@mark_cli
def test_verbose_and_quiet_flags_parse() -> None:
    for args in (["-v", "version"], ["-vv", "version"], ["-q", "version"]):
        result: Result = run_cli(args)
        assert_SUCCESS(result)
