# topmark:header:start
#
#   project      : IndentStyle
#   file         : keys.py
#   file_relpath : src/indentstyle/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for IndentStyle configuration.

These names are the external configuration API as it appears in
``indentstyle.toml`` and in ``[tool.indentstyle]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.

The same key names are used for the override mapping passed to
[`MutableConfig.apply_cli_args`][indentstyle.config.model.MutableConfig.apply_cli_args].
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by IndentStyle configuration."""

    # Root / discovery
    KEY_ROOT: Final[str] = "root"

    # [classifier]
    SECTION_CLASSIFIER: Final[str] = "classifier"

    KEY_MAX_LINES: Final[str] = "max_lines"
    KEY_THRESHOLD: Final[str] = "threshold"
    KEY_PREFERENCE: Final[str] = "preference"
    KEY_STRIP_COMMENTS: Final[str] = "strip_comments"

    # [files]
    SECTION_FILES: Final[str] = "files"

    KEY_INCLUDE_PATTERNS: Final[str] = "include_patterns"
    KEY_EXCLUDE_PATTERNS: Final[str] = "exclude_patterns"

    # [overrides.<style>]
    SECTION_OVERRIDES: Final[str] = "overrides"
