# topmark:header:start
#
#   project      : IndentStyle
#   file         : formats.py
#   file_relpath : src/indentstyle/rendering/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output formats and settings flavors used by the CLI and the API."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format for CLI rendering.

    Members:
      DEFAULT: Human-friendly text output; may include ANSI color if enabled.
      JSON: A single JSON document (machine-readable).
      NDJSON: One JSON object per line (newline-delimited JSON; machine-readable).
      MARKDOWN: A Markdown table.

    Notes:
      - Machine formats (``JSON`` and ``NDJSON``) never include ANSI color.
    """

    DEFAULT = "default"
    JSON = "json"
    NDJSON = "ndjson"
    MARKDOWN = "markdown"


class SettingsFlavor(str, Enum):
    """Target syntax when emitting style settings."""

    VIM = "vim"
    EDITORCONFIG = "editorconfig"
