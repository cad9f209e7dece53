# topmark:header:start
#
#   project      : IndentStyle
#   file         : __init__.py
#   file_relpath : src/indentstyle/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render style settings for external tools (editors, EditorConfig)."""

from __future__ import annotations

from indentstyle.rendering.formats import OutputFormat, SettingsFlavor
from indentstyle.rendering.settings import (
    editorconfig_section,
    render_editorconfig,
    render_settings,
    render_vim,
)

__all__ = [
    "OutputFormat",
    "SettingsFlavor",
    "editorconfig_section",
    "render_editorconfig",
    "render_settings",
    "render_vim",
]
