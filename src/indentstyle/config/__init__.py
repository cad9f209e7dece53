# topmark:header:start
#
#   project      : IndentStyle
#   file         : __init__.py
#   file_relpath : src/indentstyle/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""IndentStyle configuration layer.

Submodules:
    - [`indentstyle.config.logging`][]: logging setup (TRACE level, colored output).
    - [`indentstyle.config.keys`][]: canonical TOML section and key names.
    - [`indentstyle.config.io`][]: TOML loading, rendering and typed getters (``tomlkit``).
    - [`indentstyle.config.model`][]: immutable `Config` and mutable `MutableConfig`
      with layered discovery and merging.

This package module deliberately re-exports nothing so that the classifier can
import the logging helpers without pulling in the configuration model.
"""

from __future__ import annotations
