# topmark:header:start
#
#   project      : IndentStyle
#   file         : __init__.py
#   file_relpath : src/indentstyle/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command line interface for IndentStyle."""

from __future__ import annotations
