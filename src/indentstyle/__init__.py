# topmark:header:start
#
#   project      : IndentStyle
#   file         : __init__.py
#   file_relpath : src/indentstyle/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""IndentStyle package.

IndentStyle guesses the indentation convention of a source file (tabs, blocks
of spaces, or Emacs-style mixes) from the leading whitespace of its lines, and
maps the guess to editor settings. It exposes a CLI and a small typed API.
"""

from __future__ import annotations
