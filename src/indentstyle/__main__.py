# topmark:header:start
#
#   project      : IndentStyle
#   file         : __main__.py
#   file_relpath : src/indentstyle/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running IndentStyle via ``python -m indentstyle``.

Delegates to :func:`indentstyle.cli.main.cli`, the same entry point as the
``indentstyle`` console script.

Examples:
    Classify a tree using the module interface::

        python -m indentstyle detect src
"""

from __future__ import annotations

from indentstyle.cli.main import cli

if __name__ == "__main__":
    cli()
