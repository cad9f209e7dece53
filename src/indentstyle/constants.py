# topmark:header:start
#
#   project      : IndentStyle
#   file         : constants.py
#   file_relpath : src/indentstyle/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""IndentStyle Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

INDENTSTYLE_VERSION: Final[str] = get_version("indentstyle")

# Project config file names (discovered upward from the first input path).
CONFIG_FILE_NAME: Final[str] = "indentstyle.toml"
PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_SECTION: Final[str] = "indentstyle"

# Only a bounded prefix of each file is examined.
DEFAULT_MAX_LINES: Final[int] = 1000

STDIN_PATH: Final[str] = "-"
STDIN_LABEL: Final[str] = "<stdin>"
