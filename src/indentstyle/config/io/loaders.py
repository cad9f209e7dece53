# topmark:header:start
#
#   project      : IndentStyle
#   file         : loaders.py
#   file_relpath : src/indentstyle/config/io/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from indentstyle.classifier.model import DEFAULT_THRESHOLD
from indentstyle.config.keys import Toml
from indentstyle.config.logging import get_logger
from indentstyle.constants import DEFAULT_MAX_LINES
from indentstyle.styles import DEFAULT_PREFERENCE

if TYPE_CHECKING:
    from pathlib import Path

    from indentstyle.config.diagnostics import DiagnosticLog
    from indentstyle.config.logging import IndentstyleLogger

    from .tables import TomlTable

logger: IndentstyleLogger = get_logger(__name__)


def load_defaults_dict() -> TomlTable:
    """Return IndentStyle's runtime defaults as a Python dict.

    This function performs no I/O. The returned value is a new dict so callers
    can mutate it safely.

    Returns:
        TomlTable: A TOML-table-compatible dict containing the runtime defaults.
    """
    return {
        Toml.SECTION_CLASSIFIER: {
            Toml.KEY_MAX_LINES: DEFAULT_MAX_LINES,
            Toml.KEY_THRESHOLD: DEFAULT_THRESHOLD,
            Toml.KEY_PREFERENCE: [s.value for s in DEFAULT_PREFERENCE],
            Toml.KEY_STRIP_COMMENTS: True,
        },
        Toml.SECTION_FILES: {
            Toml.KEY_INCLUDE_PATTERNS: [],
            Toml.KEY_EXCLUDE_PATTERNS: [],
        },
        # No style overrides by default.
        Toml.SECTION_OVERRIDES: {},
    }


def load_toml_dict(path: Path, diagnostics: DiagnosticLog | None = None) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``indentstyle.toml`` or ``pyproject.toml``).
        diagnostics (DiagnosticLog | None): Receives an ``error`` diagnostic when the
            file cannot be read or parsed.

    Returns:
        TomlTable: The parsed TOML content.

    Notes:
        - Errors are logged (and recorded in ``diagnostics``) and an empty dict is
          returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        problem = f"Cannot read {path}: {e}"
    except TomlkitParseError as e:
        problem = f"Invalid TOML in {path}: {e}"
    except (TypeError, ValueError) as e:
        problem = f"Unexpected error while reading {path}: {e}"
    logger.error("%s", problem)
    if diagnostics is not None:
        diagnostics.add_error(problem)
    return {}
