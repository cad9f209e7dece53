# topmark:header:start
#
#   project      : IndentStyle
#   file         : __init__.py
#   file_relpath : src/indentstyle/config/io/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O helpers for IndentStyle configuration.

IndentStyle uses `tomlkit` for parsing and rendering:

- `load_toml_dict()` parses on-disk TOML and returns plain dicts.
- `to_toml()` renders a dict (after stripping TOML-incompatible `None` values).
- `TableReader` reads typed values from one section, recording diagnostics.

Typical flow:
    1. Load defaults (``load_defaults_dict``, no I/O).
    2. Load project TOML files (``load_toml_dict``).
    3. Read sections with `TableReader`, which records diagnostics.
    4. Serialize back to TOML when dumping the effective configuration.
"""

from __future__ import annotations

from .loaders import load_defaults_dict, load_toml_dict
from .render import to_toml
from .tables import TableReader, TomlTable, TomlTableMap, is_toml_table, section

__all__ = [
    "TableReader",
    "TomlTable",
    "TomlTableMap",
    "is_toml_table",
    "load_defaults_dict",
    "load_toml_dict",
    "section",
    "to_toml",
]
