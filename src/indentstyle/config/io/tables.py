# topmark:header:start
#
#   project      : IndentStyle
#   file         : tables.py
#   file_relpath : src/indentstyle/config/io/tables.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Typed access to parsed TOML tables.

`tomlkit` hands back plain dicts after ``unwrap()``, so values can have any
shape. `TableReader` reads one section with the expected type per key; a value
of the wrong type is logged, recorded in a
[`DiagnosticLog`][indentstyle.config.diagnostics.DiagnosticLog] and treated as
unset, so a user mistake surfaces without aborting the run.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeGuard, cast

from indentstyle.config.logging import get_logger

if TYPE_CHECKING:
    from indentstyle.config.diagnostics import DiagnosticLog
    from indentstyle.config.logging import IndentstyleLogger

TomlTable = dict[str, Any]
TomlTableMap = dict[str, TomlTable]

logger: IndentstyleLogger = get_logger(__name__)


def is_toml_table(obj: object) -> TypeGuard[TomlTable]:
    """Return True if ``obj`` is a (sub-)table."""
    return isinstance(obj, dict)


def section(data: TomlTable, *path: str) -> TomlTable:
    """Return the nested table at ``path``, or an empty dict if any step is missing.

    ``section(data, "tool", "indentstyle")`` reads ``[tool.indentstyle]``.
    """
    current: TomlTable = data
    for key in path:
        value: object = current.get(key)
        if not is_toml_table(value):
            return {}
        current = value
    return current


class TableReader:
    """Checked reads from one TOML section.

    Args:
        table (TomlTable): The section to read.
        where (str): Section label used in messages, e.g. ``"[classifier]"``.
        diagnostics (DiagnosticLog): Receives a warning per rejected value.
    """

    def __init__(self, table: TomlTable, *, where: str, diagnostics: DiagnosticLog) -> None:
        self.table = table
        self.where = where
        self.diagnostics = diagnostics

    def _reject(self, key: str, expected: str, value: object) -> None:
        loc: str = f"{self.where}.{key}" if self.where else key
        message: str = f"Expected {expected} in {loc}, got {type(value).__name__}: {value!r}"
        logger.warning("%s", message)
        self.diagnostics.add_warning(message)

    def boolean(self, key: str) -> bool | None:
        """Read an optional boolean."""
        value: object = self.table.get(key)
        if value is None or isinstance(value, bool):
            return value
        self._reject(key, "bool", value)
        return None

    def integer(self, key: str) -> int | None:
        """Read an optional integer (booleans are rejected)."""
        value: object = self.table.get(key)
        if value is None:
            return None
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        self._reject(key, "int", value)
        return None

    def number(self, key: str) -> float | None:
        """Read an optional float; integers are widened."""
        value: object = self.table.get(key)
        if value is None:
            return None
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return float(value)
        self._reject(key, "float", value)
        return None

    def strings(self, key: str) -> list[str]:
        """Read a list of strings; a missing key reads as ``[]``.

        Non-string entries are dropped one by one, each with its own warning.
        """
        value: object = self.table.get(key)
        if value is None:
            return []
        if not isinstance(value, list):
            self._reject(key, "list", value)
            return []
        out: list[str] = []
        for item in cast("list[object]", value):
            if isinstance(item, str):
                out.append(item)
            else:
                self._reject(key, "string entry", item)
        return out

    def subtables(self, key: str) -> TomlTableMap:
        """Read a table of tables such as ``[overrides.<style>]``.

        Entries that are not tables are dropped with a warning.
        """
        value: object = self.table.get(key)
        if value is None:
            return {}
        if not is_toml_table(value):
            self._reject(key, "table", value)
            return {}
        out: TomlTableMap = {}
        for name, sub in value.items():
            if is_toml_table(sub):
                out[name] = sub
            else:
                self._reject(f"{key}.{name}", "table", sub)
        return out
