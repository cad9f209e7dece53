# topmark:header:start
#
#   project      : IndentStyle
#   file         : render.py
#   file_relpath : src/indentstyle/config/io/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render a `TomlTable` to TOML text with `tomlkit`.

TOML has no `null`, so `None` values are left out. Arrays longer than
`MULTILINE_ARRAY_MIN` items are written one item per line, which keeps the
``preference`` list readable in ``dump-config`` output.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final, cast

import tomlkit

from .tables import is_toml_table

if TYPE_CHECKING:
    from tomlkit.items import Array, Table

    from .tables import TomlTable

MULTILINE_ARRAY_MIN: Final[int] = 4


def _array(values: list[Any]) -> Array:
    arr: Array = tomlkit.array()
    arr.extend(v for v in values if v is not None)
    if len(arr) >= MULTILINE_ARRAY_MIN:
        arr.multiline(True)
    return arr


def _fill(container: Any, data: TomlTable) -> None:
    for key, value in data.items():
        if value is None:
            continue
        if is_toml_table(value):
            sub: Table = tomlkit.table()
            _fill(sub, value)
            container.add(key, sub)
        elif isinstance(value, (list, tuple)):
            container.add(key, _array(list(cast("list[Any]", value))))
        else:
            container.add(key, value)


def to_toml(toml_dict: TomlTable) -> str:
    """Serialize a TOML mapping to a string.

    Args:
        toml_dict (TomlTable): TOML mapping to render.

    Returns:
        str: The rendered TOML document.
    """
    doc: tomlkit.TOMLDocument = tomlkit.document()
    _fill(doc, toml_dict)
    return tomlkit.dumps(doc)
