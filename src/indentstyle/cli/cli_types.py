# topmark:header:start
#
#   project      : IndentStyle
#   file         : cli_types.py
#   file_relpath : src/indentstyle/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Custom Click parameter types for the IndentStyle CLI.

Both types complete on ``<TAB>`` once shell completion is enabled:

    $ eval "$(_INDENTSTYLE_COMPLETE=bash_source indentstyle)"
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Generic, Protocol, TypeVar

import click

from indentstyle.styles import StyleName

if TYPE_CHECKING:
    from collections.abc import Iterable

    from click.shell_completion import CompletionItem

    class ParamTypeBase(Protocol):
        """Typed base to avoid subclassing Any when Click lacks stubs."""

        name: str

else:
    ParamTypeBase = click.ParamType  # type: ignore[assignment]

E = TypeVar("E", bound=Enum)


def _completions(
    candidates: Iterable[str], incomplete: str, *, prefix: str = ""
) -> list[CompletionItem]:
    from click.shell_completion import CompletionItem as Item

    needle: str = incomplete.lower()
    return [Item(prefix + c) for c in candidates if c.startswith(needle)]


class EnumChoiceParam(ParamTypeBase, Generic[E]):
    """Case-insensitive choice over the values of a string-valued Enum."""

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls: type[E] = enum_cls
        self.name = enum_cls.__name__.lower()
        self.by_value: dict[str, E] = {str(m.value).lower(): m for m in enum_cls}

    def convert(
        self,
        value: Any,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        """Return the member whose value matches ``value``, ignoring case."""
        if value is None or isinstance(value, self.enum_cls):
            return value
        member: E | None = self.by_value.get(str(value).strip().lower())
        if member is None:
            raise click.BadParameter(
                f"Invalid value '{value}'. Must be one of: {', '.join(self.by_value)}",
                param=param,
                ctx=ctx,
            )
        return member

    def shell_complete(
        self,
        ctx: click.Context,
        param: click.Parameter,
        incomplete: str,
    ) -> list[CompletionItem]:
        """Complete enum values."""
        return _completions(self.by_value, incomplete)

    def __repr__(self) -> str:
        return f"EnumChoiceParam({self.enum_cls.__name__})"


class StyleListParam(ParamTypeBase):
    """Comma-separated list of style names, e.g. ``tabs,spaces-4,...``.

    Blank items are ignored. Unknown names fail with the list of valid ones.
    """

    name = "styles"

    def convert(
        self,
        value: Any,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> list[StyleName] | None:
        """Convert the option value to a list of styles."""
        if value is None or isinstance(value, list):
            return value  # type: ignore[return-value]
        try:
            return [StyleName.parse(item) for item in str(value).split(",") if item.strip()]
        except ValueError as exc:
            raise click.BadParameter(str(exc), param=param, ctx=ctx) from exc

    def shell_complete(
        self,
        ctx: click.Context,
        param: click.Parameter,
        incomplete: str,
    ) -> list[CompletionItem]:
        """Complete the style name after the last comma, skipping names already given."""
        head, _, tail = incomplete.rpartition(",")
        given: set[str] = {part.strip().lower() for part in head.split(",") if part.strip()}
        remaining: list[str] = [s.value for s in StyleName if s.value not in given]
        return _completions(remaining, tail.strip(), prefix=f"{head}," if head else "")
