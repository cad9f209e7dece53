# topmark:header:start
#
#   project      : IndentStyle
#   file         : diagnostics.py
#   file_relpath : src/indentstyle/config/diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostics collected while loading and merging configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from indentstyle.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterator

    from indentstyle.config.logging import IndentstyleLogger

logger: IndentstyleLogger = get_logger(__name__)


class DiagnosticLevel(Enum):
    """Severity levels for diagnostics: ``error`` for unusable input, ``warning`` otherwise."""

    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Diagnostic:
    """A single diagnostic message with a severity level."""

    level: DiagnosticLevel
    message: str


@dataclass
class DiagnosticLog:
    """Mutable collection of diagnostics."""

    items: list[Diagnostic] = field(default_factory=lambda: [])

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def _add(self, diagnostic: Diagnostic) -> None:
        self.items.append(diagnostic)
        logger.trace("Adding [%s]: %r", diagnostic.level.value, diagnostic.message)

    def add_warning(self, message: str) -> None:
        """Add a ``warning`` diagnostic."""
        self._add(Diagnostic(DiagnosticLevel.WARNING, message))

    def add_error(self, message: str) -> None:
        """Add an ``error`` diagnostic."""
        self._add(Diagnostic(DiagnosticLevel.ERROR, message))

    def extend(self, other: DiagnosticLog) -> None:
        """Append all diagnostics from ``other``."""
        self.items.extend(other.items)
