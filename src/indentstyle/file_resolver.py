# topmark:header:start
#
#   project      : IndentStyle
#   file         : file_resolver.py
#   file_relpath : src/indentstyle/file_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve input files for IndentStyle based on paths and filters.

This module expands positional arguments (files, directories recursively, and
globs), applies include/exclude patterns with ``.gitignore`` semantics via
`pathspec`, and returns a deterministic, sorted list of files to classify.
Globs and patterns are evaluated relative to the current working directory.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Final

from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from indentstyle.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from indentstyle.config.logging import IndentstyleLogger
    from indentstyle.config.model import Config


logger: IndentstyleLogger = get_logger(__name__)

# Version control metadata and bytecode caches are never classified.
ALWAYS_EXCLUDED: Final[tuple[str, ...]] = (".git/", ".hg/", ".svn/", "__pycache__/")

_GLOB_CHARS: Final[str] = "*?["


def _has_glob_chars(raw: str) -> bool:
    return any(ch in raw for ch in _GLOB_CHARS)


def _rel_for_match(path: Path, base: Path) -> str:
    """Return a POSIX-style relative path (or absolute as fallback) for PathSpec matching."""
    try:
        return path.resolve().relative_to(base.resolve()).as_posix()
    except ValueError:
        return path.as_posix()


def expand_path(raw: str) -> list[Path]:
    """Expand one positional argument into candidate files.

    Handles globs (relative to CWD), directories (recursively) and files.

    Args:
        raw (str): Path or glob as given on the command line.

    Returns:
        list[Path]: Files found; empty if nothing matched.
    """
    if _has_glob_chars(raw):
        return [p for p in Path(".").glob(raw) if p.is_file()]
    p = Path(raw)
    if p.is_dir():
        return [c for c in p.rglob("*") if c.is_file()]
    if p.is_file():
        return [p]
    return []


def missing_paths(paths: Iterable[str]) -> list[str]:
    """Return the literal (non-glob) arguments that do not exist."""
    return [raw for raw in paths if not _has_glob_chars(raw) and not Path(raw).exists()]


def resolve_file_list(
    paths: Sequence[str],
    config: Config,
    *,
    base: Path | None = None,
) -> list[Path]:
    """Return the files to classify, applying expansion and filters.

    Semantics:
      1. **Candidate set**: expand every positional path.
      2. **Include intersection**: with include patterns, keep only matching files.
      3. **Exclude subtraction**: drop files matching exclude patterns and the
         always-excluded VCS/cache directories.
      4. Return a **sorted** list for deterministic output.

    Args:
        paths (Sequence[str]): Positional paths/globs.
        config (Config): Supplies ``include_patterns`` and ``exclude_patterns``.
        base (Path | None): Directory patterns are relative to; defaults to CWD.

    Returns:
        list[Path]: Sorted list of files selected for processing.
    """
    root: Path = base or Path.cwd()

    candidates: set[Path] = set()
    for raw in paths:
        expanded: list[Path] = expand_path(raw)
        if not expanded:
            logger.warning("No files matched: %s", raw)
        candidates.update(expanded)
    logger.debug("Candidate files before filtering: %d", len(candidates))

    if config.include_patterns:
        include_spec: PathSpec = PathSpec.from_lines(
            GitWildMatchPattern, list(config.include_patterns)
        )
        candidates = {p for p in candidates if include_spec.match_file(_rel_for_match(p, root))}

    exclude_spec: PathSpec = PathSpec.from_lines(
        GitWildMatchPattern, [*ALWAYS_EXCLUDED, *config.exclude_patterns]
    )
    kept: list[Path] = sorted(
        p for p in candidates if not exclude_spec.match_file(_rel_for_match(p, root))
    )
    logger.debug("Resolved %d file(s)", len(kept))
    return kept
