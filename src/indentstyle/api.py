# topmark:header:start
#
#   project      : IndentStyle
#   file         : api.py
#   file_relpath : src/indentstyle/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public API for IndentStyle.

This module is the host side of the classifier: it reads (a bounded prefix of)
files, applies the configured selection policy and maps the winning style to
concrete settings, honoring the configuration's override table.

Functions never raise for an undetermined style; callers branch on
[`ClassificationResult.determined`][indentstyle.classifier.model.ClassificationResult.determined].

Examples:
    ```python
    from indentstyle.api import detect_text

    result = detect_text("def f():\\n    return 1\\n")
    assert result.style is not None and result.style.value == "spaces-4"
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import islice
from pathlib import Path
from typing import TYPE_CHECKING

from indentstyle.classifier.engine import classify
from indentstyle.classifier.preprocess import split_lines
from indentstyle.config.logging import get_logger
from indentstyle.config.model import Config
from indentstyle.styles import StyleName

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from indentstyle.classifier.model import ClassificationResult
    from indentstyle.config.logging import IndentstyleLogger
    from indentstyle.styles import StyleSettings

logger: IndentstyleLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class FileDetection:
    """Classification outcome for one file.

    Attributes:
        path (Path | str): The file path, or a label such as ``<stdin>``.
        result (ClassificationResult | None): The classification, None if the
            file could not be read.
        settings (StyleSettings | None): Settings to apply, None when undetermined
            or on error.
        error (str | None): Read error message, if any.
    """

    path: Path | str
    result: ClassificationResult | None = None
    settings: StyleSettings | None = None
    error: str | None = None

    @property
    def style(self) -> StyleName | None:
        """The detected style, or None."""
        return self.result.style if self.result is not None else None

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly representation."""
        out: dict[str, object] = {"path": str(self.path)}
        if self.error is not None:
            out["error"] = self.error
        if self.result is not None:
            out.update(self.result.to_dict())
        out["settings"] = self.settings.as_dict() if self.settings is not None else None
        return out


def _effective(config: Config | None) -> Config:
    return config if config is not None else Config.from_defaults()


def limit_lines(lines: Iterable[str], max_lines: int | None) -> list[str]:
    """Return at most ``max_lines`` lines (all of them for None or 0)."""
    if not max_lines:
        return list(lines)
    return list(islice(lines, max_lines))


def read_lines(path: Path, max_lines: int | None) -> list[str]:
    """Read at most ``max_lines`` lines of ``path``.

    The file is decoded as UTF-8; undecodable bytes are replaced so that binary
    input degrades to an undetermined result instead of an error.

    Args:
        path (Path): File to read.
        max_lines (int | None): Line limit; None or 0 reads the whole file.

    Returns:
        list[str]: Lines without terminators.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    with path.open("r", encoding="utf-8", errors="replace", newline=None) as fh:
        lines: list[str] = [ln.rstrip("\n") for ln in limit_lines(fh, max_lines)]
    logger.trace("read %d line(s) from %s", len(lines), path)
    return lines


def detect_lines(lines: Iterable[str], config: Config | None = None) -> ClassificationResult:
    """Classify ``lines`` using the configuration's line limit and policy."""
    cfg: Config = _effective(config)
    return classify(
        limit_lines(lines, cfg.max_lines),
        policy=cfg.policy,
        strip_comments=cfg.strip_comments,
    )


def detect_text(text: str, config: Config | None = None) -> ClassificationResult:
    """Classify the content of a file given as a string."""
    return detect_lines(split_lines(text), config)


def resolve_settings(style: str | StyleName, config: Config | None = None) -> StyleSettings:
    """Return the settings for ``style``, preferring the configuration's overrides.

    Raises:
        ValueError: If ``style`` does not name a known style.
    """
    return _effective(config).settings_for(StyleName.parse(style))


def _detection(path: Path | str, result: ClassificationResult, config: Config) -> FileDetection:
    settings: StyleSettings | None = (
        config.settings_for(result.style) if result.style is not None else None
    )
    return FileDetection(path=path, result=result, settings=settings)


def detect_file(path: Path, config: Config | None = None) -> FileDetection:
    """Classify one file.

    Raises:
        OSError: If the file cannot be read.
    """
    cfg: Config = _effective(config)
    lines: list[str] = read_lines(path, cfg.max_lines)
    result: ClassificationResult = classify(
        lines, policy=cfg.policy, strip_comments=cfg.strip_comments
    )
    return _detection(path, result, cfg)


def detect_stream_text(label: str, text: str, config: Config | None = None) -> FileDetection:
    """Classify already-read content (e.g. STDIN) reported under ``label``."""
    cfg: Config = _effective(config)
    return _detection(label, detect_text(text, cfg), cfg)


def detect_files(paths: Iterable[Path], config: Config | None = None) -> Iterator[FileDetection]:
    """Classify several files; read failures are reported per file, not raised."""
    cfg: Config = _effective(config)
    for path in paths:
        try:
            yield detect_file(path, cfg)
        except OSError as exc:
            logger.error("Cannot read %s: %s", path, exc)
            yield FileDetection(path=path, error=str(exc))
