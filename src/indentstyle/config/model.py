# topmark:header:start
#
#   project      : IndentStyle
#   file         : model.py
#   file_relpath : src/indentstyle/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable runtime snapshot used by the API and the CLI.
    - `MutableConfig`: a mutable builder used during discovery/merge; it
      can be frozen into `Config` and thawed back for edits.

Merge order (lowest -> highest precedence):
    1) Built-in defaults
    2) Project configs discovered upward **root -> current**; within a directory
       ``pyproject.toml`` (``[tool.indentstyle]``) is merged first, then
       ``indentstyle.toml``
    3) Extra config files passed explicitly (``--config``), in the given order
    4) CLI overrides (`MutableConfig.apply_cli_args`)

Validation happens in `MutableConfig.freeze`, which raises `ValueError` for
unknown style names, an out-of-range threshold, a negative line limit, or
invalid override settings.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from indentstyle.classifier.model import SelectionPolicy
from indentstyle.config.diagnostics import Diagnostic, DiagnosticLog
from indentstyle.config.io import (
    TableReader,
    load_defaults_dict,
    load_toml_dict,
    section,
    to_toml,
)
from indentstyle.config.keys import Toml
from indentstyle.config.logging import get_logger
from indentstyle.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME, PYPROJECT_TOOL_SECTION
from indentstyle.styles import STYLES, StyleName, StyleSettings

if TYPE_CHECKING:
    from indentstyle.config.io import TomlTable
    from indentstyle.config.logging import IndentstyleLogger

# Generic mapping accepted by `apply_cli_args` (CLI namespaces and API dicts alike).
ArgsLike = Mapping[str, Any]

logger: IndentstyleLogger = get_logger(__name__)


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for IndentStyle.

    Attributes:
        max_lines (int): Number of leading lines examined per file; 0 = unlimited.
        threshold (float): Relative cutoff for style selection.
        preference (tuple[StyleName, ...]): Tie-break order, most preferred first.
        strip_comments (bool): Whether C-style block comments are removed first.
        include_patterns (tuple[str, ...]): Gitwildmatch patterns a file must match.
        exclude_patterns (tuple[str, ...]): Gitwildmatch patterns that drop a file.
        overrides (Mapping[StyleName, StyleSettings]): Caller settings replacing the
            catalogue defaults, keyed by style.
        config_files (tuple[Path | str, ...]): Config sources that were merged.
        diagnostics (tuple[Diagnostic, ...]): Warnings collected while loading.
    """

    max_lines: int
    threshold: float
    preference: tuple[StyleName, ...]
    strip_comments: bool
    include_patterns: tuple[str, ...] = ()
    exclude_patterns: tuple[str, ...] = ()
    overrides: Mapping[StyleName, StyleSettings] = field(default_factory=lambda: {})
    config_files: tuple[Path | str, ...] = ()
    diagnostics: tuple[Diagnostic, ...] = ()

    @classmethod
    def from_defaults(cls) -> Config:
        """Return the frozen built-in defaults."""
        return MutableConfig.from_defaults().freeze()

    @property
    def policy(self) -> SelectionPolicy:
        """Selection policy derived from ``threshold`` and ``preference``."""
        return SelectionPolicy(threshold=self.threshold, preference=self.preference)

    def settings_for(self, style: StyleName) -> StyleSettings:
        """Return the effective settings for ``style`` (override first, then default)."""
        return self.overrides.get(style, STYLES[style].settings)

    def to_toml_dict(self) -> TomlTable:
        """Return this configuration as a TOML-compatible dict."""
        return {
            Toml.SECTION_CLASSIFIER: {
                Toml.KEY_MAX_LINES: self.max_lines,
                Toml.KEY_THRESHOLD: self.threshold,
                Toml.KEY_PREFERENCE: [s.value for s in self.preference],
                Toml.KEY_STRIP_COMMENTS: self.strip_comments,
            },
            Toml.SECTION_FILES: {
                Toml.KEY_INCLUDE_PATTERNS: list(self.include_patterns),
                Toml.KEY_EXCLUDE_PATTERNS: list(self.exclude_patterns),
            },
            Toml.SECTION_OVERRIDES: {
                style.value: settings.as_dict() for style, settings in self.overrides.items()
            },
        }

    def to_toml(self) -> str:
        """Render this configuration as TOML text."""
        return to_toml(self.to_toml_dict())

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this configuration."""
        return MutableConfig(
            max_lines=self.max_lines,
            threshold=self.threshold,
            preference=[s.value for s in self.preference],
            strip_comments=self.strip_comments,
            include_patterns=list(self.include_patterns),
            exclude_patterns=list(self.exclude_patterns),
            overrides={s.value: dict(v.as_dict()) for s, v in self.overrides.items()},
            config_files=list(self.config_files),
            diagnostics=DiagnosticLog(items=list(self.diagnostics)),
        )


# ------------------ Mutable builder ------------------


@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    Scalar fields use ``None`` for "inherit". Style names and override tables
    are kept as raw strings/dicts until `freeze` validates them.

    Attributes:
        max_lines (int | None): Leading lines examined per file.
        threshold (float | None): Relative selection cutoff.
        preference (list[str]): Tie-break order as style names; empty = inherit.
        strip_comments (bool | None): Whether block comments are removed.
        include_patterns (list[str]): Include patterns; empty = inherit.
        exclude_patterns (list[str]): Exclude patterns; empty = inherit.
        overrides (dict[str, dict[str, Any]]): Partial settings per style name.
        config_files (list[Path | str]): Config sources merged so far.
        diagnostics (DiagnosticLog): Warnings collected while loading.
    """

    max_lines: int | None = None
    threshold: float | None = None
    preference: list[str] = field(default_factory=lambda: [])
    strip_comments: bool | None = None
    include_patterns: list[str] = field(default_factory=lambda: [])
    exclude_patterns: list[str] = field(default_factory=lambda: [])
    overrides: dict[str, dict[str, Any]] = field(default_factory=lambda: {})
    config_files: list[Path | str] = field(default_factory=lambda: [])
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Validate this draft and freeze it into an immutable `Config`.

        Unset scalars fall back to the built-in defaults.

        Raises:
            ValueError: If a style name, the threshold, the line limit or an
                override table is invalid.
        """
        defaults: TomlTable = section(load_defaults_dict(), Toml.SECTION_CLASSIFIER)

        max_lines: int = (
            self.max_lines if self.max_lines is not None else defaults[Toml.KEY_MAX_LINES]
        )
        if max_lines < 0:
            raise ValueError(f"{Toml.KEY_MAX_LINES} must be >= 0, got {max_lines}")

        threshold: float = (
            self.threshold if self.threshold is not None else defaults[Toml.KEY_THRESHOLD]
        )
        preference: tuple[StyleName, ...] = tuple(
            StyleName.parse(name) for name in (self.preference or defaults[Toml.KEY_PREFERENCE])
        )
        # Validates threshold range and preference completeness.
        SelectionPolicy(threshold=threshold, preference=preference)

        overrides: dict[StyleName, StyleSettings] = {}
        for name, values in self.overrides.items():
            style: StyleName = StyleName.parse(name)
            try:
                overrides[style] = STYLES[style].settings.with_overrides(values)
            except ValueError as exc:
                raise ValueError(f"Invalid [{Toml.SECTION_OVERRIDES}.{name}]: {exc}") from exc

        return Config(
            max_lines=max_lines,
            threshold=threshold,
            preference=preference,
            strip_comments=(
                self.strip_comments
                if self.strip_comments is not None
                else defaults[Toml.KEY_STRIP_COMMENTS]
            ),
            include_patterns=tuple(self.include_patterns),
            exclude_patterns=tuple(self.exclude_patterns),
            overrides=overrides,
            config_files=tuple(self.config_files),
            diagnostics=tuple(self.diagnostics),
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a draft populated with the built-in defaults."""
        draft: MutableConfig = cls.from_toml_dict(load_defaults_dict())
        draft.config_files = ["<defaults>"]
        return draft

    @classmethod
    def from_toml_dict(cls, data: TomlTable) -> MutableConfig:
        """Parse a TOML dict (already extracted from ``[tool.indentstyle]`` if needed).

        Shape errors are logged and recorded as diagnostics; the offending values
        are ignored. Semantic validation is left to `freeze`.

        Args:
            data (TomlTable): Parsed TOML content.

        Returns:
            MutableConfig: The parsed draft.
        """
        diagnostics = DiagnosticLog()
        classifier = TableReader(
            section(data, Toml.SECTION_CLASSIFIER),
            where=f"[{Toml.SECTION_CLASSIFIER}]",
            diagnostics=diagnostics,
        )
        files = TableReader(
            section(data, Toml.SECTION_FILES),
            where=f"[{Toml.SECTION_FILES}]",
            diagnostics=diagnostics,
        )
        top = TableReader(data, where="", diagnostics=diagnostics)

        return cls(
            max_lines=classifier.integer(Toml.KEY_MAX_LINES),
            threshold=classifier.number(Toml.KEY_THRESHOLD),
            preference=classifier.strings(Toml.KEY_PREFERENCE),
            strip_comments=classifier.boolean(Toml.KEY_STRIP_COMMENTS),
            include_patterns=files.strings(Toml.KEY_INCLUDE_PATTERNS),
            exclude_patterns=files.strings(Toml.KEY_EXCLUDE_PATTERNS),
            overrides={
                name: dict(table)
                for name, table in top.subtables(Toml.SECTION_OVERRIDES).items()
            },
            diagnostics=diagnostics,
        )

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        Supports both ``indentstyle.toml`` and ``pyproject.toml`` files, extracting
        the ``[tool.indentstyle]`` section from the latter.

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableConfig | None: The parsed draft; None if a ``pyproject.toml``
                has no ``[tool.indentstyle]`` section. A file that cannot be read
                or parsed yields an empty draft carrying an ``error`` diagnostic.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        read_errors = DiagnosticLog()
        toml_data: TomlTable = load_toml_dict(path, read_errors)
        if len(read_errors):
            failed: MutableConfig = cls(diagnostics=read_errors)
            failed.config_files = [path]
            return failed

        if path.name == PYPROJECT_FILE_NAME:
            tool_section: TomlTable = section(toml_data, "tool", PYPROJECT_TOOL_SECTION)
            if not tool_section:
                logger.debug("[tool.%s] section missing in %s", PYPROJECT_TOOL_SECTION, path)
                return None
            toml_data = tool_section

        draft: MutableConfig = cls.from_toml_dict(toml_data)
        draft.config_files = [path]
        return draft

    @classmethod
    def _is_root_config(cls, path: Path) -> bool:
        data: TomlTable = load_toml_dict(path)
        if path.name == PYPROJECT_FILE_NAME:
            data = section(data, "tool", PYPROJECT_TOOL_SECTION)
        return data.get(Toml.KEY_ROOT) is True

    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return config files discovered by walking upward from ``start``.

        Files are returned **root-most -> nearest**. Within one directory,
        ``pyproject.toml`` comes before ``indentstyle.toml`` so the latter wins
        when merged last. A config that sets ``root = true`` stops the walk after
        its directory.

        Args:
            start (Path): Directory (or file, whose parent is used) to start from.

        Returns:
            list[Path]: Discovered config files in merge order.
        """
        anchor: Path = start.resolve()
        if anchor.is_file():
            anchor = anchor.parent

        per_dir: list[list[Path]] = []
        for directory in (anchor, *anchor.parents):
            found: list[Path] = []
            pyproject: Path = directory / PYPROJECT_FILE_NAME
            if pyproject.is_file() and cls.from_toml_file(pyproject) is not None:
                found.append(pyproject)
            tool_file: Path = directory / CONFIG_FILE_NAME
            if tool_file.is_file():
                found.append(tool_file)
            if found:
                per_dir.append(found)
            if any(cls._is_root_config(p) for p in found):
                logger.debug("Stopping config discovery at root config in %s", directory)
                break

        discovered: list[Path] = [p for found in reversed(per_dir) for p in found]
        logger.debug("Discovered config files: %s", discovered)
        return discovered

    @classmethod
    def load_merged(
        cls,
        *,
        input_paths: Iterable[Path] | None = None,
        extra_config_files: Iterable[Path] | None = None,
        no_config: bool = False,
    ) -> MutableConfig:
        """Discover and merge configuration layers into a draft `MutableConfig`.

        Args:
            input_paths (Iterable[Path] | None): Discovery anchor(s). The first path
                (or CWD if none) is used as the starting directory.
            extra_config_files (Iterable[Path] | None): Explicit config files merged
                after discovery, in the given order.
            no_config (bool): If True, skip project discovery.

        Returns:
            MutableConfig: A draft ready to be frozen or further edited.
        """
        draft: MutableConfig = cls.from_defaults()

        anchors: list[Path] = list(input_paths or [])
        anchor: Path = anchors[0] if anchors else Path.cwd()

        if not no_config:
            for cfg_path in cls.discover_local_config_files(anchor):
                mc: MutableConfig | None = cls.from_toml_file(cfg_path)
                if mc is not None:
                    draft = draft.merge_with(mc)

        for extra in extra_config_files or ():
            mc = cls.from_toml_file(Path(extra))
            if mc is not None:
                draft = draft.merge_with(mc)
            else:
                draft.diagnostics.add_warning(f"No IndentStyle configuration found in {extra}")

        return draft

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values from ``other`` override this draft.

        Scalars: last set value wins. Lists: a non-empty list replaces. Override
        tables merge per style and per setting.

        Args:
            other (MutableConfig): The config whose values override those of this draft.

        Returns:
            MutableConfig: A new mutable configuration representing the merged result.
        """
        overrides: dict[str, dict[str, Any]] = {k: dict(v) for k, v in self.overrides.items()}
        for name, values in other.overrides.items():
            overrides.setdefault(name, {}).update(values)

        diagnostics = DiagnosticLog(items=list(self.diagnostics))
        diagnostics.extend(other.diagnostics)

        return MutableConfig(
            max_lines=other.max_lines if other.max_lines is not None else self.max_lines,
            threshold=other.threshold if other.threshold is not None else self.threshold,
            preference=other.preference or self.preference,
            strip_comments=other.strip_comments
            if other.strip_comments is not None
            else self.strip_comments,
            include_patterns=other.include_patterns or self.include_patterns,
            exclude_patterns=other.exclude_patterns or self.exclude_patterns,
            overrides=overrides,
            config_files=self.config_files + other.config_files,
            diagnostics=diagnostics,
        )

    def apply_cli_args(self, args: ArgsLike) -> MutableConfig:
        """Apply CLI (or API) overrides in place and return ``self``.

        Keys match the TOML key names in [`Toml`][indentstyle.config.keys.Toml].
        ``None`` and empty sequences leave the current value untouched.

        Args:
            args (ArgsLike): Override mapping.

        Returns:
            MutableConfig: This draft, for chaining.
        """
        if args.get(Toml.KEY_MAX_LINES) is not None:
            self.max_lines = int(args[Toml.KEY_MAX_LINES])
        if args.get(Toml.KEY_THRESHOLD) is not None:
            self.threshold = float(args[Toml.KEY_THRESHOLD])
        if args.get(Toml.KEY_PREFERENCE):
            self.preference = list(args[Toml.KEY_PREFERENCE])
        if args.get(Toml.KEY_STRIP_COMMENTS) is not None:
            self.strip_comments = bool(args[Toml.KEY_STRIP_COMMENTS])
        if args.get(Toml.KEY_INCLUDE_PATTERNS):
            self.include_patterns = list(args[Toml.KEY_INCLUDE_PATTERNS])
        if args.get(Toml.KEY_EXCLUDE_PATTERNS):
            self.exclude_patterns = list(args[Toml.KEY_EXCLUDE_PATTERNS])
        logger.debug("Applied CLI overrides: %s", {k: v for k, v in args.items() if v})
        return self
