# topmark:header:start
#
#   project      : IndentStyle
#   file         : settings.py
#   file_relpath : src/indentstyle/rendering/settings.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Turn [`StyleSettings`][indentstyle.styles.StyleSettings] into editor directives.

Two flavors are supported:

* ``vim``: a single ``setlocal`` command, suitable for an autocmd or a modeline.
* ``editorconfig``: an `.editorconfig` section.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import TYPE_CHECKING, Final

from indentstyle.rendering.formats import SettingsFlavor

if TYPE_CHECKING:
    from indentstyle.styles import StyleSettings


def render_vim(settings: StyleSettings) -> str:
    """Return a vim ``setlocal`` command applying ``settings``.

    Args:
        settings (StyleSettings): Settings to render.

    Returns:
        str: e.g. ``setlocal shiftwidth=2 tabstop=8 softtabstop=2 expandtab``.
    """
    expand: str = "expandtab" if settings.expand_tabs else "noexpandtab"
    return (
        f"setlocal shiftwidth={settings.indent_width} tabstop={settings.tab_width} "
        f"softtabstop={settings.soft_tab_stop} {expand}"
    )


# Characters with glob meaning in EditorConfig section headers.
EDITORCONFIG_GLOB_RE: Final[re.Pattern[str]] = re.compile(r"([*?\[\]{}\\])")


def editorconfig_section(path: Path, base: Path | None = None) -> str:
    """Return an EditorConfig section glob matching exactly ``path``.

    The glob is anchored with a leading ``/`` and is relative to ``base``
    (default: the current directory), where the ``.editorconfig`` is expected to
    live. A file outside ``base`` cannot be addressed from there, so its
    basename is used. Glob metacharacters in the path are backslash-escaped.

    Args:
        path (Path): The classified file.
        base (Path | None): Directory holding the ``.editorconfig``.

    Returns:
        str: e.g. ``/src/main.c``.
    """
    resolved: Path = path.resolve()
    try:
        rel: str = "/" + resolved.relative_to((base or Path.cwd()).resolve()).as_posix()
    except ValueError:
        rel = resolved.name
    return EDITORCONFIG_GLOB_RE.sub(r"\\\1", rel)


def render_editorconfig(settings: StyleSettings, section: str = "*") -> str:
    """Return an EditorConfig section applying ``settings``.

    Pure tab indentation (tabs only, one tab per level) uses ``indent_size = tab``.

    Args:
        settings (StyleSettings): Settings to render.
        section (str): Glob used as section header.

    Returns:
        str: The section text, newline-terminated.
    """
    indent_style: str = "space" if settings.expand_tabs else "tab"
    indent_size: str = str(settings.indent_width)
    if not settings.expand_tabs and settings.indent_width == settings.tab_width:
        indent_size = "tab"
    lines: list[str] = [
        f"[{section}]",
        f"indent_style = {indent_style}",
        f"indent_size = {indent_size}",
        f"tab_width = {settings.tab_width}",
    ]
    return "\n".join(lines) + "\n"


def render_settings(
    settings: StyleSettings,
    flavor: SettingsFlavor,
    *,
    section: str = "*",
) -> str:
    """Render ``settings`` in the requested flavor.

    Args:
        settings (StyleSettings): Settings to render.
        flavor (SettingsFlavor): Target syntax.
        section (str): EditorConfig section header (ignored for vim).

    Returns:
        str: Rendered text without a trailing newline.
    """
    if flavor is SettingsFlavor.EDITORCONFIG:
        return render_editorconfig(settings, section=section).rstrip("\n")
    return render_vim(settings)
