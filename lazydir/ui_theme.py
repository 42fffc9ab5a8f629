"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the frame chrome and listing rows.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the frame renderer."""

    name: str
    reset: str
    frame_border: str
    frame_title: str
    row_dir: str
    row_file: str
    row_highlight: str
    status_error: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    frame_border="\033[1;36m",
    frame_title="\033[1;36m",
    row_dir="\033[1;34m",
    row_file="\033[1;32m",
    row_highlight="\033[47m",
    status_error="\033[1;31m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    frame_border="\033[38;5;39m",
    frame_title="\033[1;38;5;45m",
    row_dir="\033[1;38;5;45m",
    row_file="\033[38;5;252m",
    row_highlight="\033[48;5;24m",
    status_error="\033[1;38;5;215m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="\033[0m",
    frame_border="",
    frame_title="",
    row_dir="",
    row_file="",
    row_highlight="\033[7m",
    status_error="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
