"""Frame composition for the listing view.

Turns viewport rows plus a title into fully styled frame lines. Nothing here
touches the terminal; ``TerminalController.draw`` positions and writes the
lines.
"""

from __future__ import annotations

from collections.abc import Sequence

from .ansi import clip_text, display_width, pad_text, sanitize_text
from .ui_theme import DEFAULT_THEME, UITheme
from .viewport import ROW_STYLE_DIRECTORY, RenderRow

FRAME_BORDER_ROWS = 2


def frame_body_height(height: int) -> int:
    """Return how many listing rows fit inside a frame ``height`` lines tall."""
    return max(1, height - FRAME_BORDER_ROWS)


def _border_line(left: str, right: str, label: str, label_style: str, inner_w: int, theme: UITheme) -> str:
    """Build a horizontal border with ``label`` embedded after one dash."""
    label_text = ""
    if label and inner_w > 2:
        label_text = clip_text(f" {sanitize_text(label)} ", inner_w - 1)
    if not label_text:
        return f"{theme.frame_border}{left}{'─' * inner_w}{right}{theme.reset}"
    fill = "─" * max(0, inner_w - 1 - display_width(label_text))
    return (
        f"{theme.frame_border}{left}─{theme.reset}"
        f"{label_style}{label_text}{theme.reset}"
        f"{theme.frame_border}{fill}{right}{theme.reset}"
    )


def _row_line(row: RenderRow | None, inner_w: int, theme: UITheme) -> str:
    border = f"{theme.frame_border}│{theme.reset}"
    if row is None:
        return f"{border}{' ' * inner_w}{border}"
    color = theme.row_dir if row.style == ROW_STYLE_DIRECTORY else theme.row_file
    if row.highlighted:
        color += theme.row_highlight
    text = pad_text(sanitize_text(row.text), inner_w)
    return f"{border}{color}{text}{theme.reset}{border}"


def build_frame_lines(
    rows: Sequence[RenderRow],
    title: str,
    width: int,
    height: int,
    theme: UITheme | None = None,
    status: str = "",
) -> list[str]:
    """Compose a rounded, titled frame holding ``rows``.

    Returns exactly ``max(3, height)`` lines. Rows beyond the body height are
    dropped; missing rows are drawn blank. ``status`` is shown in the bottom
    border.
    """
    active_theme = theme or DEFAULT_THEME
    inner_w = max(1, width - 2)
    body_rows = frame_body_height(height)

    lines = [_border_line("╭", "╮", title, active_theme.frame_title, inner_w, active_theme)]
    for i in range(body_rows):
        row = rows[i] if i < len(rows) else None
        lines.append(_row_line(row, inner_w, active_theme))
    lines.append(_border_line("╰", "╯", status, active_theme.status_error, inner_w, active_theme))
    return lines


__all__ = [
    "FRAME_BORDER_ROWS",
    "build_frame_lines",
    "frame_body_height",
]
