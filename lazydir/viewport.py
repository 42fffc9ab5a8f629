"""Viewport projection from directory state to visible, styled rows.

Rendering here is a read-only mapping. ``Viewport`` remembers only the last
scroll offset so the window moves minimally as the cursor travels.
"""

from __future__ import annotations

from dataclasses import dataclass

from .listing import Entry
from .navigation import CursorState
from .state import DirectoryState

ROW_STYLE_DIRECTORY = "directory"
ROW_STYLE_FILE = "file"


@dataclass(frozen=True)
class RenderRow:
    """One visible listing row."""

    index: int
    text: str
    style: str
    highlighted: bool = False


def format_entry_text(entry: Entry) -> str:
    """Return row text; directories omit the size column."""
    if entry.is_dir:
        return f"{entry.permissions} {entry.name} {entry.last_modified}"
    return f"{entry.permissions} {entry.name} {entry.size_bytes} bytes {entry.last_modified}"


def row_style_for(entry: Entry) -> str:
    return ROW_STYLE_DIRECTORY if entry.is_dir else ROW_STYLE_FILE


def compute_scroll_offset(previous_offset: int, cursor_index: int, visible_rows: int, entry_count: int) -> int:
    """Return the smallest scroll move that keeps ``cursor_index`` visible."""
    visible_rows = max(1, visible_rows)
    offset = max(0, previous_offset)
    if cursor_index < offset:
        offset = cursor_index
    elif cursor_index >= offset + visible_rows:
        offset = cursor_index - visible_rows + 1
    return max(0, min(offset, max(0, entry_count - visible_rows)))


class Viewport:
    def __init__(self) -> None:
        self.offset = 0

    def render(self, directory: DirectoryState, cursor: CursorState, viewport_height: int) -> list[RenderRow]:
        """Project the visible slice of ``directory`` for ``cursor``."""
        entries = directory.entries
        visible_rows = max(1, viewport_height)
        self.offset = compute_scroll_offset(self.offset, cursor.index, visible_rows, len(entries))
        window = entries[self.offset : self.offset + visible_rows]
        return [
            RenderRow(
                index=idx,
                text=format_entry_text(entry),
                style=row_style_for(entry),
                highlighted=idx == cursor.index,
            )
            for idx, entry in enumerate(window, start=self.offset)
        ]


__all__ = [
    "ROW_STYLE_DIRECTORY",
    "ROW_STYLE_FILE",
    "RenderRow",
    "Viewport",
    "compute_scroll_offset",
    "format_entry_text",
    "row_style_for",
]
