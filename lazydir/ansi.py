"""Display-width measurement and clipping for plain row text.

Row text is plain (styles are applied around it by the frame renderer), so
these helpers only deal with cell widths, tabs, and unprintable characters.
"""

from __future__ import annotations

import unicodedata

TAB_STOP = 8


def char_display_width(ch: str, col: int) -> int:
    """Return terminal column width for one character at visual column ``col``.

    Tabs expand to the next 8-column stop, combining marks consume no columns,
    and East Asian wide/fullwidth characters consume two.
    """
    if ch == "\t":
        return TAB_STOP - (col % TAB_STOP)
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def sanitize_text(text: str) -> str:
    """Replace control characters and lone surrogates so they cannot reach the tty."""
    out: list[str] = []
    for ch in text:
        if ch == "\t":
            out.append(ch)
        elif unicodedata.category(ch) in {"Cc", "Cs"}:
            out.append("?")
        else:
            out.append(ch)
    return "".join(out)


def display_width(text: str) -> int:
    col = 0
    for ch in text:
        col += char_display_width(ch, col)
    return col


def clip_text(text: str, max_cols: int) -> str:
    """Trim ``text`` to at most ``max_cols`` display columns, expanding tabs."""
    if max_cols <= 0 or not text:
        return ""

    out: list[str] = []
    col = 0
    for ch in text:
        w = char_display_width(ch, col)
        if col + w > max_cols:
            break
        out.append(" " * w if ch == "\t" else ch)
        col += w
    return "".join(out)


def pad_text(text: str, cols: int) -> str:
    """Clip then right-pad ``text`` with spaces to exactly ``cols`` columns."""
    clipped = clip_text(text, cols)
    return clipped + " " * max(0, cols - display_width(clipped))


__all__ = [
    "TAB_STOP",
    "char_display_width",
    "sanitize_text",
    "display_width",
    "clip_text",
    "pad_text",
]
