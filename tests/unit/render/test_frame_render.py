"""Tests for bordered frame composition.

Frames must keep every line at the terminal width regardless of styling,
title length, or wide characters in entry names.
"""

from __future__ import annotations

import re
import unittest

from lazydir.ansi import display_width
from lazydir.render import build_frame_lines, frame_body_height
from lazydir.ui_theme import DEFAULT_THEME, PLAIN_THEME
from lazydir.viewport import ROW_STYLE_DIRECTORY, ROW_STYLE_FILE, RenderRow

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")


def _plain(line: str) -> str:
    return ANSI_ESCAPE_RE.sub("", line)


def _rows() -> list[RenderRow]:
    return [
        RenderRow(index=0, text="drwxr-xr-x Alpha 2024-01-01 00:00:00", style=ROW_STYLE_DIRECTORY, highlighted=True),
        RenderRow(index=1, text="-rw-r--r-- zeta 10 bytes 2024-01-01 00:00:00", style=ROW_STYLE_FILE),
    ]


class FrameLayoutTests(unittest.TestCase):
    def test_frame_has_requested_height_and_width(self) -> None:
        lines = build_frame_lines(_rows(), "/tmp/demo", width=60, height=8)

        self.assertEqual(len(lines), 8)
        for line in lines:
            self.assertEqual(display_width(_plain(line)), 60)

    def test_title_sits_in_top_border(self) -> None:
        lines = build_frame_lines(_rows(), "/tmp/demo", width=60, height=6)
        top = _plain(lines[0])
        self.assertTrue(top.startswith("╭─ /tmp/demo ─"))
        self.assertTrue(top.endswith("╮"))
        self.assertTrue(_plain(lines[-1]).startswith("╰"))

    def test_rows_are_drawn_in_order_and_blank_rows_fill_body(self) -> None:
        lines = build_frame_lines(_rows(), "t", width=70, height=6)
        body = [_plain(line) for line in lines[1:-1]]

        self.assertEqual(len(body), frame_body_height(6))
        self.assertIn("Alpha", body[0])
        self.assertIn("zeta 10 bytes", body[1])
        self.assertEqual(body[2].strip("│ "), "")

    def test_long_rows_and_titles_are_clipped(self) -> None:
        row = RenderRow(index=0, text="x" * 200, style=ROW_STYLE_FILE)
        lines = build_frame_lines([row], "/" + "d" * 200, width=30, height=4)
        for line in lines:
            self.assertEqual(display_width(_plain(line)), 30)

    def test_wide_characters_keep_alignment(self) -> None:
        row = RenderRow(index=0, text="-rw-r--r-- 資料資料資料資料資料資料.txt", style=ROW_STYLE_FILE)
        lines = build_frame_lines([row], "t", width=25, height=3)
        self.assertEqual(display_width(_plain(lines[1])), 25)

    def test_control_characters_are_sanitized(self) -> None:
        row = RenderRow(index=0, text="bad\x1b[2Jname", style=ROW_STYLE_FILE)
        lines = build_frame_lines([row], "ti\ntle", width=40, height=3)

        self.assertIn("bad?[2Jname", _plain(lines[1]))
        self.assertIn("ti?tle", _plain(lines[0]))

    def test_status_message_shows_in_bottom_border(self) -> None:
        lines = build_frame_lines(_rows(), "t", width=60, height=5, status="cannot list /x")
        bottom = lines[-1]
        self.assertIn("cannot list /x", _plain(bottom))
        self.assertIn(DEFAULT_THEME.status_error, bottom)

    def test_body_height_never_below_one(self) -> None:
        self.assertEqual(frame_body_height(24), 22)
        self.assertEqual(frame_body_height(2), 1)
        self.assertEqual(len(build_frame_lines([], "t", width=10, height=1)), 3)


class FrameStyleTests(unittest.TestCase):
    def test_default_theme_colors_rows_by_kind(self) -> None:
        lines = build_frame_lines(_rows(), "t", width=70, height=5, theme=DEFAULT_THEME)

        self.assertIn(DEFAULT_THEME.row_dir + DEFAULT_THEME.row_highlight, lines[1])
        self.assertIn(DEFAULT_THEME.row_file, lines[2])
        self.assertNotIn(DEFAULT_THEME.row_highlight, lines[2])

    def test_plain_theme_only_marks_highlight(self) -> None:
        lines = build_frame_lines(_rows(), "t", width=70, height=5, theme=PLAIN_THEME)

        self.assertIn("\033[7m", lines[1])
        self.assertNotIn("\033[7m", lines[2])
        self.assertNotIn("\033[1;", "".join(lines))


if __name__ == "__main__":
    unittest.main()
