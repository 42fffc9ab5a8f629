"""Tests for terminal mode control sequences and frame writes.

Verifies raw-mode lifecycle safety and expected escape-command payloads.
These guard the low-level terminal contract used by the runtime loop.
"""

from __future__ import annotations

import os
import termios
import unittest
from unittest import mock

from lazydir.terminal import CLEAR_SEQUENCE, TerminalController
from lazydir.ui_theme import PLAIN_THEME
from lazydir.viewport import ROW_STYLE_FILE, RenderRow


class TerminalBehaviorTests(unittest.TestCase):
    def test_enable_and_disable_tui_mode_use_alternate_screen_sequences(self) -> None:
        saved_state = [1, 2, 3]

        with mock.patch("lazydir.terminal.termios.tcgetattr", return_value=saved_state), mock.patch(
            "lazydir.terminal.tty.setraw"
        ) as setraw_mock, mock.patch("lazydir.terminal.os.write") as write_mock, mock.patch(
            "lazydir.terminal.termios.tcsetattr"
        ) as setattr_mock:
            controller = TerminalController(stdin_fd=0, stdout_fd=1)
            controller.enable_tui_mode()
            controller.disable_tui_mode()

        setraw_mock.assert_called_once_with(0, termios.TCSAFLUSH)
        self.assertEqual(write_mock.call_args_list[0].args, (1, b"\x1b[?1049h\x1b[?25l"))
        self.assertEqual(write_mock.call_args_list[1].args, (1, b"\x1b[?25h\x1b[?1049l"))
        setattr_mock.assert_called_once_with(0, termios.TCSAFLUSH, saved_state)

    def test_raw_mode_restores_terminal_after_exception(self) -> None:
        with mock.patch("lazydir.terminal.termios.tcgetattr", return_value=[0]), mock.patch(
            "lazydir.terminal.tty.setraw"
        ), mock.patch("lazydir.terminal.os.write"), mock.patch(
            "lazydir.terminal.termios.tcsetattr"
        ) as setattr_mock:
            controller = TerminalController(stdin_fd=0, stdout_fd=1)
            with self.assertRaises(RuntimeError):
                with controller.raw_mode():
                    raise RuntimeError("boom")

        setattr_mock.assert_called_once_with(0, termios.TCSAFLUSH, [0])

    def test_raw_mode_restores_terminal_when_setup_fails(self) -> None:
        with mock.patch("lazydir.terminal.termios.tcgetattr", return_value=[0]), mock.patch(
            "lazydir.terminal.tty.setraw"
        ), mock.patch("lazydir.terminal.os.write", side_effect=[OSError("closed"), 0]), mock.patch(
            "lazydir.terminal.termios.tcsetattr"
        ) as setattr_mock:
            controller = TerminalController(stdin_fd=0, stdout_fd=1)
            with self.assertRaises(OSError):
                with controller.raw_mode():
                    self.fail("body must not run")

        setattr_mock.assert_called_once()

    def test_teardown_is_idempotent(self) -> None:
        with mock.patch("lazydir.terminal.termios.tcgetattr", return_value=[0]), mock.patch(
            "lazydir.terminal.tty.setraw"
        ), mock.patch("lazydir.terminal.os.write"), mock.patch(
            "lazydir.terminal.termios.tcsetattr"
        ) as setattr_mock:
            controller = TerminalController(stdin_fd=0, stdout_fd=1)
            controller.teardown()
            controller.enable_tui_mode()
            controller.teardown()
            controller.teardown()

        setattr_mock.assert_called_once()

    def test_clear_writes_home_and_erase(self) -> None:
        with mock.patch("lazydir.terminal.termios.tcgetattr", return_value=[0]), mock.patch(
            "lazydir.terminal.os.write"
        ) as write_mock:
            controller = TerminalController(stdin_fd=0, stdout_fd=1)
            controller.clear()

        write_mock.assert_called_once_with(1, CLEAR_SEQUENCE)

    def test_draw_positions_every_frame_line(self) -> None:
        rows = [RenderRow(index=0, text="-rw-r--r-- a.txt 1 bytes 2024-01-01 00:00:00", style=ROW_STYLE_FILE)]
        with mock.patch("lazydir.terminal.termios.tcgetattr", return_value=[0]), mock.patch(
            "lazydir.terminal.os.write"
        ) as write_mock:
            controller = TerminalController(stdin_fd=0, stdout_fd=1, theme=PLAIN_THEME)
            controller.draw(rows, "/tmp/x", size=os.terminal_size((50, 4)))

        write_mock.assert_called_once()
        fd, payload = write_mock.call_args.args
        self.assertEqual(fd, 1)
        text = payload.decode("utf-8")
        for row in range(1, 5):
            self.assertIn(f"\x1b[{row};1H", text)
        self.assertNotIn("\x1b[5;1H", text)
        self.assertIn("/tmp/x", text)
        self.assertIn("a.txt 1 bytes", text)


if __name__ == "__main__":
    unittest.main()
