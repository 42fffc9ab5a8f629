"""Terminal control for the browser session.

Owns raw-mode lifecycle and alternate-screen switching, and writes composed
frames. The navigation and listing layers never see this object; the event
loop receives it as a collaborator.
"""

from __future__ import annotations

import contextlib
import os
import shutil
import termios
import tty
from collections.abc import Sequence

from .render import build_frame_lines
from .ui_theme import DEFAULT_THEME, UITheme
from .viewport import RenderRow

ENTER_TUI_SEQUENCE = b"\x1b[?1049h\x1b[?25l"
LEAVE_TUI_SEQUENCE = b"\x1b[?25h\x1b[?1049l"
CLEAR_SEQUENCE = b"\x1b[H\x1b[2J"


class TerminalController:
    def __init__(self, stdin_fd: int, stdout_fd: int, theme: UITheme | None = None) -> None:
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self.theme = theme or DEFAULT_THEME
        self._saved_tty_state = termios.tcgetattr(stdin_fd)
        self._tui_active = False

    def enable_tui_mode(self) -> None:
        # Marked active first so a failure halfway through still gets restored.
        self._tui_active = True
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        # Enter alternate screen and hide cursor.
        os.write(self.stdout_fd, ENTER_TUI_SEQUENCE)

    def disable_tui_mode(self) -> None:
        # Show cursor and restore the main screen buffer.
        os.write(self.stdout_fd, LEAVE_TUI_SEQUENCE)
        self._tui_active = False
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    def teardown(self) -> None:
        """Restore the terminal if TUI mode is still active; safe to repeat."""
        if self._tui_active:
            self.disable_tui_mode()

    def size(self) -> os.terminal_size:
        return shutil.get_terminal_size((80, 24))

    def clear(self) -> None:
        os.write(self.stdout_fd, CLEAR_SEQUENCE)

    def draw(
        self,
        rows: Sequence[RenderRow],
        title: str,
        status: str = "",
        size: os.terminal_size | None = None,
    ) -> None:
        """Write one full frame, each line positioned explicitly."""
        term = size or self.size()
        lines = build_frame_lines(rows, title, term.columns, term.lines, self.theme, status=status)
        out: list[str] = []
        for row, line in enumerate(lines[: max(1, term.lines)]):
            out.append(f"\x1b[{row + 1};1H")
            out.append(line)
        os.write(self.stdout_fd, "".join(out).encode("utf-8", errors="replace"))

    @contextlib.contextmanager
    def raw_mode(self):
        """Bracket a session with TUI enter/exit; restores on any exit path."""
        try:
            self.enable_tui_mode()
            yield self
        finally:
            self.teardown()


__all__ = [
    "TerminalController",
    "ENTER_TUI_SEQUENCE",
    "LEAVE_TUI_SEQUENCE",
    "CLEAR_SEQUENCE",
]
