"""Cursor movement and directory transitions for the browser.

This module intentionally has no UI concerns. ``NavigationController`` is the
only writer of the current ``DirectoryState`` and ``CursorState``; the event
loop feeds it one command at a time and redraws when a command reports a
change.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .errors import ListError
from .listing import list_directory
from .state import DirectoryState, Lister, log_skipped

logger = logging.getLogger(__name__)

MOVE_DOWN = "move_down"
MOVE_UP = "move_up"
ENTER = "enter"
BACK = "back"


@dataclass(frozen=True)
class CursorState:
    index: int = 0

    def clamped(self, entry_count: int) -> CursorState:
        """Return a cursor inside ``[0, entry_count)``, or 0 for empty listings."""
        if entry_count <= 0:
            return CursorState(0)
        return CursorState(max(0, min(self.index, entry_count - 1)))


@dataclass(frozen=True)
class NavigationResult:
    """Outcome of one command: whether state changed and any rolled-back error."""

    changed: bool = False
    error: ListError | None = None


class NavigationController:
    """Apply navigation commands to a directory state and cursor.

    History is one level deep: Enter remembers the directory it left and Back
    consumes that memory, so repeated Back presses never climb further than
    one directory.
    """

    def __init__(
        self,
        directory: DirectoryState,
        cursor: CursorState | None = None,
        lister: Lister = list_directory,
    ) -> None:
        self.directory = directory
        self.cursor = (cursor or CursorState()).clamped(len(directory.entries))
        self.lister = lister

    def handle(self, command: str) -> NavigationResult:
        """Dispatch one command; unknown commands are ignored."""
        if command == MOVE_DOWN:
            return NavigationResult(changed=self.move_down())
        if command == MOVE_UP:
            return NavigationResult(changed=self.move_up())
        if command == ENTER:
            return self.enter()
        if command == BACK:
            return self.back()
        return NavigationResult()

    def move_down(self) -> bool:
        if self.cursor.index >= len(self.directory.entries) - 1:
            return False
        self.cursor = CursorState(self.cursor.index + 1)
        return True

    def move_up(self) -> bool:
        if self.cursor.index <= 0:
            return False
        self.cursor = CursorState(self.cursor.index - 1)
        return True

    def enter(self) -> NavigationResult:
        """Drill into the directory under the cursor; files are ignored."""
        entry = self.directory.entry_at(self.cursor.index)
        if entry is None or not entry.is_dir:
            return NavigationResult()
        target = self.directory.child_path(entry)
        return self._transition(self.directory.remember_previous(), target)

    def back(self) -> NavigationResult:
        """Return to the remembered directory, if it still exists."""
        previous = self.directory.previous_path
        if previous is None:
            return NavigationResult()
        try:
            is_dir = previous.is_dir()
        except OSError as exc:
            logger.debug("cannot check %s: %s", previous, exc)
            return NavigationResult()
        if not is_dir:
            return NavigationResult()
        return self._transition(self.directory.forget_previous(), previous)

    def _transition(self, base: DirectoryState, target: Path) -> NavigationResult:
        try:
            refreshed = base.refresh(target, lister=self.lister)
        except ListError as exc:
            logger.warning("navigation to %s rolled back: %s", target, exc)
            return NavigationResult(error=exc)
        logger.debug("navigated %s -> %s", self.directory.current_path, target)
        log_skipped(refreshed)
        self.directory = refreshed
        self.cursor = CursorState(0)
        return NavigationResult(changed=True)


__all__ = [
    "MOVE_DOWN",
    "MOVE_UP",
    "ENTER",
    "BACK",
    "CursorState",
    "NavigationResult",
    "NavigationController",
]
