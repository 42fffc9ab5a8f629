"""Main interactive event loop for the terminal UI.

Polls input with a short timeout, feeds commands to the navigation
controller, and redraws only when something visible changed. Each command
runs to completion before the next poll.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass

from ..input import QUIT, command_for_key, read_key
from ..navigation import NavigationController
from ..render import frame_body_height
from ..terminal import TerminalController
from ..viewport import Viewport

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuntimeLoopTiming:
    """Timing constants controlling interactive loop behavior."""

    poll_timeout_ms: int = 16
    status_message_seconds: float = 3.0


def run_main_loop(
    controller: NavigationController,
    terminal: TerminalController,
    viewport: Viewport,
    stdin_fd: int,
    timing: RuntimeLoopTiming,
    read_key_fn: Callable[..., str] = read_key,
) -> None:
    """Run the browser loop until a quit key arrives.

    The terminal session is entered here and released on every exit path,
    including exceptions raised by listing or rendering.
    """
    status_message = ""
    status_message_until = 0.0
    last_size = None
    dirty = True

    with terminal.raw_mode():
        while True:
            term = terminal.size()
            now = time.monotonic()
            if term != last_size:
                last_size = term
                terminal.clear()
                dirty = True
            if status_message and now >= status_message_until:
                status_message = ""
                status_message_until = 0.0
                dirty = True

            if dirty:
                rows = viewport.render(controller.directory, controller.cursor, frame_body_height(term.lines))
                terminal.draw(rows, str(controller.directory.current_path), status=status_message, size=term)
                dirty = False

            try:
                key = read_key_fn(stdin_fd, timeout_ms=timing.poll_timeout_ms)
            except KeyboardInterrupt:
                continue
            if key == "":
                continue

            command = command_for_key(key)
            if command is None:
                continue
            if command == QUIT:
                logger.debug("quit requested")
                break

            result = controller.handle(command)
            if result.error is not None:
                status_message = str(result.error)
                status_message_until = time.monotonic() + timing.status_message_seconds
                dirty = True
            if result.changed:
                dirty = True


__all__ = [
    "RuntimeLoopTiming",
    "run_main_loop",
]
