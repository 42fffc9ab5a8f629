"""Browser bootstrap: initial state, terminal wiring, and the no-tty fallback."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from ..ansi import sanitize_text
from ..navigation import NavigationController
from ..state import DirectoryState, log_skipped
from ..terminal import TerminalController
from ..ui_theme import resolve_theme
from ..viewport import Viewport, format_entry_text
from .loop import RuntimeLoopTiming, run_main_loop

logger = logging.getLogger(__name__)


def format_listing(directory: DirectoryState) -> str:
    """Render a state as plain text lines for non-interactive output.

    Unprintable characters in names are replaced, as on the interactive screen.
    """
    return "".join(f"{sanitize_text(format_entry_text(entry))}\n" for entry in directory.entries)


def run_browser(
    path: Path,
    theme_name: str | None = None,
    no_color: bool = False,
    print_only: bool = False,
    timing: RuntimeLoopTiming | None = None,
) -> None:
    """List ``path`` and browse it interactively.

    The initial listing happens before the terminal enters raw mode, so a
    ``ListError`` propagates to the caller with the screen untouched. When
    stdin is not a tty (or ``print_only`` is set) the sorted listing is written
    to stdout instead.
    """
    directory = DirectoryState.load(path)
    logger.info("browsing %s (%d entries)", directory.current_path, len(directory.entries))
    log_skipped(directory)

    if print_only or not os.isatty(sys.stdin.fileno()):
        sys.stdout.write(format_listing(directory))
        return

    terminal = TerminalController(
        sys.stdin.fileno(),
        sys.stdout.fileno(),
        theme=resolve_theme(theme_name, no_color=no_color),
    )
    run_main_loop(
        controller=NavigationController(directory),
        terminal=terminal,
        viewport=Viewport(),
        stdin_fd=sys.stdin.fileno(),
        timing=timing or RuntimeLoopTiming(),
    )


__all__ = [
    "format_listing",
    "run_browser",
]
