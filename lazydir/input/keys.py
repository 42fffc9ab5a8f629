"""Key bindings from decoded key tokens to browser commands."""

from __future__ import annotations

from ..navigation import BACK, ENTER, MOVE_DOWN, MOVE_UP

QUIT = "quit"

KEY_BINDINGS: dict[str, str] = {
    "q": QUIT,
    "j": MOVE_DOWN,
    "k": MOVE_UP,
    "l": ENTER,
    "h": BACK,
}


def command_for_key(key: str) -> str | None:
    """Return the command bound to ``key``; unbound keys map to ``None``."""
    return KEY_BINDINGS.get(key)


__all__ = [
    "QUIT",
    "KEY_BINDINGS",
    "command_for_key",
]
