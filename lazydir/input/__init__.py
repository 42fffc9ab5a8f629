"""Keyboard input: raw byte decoding and command bindings."""

from __future__ import annotations

from .decode import read_key
from .keys import KEY_BINDINGS, QUIT, command_for_key

__all__ = [
    "KEY_BINDINGS",
    "QUIT",
    "command_for_key",
    "read_key",
]
