"""Exception types shared by the listing, navigation, and CLI layers."""

from __future__ import annotations

from pathlib import Path


class LazydirError(Exception):
    """Base class for lazydir errors."""


class ListError(LazydirError):
    """A directory could not be listed."""


class UnreadableDirectoryError(ListError):
    """Directory listing failed as a whole.

    ``cause`` keeps the underlying ``OSError`` (permission denied, not found,
    not a directory, I/O fault). It is also chained as ``__cause__``.
    """

    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        reason = cause.strerror or str(cause)
        super().__init__(f"cannot list {path}: {reason}")


class InvalidStartupPathError(LazydirError):
    """Startup path argument is missing or not a directory."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{reason}: {path}")


__all__ = [
    "LazydirError",
    "ListError",
    "UnreadableDirectoryError",
    "InvalidStartupPathError",
]
