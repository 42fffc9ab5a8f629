"""Domain datatypes for one directory listing."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Entry:
    """One listed child with display metadata captured at listing time.

    ``is_dir`` is the only kind discriminant; ``size_bytes`` is always 0 for
    directories.
    """

    is_dir: bool
    name: str
    size_bytes: int
    permissions: str
    last_modified: str


@dataclass(frozen=True)
class DirectoryListing:
    """Entries read from ``path`` plus names of children that were skipped."""

    path: Path
    entries: tuple[Entry, ...] = ()
    skipped: tuple[str, ...] = ()

    @property
    def is_partial(self) -> bool:
        return bool(self.skipped)


__all__ = [
    "Entry",
    "DirectoryListing",
]
