"""Directory state: the listed path, its sorted entries, and one-step history.

States are immutable. Every transition returns a new ``DirectoryState``; a
failed refresh raises and leaves the receiver as it was.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from pathlib import Path

from .listing import DirectoryListing, Entry, list_directory

logger = logging.getLogger(__name__)

Lister = Callable[[Path], DirectoryListing]


def entry_sort_key(entry: Entry) -> str:
    """Case-insensitive ordering key; directories and files interleave."""
    return entry.name.lower()


@dataclass(frozen=True)
class DirectoryState:
    current_path: Path
    entries: tuple[Entry, ...] = ()
    previous_path: Path | None = None
    skipped: tuple[str, ...] = ()

    @classmethod
    def load(cls, path: Path, lister: Lister = list_directory) -> DirectoryState:
        """Build the initial state for ``path``; raises ``ListError`` on failure."""
        return cls(current_path=Path(path)).refresh(path, lister=lister)

    def refresh(self, path: Path, lister: Lister = list_directory) -> DirectoryState:
        """Return a state listing ``path``, replacing path and entries together.

        Raises ``ListError`` before anything is replaced, so callers keep
        ``self`` on failure.
        """
        listing = lister(Path(path))
        return replace(
            self,
            current_path=Path(path),
            entries=listing.entries,
            skipped=listing.skipped,
        ).sort()

    def sort(self) -> DirectoryState:
        """Return a state with entries in stable case-insensitive name order."""
        return replace(self, entries=tuple(sorted(self.entries, key=entry_sort_key)))

    def remember_previous(self) -> DirectoryState:
        """Record the parent of the next drill-down target as the step-back path.

        Drill-down targets are always children of ``current_path``.
        """
        return replace(self, previous_path=self.current_path)

    def forget_previous(self) -> DirectoryState:
        return replace(self, previous_path=None)

    def entry_at(self, index: int) -> Entry | None:
        if 0 <= index < len(self.entries):
            return self.entries[index]
        return None

    def child_path(self, entry: Entry) -> Path:
        return self.current_path / entry.name


def log_skipped(directory: DirectoryState) -> None:
    """Record children left out of a partial listing."""
    if directory.skipped:
        logger.info(
            "%s: skipped %d unreadable entries (%s)",
            directory.current_path,
            len(directory.skipped),
            ", ".join(directory.skipped),
        )


__all__ = [
    "DirectoryState",
    "Lister",
    "entry_sort_key",
    "log_skipped",
]
