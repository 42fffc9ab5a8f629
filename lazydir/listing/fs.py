"""Filesystem scanning and metadata formatting for directory listings."""

from __future__ import annotations

import logging
import os
import stat
from datetime import datetime
from pathlib import Path

from ..errors import UnreadableDirectoryError
from .types import DirectoryListing, Entry

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

_PERMISSION_BITS: tuple[tuple[int, str], ...] = (
    (stat.S_IRUSR, "r"),
    (stat.S_IWUSR, "w"),
    (stat.S_IXUSR, "x"),
    (stat.S_IRGRP, "r"),
    (stat.S_IWGRP, "w"),
    (stat.S_IXGRP, "x"),
    (stat.S_IROTH, "r"),
    (stat.S_IWOTH, "w"),
    (stat.S_IXOTH, "x"),
)


def format_permissions(mode: int, is_dir: bool) -> str:
    """Return a 10-char ``drwxr-xr-x`` style string for ``mode``.

    The type column is only ``d`` or ``-``; symlinks, sockets and devices all
    show as ``-``.
    """
    type_char = "d" if is_dir else "-"
    return type_char + "".join(char if mode & bit else "-" for bit, char in _PERMISSION_BITS)


def format_timestamp(seconds: float) -> str:
    """Format an epoch timestamp in local time."""
    return datetime.fromtimestamp(seconds).strftime(TIMESTAMP_FORMAT)


def _entry_from_dir_entry(child: os.DirEntry) -> Entry:
    """Build an ``Entry`` from a scandir child; raises ``OSError`` on stat failure."""
    is_dir = child.is_dir(follow_symlinks=False)
    st = child.stat(follow_symlinks=False)
    return Entry(
        is_dir=is_dir,
        name=child.name,
        size_bytes=0 if is_dir else int(st.st_size),
        permissions=format_permissions(st.st_mode, is_dir),
        last_modified=format_timestamp(st.st_mtime),
    )


def list_directory(path: Path) -> DirectoryListing:
    """List the direct children of ``path`` with metadata.

    Children whose metadata cannot be read are skipped and named in
    ``DirectoryListing.skipped``. Raises ``UnreadableDirectoryError`` when the
    directory itself cannot be scanned. Entries come back in scan order.
    """
    entries: list[Entry] = []
    skipped: list[str] = []
    try:
        with os.scandir(path) as children:
            for child in children:
                try:
                    entries.append(_entry_from_dir_entry(child))
                except OSError as exc:
                    logger.debug("skipping %s: %s", child.path, exc)
                    skipped.append(child.name)
    except OSError as exc:
        raise UnreadableDirectoryError(Path(path), exc) from exc

    return DirectoryListing(path=Path(path), entries=tuple(entries), skipped=tuple(skipped))


__all__ = [
    "TIMESTAMP_FORMAT",
    "format_permissions",
    "format_timestamp",
    "list_directory",
]
