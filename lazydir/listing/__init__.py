"""Directory listing primitives.

This package contains non-UI listing code:
- entry and listing datatypes
- filesystem scanning with per-entry failure isolation
- permission and timestamp formatting
"""

from __future__ import annotations

from .types import DirectoryListing, Entry
from .fs import TIMESTAMP_FORMAT, format_permissions, format_timestamp, list_directory

__all__ = [
    "Entry",
    "DirectoryListing",
    "TIMESTAMP_FORMAT",
    "format_permissions",
    "format_timestamp",
    "list_directory",
]
