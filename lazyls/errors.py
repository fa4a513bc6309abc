"""Listing error taxonomy.

``DirectoryUnreadable`` aborts the listing of one directory (or the whole run
when it is the top-level path). ``MetadataUnavailable`` drops a single entry.
Unmapped owner ids and unreadable symlink targets are not errors at all.
"""

from __future__ import annotations

from pathlib import Path


class ListingError(Exception):
    """Base class for failures observed while listing a directory."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")

    def diagnostic(self) -> str:
        return f"{self.path}: {self.reason}"


class DirectoryUnreadable(ListingError):
    """Directory is missing, not a directory, or cannot be opened."""

    def diagnostic(self) -> str:
        return f"cannot open directory '{self.path}': {self.reason}"


class MetadataUnavailable(ListingError):
    """``lstat`` failed for one child, usually a race with deletion."""

    def diagnostic(self) -> str:
        return f"cannot access '{self.path}': {self.reason}"


def describe_os_error(exc: OSError) -> str:
    """Return the human-readable part of an ``OSError``."""
    return exc.strerror or str(exc)


__all__ = [
    "ListingError",
    "DirectoryUnreadable",
    "MetadataUnavailable",
    "describe_os_error",
]
