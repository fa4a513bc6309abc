"""Filesystem scanning and ordering for one directory listing."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterable
from pathlib import Path

from ..errors import DirectoryUnreadable, MetadataUnavailable, describe_os_error
from .types import FILE_TYPE_SYMLINK, DirectoryEntry, FileMetadata, Permissions, file_type_from_mode


def is_hidden_name(name: str) -> bool:
    return name.startswith(".")


def read_symlink_target(path: Path) -> str:
    """Return the link text for ``path`` or ``""`` when it cannot be read."""
    try:
        return os.readlink(path)
    except OSError:
        return ""


def metadata_from_stat(st: os.stat_result, symlink_target: str = "") -> FileMetadata:
    """Build ``FileMetadata`` from an ``lstat`` result."""
    return FileMetadata(
        file_type=file_type_from_mode(st.st_mode),
        permissions=Permissions.from_mode(st.st_mode),
        nlink=int(st.st_nlink),
        uid=int(st.st_uid),
        gid=int(st.st_gid),
        size=int(st.st_size),
        mtime=float(st.st_mtime),
        symlink_target=symlink_target,
    )


def collect_entries(
    directory: Path | str,
    on_error: Callable[[MetadataUnavailable], None] | None = None,
) -> list[DirectoryEntry]:
    """Collect every non-hidden child of ``directory`` in scan order.

    Raises ``DirectoryUnreadable`` when the directory itself cannot be opened.
    Children whose ``lstat`` fails are skipped; the corresponding
    ``MetadataUnavailable`` is passed to ``on_error`` when one is given.
    """
    directory = Path(directory)
    entries: list[DirectoryEntry] = []
    try:
        scanner = os.scandir(directory)
    except OSError as exc:
        raise DirectoryUnreadable(directory, describe_os_error(exc)) from exc

    with scanner:
        for child in scanner:
            name = child.name
            if is_hidden_name(name):
                continue
            child_path = directory / name
            try:
                st = child.stat(follow_symlinks=False)
            except OSError as exc:
                if on_error is not None:
                    on_error(MetadataUnavailable(child_path, describe_os_error(exc)))
                continue

            metadata = metadata_from_stat(st)
            if metadata.file_type == FILE_TYPE_SYMLINK:
                metadata = metadata_from_stat(st, read_symlink_target(child_path))
            entries.append(DirectoryEntry(name=name, path=child_path, metadata=metadata))
    return entries


def entry_sort_key(entry: DirectoryEntry) -> bytes:
    """Byte-wise sort key: no case folding and no locale collation."""
    return os.fsencode(entry.name)


def sort_entries(entries: Iterable[DirectoryEntry]) -> list[DirectoryEntry]:
    """Return a new list ordered by ``entry_sort_key``."""
    return sorted(entries, key=entry_sort_key)


__all__ = [
    "is_hidden_name",
    "read_symlink_target",
    "metadata_from_stat",
    "collect_entries",
    "entry_sort_key",
    "sort_entries",
]
