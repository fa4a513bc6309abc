"""Domain model for one directory listing.

This package contains non-UI listing primitives:
- entry/metadata datatypes and the permission bit-set formatter
- directory scanning with hidden-entry filtering
- byte-wise name ordering
"""

from __future__ import annotations

from .types import (
    FILE_TYPE_BLOCK_DEVICE,
    FILE_TYPE_CHAR_DEVICE,
    FILE_TYPE_DIRECTORY,
    FILE_TYPE_FIFO,
    FILE_TYPE_REGULAR,
    FILE_TYPE_SOCKET,
    FILE_TYPE_SYMLINK,
    FILE_TYPE_UNKNOWN,
    SPECIAL_FILE_TYPES,
    DirectoryEntry,
    FileMetadata,
    Permissions,
    file_type_char,
    file_type_from_mode,
)
from .fs import (
    collect_entries,
    entry_sort_key,
    is_hidden_name,
    metadata_from_stat,
    read_symlink_target,
    sort_entries,
)

__all__ = [
    "FILE_TYPE_BLOCK_DEVICE",
    "FILE_TYPE_CHAR_DEVICE",
    "FILE_TYPE_DIRECTORY",
    "FILE_TYPE_FIFO",
    "FILE_TYPE_REGULAR",
    "FILE_TYPE_SOCKET",
    "FILE_TYPE_SYMLINK",
    "FILE_TYPE_UNKNOWN",
    "SPECIAL_FILE_TYPES",
    "DirectoryEntry",
    "FileMetadata",
    "Permissions",
    "file_type_char",
    "file_type_from_mode",
    "collect_entries",
    "entry_sort_key",
    "is_hidden_name",
    "metadata_from_stat",
    "read_symlink_target",
    "sort_entries",
]
