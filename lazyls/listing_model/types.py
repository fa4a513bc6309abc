"""Domain datatypes for listed directory entries."""

from __future__ import annotations

import stat
from dataclasses import dataclass
from pathlib import Path

FILE_TYPE_REGULAR = "regular"
FILE_TYPE_DIRECTORY = "directory"
FILE_TYPE_SYMLINK = "symlink"
FILE_TYPE_CHAR_DEVICE = "char_device"
FILE_TYPE_BLOCK_DEVICE = "block_device"
FILE_TYPE_FIFO = "fifo"
FILE_TYPE_SOCKET = "socket"
FILE_TYPE_UNKNOWN = "unknown"

SPECIAL_FILE_TYPES = frozenset(
    {FILE_TYPE_CHAR_DEVICE, FILE_TYPE_BLOCK_DEVICE, FILE_TYPE_FIFO, FILE_TYPE_SOCKET}
)

FILE_TYPE_CHARS = {
    FILE_TYPE_REGULAR: "-",
    FILE_TYPE_DIRECTORY: "d",
    FILE_TYPE_SYMLINK: "l",
    FILE_TYPE_CHAR_DEVICE: "c",
    FILE_TYPE_BLOCK_DEVICE: "b",
    FILE_TYPE_FIFO: "p",
    FILE_TYPE_SOCKET: "s",
}


def file_type_from_mode(mode: int) -> str:
    """Map the format bits of ``st_mode`` to a file-type tag."""
    if stat.S_ISLNK(mode):
        return FILE_TYPE_SYMLINK
    if stat.S_ISDIR(mode):
        return FILE_TYPE_DIRECTORY
    if stat.S_ISREG(mode):
        return FILE_TYPE_REGULAR
    if stat.S_ISCHR(mode):
        return FILE_TYPE_CHAR_DEVICE
    if stat.S_ISBLK(mode):
        return FILE_TYPE_BLOCK_DEVICE
    if stat.S_ISFIFO(mode):
        return FILE_TYPE_FIFO
    if stat.S_ISSOCK(mode):
        return FILE_TYPE_SOCKET
    return FILE_TYPE_UNKNOWN


def file_type_char(file_type: str) -> str:
    return FILE_TYPE_CHARS.get(file_type, "?")


@dataclass(frozen=True)
class Permissions:
    """Permission and special bits (the low 12 bits of ``st_mode``)."""

    bits: int = 0

    @classmethod
    def from_mode(cls, mode: int) -> "Permissions":
        return cls(stat.S_IMODE(mode))

    def has(self, mask: int) -> bool:
        return bool(self.bits & mask)

    @property
    def has_any_execute(self) -> bool:
        return self.has(stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)

    def symbolic(self) -> str:
        """Return the 9-character ``rwx`` triplets for owner, group and other.

        Setuid/setgid replace the owner/group execute slot with ``s`` (``S``
        when execute is unset); sticky does the same for other with ``t``/``T``.
        """
        triplets = (
            (stat.S_IRUSR, stat.S_IWUSR, stat.S_IXUSR, stat.S_ISUID, "s"),
            (stat.S_IRGRP, stat.S_IWGRP, stat.S_IXGRP, stat.S_ISGID, "s"),
            (stat.S_IROTH, stat.S_IWOTH, stat.S_IXOTH, stat.S_ISVTX, "t"),
        )
        out: list[str] = []
        for read_bit, write_bit, exec_bit, special_bit, special_char in triplets:
            out.append("r" if self.has(read_bit) else "-")
            out.append("w" if self.has(write_bit) else "-")
            executable = self.has(exec_bit)
            if self.has(special_bit):
                out.append(special_char if executable else special_char.upper())
            else:
                out.append("x" if executable else "-")
        return "".join(out)


@dataclass(frozen=True)
class FileMetadata:
    """``lstat`` view of one entry; describes a symlink itself, not its target."""

    file_type: str
    permissions: Permissions
    nlink: int = 1
    uid: int = 0
    gid: int = 0
    size: int = 0
    mtime: float = 0.0
    symlink_target: str = ""

    @property
    def is_symlink(self) -> bool:
        return self.file_type == FILE_TYPE_SYMLINK

    @property
    def is_dir(self) -> bool:
        return self.file_type == FILE_TYPE_DIRECTORY

    def mode_string(self) -> str:
        """Return the 10-character type-and-permission column."""
        return file_type_char(self.file_type) + self.permissions.symbolic()


@dataclass(frozen=True)
class DirectoryEntry:
    """One non-hidden child of a listed directory."""

    name: str
    path: Path
    metadata: FileMetadata


__all__ = [
    "FILE_TYPE_REGULAR",
    "FILE_TYPE_DIRECTORY",
    "FILE_TYPE_SYMLINK",
    "FILE_TYPE_CHAR_DEVICE",
    "FILE_TYPE_BLOCK_DEVICE",
    "FILE_TYPE_FIFO",
    "FILE_TYPE_SOCKET",
    "FILE_TYPE_UNKNOWN",
    "SPECIAL_FILE_TYPES",
    "file_type_from_mode",
    "file_type_char",
    "Permissions",
    "FileMetadata",
    "DirectoryEntry",
]
