"""``-l`` record formatting.

Each entry renders as one line: mode string, link count, owner, group, size,
modification time and name, plus `` -> target`` for readable symlinks.
Numeric columns are right-aligned and names left-aligned to the widest value
in the listing.
"""

from __future__ import annotations

import grp
import pwd
import time
from collections.abc import Callable, Sequence

from ..listing_model.types import DirectoryEntry

UNRESOLVED_ID_PLACEHOLDER = "?"
TIMESTAMP_FORMAT = "%b %d %H:%M"


def owner_name(uid: int) -> str:
    """Return the user name for ``uid`` or the unresolved placeholder."""
    try:
        return pwd.getpwuid(uid).pw_name
    except (KeyError, OverflowError):
        return UNRESOLVED_ID_PLACEHOLDER


def group_name(gid: int) -> str:
    """Return the group name for ``gid`` or the unresolved placeholder."""
    try:
        return grp.getgrgid(gid).gr_name
    except (KeyError, OverflowError):
        return UNRESOLVED_ID_PLACEHOLDER


def format_timestamp(mtime: float) -> str:
    return time.strftime(TIMESTAMP_FORMAT, time.localtime(mtime))


def format_long_listing(
    entries: Sequence[DirectoryEntry],
    decorate: Callable[[DirectoryEntry], str] | None = None,
    resolve_owner: Callable[[int], str] = owner_name,
    resolve_group: Callable[[int], str] = group_name,
) -> list[str]:
    """Render ``entries`` in the given order, one line each."""
    if not entries:
        return []

    owners: dict[int, str] = {}
    groups: dict[int, str] = {}
    for entry in entries:
        uid = entry.metadata.uid
        gid = entry.metadata.gid
        if uid not in owners:
            owners[uid] = resolve_owner(uid)
        if gid not in groups:
            groups[gid] = resolve_group(gid)

    nlink_width = max(len(str(entry.metadata.nlink)) for entry in entries)
    size_width = max(len(str(entry.metadata.size)) for entry in entries)
    owner_width = max(len(owners[entry.metadata.uid]) for entry in entries)
    group_width = max(len(groups[entry.metadata.gid]) for entry in entries)

    lines: list[str] = []
    for entry in entries:
        metadata = entry.metadata
        name = decorate(entry) if decorate is not None else entry.name
        line = (
            f"{metadata.mode_string()} "
            f"{metadata.nlink:>{nlink_width}} "
            f"{owners[metadata.uid]:<{owner_width}} "
            f"{groups[metadata.gid]:<{group_width}} "
            f"{metadata.size:>{size_width}} "
            f"{format_timestamp(metadata.mtime)} "
            f"{name}"
        )
        if metadata.is_symlink and metadata.symlink_target:
            line += f" -> {metadata.symlink_target}"
        lines.append(line)
    return lines


__all__ = [
    "UNRESOLVED_ID_PLACEHOLDER",
    "TIMESTAMP_FORMAT",
    "owner_name",
    "group_name",
    "format_timestamp",
    "format_long_listing",
]
