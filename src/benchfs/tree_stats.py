"""Recursive file count and size aggregation for a directory tree."""

import errno
import os
from typing import NamedTuple, Optional, Set, Tuple

from humanfriendly import format_size

from benchfs.exceptions import PathIOError
from benchfs.types import EntryKind, PathType

# Errors that mean "there is nothing here to count" rather than a real failure
_ABSENT_ERRNOS = {errno.ENOENT, errno.ENOTDIR, errno.ELOOP}


class TreeStats(NamedTuple):
    """Number of regular files under a path and their combined size in bytes.

    Compares equal to a plain ``(file_count, total_size)`` tuple.

    Example:
        >>> stats = TreeStats(2, 1500) + TreeStats(1, 500)
        >>> stats == (3, 2000)
        True
        >>> stats.describe()
        '3 files, 2 KB'
    """

    file_count: int = 0
    total_size: int = 0

    def __add__(self, other: object) -> "TreeStats":  # type: ignore[override]
        if not isinstance(other, TreeStats):
            return NotImplemented
        return TreeStats(self.file_count + other.file_count, self.total_size + other.total_size)

    def describe(self) -> str:
        """Return a short human readable summary, e.g. ``'6 files, 1.33 KB'``."""
        noun = "file" if self.file_count == 1 else "files"
        return f"{self.file_count} {noun}, {format_size(self.total_size)}"


def _stat(path: PathType) -> Optional[os.stat_result]:
    """Stat a path following symlinks, returning None if there is no entry to count."""
    try:
        return os.stat(path)
    except OSError as e:
        if e.errno in _ABSENT_ERRNOS:
            return None
        raise PathIOError("reading metadata of", path, e) from e


def tree_stats(path: PathType) -> TreeStats:
    """Count the regular files under a path and sum their sizes.

    Sizes are the byte lengths reported by the filesystem metadata. Symlinks are
    followed: a link to a file counts as that file and a link to a directory is
    descended into, unless that directory has already been entered through another
    path, so symlink cycles and aliases never count a file twice. Directories
    themselves contribute nothing. Entries that are neither files nor directories,
    including missing paths and broken links, contribute ``(0, 0)``.

    Args:
        path: File or directory to measure.

    Returns:
        TreeStats: The file count and total size.

    Raises:
        PathIOError: If metadata or a directory listing cannot be read for any reason
            other than the entry not existing.

    Example:
        >>> tree_stats("/nonexistent/path")
        TreeStats(file_count=0, total_size=0)
    """
    return _tree_stats(path, set())


def _tree_stats(path: PathType, visited: Set[Tuple[int, int]]) -> TreeStats:
    stat_result = _stat(path)
    if stat_result is None:
        return TreeStats()

    kind = EntryKind.from_stat(stat_result)
    if kind is EntryKind.FILE:
        return TreeStats(1, stat_result.st_size)
    if kind is not EntryKind.DIRECTORY:
        return TreeStats()

    # Directories are identified by device and inode
    directory_id = (stat_result.st_dev, stat_result.st_ino)
    if directory_id in visited:
        return TreeStats()
    visited.add(directory_id)

    total = TreeStats()
    try:
        with os.scandir(path) as entries:
            children = [entry.path for entry in entries]
    except OSError as e:
        raise PathIOError("listing directory", path, e) from e

    for child in children:
        total = total + _tree_stats(child, visited)
    return total
