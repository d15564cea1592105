import os
import stat
from enum import Enum
from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class EntryKind(Enum):
    """Enumeration of filesystem entry kinds as seen by the tree operations.

    Attributes:
        FILE: Regular file
        DIRECTORY: Directory
        SYMLINK: Symbolic link (only reported when links are not followed)
        OTHER: Anything else, such as device files, sockets and FIFOs
    """

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    OTHER = "other"

    @classmethod
    def from_stat(cls, stat_result: os.stat_result) -> "EntryKind":
        """Classify an entry from the result of ``os.stat`` or ``os.lstat``."""
        mode = stat_result.st_mode
        if stat.S_ISDIR(mode):
            return cls.DIRECTORY
        if stat.S_ISREG(mode):
            return cls.FILE
        if stat.S_ISLNK(mode):
            return cls.SYMLINK
        return cls.OTHER
