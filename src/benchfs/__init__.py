"""Filesystem primitives for staging build trees between benchmark runs.

This package provides tools for relocating build directories across
filesystem boundaries, selectively invalidating compiler caches by touching
source files, and measuring the size of a directory tree.
"""

from importlib.metadata import PackageNotFoundError, version

from benchfs.exceptions import (
    BenchFsError,
    ExternalProcessError,
    ExternalProcessFailedError,
    ExternalProcessLaunchError,
    PathIOError,
    TreeCopyError,
)
from benchfs.relocation import TreeRelocator, default_relocator, relocate
from benchfs.touch import SelectiveTouch, TouchPolicy, touch_file, touch_tree
from benchfs.tree_stats import TreeStats, tree_stats

# Expose the version for programmatic use
try:
    __version__ = version("benchfs")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "BenchFsError",
    "ExternalProcessError",
    "ExternalProcessFailedError",
    "ExternalProcessLaunchError",
    "PathIOError",
    "SelectiveTouch",
    "TouchPolicy",
    "TreeCopyError",
    "TreeRelocator",
    "TreeStats",
    "default_relocator",
    "relocate",
    "touch_file",
    "touch_tree",
    "tree_stats",
]
