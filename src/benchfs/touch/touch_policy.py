"""The pure inclusion policy deciding which files a selective touch updates."""

from dataclasses import dataclass
from pathlib import PurePath
from typing import FrozenSet, NamedTuple

from benchfs.touch.touch_reason import TouchReason
from benchfs.types import PathType


class TouchDecision(NamedTuple):
    """The outcome of evaluating a path against a TouchPolicy."""

    accepted: bool
    reason: TouchReason


@dataclass(frozen=True)
class TouchPolicy:
    """Decides which files are touched and which are deleted as stale build caches.

    The decision is a pure function of the path's components and extension; the
    filesystem is never consulted. Defaults describe a Cargo workspace: Rust sources
    are touched, anything under ``target/`` keeps its timestamps because it holds
    artifacts produced by dependency build scripts, and ``build.rs`` is left alone so
    that touching it does not re-run every build script.

    Attributes:
        source_extension: Extension of compilable source files, including the dot.
        build_script_name: File name of the build script that must not be touched.
        reserved_directories: Directory names whose contents are never touched, at any depth.
        cache_marker_names: File names of build caches deleted during the walk.

    Example:
        >>> policy = TouchPolicy()
        >>> policy.evaluate("crate/src/lib.rs")
        TouchDecision(accepted=True, reason=<TouchReason.ACCEPTED: 'accepted'>)
        >>> policy.evaluate("crate/target/debug/build/out/bindings.rs").reason
        <TouchReason.RESERVED_DIRECTORY: 'reserved_directory'>
        >>> policy.evaluate("crate/build.rs").accepted
        False
        >>> policy.is_cache_marker("crate/cmake/CMakeCache.txt")
        True
    """

    source_extension: str = ".rs"
    build_script_name: str = "build.rs"
    reserved_directories: FrozenSet[str] = frozenset({"target"})
    cache_marker_names: FrozenSet[str] = frozenset({"CMakeCache.txt"})

    def evaluate(self, path: PathType) -> TouchDecision:
        """Decide whether a file at ``path`` should have its modification time reset.

        Args:
            path: Path to evaluate. Every component is checked against the reserved
                directory names, so absolute paths are judged by their full ancestry.

        Returns:
            TouchDecision: Whether to touch the file, and why.
        """
        pure = PurePath(path)

        if any(part in self.reserved_directories for part in pure.parts):
            return TouchDecision(False, TouchReason.RESERVED_DIRECTORY)

        if pure.suffix != self.source_extension:
            return TouchDecision(False, TouchReason.WRONG_EXTENSION)

        if pure.name == self.build_script_name:
            return TouchDecision(False, TouchReason.BUILD_SCRIPT)

        return TouchDecision(True, TouchReason.ACCEPTED)

    def is_cache_marker(self, path: PathType) -> bool:
        """Return True if the final component of ``path`` names a build cache file."""
        return PurePath(path).name in self.cache_marker_names
