"""Relocation strategy base class defining how a tree is moved."""

from abc import ABC, abstractmethod

from benchfs.types import PathType


class RelocationStrategy(ABC):
    """Abstract base class for one way of moving a file or directory tree.

    Concrete strategies range from an atomic in-place rename to shelling out to a
    platform tool or copying the tree and deleting the source. A strategy either
    completes the move, leaving the destination populated and the source gone, or
    raises a BenchFsError describing the operation and both paths.

    Example:
        >>> import shutil
        >>> class ShutilStrategy(RelocationStrategy):
        ...     def relocate(self, source, destination):
        ...         shutil.move(source, destination)
    """

    @abstractmethod
    def relocate(self, source: PathType, destination: PathType) -> None:
        """Move ``source`` to ``destination``.

        Args:
            source: Existing file or directory to move.
            destination: Target path. Its parent directory must exist.

        Raises:
            BenchFsError: If the move could not be completed.
        """
        pass

    @property
    def name(self) -> str:
        """Short name used in log messages."""
        return self.__class__.__name__


def describe_move(source: PathType, destination: PathType) -> str:
    """Return the operation context used in relocation errors.

    Example:
        >>> describe_move("/tmp/a", "/data/b")
        "moving '/tmp/a' to '/data/b'"
    """
    return f"moving {str(source)!r} to {str(destination)!r}"
