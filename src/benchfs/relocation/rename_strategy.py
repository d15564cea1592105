import os

from benchfs.exceptions import PathIOError
from benchfs.types import PathType

from .base_strategy import RelocationStrategy, describe_move


class RenameStrategy(RelocationStrategy):
    """In-place rename with ``os.rename``.

    Atomic when it succeeds, but only works within one filesystem. On POSIX an
    existing empty destination directory is replaced; on Windows an existing
    destination is an error.
    """

    def relocate(self, source: PathType, destination: PathType) -> None:
        try:
            os.rename(source, destination)
        except OSError as e:
            raise PathIOError(f"{describe_move(source, destination)}: renaming", source, e) from e
