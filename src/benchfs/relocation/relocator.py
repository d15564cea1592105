"""Moving build trees with an in-place rename and a fallback strategy."""

import logging
import os
import platform
from typing import Optional

from benchfs.exceptions import BenchFsError, PathIOError
from benchfs.process import ProcessRunner
from benchfs.types import EntryKind, PathType

from .base_strategy import RelocationStrategy, describe_move
from .command_strategies import MoveCommandStrategy, RobocopyStrategy
from .copy_strategy import CopyTreeStrategy
from .rename_strategy import RenameStrategy

logger = logging.getLogger(__name__)


class TreeRelocator:
    """Moves files and directory trees, falling back when a rename is impossible.

    The primary strategy (an in-place rename by default) is always tried first and
    doubles as the capability probe: if it raises, the move is handed to the fallback
    for the kind of entry being moved. A rename typically fails when the source and
    destination live on different filesystems, e.g. when ``/tmp`` is a tmpfs.

    No rollback is attempted. If a fallback fails part way the source and destination
    may both be populated, and the error says so by naming both paths.

    Attributes:
        primary (RelocationStrategy): Strategy tried first.
        file_fallback (Optional[RelocationStrategy]): Used for files and symlinks when
            the primary strategy fails. None re-raises the primary error.
        directory_fallback (Optional[RelocationStrategy]): Used for directories when
            the primary strategy fails. None re-raises the primary error.

    Example:
        >>> relocator = TreeRelocator(file_fallback=CopyTreeStrategy(), directory_fallback=CopyTreeStrategy())
        >>> relocator.relocate("/tmp/build", "/data/build")  # doctest: +SKIP
    """

    def __init__(
        self,
        primary: Optional[RelocationStrategy] = None,
        file_fallback: Optional[RelocationStrategy] = None,
        directory_fallback: Optional[RelocationStrategy] = None,
    ) -> None:
        self.primary = primary if primary is not None else RenameStrategy()
        self.file_fallback = file_fallback
        self.directory_fallback = directory_fallback

    def relocate(self, source: PathType, destination: PathType) -> None:
        """Move ``source`` to ``destination``.

        Args:
            source: Existing file or directory.
            destination: Target path. Its parent directory must already exist.

        Raises:
            PathIOError: If the source does not exist, or the rename failed and there
                is no fallback for this kind of entry.
            ExternalProcessLaunchError: If a fallback tool could not be started.
            ExternalProcessFailedError: If a fallback tool reported failure.
            TreeCopyError: If the copy fallback could not copy every entry.
        """
        try:
            kind = EntryKind.from_stat(os.lstat(source))
        except OSError as e:
            raise PathIOError(f"{describe_move(source, destination)}: reading metadata of", source, e) from e

        fallback = self.directory_fallback if kind is EntryKind.DIRECTORY else self.file_fallback

        try:
            self.primary.relocate(source, destination)
            strategy = self.primary
        except BenchFsError as e:
            if fallback is None:
                raise
            logger.debug("%s failed (%s), falling back to %s", self.primary.name, e, fallback.name)
            fallback.relocate(source, destination)
            strategy = fallback

        logger.debug("moved %s %s to %s using %s", kind.value, source, destination, strategy.name)


def default_relocator(runner: Optional[ProcessRunner] = None, system: Optional[str] = None) -> TreeRelocator:
    """Build the relocator appropriate for the current platform.

    On Windows, files fall back to an owned copy and directories to ``robocopy /move``.
    Everywhere else both fall back to ``mv``.

    Args:
        runner: Process runner handed to the command strategies.
        system: Platform name as returned by ``platform.system()``. Defaults to the
            running platform.

    Example:
        >>> relocator = default_relocator(system="Linux")
        >>> relocator.directory_fallback.command
        ('mv',)
        >>> default_relocator(system="Windows").directory_fallback.name
        'RobocopyStrategy'
    """
    if system is None:
        system = platform.system()

    if system == "Windows":
        return TreeRelocator(
            file_fallback=CopyTreeStrategy(),
            directory_fallback=RobocopyStrategy(runner=runner),
        )

    move = MoveCommandStrategy(runner=runner)
    return TreeRelocator(file_fallback=move, directory_fallback=move)


def relocate(source: PathType, destination: PathType, relocator: Optional[TreeRelocator] = None) -> None:
    """Move a file or directory tree using the platform default relocator.

    Args:
        source: Existing file or directory.
        destination: Target path. Its parent directory must already exist.
        relocator: Relocator to use instead of ``default_relocator()``.

    Raises:
        BenchFsError: If the move could not be completed. See TreeRelocator.relocate.
    """
    if relocator is None:
        relocator = default_relocator()
    relocator.relocate(source, destination)
