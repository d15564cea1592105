import logging
import os
import shutil
from typing import List, Tuple

from benchfs.exceptions import PathIOError, TreeCopyError
from benchfs.types import PathType

from .base_strategy import RelocationStrategy, describe_move

logger = logging.getLogger(__name__)

CopyFailure = Tuple[str, str, str]


class CopyTreeStrategy(RelocationStrategy):
    """Moves a file or directory by copying it and then deleting the source.

    Works across filesystems without any external tool. Modification times are
    preserved (``shutil.copy2``) and symbolic links are copied as links. Every entry
    that fails to copy is collected; if there is at least one failure the source is
    kept and a single TreeCopyError lists them all. The partially populated
    destination is not removed.

    Example:
        >>> CopyTreeStrategy().relocate("/mnt/tmpfs/build", "/data/build")  # doctest: +SKIP
    """

    def relocate(self, source: PathType, destination: PathType) -> None:
        operation = describe_move(source, destination)
        is_directory = os.path.isdir(source) and not os.path.islink(source)

        if is_directory:
            failures = self._copy_tree(source, destination)
        else:
            failures = self._copy_file(source, destination)

        if failures:
            raise TreeCopyError(operation, failures)

        logger.debug("copied %s to %s, removing source", source, destination)
        try:
            if is_directory:
                shutil.rmtree(source)
            else:
                os.remove(source)
        except OSError as e:
            failed_path = e.filename if e.filename is not None else source
            raise PathIOError(f"{operation}: deleting source after copy", failed_path, e) from e

    @staticmethod
    def _copy_file(source: PathType, destination: PathType) -> List[CopyFailure]:
        try:
            shutil.copy2(source, destination, follow_symlinks=False)
        except OSError as e:
            return [(str(source), str(destination), e.strerror or str(e))]
        return []

    @staticmethod
    def _copy_tree(source: PathType, destination: PathType) -> List[CopyFailure]:
        try:
            shutil.copytree(source, destination, symlinks=True, dirs_exist_ok=True)
        except shutil.Error as e:
            # copytree keeps going after per-entry failures and reports them together
            return [(str(src), str(dst), str(reason)) for src, dst, reason in e.args[0]]
        except OSError as e:
            return [(str(source), str(destination), e.strerror or str(e))]
        return []
