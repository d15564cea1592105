"""Selective timestamp reset over a directory tree.

Touching compilable sources forces the compiler to rebuild them on the next run,
while build outputs and build scripts keep their real timestamps. Build cache
marker files found during the walk are deleted.
"""

import logging
import os
import time
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path, PurePath
from typing import List, Optional

from benchfs.exceptions import PathIOError
from benchfs.exclusion_rules.base_rules import BaseExclusionRules
from benchfs.touch.touch_policy import TouchPolicy
from benchfs.types import PathType

logger = logging.getLogger(__name__)


def touch_file(path: PathType) -> None:
    """Reset the modification time of a file to the current time.

    The access time is left as it was.

    Args:
        path: The file to touch. Symlinks are followed.

    Raises:
        PathIOError: If the timestamp cannot be set.
    """
    logger.debug("touching file %s", path)
    try:
        stat_result = os.stat(path)
        os.utime(path, ns=(stat_result.st_atime_ns, time.time_ns()))
    except OSError as e:
        raise PathIOError("touching file", path, e) from e


@dataclass
class TouchReport:
    """What a SelectiveTouch walk did.

    Attributes:
        touched: Files whose modification time was reset.
        deleted: Cache marker files that were removed.
        skipped: Number of files left alone, by reason. Files dropped by exclusion
            rules are not counted here; see ``excluded``.
        excluded: Files the policy accepted but the exclusion rules removed.
    """

    touched: List[Path] = field(default_factory=list)
    deleted: List[Path] = field(default_factory=list)
    skipped: Counter = field(default_factory=Counter)
    excluded: List[Path] = field(default_factory=list)


class SelectiveTouch:
    """Walks a tree touching compilable sources and deleting build cache files.

    Every entry reachable through directories is visited. Symbolic links to
    directories are not descended into; a symbolic link to a regular file is
    touched through the link. An entry whose name matches a cache marker is
    deleted; every other regular file is checked against the policy and, if
    accepted and not excluded by the optional rules, touched.

    Attributes:
        root_path (Path): The root of the walk.
        policy (TouchPolicy): Inclusion policy and cache marker names.
        exclusion_rules (Optional[BaseExclusionRules]): Extra rules consulted with the
            path relative to the root.

    Example:
        >>> walker = SelectiveTouch("/path/to/workspace")  # doctest: +SKIP
        >>> report = walker.run()  # doctest: +SKIP
        >>> len(report.touched)  # doctest: +SKIP
        128
    """

    def __init__(
        self,
        root_path: PathType,
        policy: Optional[TouchPolicy] = None,
        exclusion_rules: Optional[BaseExclusionRules] = None,
    ) -> None:
        self.root_path = Path(root_path)
        self.policy = policy if policy is not None else TouchPolicy()
        self.exclusion_rules = exclusion_rules

    def run(self) -> TouchReport:
        """Walk the tree once.

        Returns:
            TouchReport: The files touched, deleted and skipped.

        Raises:
            PathIOError: If the root cannot be walked, a cache file cannot be deleted,
                or a file cannot be touched. The walk stops at the first error.
        """
        report = TouchReport()

        if os.path.isfile(self.root_path):
            self._visit(self.root_path, report)
            return report

        for dirpath, dirnames, filenames in os.walk(self.root_path, onerror=self._raise_walk_error):
            for name in dirnames + filenames:
                self._visit(Path(dirpath, name), report)

        return report

    def _visit(self, path: Path, report: TouchReport) -> None:
        if self.policy.is_cache_marker(path):
            logger.debug("deleting build cache %s", path)
            try:
                os.remove(path)
            except OSError as e:
                raise PathIOError("deleting build cache", path, e) from e
            report.deleted.append(path)
            return

        decision = self.policy.evaluate(path)
        if not decision.accepted:
            if os.path.isfile(path):
                report.skipped[decision.reason] += 1
            return

        # Directories and special files with a source extension are never touched
        if not os.path.isfile(path):
            return

        if self.exclusion_rules is not None and self.exclusion_rules.exclude(self._relative(path)):
            report.excluded.append(path)
            return

        touch_file(path)
        report.touched.append(path)

    def _relative(self, path: Path) -> str:
        if path == self.root_path:
            return path.name
        try:
            return PurePath(path).relative_to(self.root_path).as_posix()
        except ValueError:
            return PurePath(path).as_posix()

    @staticmethod
    def _raise_walk_error(error: OSError) -> None:
        path = error.filename if error.filename is not None else ""
        raise PathIOError("walking directory", path, error) from error


def touch_tree(
    root: PathType,
    policy: Optional[TouchPolicy] = None,
    exclusion_rules: Optional[BaseExclusionRules] = None,
) -> None:
    """Reset the modification time of every compilable source under ``root``.

    Files under a reserved build output directory and the build script are left
    alone, and build cache marker files are deleted along the way.

    Args:
        root: Directory (or single file) to walk.
        policy: Inclusion policy. Defaults to ``TouchPolicy()``.
        exclusion_rules: Optional extra rules that keep matching files untouched.

    Raises:
        PathIOError: On the first filesystem failure.
    """
    report = SelectiveTouch(root, policy, exclusion_rules).run()
    logger.debug(
        "touched %d files and deleted %d build caches under %s", len(report.touched), len(report.deleted), root
    )
