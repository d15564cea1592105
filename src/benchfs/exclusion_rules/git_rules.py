"""Exclusion rules for the touch walk written in .gitignore pattern syntax."""

from os import PathLike
from pathlib import Path
from typing import Optional, Sequence, Union

from pathspec import PathSpec

from benchfs.types import PathType

from .base_rules import BaseExclusionRules


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Exclusion rules using .gitignore pattern syntax, matched with pathspec.

    Useful for keeping vendored crates or checked-in generated code out of a
    touch walk without changing the policy for the rest of the tree. Patterns
    support globs, directory patterns ending in ``/``, ``**`` and negation with ``!``.
    Later patterns override earlier ones.

    Attributes:
        spec (PathSpec): Compiled pattern matcher.

    Example:
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule("vendor/")
        >>> rules.add_rule("*_generated.rs")
        >>> rules.exclude("vendor/libc/src/lib.rs")
        True
        >>> rules.exclude("src/parser_generated.rs")
        True
        >>> rules.exclude("src/main.rs")
        False
    """

    def __init__(self, rules_files: Optional[Union[PathType, Sequence[PathType]]] = None):
        """Initialize the rules, optionally loading patterns from files.

        Args:
            rules_files: Path or paths to files containing .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self.spec = PathSpec.from_lines("gitwildmatch", [])

        if rules_files is not None:
            self.load_rules(rules_files)

    def exclude(self, path: str) -> bool:
        return self.spec.match_file(path)

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Append the patterns from one or more files, in order.

        Args:
            rules_files: Path or paths to files containing .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

            with open(path, "r") as f:
                lines = f.read().splitlines()

            self._extend(lines)

    def add_rule(self, rule: str) -> None:
        """Append a single .gitignore pattern, e.g. ``"vendor/"`` or ``"!src/keep.rs"``."""
        self._extend([rule])

    def _extend(self, lines: Sequence[str]) -> None:
        # PathSpec compiles its patterns when constructed
        new_patterns = PathSpec.from_lines("gitwildmatch", lines).patterns
        self.spec = PathSpec([*self.spec.patterns, *new_patterns])
