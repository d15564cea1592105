"""Relocation of files and directory trees across filesystem boundaries."""

from .base_strategy import RelocationStrategy
from .command_strategies import MoveCommandStrategy, RobocopyStrategy
from .copy_strategy import CopyTreeStrategy
from .relocator import TreeRelocator, default_relocator, relocate
from .rename_strategy import RenameStrategy

__all__ = [
    "CopyTreeStrategy",
    "MoveCommandStrategy",
    "RelocationStrategy",
    "RenameStrategy",
    "RobocopyStrategy",
    "TreeRelocator",
    "default_relocator",
    "relocate",
]
