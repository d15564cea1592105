from abc import ABC, abstractmethod


class BaseExclusionRules(ABC):
    """
    Abstract base class for rules that keep files out of a selective touch.

    The built-in TouchPolicy decides which files are compilable sources. Exclusion rules
    are an additional, caller supplied filter applied after the policy has accepted a file:
    they can only remove files from the touch set, never add to it, and they never stop
    a cache marker from being deleted.

    Example:
        >>> class VendorRules(BaseExclusionRules):
        ...     def exclude(self, path: str) -> bool:
        ...         return path.startswith("vendor/")
        >>> rules = VendorRules()
        >>> rules.exclude("vendor/libc/src/lib.rs")
        True
        >>> rules.exclude("src/main.rs")
        False
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if a path should be left untouched.

        Args:
            path (str): The path to check, relative to the root of the walk and using
                forward slashes as separators.

        Returns:
            bool: True if the path should be excluded, False otherwise.
        """
        pass
