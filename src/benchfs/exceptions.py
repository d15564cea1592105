from typing import List, Optional, Sequence, Tuple

from benchfs.types import PathType


class BenchFsError(Exception):
    """Base class for every error raised by benchfs."""

    pass


class PathIOError(BenchFsError):
    """
    Exception raised when an underlying filesystem call fails.

    The error always names the operation that was attempted and the path it failed on.
    The originating ``OSError`` is chained as ``__cause__`` when the error is raised with
    ``raise ... from``, and its errno is copied for convenience.

    Attributes:
        operation (str): Human readable description of the attempted operation.
        path (str): The offending path.
        errno (Optional[int]): The errno of the originating OSError, if any.

    Example:
        >>> error = PathIOError("touching file", "/src/main.rs", PermissionError(13, "Permission denied"))
        >>> str(error)
        "touching file '/src/main.rs': Permission denied"
        >>> error.errno
        13
    """

    def __init__(self, operation: str, path: PathType, cause: Optional[OSError] = None) -> None:
        """
        Initialize the exception with its operation context.

        Args:
            operation (str): Description of the attempted operation, e.g. "deleting cache file".
            path (PathType): The path the operation failed on.
            cause (Optional[OSError]): The originating error. Its strerror (or message) is
                appended to the error message.
        """
        self.operation = operation
        self.path = str(path)
        self.errno = cause.errno if cause is not None else None
        message = f"{operation} {self.path!r}"
        if cause is not None:
            message = f"{message}: {cause.strerror or cause}"
        super().__init__(message)


class ExternalProcessError(BenchFsError):
    """
    Base class for errors raised while running an external tool.

    Attributes:
        operation (str): Description of what the tool was run for.
        command (Tuple[str, ...]): The full command line.
    """

    def __init__(self, operation: str, command: Sequence[str], message: str) -> None:
        self.operation = operation
        self.command = tuple(str(arg) for arg in command)
        super().__init__(message)


class ExternalProcessLaunchError(ExternalProcessError):
    """
    Exception raised when an external tool cannot be started at all.

    This is distinct from ExternalProcessFailedError so that a missing or non-executable
    binary can be told apart from a tool that ran and failed.

    Example:
        >>> error = ExternalProcessLaunchError("moving tree", ["mv", "a", "b"], FileNotFoundError(2, "No such file"))
        >>> str(error)
        "moving tree: could not start 'mv a b': No such file"
    """

    def __init__(self, operation: str, command: Sequence[str], cause: OSError) -> None:
        self.cause = cause
        joined = " ".join(str(arg) for arg in command)
        super().__init__(operation, command, f"{operation}: could not start {joined!r}: {cause.strerror or cause}")


class ExternalProcessFailedError(ExternalProcessError):
    """
    Exception raised when an external tool runs but reports failure.

    The captured standard output and error are decoded leniently and included in the
    error message.

    Attributes:
        returncode (int): The exit status of the tool. Negative values are signals.
        stdout (str): Captured standard output.
        stderr (str): Captured standard error.

    Example:
        >>> error = ExternalProcessFailedError("moving tree", ["mv", "a", "b"], 1, "", "mv: cannot stat 'a'")
        >>> error.returncode
        1
        >>> "cannot stat" in str(error)
        True
    """

    def __init__(self, operation: str, command: Sequence[str], returncode: int, stdout: str, stderr: str) -> None:
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        joined = " ".join(str(arg) for arg in command)
        super().__init__(
            operation,
            command,
            f"{operation}: {joined!r} exited with status {returncode}\n\nstderr={stderr}\n\nstdout={stdout}",
        )


class TreeCopyError(BenchFsError):
    """
    Exception raised when the owned copy-then-delete fallback cannot copy every entry.

    The source is left in place whenever this error is raised. The destination may be
    partially populated; cleaning it up is the caller's decision.

    Attributes:
        operation (str): Description of the attempted move.
        failures (List[Tuple[str, str, str]]): One ``(source, destination, reason)`` triple
            per entry that could not be copied.

    Example:
        >>> error = TreeCopyError("moving 'a' to 'b'", [("a/x.rs", "b/x.rs", "Permission denied")])
        >>> str(error)
        "moving 'a' to 'b': 1 entry could not be copied (first: a/x.rs: Permission denied)"
    """

    def __init__(self, operation: str, failures: Sequence[Tuple[str, str, str]]) -> None:
        self.operation = operation
        self.failures: List[Tuple[str, str, str]] = [(str(s), str(d), str(r)) for s, d, r in failures]
        count = len(self.failures)
        noun = "entry" if count == 1 else "entries"
        message = f"{operation}: {count} {noun} could not be copied"
        if self.failures:
            first_source, _, first_reason = self.failures[0]
            message = f"{message} (first: {first_source}: {first_reason})"
        super().__init__(message)
