"""Running external tools with captured output and exit status classification.

The relocation fallbacks shell out to platform tools. This module keeps that
behind a narrow interface so the strategies can be exercised with a fake runner.
"""

import logging
import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence, Tuple

from benchfs.exceptions import ExternalProcessFailedError, ExternalProcessLaunchError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProcessResult:
    """The outcome of running an external tool to completion.

    Attributes:
        args: The command line that was run.
        returncode: The exit status. Negative values mean the process was killed by a signal.
        stdout: Captured standard output.
        stderr: Captured standard error.
    """

    args: Tuple[str, ...]
    returncode: int
    stdout: bytes = b""
    stderr: bytes = b""


class ProcessRunner(ABC):
    """Abstract interface for starting a tool and waiting for it to finish."""

    @abstractmethod
    def run(self, args: Sequence[str]) -> ProcessResult:
        """Run a command to completion, capturing both output streams.

        Args:
            args: Program followed by its arguments.

        Returns:
            ProcessResult: Exit status and captured output.

        Raises:
            OSError: If the program could not be started.
        """
        pass


class SubprocessRunner(ProcessRunner):
    """ProcessRunner backed by ``subprocess.run``.

    Standard input is closed and both output streams are captured, so a tool never
    inherits the caller's console.
    """

    def run(self, args: Sequence[str]) -> ProcessResult:
        command = tuple(str(arg) for arg in args)
        completed = subprocess.run(command, stdin=subprocess.DEVNULL, capture_output=True, check=False)
        return ProcessResult(command, completed.returncode, completed.stdout, completed.stderr)


def run_tool(runner: ProcessRunner, args: Sequence[str], operation: str, success_below: int = 1) -> ProcessResult:
    """Run an external tool and classify its exit status.

    A run is successful when ``0 <= returncode < success_below``. Most tools only
    report success with 0 (the default); tools such as robocopy use small positive
    codes to report successful copies and need a higher threshold.

    Args:
        runner: The runner that starts the process.
        args: Program followed by its arguments.
        operation: Description of what the tool is run for, used in errors.
        success_below: Exclusive upper bound of the exit statuses that mean success.

    Returns:
        ProcessResult: The result of a successful run.

    Raises:
        ExternalProcessLaunchError: If the tool could not be started.
        ExternalProcessFailedError: If the tool exited with a failure status.

    Example:
        >>> class EchoRunner(ProcessRunner):
        ...     def run(self, args):
        ...         return ProcessResult(tuple(args), 3)
        >>> run_tool(EchoRunner(), ["robocopy", "a", "b"], "copying", success_below=8).returncode
        3
    """
    command = tuple(str(arg) for arg in args)
    logger.debug("running %s", " ".join(command))

    try:
        result = runner.run(command)
    except OSError as e:
        raise ExternalProcessLaunchError(operation, command, e) from e

    if not 0 <= result.returncode < success_below:
        raise ExternalProcessFailedError(
            operation,
            command,
            result.returncode,
            result.stdout.decode("utf-8", errors="replace"),
            result.stderr.decode("utf-8", errors="replace"),
        )

    return result
