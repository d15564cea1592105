"""Relocation strategies that shell out to a platform move or copy tool."""

from typing import Optional, Sequence

from benchfs.process import ProcessRunner, SubprocessRunner, run_tool
from benchfs.types import PathType

from .base_strategy import RelocationStrategy, describe_move

# robocopy exit codes 0-7 report what was copied; 8 and above mean at least one failure
ROBOCOPY_FAILURE_THRESHOLD = 8


class MoveCommandStrategy(RelocationStrategy):
    """Moves a file or directory by running ``mv source destination``.

    ``mv`` handles cross-device moves by copying and deleting, so it covers the cases
    where a rename fails because the source and destination are on different mounts.
    Only exit status 0 is success.

    Attributes:
        command (Tuple[str, ...]): The program (and leading arguments) to run.
        runner (ProcessRunner): Runner used to start the process.
    """

    def __init__(self, command: Sequence[str] = ("mv",), runner: Optional[ProcessRunner] = None) -> None:
        self.command = tuple(command)
        self.runner = runner if runner is not None else SubprocessRunner()

    def relocate(self, source: PathType, destination: PathType) -> None:
        args = [*self.command, str(source), str(destination)]
        run_tool(self.runner, args, describe_move(source, destination))


class RobocopyStrategy(RelocationStrategy):
    """Moves a directory tree with ``robocopy source destination /s /e /move``.

    ``/s`` and ``/e`` copy every file and subdirectory, including empty ones, and the
    default extra argument ``/move`` deletes the source once copied. robocopy treats
    exit codes below 8 as success. A failed run can leave both trees populated.

    Attributes:
        extra_args (Tuple[str, ...]): Arguments appended after ``/s /e``.
        runner (ProcessRunner): Runner used to start the process.
    """

    def __init__(
        self,
        extra_args: Sequence[str] = ("/move",),
        program: str = "robocopy",
        runner: Optional[ProcessRunner] = None,
    ) -> None:
        self.extra_args = tuple(extra_args)
        self.program = program
        self.runner = runner if runner is not None else SubprocessRunner()

    def relocate(self, source: PathType, destination: PathType) -> None:
        args = [self.program, str(source), str(destination), "/s", "/e", *self.extra_args]
        run_tool(self.runner, args, describe_move(source, destination), success_below=ROBOCOPY_FAILURE_THRESHOLD)
