"""Test configuration and fixtures for benchfs."""

import os
import shutil

import pytest

from benchfs.process import ProcessResult, ProcessRunner


class FakeRunner(ProcessRunner):
    """Records every command and answers with a scripted exit status.

    With ``perform_move`` set, each run moves ``args[1]`` to ``args[2]`` the way mv
    and robocopy /move would, so the postconditions of a relocation can be checked.
    """

    def __init__(self, returncode=0, stdout=b"", stderr=b"", launch_error=None, perform_move=False):
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        self.launch_error = launch_error
        self.perform_move = perform_move
        self.calls = []

    def run(self, args):
        self.calls.append(tuple(args))
        if self.launch_error is not None:
            raise self.launch_error
        if self.perform_move:
            shutil.move(args[1], args[2])
        return ProcessResult(tuple(args), self.returncode, self.stdout, self.stderr)


@pytest.fixture
def fake_runner():
    return FakeRunner()


@pytest.fixture
def make_runner():
    """Factory fixture for FakeRunner instances with custom behavior."""
    return FakeRunner


@pytest.fixture
def write_file():
    """Return a helper that writes ``size`` zero bytes to a path, creating parents."""

    def write(path, size=0):
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"\0" * size)
        return path

    return write


def set_old_mtime(path, seconds_ago=10_000):
    """Push a file's modification time into the past and return the new value."""
    stat_result = os.stat(path)
    old = stat_result.st_mtime - seconds_ago
    os.utime(path, (stat_result.st_atime, old))
    return os.stat(path).st_mtime


@pytest.fixture
def age_file():
    return set_old_mtime
