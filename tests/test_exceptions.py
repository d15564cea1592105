"""Tests for custom exceptions."""

from benchfs.exceptions import (
    BenchFsError,
    ExternalProcessError,
    ExternalProcessFailedError,
    ExternalProcessLaunchError,
    PathIOError,
    TreeCopyError,
)


class TestPathIOError:
    """Test PathIOError exception."""

    def test_path_io_error_with_cause(self):
        cause = PermissionError(13, "Permission denied")
        error = PathIOError("deleting build cache", "/ws/CMakeCache.txt", cause)

        assert error.path == "/ws/CMakeCache.txt"
        assert error.operation == "deleting build cache"
        assert error.errno == 13
        assert str(error) == "deleting build cache '/ws/CMakeCache.txt': Permission denied"

    def test_path_io_error_without_cause(self):
        error = PathIOError("walking directory", "/ws")
        assert error.errno is None
        assert str(error) == "walking directory '/ws'"

    def test_path_io_error_is_bench_fs_error(self):
        assert isinstance(PathIOError("touching file", "x"), BenchFsError)


class TestExternalProcessErrors:
    """Test the external process error hierarchy."""

    def test_launch_and_failure_are_distinct(self):
        launch = ExternalProcessLaunchError("moving", ["mv", "a", "b"], FileNotFoundError(2, "No such file"))
        failed = ExternalProcessFailedError("moving", ["mv", "a", "b"], 1, "", "boom")

        assert isinstance(launch, ExternalProcessError)
        assert isinstance(failed, ExternalProcessError)
        assert not isinstance(launch, ExternalProcessFailedError)
        assert not isinstance(failed, ExternalProcessLaunchError)

    def test_launch_error_message(self):
        error = ExternalProcessLaunchError("moving tree", ["robocopy", "a", "b"], FileNotFoundError(2, "No such file"))
        assert str(error) == "moving tree: could not start 'robocopy a b': No such file"
        assert error.command == ("robocopy", "a", "b")

    def test_failed_error_message_contains_streams(self):
        error = ExternalProcessFailedError("moving tree", ["mv", "a", "b"], 1, "some output", "some error")
        message = str(error)
        assert "exited with status 1" in message
        assert "stderr=some error" in message
        assert "stdout=some output" in message


class TestTreeCopyError:
    """Test TreeCopyError exception."""

    def test_tree_copy_error_lists_failures(self):
        failures = [("a/x.rs", "b/x.rs", "Permission denied"), ("a/y.rs", "b/y.rs", "No space left on device")]
        error = TreeCopyError("moving 'a' to 'b'", failures)

        assert error.failures == failures
        assert str(error) == "moving 'a' to 'b': 2 entries could not be copied (first: a/x.rs: Permission denied)"

    def test_tree_copy_error_single_failure(self):
        error = TreeCopyError("moving 'a' to 'b'", [("a", "b", "Read-only file system")])
        assert "1 entry could not be copied" in str(error)
