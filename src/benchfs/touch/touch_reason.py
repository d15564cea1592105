"""Reasons reported by the touch policy for accepting or rejecting a path."""

from enum import Enum


class TouchReason(str, Enum):
    """Why a path was accepted or rejected by the touch policy.

    Values:
        ACCEPTED: A compilable source file that will be touched
        RESERVED_DIRECTORY: Lies under a reserved build output directory such as ``target``
        BUILD_SCRIPT: The build script file, whose timestamp triggers a build script re-run
        WRONG_EXTENSION: Not a compilable source file (other or missing extension)
    """

    ACCEPTED = "accepted"
    RESERVED_DIRECTORY = "reserved_directory"
    BUILD_SCRIPT = "build_script"
    WRONG_EXTENSION = "wrong_extension"
