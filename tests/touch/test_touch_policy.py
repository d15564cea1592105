"""Unit tests for the touch inclusion policy."""

from pathlib import PurePosixPath, PureWindowsPath

import pytest

from benchfs.touch.touch_policy import TouchDecision, TouchPolicy
from benchfs.touch.touch_reason import TouchReason


@pytest.fixture
def policy():
    return TouchPolicy()


@pytest.mark.parametrize(
    "path,expected",
    [
        ("src/main.rs", TouchReason.ACCEPTED),
        ("a/b/c.rs", TouchReason.ACCEPTED),
        ("/abs/workspace/src/lib.rs", TouchReason.ACCEPTED),
        ("lib.rs", TouchReason.ACCEPTED),
        # Reserved build output directory at any depth
        ("target/debug/build/foo/out/bindings.rs", TouchReason.RESERVED_DIRECTORY),
        ("a/target/d.rs", TouchReason.RESERVED_DIRECTORY),
        ("/abs/target/workspace/src/lib.rs", TouchReason.RESERVED_DIRECTORY),
        ("a/target/notes.txt", TouchReason.RESERVED_DIRECTORY),
        # Component must match exactly
        ("targets/d.rs", TouchReason.ACCEPTED),
        ("my-target/d.rs", TouchReason.ACCEPTED),
        ("src/target.rs", TouchReason.ACCEPTED),
        # Build script
        ("build.rs", TouchReason.BUILD_SCRIPT),
        ("a/build.rs", TouchReason.BUILD_SCRIPT),
        ("crates/sys/build.rs", TouchReason.BUILD_SCRIPT),
        ("a/target/build.rs", TouchReason.RESERVED_DIRECTORY),
        ("src/build.rs.bak", TouchReason.WRONG_EXTENSION),
        ("src/rebuild.rs", TouchReason.ACCEPTED),
        # Wrong or missing extension
        ("Cargo.toml", TouchReason.WRONG_EXTENSION),
        ("README", TouchReason.WRONG_EXTENSION),
        ("src/main.RS", TouchReason.WRONG_EXTENSION),
        ("src/main.rs.orig", TouchReason.WRONG_EXTENSION),
        (".rs", TouchReason.WRONG_EXTENSION),
    ],
)
def test_evaluate(policy, path, expected):
    decision = policy.evaluate(path)
    assert decision.reason == expected
    assert decision.accepted is (expected == TouchReason.ACCEPTED)


def test_evaluate_accepts_path_objects(policy):
    assert policy.evaluate(PurePosixPath("a/b/c.rs")) == TouchDecision(True, TouchReason.ACCEPTED)
    assert policy.evaluate(PureWindowsPath(r"C:\ws\target\d.rs")).reason == TouchReason.RESERVED_DIRECTORY


def test_evaluate_is_deterministic(policy):
    decisions = {policy.evaluate("a/b/c.rs") for _ in range(5)}
    assert decisions == {TouchDecision(True, TouchReason.ACCEPTED)}


def test_is_cache_marker(policy):
    assert policy.is_cache_marker("CMakeCache.txt")
    assert policy.is_cache_marker("deps/zlib/build/CMakeCache.txt")
    assert not policy.is_cache_marker("deps/zlib/CMakeCache.txt.bak")
    assert not policy.is_cache_marker("cmakecache.txt")
    assert not policy.is_cache_marker("CMakeCache.txt/inner.rs")


def test_custom_policy():
    policy = TouchPolicy(
        source_extension=".c",
        build_script_name="configure.c",
        reserved_directories=frozenset({"out", "dist"}),
        cache_marker_names=frozenset({"config.cache"}),
    )
    assert policy.evaluate("src/main.c").accepted
    assert policy.evaluate("src/main.rs").reason == TouchReason.WRONG_EXTENSION
    assert policy.evaluate("dist/main.c").reason == TouchReason.RESERVED_DIRECTORY
    assert policy.evaluate("out/x/main.c").reason == TouchReason.RESERVED_DIRECTORY
    assert policy.evaluate("target/main.c").accepted
    assert policy.evaluate("configure.c").reason == TouchReason.BUILD_SCRIPT
    assert policy.is_cache_marker("config.cache")
    assert not policy.is_cache_marker("CMakeCache.txt")


def test_policy_is_immutable(policy):
    with pytest.raises(AttributeError):
        policy.source_extension = ".c"


def test_touch_reason_values():
    assert TouchReason.ACCEPTED == "accepted"
    assert TouchReason.RESERVED_DIRECTORY == "reserved_directory"
    assert TouchReason.BUILD_SCRIPT == "build_script"
    assert TouchReason.WRONG_EXTENSION == "wrong_extension"
    assert TouchReason("build_script") is TouchReason.BUILD_SCRIPT
