"""Shared fixtures for javainfo tests."""

import pathlib

import pytest

from tests.discovery.helpers import FakeRunner


@pytest.fixture
def fake_runner() -> FakeRunner:
    """A process runner that knows no commands."""
    return FakeRunner()


@pytest.fixture
def jvm_root(tmp_path: pathlib.Path) -> pathlib.Path:
    """Create an empty ``usr/lib/jvm`` directory under tmp_path."""
    root = tmp_path / "usr" / "lib" / "jvm"
    root.mkdir(parents=True)
    return root


@pytest.fixture
def mixed_jvm_root(jvm_root: pathlib.Path) -> pathlib.Path:
    """A JVM root with a real JDK, a ``default`` link dir and a JRE."""
    for name in ("java-17-openjdk", "java-17-openjdk-default", "java-11-openjdk-jre"):
        (jvm_root / name / "bin").mkdir(parents=True)
    return jvm_root
