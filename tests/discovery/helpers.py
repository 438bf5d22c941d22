"""Shared test helpers for building fake Java installations.

Each helper creates a minimal but realistic directory layout under a
temporary root. ``FakeRunner`` stands in for ``ProcessRunner`` so tests
never spawn real programs.
"""

from __future__ import annotations

from pathlib import Path

from javainfo.core.process import ProcessOutput
from javainfo.discovery.config import DiscoveryConfig
from javainfo.exceptions import ProcessRunError


class FakeRunner:
    """In-memory replacement for ``ProcessRunner``.

    ``responses`` maps ``(program, arguments)`` to the output to return.
    Unknown commands raise ``ProcessRunError`` like a missing binary.
    """

    def __init__(self, responses: dict[tuple[str, str], ProcessOutput] | None = None) -> None:
        self.responses = dict(responses or {})
        self.calls: list[tuple[str, str]] = []

    def run(self, program: str, arguments: str = "") -> ProcessOutput:
        self.calls.append((program, arguments))
        key = (program, arguments)
        if key not in self.responses:
            raise ProcessRunError(program, arguments, "not found")
        return self.responses[key]


def create_jdk(root: Path, name: str, release: str | None = None) -> Path:
    """Create ``root/name/bin`` and optionally a release file.

    Returns:
        Path of the ``bin/java`` executable (not created).
    """
    home = root / name
    (home / "bin").mkdir(parents=True, exist_ok=True)
    if release is not None:
        (home / "release").write_text(release)
    return home / "bin" / "java"


def create_macos_bundle(jvm_dir: Path, name: str, release: str | None = None) -> Path:
    """Create a ``<name>.jdk/Contents/Home`` bundle under ``jvm_dir``."""
    return create_jdk(jvm_dir / name / "Contents", "Home", release)


def create_package_manager(bin_dir: Path, name: str) -> None:
    """Create an empty package-manager binary marker."""
    bin_dir.mkdir(parents=True, exist_ok=True)
    (bin_dir / name).write_text("")


def linux_config(tmp_path: Path, **overrides: object) -> DiscoveryConfig:
    """A Linux config whose directories all live under ``tmp_path``."""
    values: dict[str, object] = {
        "platform": "linux",
        "macos_jvm_dir": str(tmp_path / "JavaVirtualMachines"),
        "linux_jvm_roots": (
            str(tmp_path / "usr" / "lib" / "jvm"),
            str(tmp_path / "usr" / "lib64" / "jvm"),
        ),
        "package_manager_dir": str(tmp_path / "usr" / "bin"),
        "process_timeout": None,
    }
    values.update(overrides)
    return DiscoveryConfig(**values)  # type: ignore[arg-type]


def release_text(version: str) -> str:
    """A typical JDK release file declaring ``version``."""
    return (
        'IMPLEMENTOR="Eclipse Adoptium"\n'
        f'JAVA_VERSION="{version}"\n'
        'OS_NAME="Linux"\n'
    )
