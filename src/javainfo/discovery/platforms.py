"""Operating-system and package-manager detection."""

from __future__ import annotations

import platform
from pathlib import Path

WINDOWS = "windows"
MACOS = "macos"
LINUX = "linux"
UNIX = "unix"

PLATFORMS: tuple[str, ...] = (WINDOWS, MACOS, LINUX, UNIX)


def current_platform() -> str:
    """Return the platform identifier for the running interpreter."""
    system = platform.system().lower()
    if system == "windows":
        return WINDOWS
    if system == "darwin":
        return MACOS
    return LINUX if system == "linux" else UNIX


def find_jvm_root(roots: tuple[str, ...]) -> Path | None:
    """Return the first existing JVM root directory, or ``None``."""
    for root in roots:
        candidate = Path(root)
        try:
            if candidate.is_dir():
                return candidate
        except OSError:
            continue
    return None


def detect_package_manager(bin_dir: str, managers: tuple[str, ...]) -> str | None:
    """Return the first package manager whose binary exists in ``bin_dir``."""
    for name in managers:
        try:
            if (Path(bin_dir) / name).is_file():
                return name
        except OSError:
            continue
    return None
