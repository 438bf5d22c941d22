"""Filesystem locations and limits used during discovery.

The defaults describe a real machine. Tests build a ``DiscoveryConfig``
pointing every directory at a temporary tree instead.
"""

from __future__ import annotations

from dataclasses import dataclass

MACOS_JVM_DIR = "/Library/Java/JavaVirtualMachines"
LINUX_JVM_ROOTS: tuple[str, ...] = ("/usr/lib/jvm", "/usr/lib64/jvm")
PACKAGE_MANAGER_DIR = "/usr/bin"

# Checked in this order; the first one present decides the distro family.
PACKAGE_MANAGERS: tuple[str, ...] = ("pacman", "apt", "yum", "dnf", "zypper")

DEFAULT_PROCESS_TIMEOUT = 30.0


@dataclass(frozen=True)
class DiscoveryConfig:
    """Where to look for Java installations.

    Attributes:
        platform: One of "windows", "macos", "linux", "unix". ``None``
            detects the running platform.
        macos_jvm_dir: Directory holding macOS ``*.jdk`` bundles.
        linux_jvm_roots: Candidate JVM roots; the first existing one wins.
        package_manager_dir: Directory probed for package-manager binaries.
        package_managers: Package managers in priority order.
        process_timeout: Seconds before a child process is killed.
            ``None`` waits forever.
    """

    platform: str | None = None
    macos_jvm_dir: str = MACOS_JVM_DIR
    linux_jvm_roots: tuple[str, ...] = LINUX_JVM_ROOTS
    package_manager_dir: str = PACKAGE_MANAGER_DIR
    package_managers: tuple[str, ...] = PACKAGE_MANAGERS
    process_timeout: float | None = DEFAULT_PROCESS_TIMEOUT
