"""Per-platform strategies that enumerate candidate Java executables.

Each ``Locator`` returns a frozenset of ``Installation`` values with an
empty version. ``select_locator`` picks exactly one strategy for the
configured platform; the orchestrator then treats them all alike.

Platform Notes:
    Windows asks ``where.exe`` for every ``javaw.exe`` on PATH.
    macOS lists the bundles under ``/Library/Java/JavaVirtualMachines``.
    Linux lists the JVM root and filters it by package manager, falling
    back to ``which java`` when no known package manager is installed.
    Any other Unix only reports the ``java`` on PATH.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path

from javainfo.core.process import ProcessRunner
from javainfo.discovery import platforms
from javainfo.discovery.config import DiscoveryConfig
from javainfo.discovery.linux import filter_jvm_dirs, list_subdirectories
from javainfo.discovery.models import Installation
from javainfo.exceptions import ProcessRunError

logger = logging.getLogger(__name__)


class Locator(ABC):
    """Strategy interface: find candidate installations for one platform."""

    name: str = ""

    @abstractmethod
    def locate(self) -> frozenset[Installation]:
        """Return the candidate installations, versions unset."""


class NullLocator(Locator):
    """Used when there is nowhere to look."""

    name = "none"

    def locate(self) -> frozenset[Installation]:
        return frozenset()


class CommandLocator(Locator):
    """Runs a lookup command and turns each output line into a candidate."""

    program: str = ""
    arguments: str = ""

    def __init__(self, runner: ProcessRunner) -> None:
        self.runner = runner

    def locate(self) -> frozenset[Installation]:
        try:
            output = self.runner.run(self.program, self.arguments)
        except ProcessRunError as exc:
            logger.debug("%s lookup failed: %s", self.name, exc)
            return frozenset()
        return frozenset(Installation(line) for line in output.lines())


class WindowsLocator(CommandLocator):
    name = "windows"
    program = "where.exe"
    arguments = "javaw.exe"


class GenericUnixLocator(CommandLocator):
    name = "unix"
    program = "which"
    arguments = "java"


class LinuxFallbackLocator(GenericUnixLocator):
    """Linux without a recognised package manager: only the java on PATH."""

    name = "linux-fallback"


class MacOSLocator(Locator):
    """Finds ``<bundle>/Contents/Home/bin/java`` under the JVM directory."""

    name = "macos"

    def __init__(self, jvm_dir: str) -> None:
        self.jvm_dir = Path(jvm_dir)

    def locate(self) -> frozenset[Installation]:
        found: set[Installation] = set()
        for bundle in list_subdirectories(self.jvm_dir):
            bin_dir = bundle / "Contents" / "Home" / "bin"
            try:
                if not bin_dir.is_dir():
                    continue
            except OSError:
                continue
            found.add(Installation(str(bin_dir / "java")))
        return frozenset(found)


class LinuxDistroLocator(Locator):
    """Lists a JVM root and applies one package manager's exclusion rule."""

    package_manager: str = ""

    def __init__(self, jvm_root: Path) -> None:
        self.jvm_root = jvm_root

    def locate(self) -> frozenset[Installation]:
        entries = list_subdirectories(self.jvm_root)
        return filter_jvm_dirs(entries, self.package_manager)


class LinuxPacmanLocator(LinuxDistroLocator):
    name = "linux-pacman"
    package_manager = "pacman"


class LinuxAptLocator(LinuxDistroLocator):
    name = "linux-apt"
    package_manager = "apt"


class LinuxYumDnfLocator(LinuxDistroLocator):
    name = "linux-yum-dnf"
    package_manager = "yum"


class LinuxZypperLocator(LinuxDistroLocator):
    name = "linux-zypper"
    package_manager = "zypper"


_DISTRO_LOCATORS: dict[str, type[LinuxDistroLocator]] = {
    "pacman": LinuxPacmanLocator,
    "apt": LinuxAptLocator,
    "yum": LinuxYumDnfLocator,
    "dnf": LinuxYumDnfLocator,
    "zypper": LinuxZypperLocator,
}


def select_locator(config: DiscoveryConfig, runner: ProcessRunner) -> Locator:
    """Pick the locator for the configured (or running) platform.

    Args:
        config: Directories and platform override.
        runner: Process runner handed to command-based locators.

    Returns:
        Exactly one ``Locator``. First match wins.
    """
    system = config.platform or platforms.current_platform()
    if system == platforms.WINDOWS:
        locator: Locator = WindowsLocator(runner)
    elif system == platforms.MACOS:
        locator = MacOSLocator(config.macos_jvm_dir)
    elif system == platforms.LINUX:
        locator = _select_linux_locator(config, runner)
    else:
        locator = GenericUnixLocator(runner)
    logger.debug("Using %s locator", locator.name)
    return locator


def _select_linux_locator(config: DiscoveryConfig, runner: ProcessRunner) -> Locator:
    jvm_root = platforms.find_jvm_root(config.linux_jvm_roots)
    if jvm_root is None:
        return NullLocator()
    manager = platforms.detect_package_manager(
        config.package_manager_dir, config.package_managers,
    )
    if manager is None or manager not in _DISTRO_LOCATORS:
        return LinuxFallbackLocator(runner)
    return _DISTRO_LOCATORS[manager](jvm_root)
