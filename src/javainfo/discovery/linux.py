"""Package-manager-aware filtering of Linux JVM directories.

Distributions lay out ``/usr/lib/jvm`` differently. Arch keeps a mutable
``default`` symlink next to the real runtimes, Red Hat and openSUSE ship
separate JRE-only packages, and Debian-family systems have neither. The
rule for each package manager drops the entries that would otherwise
duplicate or misrepresent a real installation.

Rule table:
    pacman        -- skip paths containing "default"
    apt           -- keep everything
    yum / dnf     -- skip paths containing "jre"
    zypper        -- skip paths containing "jre"
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from javainfo.discovery.models import Installation

logger = logging.getLogger(__name__)

EXCLUSION_RULES: dict[str, str | None] = {
    "pacman": "default",
    "apt": None,
    "yum": "jre",
    "dnf": "jre",
    "zypper": "jre",
}


def list_subdirectories(root: Path) -> list[Path]:
    """Immediate subdirectories of ``root``; empty when it cannot be read."""
    try:
        entries = sorted(root.iterdir())
    except OSError:
        logger.debug("Cannot list %s", root, exc_info=True)
        return []
    dirs: list[Path] = []
    for entry in entries:
        try:
            if entry.is_dir():
                dirs.append(entry)
        except OSError:
            continue
    return dirs


def is_excluded(entry: Path, package_manager: str) -> bool:
    """Whether the package manager's rule drops this JVM directory.

    The marker is matched against the whole directory path, so a JVM root
    that itself contains the marker excludes every entry below it.
    """
    marker = EXCLUSION_RULES.get(package_manager)
    return marker is not None and marker in str(entry)


def filter_jvm_dirs(
    entries: Iterable[Path],
    package_manager: str,
) -> frozenset[Installation]:
    """Apply the distro rule and build ``<dir>/bin/java`` candidates.

    Args:
        entries: Immediate subdirectories of the JVM root.
        package_manager: Key into ``EXCLUSION_RULES``.

    Returns:
        One candidate per kept directory that has a ``bin`` folder.
    """
    if package_manager not in EXCLUSION_RULES:
        raise ValueError(f"Unknown package manager: {package_manager!r}")
    found: set[Installation] = set()
    for entry in entries:
        if is_excluded(entry, package_manager):
            logger.debug("Skipping %s (%s rule)", entry, package_manager)
            continue
        bin_dir = entry / "bin"
        try:
            has_bin = bin_dir.is_dir()
        except OSError:
            has_bin = False
        if has_bin:
            found.add(Installation(str(bin_dir / "java")))
    return frozenset(found)
