"""Two-tier version resolution for a discovered Java executable.

Resolution Algorithm:
    1. Derive the installation's ``release`` file from the executable path
       (``<root>/bin/java`` -> ``<root>/release``).
    2. If the file exists, scan it for the ``JAVA_VERSION=`` line.
    3. Otherwise, or when the scan ends on an unterminated final line,
       run ``<root>/bin/java -version`` and take the first double-quoted
       token from its stderr banner.

Two fixed strings stand in for a version when the metadata file is
present but unusable:

- ``CANNOT_OPEN_METADATA``: the file exists but could not be opened.
- ``UNKNOWN_VERSION``: a read came back empty before the token was found.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import TextIO

from javainfo.core.process import ProcessRunner
from javainfo.discovery.models import Installation
from javainfo.exceptions import ProcessRunError

logger = logging.getLogger(__name__)

CANNOT_OPEN_METADATA = "cannot open metadata"
UNKNOWN_VERSION = "unknown version"

VERSION_TOKEN = "JAVA_VERSION="
RELEASE_FILE = "release"

_QUOTED_RE = re.compile(r'"(.*?)"')

# (executable suffix in a candidate path, executable run for ``-version``)
_UNIX_SUFFIXES = ("bin/java", "bin/java")
_WINDOWS_SUFFIXES = ("bin\\javaw.exe", "bin\\java.exe")


class VersionResolver:
    """Populates the ``version`` of candidate installations.

    Args:
        runner: Process runner used for the ``-version`` fallback.
        windows: Use Windows executable names and separators.
    """

    def __init__(self, runner: ProcessRunner | None = None, windows: bool = False) -> None:
        self.runner = runner if runner is not None else ProcessRunner()
        self.windows = windows
        self._candidate_suffix, self._executable_suffix = (
            _WINDOWS_SUFFIXES if windows else _UNIX_SUFFIXES
        )

    def resolve(self, installation: Installation) -> Installation:
        """Return a copy of ``installation`` with its version filled in."""
        release = self.release_path(installation.path)
        if release is None:
            version = self.version_from_process(installation.path)
        else:
            version = self.version_from_release(release)
        logger.debug("Resolved %s -> %r", installation.path, version)
        return installation.with_version(version)

    def release_path(self, executable: str) -> str | None:
        """Map ``<root>/bin/java`` to ``<root>/release``.

        Returns ``None`` when the path does not end with the executable
        suffix, since no installation root can be derived from it.
        """
        if not executable.endswith(self._candidate_suffix):
            return None
        return executable[: -len(self._candidate_suffix)] + RELEASE_FILE

    def executable_path(self, release: str) -> str:
        """Map ``<root>/release`` back to the executable run for ``-version``."""
        if release.endswith(RELEASE_FILE):
            return release[: -len(RELEASE_FILE)] + self._executable_suffix
        return release

    def version_from_release(self, release: str) -> str:
        """Resolve a version from a release file, falling back to the process."""
        try:
            present = Path(release).is_file()
        except OSError:
            present = False
        if not present:
            return self.version_from_process(self.executable_path(release))
        try:
            with open(release, encoding="utf-8", errors="replace", newline="") as fh:
                version = read_release(fh)
        except OSError:
            logger.debug("Cannot open %s", release, exc_info=True)
            return CANNOT_OPEN_METADATA
        if version is None:
            return self.version_from_process(self.executable_path(release))
        return version

    def version_from_process(self, executable: str) -> str:
        """Run ``<executable> -version`` and extract the quoted version."""
        try:
            output = self.runner.run(executable, "-version")
        except ProcessRunError as exc:
            logger.debug("No version banner from %s: %s", executable, exc)
            return ""
        # java prints its banner on stderr, not stdout
        return parse_version_banner(output.stderr)


def read_release(fh: TextIO) -> str | None:
    """Scan an open release file for the ``JAVA_VERSION=`` entry.

    Returns:
        The version text, ``UNKNOWN_VERSION`` when a read comes back empty
        before the token is found, or ``None`` when the scan ends on an
        unterminated final line (the caller then asks the process).
    """
    while True:
        line = fh.readline()
        if not line:
            return UNKNOWN_VERSION
        if VERSION_TOKEN in line:
            value = line.split(VERSION_TOKEN, 1)[1]
            return value.strip().strip('"')
        if not line.endswith(("\n", "\r")):
            return None


def parse_version_banner(text: str) -> str:
    """Return the first double-quoted substring of ``text``, or ``""``."""
    match = _QUOTED_RE.search(text)
    return match.group(1) if match else ""
