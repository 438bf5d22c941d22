"""Top-level discovery: locate candidates, then resolve every version.

Discovery Algorithm:
    1. Select the locator for the current platform (``select_locator``).
    2. Collect its candidate installations.
    3. Resolve each candidate's version into a new set of values.

A failure while resolving one candidate is recorded as a sentinel version
string on that candidate and never stops the others.
"""

from __future__ import annotations

import logging

from javainfo.core.process import ProcessRunner
from javainfo.core.version import VersionResolver
from javainfo.discovery import platforms
from javainfo.discovery.config import DiscoveryConfig
from javainfo.discovery.locators import Locator, select_locator
from javainfo.discovery.models import Installation

logger = logging.getLogger(__name__)


class JavaFinder:
    """Discovers all Java installations on this machine.

    Usage::

        finder = JavaFinder()
        for java in sorted(finder.find_all(), key=lambda j: j.path):
            print(java.path, java.version)
    """

    def __init__(
        self,
        config: DiscoveryConfig | None = None,
        runner: ProcessRunner | None = None,
    ) -> None:
        self.config = config if config is not None else DiscoveryConfig()
        self.runner = runner if runner is not None else ProcessRunner(
            timeout=self.config.process_timeout,
        )
        self.platform = self.config.platform or platforms.current_platform()
        self.resolver = VersionResolver(
            self.runner, windows=self.platform == platforms.WINDOWS,
        )

    def locator(self) -> Locator:
        """The locator strategy for the configured platform."""
        return select_locator(self.config, self.runner)

    def find_all(self) -> frozenset[Installation]:
        """Locate every candidate and resolve its version."""
        candidates = self.locator().locate()
        logger.debug("Found %d candidate installation(s)", len(candidates))
        return frozenset(self.resolver.resolve(c) for c in candidates)

    def resolve(self, path: str) -> Installation:
        """Resolve the version of a single java executable path."""
        return self.resolver.resolve(Installation(path))


def find_all(config: DiscoveryConfig | None = None) -> frozenset[Installation]:
    """Discover all Java installations with default settings."""
    return JavaFinder(config).find_all()
