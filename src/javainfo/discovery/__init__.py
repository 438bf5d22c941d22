"""Discovery of Java runtime installations.

Public API::

    from javainfo.discovery import JavaFinder

    for java in JavaFinder().find_all():
        print(f"{java.path}: {java.version}")
"""

from __future__ import annotations

from javainfo.discovery.models import Installation
from javainfo.discovery.config import DiscoveryConfig
from javainfo.discovery.finder import JavaFinder, find_all

__all__ = [
    "DiscoveryConfig",
    "Installation",
    "JavaFinder",
    "find_all",
]
