"""javainfo: Discover installed Java runtimes and resolve their versions."""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

from javainfo.discovery import Installation, JavaFinder, find_all  # noqa: E402

__all__ = [
    "Installation",
    "JavaFinder",
    "__version__",
    "find_all",
]
