"""Data model for the discovery module.

``Installation`` is the only entity: a Java executable path and the
version string resolved for it. Equality and hashing use the path alone,
so collecting installations in a set collapses duplicates.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace


@dataclass(frozen=True)
class Installation:
    """A Java runtime found on this machine.

    Attributes:
        path: Absolute path to the java executable, kept verbatim.
        version: Resolved version string. Empty until resolution.
    """

    path: str
    version: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        if not self.path:
            raise ValueError("Installation path must not be empty")
        if self.version is None:
            raise ValueError("Installation version must be a string")

    def with_version(self, version: str) -> Installation:
        """Return a new Installation for the same path with ``version`` set."""
        return replace(self, version=version)

    def as_dict(self) -> dict[str, str]:
        return {"path": self.path, "version": self.version}
