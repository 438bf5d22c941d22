"""Process execution and version resolution for discovered Java runtimes.

Submodules
----------
- ``process``: The ProcessRunner used for every external command.
- ``version``: The two-tier VersionResolver (release file, then ``-version``).

All public names are re-exported here::

    from javainfo.core import ProcessRunner, VersionResolver
"""

from javainfo.core.process import ProcessOutput, ProcessRunner
from javainfo.core.version import (
    CANNOT_OPEN_METADATA,
    UNKNOWN_VERSION,
    VersionResolver,
)

__all__ = [
    "CANNOT_OPEN_METADATA",
    "ProcessOutput",
    "ProcessRunner",
    "UNKNOWN_VERSION",
    "VersionResolver",
]
