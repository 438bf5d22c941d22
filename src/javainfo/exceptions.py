"""Errors raised by javainfo.

Discovery itself never fails: a missing directory or an unreadable release
file degrades to an empty result or a sentinel version. The only error
that crosses a module boundary is ``ProcessRunError``, raised when an
external program (``where.exe``, ``which``, ``java -version``) cannot be
started or has to be killed after its timeout. Locators and the version
resolver catch it and carry on as if the program printed nothing.
"""


class JavaInfoError(Exception):
    """Base exception for all javainfo errors."""


class ProcessRunError(JavaInfoError):
    """An external program could not be run to completion.

    Attributes:
        program: Executable that was started.
        arguments: Argument string it was given.
        reason: Why it failed, e.g. the OS error or "timed out after 30s".
    """

    def __init__(self, program: str, arguments: str, reason: str) -> None:
        self.program = program
        self.arguments = arguments
        self.reason = reason
        super().__init__(f"{program} {arguments}: {reason}".strip())
