"""Captured-output execution of external programs.

Every command javainfo runs (``where.exe``, ``which``, ``java -version``)
goes through ``ProcessRunner.run``. The child never inherits the caller's
streams, never gets a console window on Windows, and is always reaped
before ``run`` returns.
"""

from __future__ import annotations

import logging
import os
import shlex
import subprocess
import sys
from dataclasses import dataclass

from javainfo.exceptions import ProcessRunError

logger = logging.getLogger(__name__)

_CREATION_FLAGS = getattr(subprocess, "CREATE_NO_WINDOW", 0) if sys.platform == "win32" else 0


@dataclass(frozen=True)
class ProcessOutput:
    """Text captured from a finished child process."""

    stdout: str = ""
    stderr: str = ""

    def lines(self) -> list[str]:
        """Non-empty stdout lines with carriage returns removed."""
        out: list[str] = []
        for line in self.stdout.split("\n"):
            line = line.replace("\r", "")
            if line:
                out.append(line)
        return out


class ProcessRunner:
    """Runs a program and returns its captured stdout and stderr.

    Args:
        timeout: Seconds to wait for the child before killing it.
            ``None`` waits indefinitely.
    """

    def __init__(self, timeout: float | None = None) -> None:
        self.timeout = timeout

    def run(self, program: str, arguments: str = "") -> ProcessOutput:
        """Spawn ``program`` with ``arguments`` and capture both streams.

        Args:
            program: Executable name or path.
            arguments: Pre-formed argument string, split without a shell.

        Returns:
            The captured output. Empty when the child had already exited
            by the time it was started.

        Raises:
            ProcessRunError: The program could not be started or timed out.
        """
        argv = [program, *shlex.split(arguments, posix=sys.platform != "win32")]
        try:
            proc = subprocess.Popen(
                argv,
                cwd=os.getcwd(),
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                errors="replace",
                shell=False,
                creationflags=_CREATION_FLAGS,
            )
        except OSError as exc:
            logger.debug("Cannot start %s: %s", program, exc)
            raise ProcessRunError(program, arguments, str(exc)) from exc

        with proc:
            if proc.poll() is not None:
                logger.debug("%s exited before its output was read", program)
                proc.communicate()
                return ProcessOutput()
            try:
                stdout, stderr = proc.communicate(timeout=self.timeout)
            except subprocess.TimeoutExpired as exc:
                proc.kill()
                proc.communicate()
                logger.debug("%s timed out after %ss", program, self.timeout)
                raise ProcessRunError(
                    program, arguments, f"timed out after {self.timeout}s",
                ) from exc
        return ProcessOutput(stdout=stdout or "", stderr=stderr or "")
