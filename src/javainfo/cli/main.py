"""javainfo CLI -- List the Java runtimes installed on this machine.

Entry point for the ``javainfo`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    list     -- Discover every installation and resolve its version.
    resolve  -- Resolve the version of one java executable.

Usage::

    javainfo list
    javainfo list --format json
    javainfo resolve /usr/lib/jvm/java-17-openjdk/bin/java
"""

from __future__ import annotations

import click

from javainfo import __version__
from javainfo.cli.list_cmd import list_command
from javainfo.cli.resolve_cmd import resolve_command


@click.group()
@click.version_option(version=__version__)
def cli() -> None:
    """javainfo: Find installed Java runtimes and their versions.

    Searches the platform's usual install locations (Windows PATH, macOS
    JavaVirtualMachines, Linux JVM directories) and reads each runtime's
    release file, asking the runtime itself when that file is missing.
    """


cli.add_command(list_command)
cli.add_command(resolve_command)
