"""``javainfo list`` -- Discover and print every Java installation.

Exit Codes:
    0 -- At least one installation was found.
    2 -- No installations were found.
"""

from __future__ import annotations

import json
import sys

import click

from javainfo.cli.options import common_options, configure_logging
from javainfo.cli.output import print_installations
from javainfo.discovery import DiscoveryConfig, JavaFinder
from javainfo.exceptions import JavaInfoError


@click.command("list")
@common_options
def list_command(output_format: str, timeout: float, verbose: bool) -> None:
    """Discover all installed Java runtimes and their versions.

    Exit code 0 if any runtime was found, 2 if none were.
    """
    configure_logging(verbose)
    finder = JavaFinder(DiscoveryConfig(process_timeout=timeout))
    try:
        installations = sorted(finder.find_all(), key=lambda j: j.path)
    except JavaInfoError as exc:
        raise click.ClickException(str(exc)) from exc

    if output_format == "json":
        click.echo(json.dumps([j.as_dict() for j in installations], indent=2))
    else:
        print_installations(installations)

    sys.exit(0 if installations else 2)
