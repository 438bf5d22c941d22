"""``javainfo resolve PATH`` -- Resolve the version of one java executable.

Exit Codes:
    0 -- Always, once the path exists. A version that cannot be read is
         reported as a sentinel string or left empty.
"""

from __future__ import annotations

import json

import click

from javainfo.cli.options import common_options, configure_logging
from javainfo.cli.output import print_installations
from javainfo.discovery import DiscoveryConfig, JavaFinder
from javainfo.exceptions import JavaInfoError


@click.command("resolve")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@common_options
def resolve_command(
    path: str,
    output_format: str,
    timeout: float,
    verbose: bool,
) -> None:
    """Resolve the version of the java executable at PATH."""
    configure_logging(verbose)
    finder = JavaFinder(DiscoveryConfig(process_timeout=timeout))
    try:
        installation = finder.resolve(path)
    except JavaInfoError as exc:
        raise click.ClickException(str(exc)) from exc

    if output_format == "json":
        click.echo(json.dumps(installation.as_dict(), indent=2))
    else:
        print_installations([installation], title="Java Installation")
