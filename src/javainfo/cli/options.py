"""Options shared by several javainfo commands."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

import click

from javainfo.discovery.config import DEFAULT_PROCESS_TIMEOUT


def common_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach ``--format``, ``--timeout`` and ``--verbose`` to a command."""
    func = click.option(
        "--verbose", "-v",
        is_flag=True,
        default=False,
        help="Log discovery steps to stderr.",
    )(func)
    func = click.option(
        "--timeout",
        type=click.FloatRange(min=0, min_open=True),
        default=DEFAULT_PROCESS_TIMEOUT,
        show_default=True,
        help="Seconds to wait for each external command.",
    )(func)
    func = click.option(
        "--format", "output_format",
        type=click.Choice(["text", "json"]),
        default="text",
        help="Output format: text (default) or json.",
    )(func)
    return func


def configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )
