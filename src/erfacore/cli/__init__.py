"""CLI entry point for erfacore."""

import click

from .. import __version__
from . import common as common
from .sidereal import sidereal
from .timescales import calendar, convert, leap_seconds
from ..logging import get_logger

# Create a logger for this module
logger = get_logger(__name__)


@click.group()
@click.version_option(__version__, prog_name="erfacore")
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity (can be used multiple times: -v, -vv, -vvv)",
)
@click.option(
    "--debug",
    is_flag=True,
    help="Enable debug logging (equivalent to -vv)",
)
@click.option(
    "--quiet",
    is_flag=True,
    help="Suppress all logging except errors",
)
def cli(verbose: int, debug: bool, quiet: bool) -> None:
    """Fundamental astronomy from the command line.

    Time-scale conversion, leap seconds, calendar dates and sidereal time,
    computed with the same algorithms as SOFA.
    """
    common.configure_logging(
        {
            "quiet": quiet,
            "debug": debug,
            "verbose": verbose,
        }
    )
    logger.debug("Debug logging enabled")


cli.add_command(convert)
cli.add_command(leap_seconds)
cli.add_command(calendar)
cli.add_command(sidereal)

if __name__ == "__main__":
    cli()
