"""Main console script for satherapist.

Copyright © 2024 satherapist contributors.
"""

import sys

import click

from satherapist import __version__
from satherapist.cli.common import AliasedOrderedGroup, logger
from satherapist.cli.flagstat import parse_flagstat_cmd
from satherapist.logging import LoggingSetup


@click.group(cls=AliasedOrderedGroup, name="satherapist")
@click.version_option(__version__)
@click.option(
    "--verbose",
    "-d",
    "--debug",
    "verbose",
    type=click.BOOL,
    default=False,
    is_flag=True,
    help="Show extended messages during execution",
)
@click.option(
    "--log-file",
    required=False,
    default=None,
    type=click.Path(exists=False),
    help="The path to the log file (it is created if it does not exist)",
)
@click.pass_context
def main_cli(ctx, verbose: bool, log_file: str):
    """Provide useful information about alignments."""
    # early out if run in help mode
    if any(x in sys.argv for x in ["--help", "--version"]):
        return 0

    # Pass arguments to other commands
    ctx.ensure_object(dict)

    # This registers the logger with it's context manager,
    # so that it is clean-up properly when the command is done.
    ctx.obj["LOGGER"] = ctx.with_resource(LoggingSetup(log_file, verbose=verbose))
    ctx.obj["VERBOSE"] = verbose

    if verbose:
        logger.debug("Running in VERBOSE mode")
    return 0


main_cli.add_command(parse_flagstat_cmd, aliases=["parseflagstat"])


if __name__ == "__main__":
    sys.exit(main_cli())  # pragma: no cover
