"""
Console script for satherapist (parse-flagstat)

Copyright © 2024 satherapist contributors.
"""

from pathlib import Path

import click

from satherapist.cli.common import logger
from satherapist.exception import FlagstatError
from satherapist.flagstat import parse_flagstat
from satherapist.flagstat.config import FlagstatConfig
from satherapist.utils import click_echo, log_step_start, timer


@click.command(
    "parse-flagstat",
    short_help="parse `samtools flagstat` text",
    options_metavar="<options>",
)
@click.argument(
    "input_file",
    required=False,
    default="-",
    type=click.File("r"),
    metavar="FLAGSTAT",
)
@click.option(
    "-j",
    "--json",
    "json_output",
    is_flag=True,
    default=False,
    help="Output a JSON blob including the original flagstat text",
)
@click.option(
    "-e",
    "--fastq-read-count",
    required=False,
    default=0,
    type=click.IntRange(min=0),
    show_default=True,
    help="The number of reads in the fastq file(s) that are expected to show up",
)
@click.option(
    "-o",
    "--output",
    required=False,
    default=None,
    type=click.Path(exists=False, dir_okay=False),
    help="Write the report to this file instead of stdout",
)
@timer
def parse_flagstat_cmd(input_file, json_output, fastq_read_count, output):
    """
    Parse the text summary of `samtools flagstat` (FLAGSTAT, or stdin if omitted
    or '-') and report on the alignment quality
    """
    log_step_start(
        "parse-flagstat",
        input_file=input_file.name,
        output=output,
        json=json_output,
        fastq_read_count=fastq_read_count,
    )

    config = FlagstatConfig(json_output=json_output, fastq_read_count=fastq_read_count)

    try:
        record = parse_flagstat(input_file, config)
        if output is not None:
            Path(output).write_text(record.output)
    except (FlagstatError, OSError, ValueError) as e:
        logger.debug("Failed to process %s", input_file.name, exc_info=True)
        raise click.ClickException(str(e)) from e

    if output is None:
        click_echo(record.output, nl=False)
    else:
        logger.info("Report written to %s", output)
