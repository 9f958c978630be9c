"""Parse `samtools flagstat` summaries and report on alignment quality.

Copyright © 2024 satherapist contributors.
"""

from typing import Iterable

from satherapist.flagstat.classifier import classify_line, scan_flagstat
from satherapist.flagstat.config import FlagstatConfig
from satherapist.flagstat.metrics import compute_metrics
from satherapist.flagstat.models import FlagstatRecord
from satherapist.flagstat.report import render_report


def parse_flagstat(lines: Iterable[str], config: FlagstatConfig) -> FlagstatRecord:
    """Scan, finalize and render a flagstat summary.

    :param lines: the lines of the flagstat summary
    :param config: the processing parameters
    :returns: the finalized record, with the rendered report in `output`
    """
    record = scan_flagstat(lines, fastq_read_count=config.fastq_read_count)
    compute_metrics(record)
    return render_report(record, json_output=config.json_output)


__all__ = [
    "FlagstatConfig",
    "FlagstatRecord",
    "classify_line",
    "compute_metrics",
    "parse_flagstat",
    "render_report",
    "scan_flagstat",
]
