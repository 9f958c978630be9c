"""Render a finalized flagstat record as text or as a JSON document.

Copyright © 2024 satherapist contributors.
"""

from __future__ import annotations

import logging
from typing import Optional

from satherapist.exception import FlagstatStateError
from satherapist.flagstat.metrics import percentage
from satherapist.flagstat.models import FlagstatRecord

logger = logging.getLogger(__name__)


def _format_percent(value: Optional[float]) -> str:
    if value is None:
        return "N/A"
    return f"{value:.2f}"


def _ensure_finalized(record: FlagstatRecord) -> None:
    if not record.is_finalized:
        raise FlagstatStateError("Metrics must be computed before rendering a report")


def read_count_sentence(record: FlagstatRecord) -> str:
    """Return the read count reconciliation sentence (empty if not requested)."""
    if record.read_count_consistent is None:
        return ""
    if record.read_count_consistent:
        return "all reads accounted for. "
    return (
        "Read count mismatch between user provided fastq read count and flagstat: "
        f"{record.fastq_read_count} != {record.primary_read_count}. "
    )


def render_text_report(record: FlagstatRecord) -> str:
    """Build the human readable report for a finalized record.

    :param record: the finalized record
    :returns: the multi-line report
    :raises FlagstatStateError: if the metrics have not been computed
    """
    _ensure_finalized(record)

    # Failed over passed, not failed over total.
    qc_fail = percentage(record.total[1], record.total[0])

    lines = [
        "Report",
        f"{read_count_sentence(record)}QC fail fraction: {qc_fail:.2f}%. "
        "Only passing used for counts in this report.",
        f"{_format_percent(record.primary_mapped_percent)}% reads "
        f"({record.primary_mapped[0]}) are primarily mapped of which "
        f"{_format_percent(record.properly_paired_primary_mapped_percent)}% "
        f"({record.properly_paired[0]}) are aligned and spaced as expected. "
        f"{sum(record.secondary)} additional secondary alignments have been recorded.",
        f"{record.unmapped_reads} unmapped include {record.singletons[0]} singletons",
        f"Structural variation evidence in {record.mate_diff_chr[0]} reads where "
        "mates mapped to a different chr of which "
        f"{_format_percent(record.high_quality_diff_chr_percent)}% "
        f"({record.mate_diff_chr_mapq5[0]}) are high quality mappings. "
        f"{record.supplementary[0]} Supplementary mappings could also indicate SV",
    ]
    return "\n".join(lines) + "\n"


def render_json_report(record: FlagstatRecord) -> str:
    """Serialize a finalized record, derived fields are not included.

    :param record: the finalized record
    :returns: the compact JSON document
    :raises FlagstatStateError: if the metrics have not been computed
    """
    _ensure_finalized(record)
    return record.to_json()


def render_report(record: FlagstatRecord, json_output: bool = False) -> FlagstatRecord:
    """Render a finalized record in the requested format.

    :param record: the finalized record, left untouched
    :param json_output: produce the JSON document instead of the text report
    :returns: a copy of the record with `output` set to the rendered text
    """
    if json_output:
        logger.debug("Rendering flagstat record as JSON")
        rendered = render_json_report(record)
    else:
        logger.debug("Rendering flagstat text report")
        rendered = render_text_report(record)

    return record.model_copy(update={"output": rendered})
