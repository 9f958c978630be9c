"""Derived quality metrics computed from a fully scanned flagstat record.

Copyright © 2024 satherapist contributors.
"""

import logging

import numpy as np

from satherapist.exception import FlagstatStateError
from satherapist.flagstat.models import FlagstatRecord

logger = logging.getLogger(__name__)


def percentage(numerator: int, denominator: int) -> float:
    """Return `numerator / denominator * 100` using IEEE-754 semantics.

    A zero denominator is not special-cased: `x / 0` gives `inf` and
    `0 / 0` gives `nan`.

    :param numerator: the numerator
    :param denominator: the denominator
    :returns: the percentage as a python float
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(numerator) / np.float64(denominator) * 100)


def check_read_count(record: FlagstatRecord) -> bool | None:
    """Compare the expected read count with the observed primary count.

    :param record: the scanned record
    :returns: None if no read count was supplied, otherwise whether they match
    """
    if record.fastq_read_count <= 0:
        return None

    observed = record.primary_read_count
    if observed != record.fastq_read_count:
        logger.warning(
            "Read count mismatch between user provided fastq read count and "
            "flagstat: %d != %d",
            record.fastq_read_count,
            observed,
        )
        return False

    logger.info("All %d reads accounted for", observed)
    return True


def compute_metrics(record: FlagstatRecord) -> FlagstatRecord:
    """Fill in the derived fields of a scanned record.

    This must run exactly once, after all input lines have been consumed.

    :param record: the scanned record, updated in place
    :returns: the same record, now finalized
    :raises FlagstatStateError: if the record was already finalized
    """
    if record.is_finalized:
        raise FlagstatStateError("Metrics have already been computed for this record")

    record.properly_paired_primary_mapped_percent = percentage(
        record.properly_paired[0], record.primary_mapped[0]
    )
    record.unmapped_reads = sum(record.paired_in_seq) - sum(record.primary_mapped)
    record.high_quality_diff_chr_percent = percentage(
        record.mate_diff_chr_mapq5[0], record.mate_diff_chr[0]
    )
    record.read_count_consistent = check_read_count(record)

    logger.debug(
        "Computed metrics: pppmp=%.2f, unmapped=%d, hq_diff_chr=%.2f",
        record.properly_paired_primary_mapped_percent,
        record.unmapped_reads,
        record.high_quality_diff_chr_percent,
    )
    return record
