"""Classify flagstat lines and accumulate them into a record.

Copyright © 2024 satherapist contributors.
"""

from __future__ import annotations

import logging
from typing import Iterable, NamedTuple, Optional, Sequence

from satherapist.exception import FlagstatParseError
from satherapist.flagstat.models import FlagstatRecord
from satherapist.flagstat.patterns import (
    FLAGSTAT_PATTERNS,
    CategoryPattern,
)

logger = logging.getLogger(__name__)


class ClassifiedLine(NamedTuple):
    """A recognized flagstat line and the values parsed from it."""

    pattern: CategoryPattern
    passed: int
    failed: int
    percent: Optional[float] = None


def classify_line(
    line: str, patterns: Sequence[CategoryPattern] = FLAGSTAT_PATTERNS
) -> ClassifiedLine | None:
    """Match a single (stripped) line against the category table.

    The first matching pattern wins, the table is expected to be ordered
    from most to least specific.

    :param line: the line to classify, without surrounding whitespace
    :param patterns: the ordered category table
    :returns: the classified line or None if no pattern matches
    :raises FlagstatParseError: if a captured value is not a valid number
    """
    for pattern in patterns:
        match = pattern.pattern.match(line)
        if match is None:
            continue

        try:
            passed = int(match.group("passed"))
            failed = int(match.group("failed"))
        except ValueError as e:
            raise FlagstatParseError("Failed to parse read counts", line) from e

        percent = None
        if pattern.has_percent and match.group("percent") is not None:
            try:
                percent = float(match.group("percent"))
            except ValueError as e:
                raise FlagstatParseError("Failed to parse percentage", line) from e

        return ClassifiedLine(pattern, passed, failed, percent)

    return None


def update_record(record: FlagstatRecord, classified: ClassifiedLine) -> None:
    """Write the values of a classified line into the matching record fields.

    A category seen twice keeps the values of the last line.
    """
    setattr(
        record,
        classified.pattern.category.value,
        (classified.passed, classified.failed),
    )
    percent_field = classified.pattern.percent_field
    if percent_field is not None:
        setattr(record, percent_field, classified.percent)


def scan_flagstat(
    lines: Iterable[str],
    fastq_read_count: int = 0,
    patterns: Sequence[CategoryPattern] = FLAGSTAT_PATTERNS,
) -> FlagstatRecord:
    """Build a :class:`FlagstatRecord` from the lines of a flagstat summary.

    Lines that do not match any category are logged as warnings and skipped.
    Blank lines are skipped silently.

    :param lines: an iterable of text lines, e.g. an open file handle
    :param fastq_read_count: the expected number of reads (0 if unknown)
    :param patterns: the ordered category table
    :returns: the populated (not yet finalized) record
    :raises FlagstatParseError: if a recognized line carries an invalid number
    """
    record = FlagstatRecord(fastq_read_count=fastq_read_count)
    input_lines = []

    for raw_line in lines:
        line = raw_line.strip()
        input_lines.append(line + "\n")

        if not line:
            logger.debug("Skipping blank line")
            continue

        classified = classify_line(line, patterns)
        if classified is None:
            logger.warning("Unrecognized flagstat line: %r", line)
            continue

        logger.debug(
            "Classified line as %s: %r", classified.pattern.category.value, line
        )
        update_record(record, classified)

    record.input = "".join(input_lines)
    return record
