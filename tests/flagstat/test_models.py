"""Tests for the flagstat record model.

Copyright © 2024 satherapist contributors.
"""

import json
import math

import pydantic
import pytest

from satherapist.flagstat.models import FlagstatRecord

SERIALIZED_FIELDS = [
    "input",
    "output",
    "fastq_read_count",
    "total",
    "primary",
    "secondary",
    "supplementary",
    "duplicates",
    "primary_duplicates",
    "mapped",
    "mapped_percent",
    "primary_mapped",
    "primary_mapped_percent",
    "paired_in_seq",
    "read1",
    "read2",
    "properly_paired",
    "properly_paired_percent",
    "with_mate_mapped",
    "singletons",
    "singletons_percent",
    "mate_diff_chr",
    "mate_diff_chr_mapq5",
]


def test_defaults():
    record = FlagstatRecord()
    assert record.total == (0, 0)
    assert record.mapped_percent is None
    assert record.properly_paired_primary_mapped_percent is None
    assert not record.is_finalized


def test_serialized_schema():
    document = json.loads(FlagstatRecord().to_json())
    assert list(document) == SERIALIZED_FIELDS


def test_counts_are_validated_on_assignment():
    record = FlagstatRecord()
    record.total = [3, 4]
    assert record.total == (3, 4)

    with pytest.raises(pydantic.ValidationError):
        record.total = (-1, 0)

    with pytest.raises(pydantic.ValidationError):
        FlagstatRecord(fastq_read_count=-1)


def test_primary_read_count():
    record = FlagstatRecord(primary=(950, 10))
    assert record.primary_read_count == 960


def test_write_and_read_json_file(full_record, tmp_path):
    target = tmp_path / "nested" / "sample.flagstat.json"
    full_record.write_json_file(target)

    restored = FlagstatRecord.from_json(target)
    assert restored.total == full_record.total
    assert restored.singletons_percent == full_record.singletons_percent
    assert restored.input == full_record.input
    assert not restored.is_finalized


def test_nan_percentage_survives_json_file(tmp_path):
    record = FlagstatRecord(properly_paired_percent=float("nan"))
    target = tmp_path / "nan.flagstat.json"
    record.write_json_file(target)

    restored = FlagstatRecord.from_json(target)
    assert math.isnan(restored.properly_paired_percent)
