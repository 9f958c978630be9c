"""Model for the values parsed from a flagstat summary.

Copyright © 2024 satherapist contributors.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Optional, Tuple

import pydantic
from pydantic import NonNegativeInt

try:
    from typing import Self
except ImportError:
    from typing_extensions import Self

#: A ``(QC-passed, QC-failed)`` count pair
CountPair = Tuple[NonNegativeInt, NonNegativeInt]


def _pair(description: str) -> Any:
    return pydantic.Field(default=(0, 0), description=description)


def _percent(description: str) -> Any:
    return pydantic.Field(default=None, description=description)


def _derived(description: str) -> Any:
    return pydantic.Field(default=None, exclude=True, description=description)


class FlagstatRecord(pydantic.BaseModel):
    """All values parsed from one flagstat summary.

    Count pairs and inline percentages are filled in while scanning the
    input. The derived fields are left as `None` until
    :func:`satherapist.flagstat.metrics.compute_metrics` has run, and they
    are not part of the serialized document.
    """

    model_config = pydantic.ConfigDict(
        validate_assignment=True, ser_json_inf_nan="constants"
    )

    input: str = pydantic.Field(
        default="", description="The verbatim (stripped) input lines."
    )
    output: str = pydantic.Field(default="", description="The rendered text report.")
    fastq_read_count: NonNegativeInt = pydantic.Field(
        default=0,
        description="The expected number of reads, 0 when not supplied.",
    )

    total: CountPair = _pair("Total number of alignment records.")
    primary: CountPair = _pair("Primary alignments.")
    secondary: CountPair = _pair("Secondary alignments.")
    supplementary: CountPair = _pair("Supplementary alignments.")
    duplicates: CountPair = _pair("Alignments flagged as duplicates.")
    primary_duplicates: CountPair = _pair("Primary alignments flagged as duplicates.")
    mapped: CountPair = _pair("Mapped alignments.")
    mapped_percent: Optional[float] = _percent("Percentage of mapped alignments.")
    primary_mapped: CountPair = _pair("Mapped primary alignments.")
    primary_mapped_percent: Optional[float] = _percent(
        "Percentage of mapped primary alignments."
    )
    paired_in_seq: CountPair = _pair("Reads paired in sequencing.")
    read1: CountPair = _pair("First reads of a pair.")
    read2: CountPair = _pair("Second reads of a pair.")
    properly_paired: CountPair = _pair("Properly paired reads.")
    properly_paired_percent: Optional[float] = _percent(
        "Percentage of properly paired reads."
    )
    with_mate_mapped: CountPair = _pair("Reads mapped together with their mate.")
    singletons: CountPair = _pair("Mapped reads with an unmapped mate.")
    singletons_percent: Optional[float] = _percent("Percentage of singletons.")
    mate_diff_chr: CountPair = _pair("Reads with the mate on a different chromosome.")
    mate_diff_chr_mapq5: CountPair = _pair(
        "Reads with the mate on a different chromosome and mapQ>=5."
    )

    properly_paired_primary_mapped_percent: Optional[float] = _derived(
        "QC-passed properly paired reads as a percentage of primary mapped reads."
    )
    unmapped_reads: Optional[int] = _derived(
        "Reads paired in sequencing that have no primary mapping."
    )
    high_quality_diff_chr_percent: Optional[float] = _derived(
        "Percentage of different chromosome mates with mapQ>=5."
    )
    read_count_consistent: Optional[bool] = _derived(
        "Whether the expected read count equals the primary count."
    )

    @property
    def is_finalized(self) -> bool:
        """Return True once the derived metrics have been computed."""
        return (
            self.properly_paired_primary_mapped_percent is not None
            and self.unmapped_reads is not None
            and self.high_quality_diff_chr_percent is not None
        )

    @property
    def primary_read_count(self) -> int:
        """Return the number of primary alignments, passing and failing QC."""
        return sum(self.primary)

    @classmethod
    def from_json(cls, p: str | os.PathLike) -> Self:
        """Initialize a :class:`FlagstatRecord` from a structured document.

        :param p: The path to the JSON file.
        :return: A :class:`FlagstatRecord` object.
        """
        with open(p) as fp:
            json_data = json.load(fp)

        return cls(**json_data)

    def to_json(self, **kwargs: Any) -> str:
        """Dump the record to a compact JSON string.

        :param kwargs: Additional arguments to pass to pydantics `model_dump_json`.
        :return: The record serialized to JSON as a string.
        """
        return self.model_dump_json(**kwargs)

    def write_json_file(self, p: str | os.PathLike, **kwargs: Any) -> None:
        """Write a JSON serialized FlagstatRecord to a file.

        Non-existing intermediate directories in the path will be created.

        :param p: The path to the file to write.
        :param kwargs: Additional arguments to pass to pydantics `model_dump_json`.
        """
        Path(p).resolve().parent.mkdir(parents=True, exist_ok=True)

        with open(p, "w") as fp:
            fp.write(self.to_json(**kwargs))
