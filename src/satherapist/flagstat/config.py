"""Options controlling how a flagstat summary is processed.

Copyright © 2024 satherapist contributors.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class FlagstatConfig:
    """Flagstat processing parameters.

    :ivar json_output: emit the structured (JSON) document instead of the text report
    :ivar fastq_read_count: the expected number of reads, 0 when not supplied
    """

    json_output: bool = False
    fastq_read_count: int = 0

    def __post_init__(self):
        if self.fastq_read_count < 0:
            raise ValueError(
                f"fastq_read_count must be non-negative, got {self.fastq_read_count}"
            )
