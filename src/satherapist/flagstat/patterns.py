"""Line shapes of the `samtools flagstat` text summary.

Each category line reads ``<pass> + <fail> <description>``, where a handful
of descriptions are followed by a parenthesised percentage. The shapes are
anchored at both ends so that no description can shadow a longer one that
starts with it (``primary`` vs ``primary mapped``, ``duplicates`` vs
``primary duplicates``...). The table is additionally kept in
most-specific-first order.

Copyright © 2024 satherapist contributors.
"""

from __future__ import annotations

import dataclasses
import enum
import re


class FlagstatCategory(str, enum.Enum):
    """The categories reported by flagstat.

    The values are the field names used in :class:`FlagstatRecord`.
    """

    TOTAL = "total"
    PRIMARY = "primary"
    SECONDARY = "secondary"
    SUPPLEMENTARY = "supplementary"
    DUPLICATES = "duplicates"
    PRIMARY_DUPLICATES = "primary_duplicates"
    MAPPED = "mapped"
    PRIMARY_MAPPED = "primary_mapped"
    PAIRED_IN_SEQ = "paired_in_seq"
    READ1 = "read1"
    READ2 = "read2"
    PROPERLY_PAIRED = "properly_paired"
    WITH_MATE_MAPPED = "with_mate_mapped"
    SINGLETONS = "singletons"
    MATE_DIFF_CHR = "mate_diff_chr"
    MATE_DIFF_CHR_MAPQ5 = "mate_diff_chr_mapq5"


_COUNTS = r"^(?P<passed>\d+) \+ (?P<failed>\d+) "

# "(90.00% : N/A)", "(90.00%:-nan%)", "(N/A : N/A)" or nothing at all
_PERCENT = r"(?: \((?:(?P<percent>[^\s%:()]+)%|N/A)[^)]*\))?$"


@dataclasses.dataclass(frozen=True)
class CategoryPattern:
    """A line shape together with the category it identifies.

    :ivar category: the category matched by this shape
    :ivar pattern: the compiled, fully anchored line shape
    :ivar has_percent: True if the shape captures an inline percentage
    """

    category: FlagstatCategory
    pattern: re.Pattern
    has_percent: bool = False

    @classmethod
    def build(
        cls, category: FlagstatCategory, description: str, has_percent: bool = False
    ) -> CategoryPattern:
        """Create a pattern from a literal flagstat description.

        :param category: the category to assign
        :param description: the description text following the counts
        :param has_percent: the description is followed by a percentage group
        :returns: a new :class:`CategoryPattern`
        """
        suffix = _PERCENT if has_percent else "$"
        regex = _COUNTS + re.escape(description) + suffix
        return cls(category, re.compile(regex), has_percent)

    @property
    def percent_field(self) -> str | None:
        """Return the record field holding the inline percentage, if any."""
        return f"{self.category.value}_percent" if self.has_percent else None


FLAGSTAT_PATTERNS: tuple[CategoryPattern, ...] = (
    CategoryPattern(
        FlagstatCategory.TOTAL,
        re.compile(_COUNTS + r"in total(?: \(.*\))?$"),
    ),
    CategoryPattern.build(FlagstatCategory.PRIMARY_DUPLICATES, "primary duplicates"),
    CategoryPattern.build(
        FlagstatCategory.PRIMARY_MAPPED, "primary mapped", has_percent=True
    ),
    CategoryPattern.build(FlagstatCategory.PRIMARY, "primary"),
    CategoryPattern.build(FlagstatCategory.SECONDARY, "secondary"),
    CategoryPattern.build(FlagstatCategory.SUPPLEMENTARY, "supplementary"),
    CategoryPattern.build(FlagstatCategory.DUPLICATES, "duplicates"),
    CategoryPattern.build(FlagstatCategory.MAPPED, "mapped", has_percent=True),
    CategoryPattern.build(FlagstatCategory.PAIRED_IN_SEQ, "paired in sequencing"),
    CategoryPattern.build(FlagstatCategory.READ1, "read1"),
    CategoryPattern.build(FlagstatCategory.READ2, "read2"),
    CategoryPattern.build(
        FlagstatCategory.PROPERLY_PAIRED, "properly paired", has_percent=True
    ),
    CategoryPattern.build(
        FlagstatCategory.WITH_MATE_MAPPED, "with itself and mate mapped"
    ),
    CategoryPattern.build(FlagstatCategory.SINGLETONS, "singletons", has_percent=True),
    CategoryPattern.build(
        FlagstatCategory.MATE_DIFF_CHR_MAPQ5,
        "with mate mapped to a different chr (mapQ>=5)",
    ),
    CategoryPattern.build(
        FlagstatCategory.MATE_DIFF_CHR, "with mate mapped to a different chr"
    ),
)
