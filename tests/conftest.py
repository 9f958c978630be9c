"""Configuration and shared files/objects for the testing framework.

Copyright © 2024 satherapist contributors.
"""

from pathlib import Path

import pytest

from satherapist.flagstat.classifier import scan_flagstat
from satherapist.flagstat.metrics import compute_metrics
from satherapist.flagstat.models import FlagstatRecord

DATA_ROOT = Path(__file__).parent / "data"


@pytest.fixture(name="data_root", scope="session")
def data_root_fixture():
    """Return the data root directory."""
    return DATA_ROOT


@pytest.fixture(name="full_flagstat_file", scope="session")
def full_flagstat_file_fixture(data_root) -> Path:
    """A flagstat summary with all sixteen categories and QC-failed reads."""
    return data_root / "full.flagstat.txt"


@pytest.fixture(name="example_flagstat_file", scope="session")
def example_flagstat_file_fixture(data_root) -> Path:
    """A partial flagstat summary of a paired-end run without QC-failed reads."""
    return data_root / "example.flagstat.txt"


@pytest.fixture(name="full_flagstat_lines")
def full_flagstat_lines_fixture(full_flagstat_file) -> list[str]:
    return full_flagstat_file.read_text().splitlines(keepends=True)


@pytest.fixture(name="example_flagstat_lines")
def example_flagstat_lines_fixture(example_flagstat_file) -> list[str]:
    return example_flagstat_file.read_text().splitlines(keepends=True)


@pytest.fixture(name="example_record")
def example_record_fixture(example_flagstat_lines) -> FlagstatRecord:
    """A finalized record for the example summary."""
    return compute_metrics(scan_flagstat(example_flagstat_lines))


@pytest.fixture(name="full_record")
def full_record_fixture(full_flagstat_lines) -> FlagstatRecord:
    """A finalized record for the full summary."""
    return compute_metrics(scan_flagstat(full_flagstat_lines))
