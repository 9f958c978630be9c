"""
Tests for the flagstat processing parameters

Copyright © 2024 satherapist contributors.
"""

import dataclasses

import pytest

from satherapist.flagstat.config import FlagstatConfig


def test_defaults():
    config = FlagstatConfig()
    assert config.json_output is False
    assert config.fastq_read_count == 0


def test_config_is_frozen():
    config = FlagstatConfig(json_output=True, fastq_read_count=10)
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.json_output = False


def test_negative_read_count():
    with pytest.raises(ValueError, match="non-negative"):
        FlagstatConfig(fastq_read_count=-1)
