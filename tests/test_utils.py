"""
Tests for the utils module

Copyright © 2024 satherapist contributors.
"""

import logging

from satherapist import __version__
from satherapist.utils import click_echo, log_step_start, timer


def test_timer(caplog):
    @timer
    def my_func():
        return "foo"

    with caplog.at_level(logging.DEBUG):
        res = my_func()
        assert res == "foo"
        assert "Finished satherapist my_func in" in caplog.text


def test_log_step_start(caplog):
    with caplog.at_level(logging.DEBUG):
        log_step_start(
            "parse-flagstat",
            input_file="sample.flagstat.txt",
            output="report.txt",
            fastq_read_count=10,
        )

    assert f"Start satherapist parse-flagstat {__version__}" in caplog.messages
    assert "Input file sample.flagstat.txt" in caplog.messages
    assert "Output report.txt" in caplog.messages
    assert "Parameters:fastq-read-count=10" in caplog.messages


def test_click_echo(capsys):
    click_echo("no newline", nl=False)
    assert capsys.readouterr().out == "no newline"

    click_echo("with newline")
    assert capsys.readouterr().out == "with newline\n"
