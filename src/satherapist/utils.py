"""
Common functions and utilities for satherapist

Copyright © 2024 satherapist contributors.
"""
from __future__ import annotations

import logging
import time
from functools import wraps
from typing import Optional

import click

from satherapist import __version__

logger = logging.getLogger(__name__)


def click_echo(msg: str, nl: bool = True):
    """
    Helper function that print a message to the console

    :param msg: the message to print
    :param nl: print a trailing newline
    """
    click.echo(msg, nl=nl)


def log_step_start(
    step_name: str,
    input_file: Optional[str] = None,
    output: Optional[str] = None,
    **kwargs,
) -> None:
    """
    Utility function to add information about the start of a
    satherapist command to the logs

    :param step_name: name of the command that is starting
    :param input_file: optional input file path
    :param output: optional path to output
    :param kwargs: any additional parameters that you wish to log
    :returns: None
    """
    logger.debug("Start satherapist %s %s", step_name, __version__)

    if input_file is not None:
        logger.debug("Input file %s", input_file)

    if output is not None:
        logger.debug("Output %s", output)

    if kwargs:
        params = [f"{key.replace('_', '-')}={value}" for key, value in kwargs.items()]
        logger.debug("Parameters:%s", ",".join(params))


def timer(func):
    """
    Function decorator used to time the different commands
    """

    @wraps(func)
    def wrapper(*args, **kwds):
        start_time = time.perf_counter()
        res = func(*args, **kwds)
        run_time = time.perf_counter() - start_time
        logger.debug("Finished satherapist %s in %.2fs", func.__name__, run_time)
        return res

    return wrapper
