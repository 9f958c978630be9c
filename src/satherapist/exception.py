"""
This module contains all the extra exception classes and handling
defined by satherapist

Copyright © 2024 satherapist contributors.
"""


class FlagstatError(Exception):
    """Base class for all errors raised while processing flagstat text."""


class FlagstatParseError(FlagstatError, ValueError):
    """
    Class to manage lines that match a category but carry unparseable values.

    Attributes:
        msg: the error message to output
        line: the offending input line
    """

    def __init__(self, msg: str, line: str):
        super().__init__(f"{msg}: {line!r}")
        self.msg = msg
        self.line = line


class FlagstatStateError(FlagstatError):
    """Raised when a record is used out of its scan/finalize/render order."""
