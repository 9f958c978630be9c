"""Top-level package for satherapist.

Copyright © 2024 satherapist contributors.
"""

from importlib import metadata

__version__ = "0.0.0"

try:
    __version__ = metadata.version("satherapist")
except metadata.PackageNotFoundError:
    pass


# Shortcuts to be able to do
# import satherapist
# satherapist.parse_flagstat(lines, satherapist.FlagstatConfig())
from satherapist.flagstat import parse_flagstat  # noqa
from satherapist.flagstat.config import FlagstatConfig  # noqa
from satherapist.flagstat.models import FlagstatRecord  # noqa

__all__ = ["parse_flagstat", "FlagstatConfig", "FlagstatRecord"]
