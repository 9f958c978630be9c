"""Command line interface for satherapist.

Copyright © 2024 satherapist contributors.
"""

from satherapist.cli.main import main_cli

__all__ = ["main_cli"]
