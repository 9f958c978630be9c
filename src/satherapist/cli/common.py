"""
Console script for satherapist (common functions)

Copyright © 2024 satherapist contributors.
"""

import logging
from typing import Dict, List, Optional, Sequence

import click

logger = logging.getLogger("satherapist.cli")


# code snippet obtained from
# https://stackoverflow.com/questions/47972638/how-can-i-define-the-order-of-click-sub-commands-in-help
# the purpose is to order subcommands in order of addition
class OrderedGroup(click.Group):
    """Custom click.Group that keeps insertion order for subcommands."""

    def __init__(  # noqa: D107
        self,
        name: Optional[str] = None,
        commands: Optional[Dict[str, click.Command]] = None,
        **kwargs,
    ):
        super(OrderedGroup, self).__init__(name, commands, **kwargs)
        self.commands = commands or {}

    def list_commands(self, ctx: click.Context) -> List[str]:
        """Return a list of subcommands."""
        return list(self.commands)


class AliasedOrderedGroup(OrderedGroup):
    """Custom click.Group that supports hidden aliases for subcommands."""

    def __init__(self, *args, **kwargs):  # noqa: D107
        super(AliasedOrderedGroup, self).__init__(*args, **kwargs)
        self.aliases: Dict[str, str] = {}

    def add_command(
        self,
        cmd: click.Command,
        name: Optional[str] = None,
        aliases: Sequence[str] = (),
    ) -> None:
        """Register a subcommand and the aliases it can be invoked with."""
        super(AliasedOrderedGroup, self).add_command(cmd, name)
        for alias in aliases:
            self.aliases[alias] = name or str(cmd.name)

    def get_command(self, ctx: click.Context, cmd_name: str):
        """Look up a subcommand by name or alias."""
        return super(AliasedOrderedGroup, self).get_command(
            ctx, self.aliases.get(cmd_name, cmd_name)
        )
