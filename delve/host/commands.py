"""The ``ProcGen`` command surface.

Usage from a host script or event:
    ProcGen GenerateMap

The sub-command is case-insensitive. Other commands and unknown sub-commands
are ignored so that several command handlers can share one dispatcher.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from delve import config

if TYPE_CHECKING:
    from delve.environment.generators.dungeon import DungeonResult

    from .adapter import DungeonHostAdapter

logger = logging.getLogger(__name__)


def split_command_line(line: str) -> tuple[str, list[str]]:
    """Split ``"ProcGen GenerateMap"`` into ``("ProcGen", ["GenerateMap"])``."""
    parts = line.split()
    if not parts:
        return "", []
    return parts[0], parts[1:]


class ProcGenCommands:
    """Dispatches ``ProcGen`` commands to a ``DungeonHostAdapter``."""

    def __init__(self, adapter: DungeonHostAdapter) -> None:
        self.adapter = adapter

    def execute(self, command: str, args: Sequence[str]) -> DungeonResult | None:
        """Run ``command`` with ``args``.

        Returns the generation result for ``GenerateMap``, otherwise None.
        """
        if command != config.PLUGIN_COMMAND:
            return None

        sub_command = (args[0] if args else "").lower()
        match sub_command:
            case config.GENERATE_MAP_SUBCOMMAND:
                return self.adapter.generate_floor()
            case _:
                logger.debug(
                    "Ignoring unknown %s sub-command %r",
                    config.PLUGIN_COMMAND,
                    sub_command,
                )
                return None

    def execute_line(self, line: str) -> DungeonResult | None:
        command, args = split_command_line(line)
        return self.execute(command, args)
