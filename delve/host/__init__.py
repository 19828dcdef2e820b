"""Host-side glue: ports, the generation adapter and the command surface."""

from .adapter import DungeonHostAdapter
from .commands import ProcGenCommands, split_command_line
from .console_scene import ConsoleScene, render_ascii, tile_glyphs_for
from .memory import MemoryLevelState, MemoryMapHost, MemoryPlayer
from .ports import LevelState, MapHost, PlayerPort, ScenePort

__all__ = [
    "ConsoleScene",
    "DungeonHostAdapter",
    "LevelState",
    "MapHost",
    "MemoryLevelState",
    "MemoryMapHost",
    "MemoryPlayer",
    "PlayerPort",
    "ProcGenCommands",
    "ScenePort",
    "render_ascii",
    "split_command_line",
    "tile_glyphs_for",
]
