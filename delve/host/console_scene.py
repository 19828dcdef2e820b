"""A ``ScenePort`` that draws the ground layer into a tcod console.

Used for the command-line preview and for inspecting generated floors in
tests. Each ``refresh()`` redraws the whole map from the grid's tile ids.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeAlias

import numpy as np
from tcod.console import Console

from delve import colors, config

from .ports import ScenePort

if TYPE_CHECKING:
    from delve.environment.tile_grid import TileGrid
    from delve.environment.tile_types import TileSet
    from delve.types import TileId

    from .ports import PlayerPort

TileGlyph: TypeAlias = tuple[str, colors.Color]


def tile_glyphs_for(tileset: TileSet) -> dict[TileId, TileGlyph]:
    """Default glyphs for the wall, floor and door ids of ``tileset``."""
    return {
        tileset.wall: (config.PREVIEW_WALL_GLYPH, config.PREVIEW_WALL_COLOR),
        tileset.floor: (config.PREVIEW_FLOOR_GLYPH, config.PREVIEW_FLOOR_COLOR),
        tileset.door: (config.PREVIEW_DOOR_GLYPH, config.PREVIEW_DOOR_COLOR),
    }


class ConsoleScene(ScenePort):
    """Renders a ``TileGrid`` into an off-screen ``Console``."""

    def __init__(
        self,
        grid: TileGrid,
        tile_glyphs: dict[TileId, TileGlyph],
        player: PlayerPort | None = None,
    ) -> None:
        self.grid = grid
        self.tile_glyphs = tile_glyphs
        self.player = player
        self.refresh_count = 0
        self.console = Console(grid.width, grid.height, order="F")

    def _read_ground_layer(self) -> np.ndarray:
        ids = np.zeros((self.grid.width, self.grid.height), dtype=np.int32, order="F")
        for x in range(self.grid.width):
            for y in range(self.grid.height):
                ids[x, y] = self.grid.get_tile_id(x, y, config.GROUND_LAYER)
        return ids

    def refresh(self) -> None:
        if (self.console.width, self.console.height) != (
            self.grid.width,
            self.grid.height,
        ):
            self.console = Console(self.grid.width, self.grid.height, order="F")

        ids = self._read_ground_layer()
        self.console.clear()
        ch = self.console.rgb["ch"]
        fg = self.console.rgb["fg"]
        ch[:] = ord(config.PREVIEW_UNKNOWN_GLYPH)
        for tile_id, (glyph, color) in self.tile_glyphs.items():
            mask = ids == tile_id
            ch[mask] = ord(glyph)
            fg[mask] = color

        if self.player is not None and self.grid.in_bounds(
            self.player.x, self.player.y
        ):
            ch[self.player.x, self.player.y] = ord(config.PREVIEW_PLAYER_GLYPH)
            fg[self.player.x, self.player.y] = config.PREVIEW_PLAYER_COLOR

        self.refresh_count += 1


def render_ascii(console: Console) -> str:
    """Return the console's glyphs as newline-separated rows."""
    ch = console.rgb["ch"]
    return "\n".join(
        "".join(chr(int(ch[x, y])) for x in range(console.width))
        for y in range(console.height)
    )
