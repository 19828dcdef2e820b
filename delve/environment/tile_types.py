"""Semantic tile ids for a generation run.

The host's tile ids are opaque integers. The map author marks which id means
wall, floor and door by painting them at fixed anchor cells on the ground
layer; ``resolve_tileset`` reads those anchors once per run.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from delve import config
from delve.environment.errors import InvalidTileset

if TYPE_CHECKING:
    from delve.environment.tile_grid import TileGrid
    from delve.types import TileId


@dataclass(frozen=True)
class TileSet:
    """The three tile ids a generation run writes."""

    wall: TileId
    floor: TileId
    door: TileId

    def validate(self) -> None:
        """Raise ``InvalidTileset`` unless all ids are set and pairwise distinct."""
        if not self.wall or not self.floor or not self.door:
            raise InvalidTileset(
                f"Missing tile id (wall={self.wall}, floor={self.floor}, "
                f"door={self.door}). Check anchors {config.WALL_ANCHOR}, "
                f"{config.FLOOR_ANCHOR} and {config.DOOR_ANCHOR}."
            )
        if len({self.wall, self.floor, self.door}) != 3:
            raise InvalidTileset(
                f"Tile ids must differ (wall={self.wall}, floor={self.floor}, "
                f"door={self.door}). Check anchors {config.WALL_ANCHOR}, "
                f"{config.FLOOR_ANCHOR} and {config.DOOR_ANCHOR}."
            )


def resolve_tileset(grid: TileGrid) -> TileSet:
    """Read the wall, floor and door ids from the anchor cells of ``grid``.

    Raises:
        InvalidTileset: If any id is zero or two ids coincide.
    """
    layer = config.GROUND_LAYER
    tileset = TileSet(
        wall=grid.get_tile_id(*config.WALL_ANCHOR, layer),
        floor=grid.get_tile_id(*config.FLOOR_ANCHOR, layer),
        door=grid.get_tile_id(*config.DOOR_ANCHOR, layer),
    )
    tileset.validate()
    return tileset
