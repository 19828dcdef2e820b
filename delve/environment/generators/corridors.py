"""L-shaped corridors between room centers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from delve import config

if TYPE_CHECKING:
    from delve.environment.tile_grid import TileGrid
    from delve.types import TileCoord, TileId, WorldTilePos
    from delve.util.rng import RNG

    from .rooms import Room


def h_segment(x1: TileCoord, x2: TileCoord, y: TileCoord) -> list[WorldTilePos]:
    """Cells of a horizontal run on row ``y``, both ends included."""
    return [(x, y) for x in range(min(x1, x2), max(x1, x2) + 1)]


def v_segment(y1: TileCoord, y2: TileCoord, x: TileCoord) -> list[WorldTilePos]:
    """Cells of a vertical run on column ``x``, both ends included."""
    return [(x, y) for y in range(min(y1, y2), max(y1, y2) + 1)]


def corridor_cells(
    room_a: Room, room_b: Room, horizontal_first: bool
) -> list[WorldTilePos]:
    """Cells covered by the two-segment corridor from ``room_a`` to ``room_b``.

    Horizontal-first runs along A's center row to B's center column, then
    along B's center column to B's center row. Vertical-first runs along A's
    center column first, then along B's center row.
    """
    ax, ay = room_a.center
    bx, by = room_b.center
    if horizontal_first:
        return h_segment(ax, bx, ay) + v_segment(ay, by, bx)
    return v_segment(ay, by, ax) + h_segment(ax, bx, by)


class CorridorCarver:
    """Writes floor tiles along L-shaped corridors.

    The orientation of each corridor is a coin flip drawn from ``rng``.
    """

    def __init__(
        self,
        grid: TileGrid,
        floor_id: TileId,
        rng: RNG,
        layer: int = config.GROUND_LAYER,
    ) -> None:
        self.grid = grid
        self.floor_id = floor_id
        self.rng = rng
        self.layer = layer

    def carve_room(self, room: Room) -> None:
        for x, y in room.cells():
            self.grid.set_tile(self.layer, x, y, self.floor_id)

    def connect(self, room_a: Room, room_b: Room) -> bool:
        """Carve a corridor between the rooms.

        Returns True if the corridor went horizontal-first.
        """
        horizontal_first = self.rng.random() < 0.5
        for x, y in corridor_cells(room_a, room_b, horizontal_first):
            self.grid.set_tile(self.layer, x, y, self.floor_id)
        return horizontal_first
