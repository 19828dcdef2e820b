"""The tile grid port and an in-memory numpy implementation.

The generator never owns a tile buffer. It reads and writes tile ids through
a ``TileGrid``, which the host implements on top of its own map data.
``ArrayTileGrid`` is the host-side implementation used by the CLI preview
and the tests: a dense ``(width, height, layers)`` array of tile ids.
"""

from __future__ import annotations

import abc

import numpy as np

from delve import config
from delve.types import LayerIndex, TileCoord, TileId, WorldTilePos


class TileGrid(abc.ABC):
    """Bounds-checked access to a host-owned, layered grid of tile ids."""

    @property
    @abc.abstractmethod
    def width(self) -> TileCoord:
        raise NotImplementedError

    @property
    @abc.abstractmethod
    def height(self) -> TileCoord:
        raise NotImplementedError

    @abc.abstractmethod
    def get_tile_id(self, x: TileCoord, y: TileCoord, layer: LayerIndex) -> TileId:
        """Return the tile id at ``(x, y)`` on ``layer``."""
        raise NotImplementedError

    @abc.abstractmethod
    def set_tile(
        self, layer: LayerIndex, x: TileCoord, y: TileCoord, tile_id: TileId
    ) -> None:
        """Write ``tile_id`` at ``(x, y)`` on ``layer``.

        Must silently ignore coordinates outside ``[0, width) x [0, height)``.
        """
        raise NotImplementedError

    def in_bounds(self, x: TileCoord, y: TileCoord) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height


class ArrayTileGrid(TileGrid):
    """A ``TileGrid`` backed by a numpy array of shape (width, height, layers).

    Tile id 0 means "empty", matching hosts where an unset cell has no tile.
    """

    def __init__(
        self,
        width: TileCoord,
        height: TileCoord,
        layers: int = config.GRID_LAYER_COUNT,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid must be at least 1x1, got {width}x{height}")
        self._width = width
        self._height = height
        self.tiles = np.zeros((width, height, layers), dtype=np.int32, order="F")

    @classmethod
    def with_anchors(
        cls,
        width: TileCoord,
        height: TileCoord,
        wall_id: TileId,
        floor_id: TileId,
        door_id: TileId,
    ) -> ArrayTileGrid:
        """Create a blank grid with the tileset anchors painted on layer 0."""
        grid = cls(width, height)
        for (x, y), tile_id in (
            (config.WALL_ANCHOR, wall_id),
            (config.FLOOR_ANCHOR, floor_id),
            (config.DOOR_ANCHOR, door_id),
        ):
            grid.set_tile(config.GROUND_LAYER, x, y, tile_id)
        return grid

    @property
    def width(self) -> TileCoord:
        return self._width

    @property
    def height(self) -> TileCoord:
        return self._height

    @property
    def layer_count(self) -> int:
        return self.tiles.shape[2]

    def get_tile_id(self, x: TileCoord, y: TileCoord, layer: LayerIndex) -> TileId:
        if not self.in_bounds(x, y) or not 0 <= layer < self.layer_count:
            return 0
        return int(self.tiles[x, y, layer])

    def set_tile(
        self, layer: LayerIndex, x: TileCoord, y: TileCoord, tile_id: TileId
    ) -> None:
        if not self.in_bounds(x, y) or not 0 <= layer < self.layer_count:
            return
        self.tiles[x, y, layer] = tile_id

    def layer(self, layer: LayerIndex) -> np.ndarray:
        """Return a (width, height) view of one layer."""
        return self.tiles[:, :, layer]

    def positions_of(
        self, tile_id: TileId, layer: LayerIndex = config.GROUND_LAYER
    ) -> list[WorldTilePos]:
        """Return every ``(x, y)`` on ``layer`` holding ``tile_id``."""
        xs, ys = np.nonzero(self.layer(layer) == tile_id)
        return [(int(x), int(y)) for x, y in zip(xs, ys, strict=True)]

    def snapshot(self) -> np.ndarray:
        """Return a copy of the full tile array."""
        return self.tiles.copy()

    def restore(self, snapshot: np.ndarray) -> None:
        """Overwrite the tile array with a previously taken snapshot."""
        if snapshot.shape != self.tiles.shape:
            raise ValueError(
                f"Snapshot shape {snapshot.shape} does not match {self.tiles.shape}"
            )
        self.tiles[...] = snapshot
