"""In-process implementations of the host ports.

These back the command-line preview and the tests. The map host keeps the
map as authored (anchors painted, nothing generated) and restores it on every
reload, the same way a real host reloads map data from disk.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .ports import LevelState, MapHost, PlayerPort

if TYPE_CHECKING:
    from delve.environment.tile_grid import ArrayTileGrid
    from delve.types import Facing, TileCoord

logger = logging.getLogger(__name__)


class MemoryPlayer(PlayerPort):
    def __init__(
        self, x: TileCoord = 0, y: TileCoord = 0, direction: Facing = 2
    ) -> None:
        self._x = x
        self._y = y
        self._direction: Facing = direction

    @property
    def x(self) -> TileCoord:
        return self._x

    @property
    def y(self) -> TileCoord:
        return self._y

    @property
    def direction(self) -> Facing:
        return self._direction

    def locate(self, x: TileCoord, y: TileCoord) -> None:
        self._x = x
        self._y = y


@dataclass
class MemoryLevelState(LevelState):
    map_id: int = 1
    next_floor_pending: bool = False
    exit_x: TileCoord | None = None
    exit_y: TileCoord | None = None
    refresh_requests: int = 0

    def request_refresh(self) -> None:
        self.refresh_requests += 1


@dataclass
class MemoryMapHost(MapHost):
    """Reloads an ``ArrayTileGrid`` from the snapshot taken at construction.

    ``on_loaded`` is called after every reload; wire it to
    ``DungeonHostAdapter.on_map_loaded``.
    """

    grid: ArrayTileGrid
    player: MemoryPlayer
    on_loaded: Callable[[], object] | None = None
    transfers: list[tuple[int, TileCoord, TileCoord, Facing]] = field(
        default_factory=list
    )

    def __post_init__(self) -> None:
        self._authored = self.grid.snapshot()

    def reserve_transfer(
        self, map_id: int, x: TileCoord, y: TileCoord, direction: Facing
    ) -> None:
        logger.debug("Reloading map %d with player at (%d, %d)", map_id, x, y)
        self.transfers.append((map_id, x, y, direction))
        self.grid.restore(self._authored)
        self.player.locate(x, y)
        if self.on_loaded is not None:
            self.on_loaded()
