from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from delve.environment.tile_grid import ArrayTileGrid
from delve.environment.tile_types import TileSet
from delve.host import (
    ConsoleScene,
    DungeonHostAdapter,
    MemoryLevelState,
    MemoryMapHost,
    MemoryPlayer,
    tile_glyphs_for,
)

WALL = 1
FLOOR = 2
DOOR = 3

# Two 5x5 rooms on a 20x10 map: (1, 1) and (10, 2). Draw order per room is
# width, height, x, y.
TWO_ROOM_DRAWS = [5, 5, 1, 1, 5, 5, 10, 2]


class ScriptedRNG:
    """An RNG that replays queued values, failing loudly on a bad draw."""

    def __init__(self, ints: Sequence[int], floats: Sequence[float] = ()) -> None:
        self._ints = list(ints)
        self._floats = list(floats)

    def randint(self, a: int, b: int) -> int:
        if not self._ints:
            raise AssertionError("ScriptedRNG ran out of integers")
        value = self._ints.pop(0)
        if not a <= value <= b:
            raise AssertionError(f"Scripted value {value} outside [{a}, {b}]")
        return value

    def random(self) -> float:
        return self._floats.pop(0) if self._floats else 0.0

    @property
    def remaining_ints(self) -> int:
        return len(self._ints)


def make_grid(
    width: int = 20,
    height: int = 10,
    wall: int = WALL,
    floor: int = FLOOR,
    door: int = DOOR,
) -> ArrayTileGrid:
    return ArrayTileGrid.with_anchors(width, height, wall, floor, door)


@dataclass
class Host:
    grid: ArrayTileGrid
    player: MemoryPlayer
    level: MemoryLevelState
    scene: ConsoleScene
    map_host: MemoryMapHost
    adapter: DungeonHostAdapter


def make_host(width: int = 40, height: int = 24) -> Host:
    """Wire the in-memory host the same way the CLI does."""
    grid = make_grid(width, height)
    player = MemoryPlayer(x=3, y=0, direction=2)
    level = MemoryLevelState(map_id=7)
    scene = ConsoleScene(
        grid, tile_glyphs_for(TileSet(WALL, FLOOR, DOOR)), player=player
    )
    map_host = MemoryMapHost(grid, player)
    adapter = DungeonHostAdapter(
        grid=grid, player=player, scene=scene, level=level, map_host=map_host
    )
    map_host.on_loaded = adapter.on_map_loaded
    return Host(grid, player, level, scene, map_host, adapter)
