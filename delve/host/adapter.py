"""Glue between the dungeon generator and a host runtime.

The adapter is the only code that writes generation state back onto the
host's ``LevelState``: the pending next-floor flag and the exit coordinates.
It also owns the reentrancy guard that keeps one lifecycle transition from
triggering more than one generation pass.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from delve import config
from delve.environment.generators.dungeon import (
    DungeonGenerationRequest,
    DungeonGenerator,
    DungeonResult,
)

if TYPE_CHECKING:
    from delve.environment.generators.rooms import RoomSampler
    from delve.environment.tile_grid import TileGrid

    from .ports import LevelState, MapHost, PlayerPort, ScenePort

logger = logging.getLogger(__name__)


class DungeonHostAdapter:
    """Runs generation passes on behalf of the host.

    Ports are plain attributes so the host can attach them as they become
    available (the grid usually exists only once a map is loaded).
    """

    def __init__(
        self,
        grid: TileGrid | None = None,
        player: PlayerPort | None = None,
        scene: ScenePort | None = None,
        level: LevelState | None = None,
        map_host: MapHost | None = None,
        sampler: RoomSampler | None = None,
    ) -> None:
        self.grid = grid
        self.player = player
        self.scene = scene
        self.level = level
        self.map_host = map_host
        self.sampler = sampler
        self.last_result: DungeonResult | None = None
        self._generating = False

    @property
    def is_generating(self) -> bool:
        return self._generating

    def generate_floor(
        self, request: DungeonGenerationRequest | None = None
    ) -> DungeonResult | None:
        """Run one generation pass and record its exit on the level.

        Returns None if a pass is already running (a nested trigger).
        """
        if self._generating:
            logger.debug("Ignoring nested generation trigger")
            return None

        self._generating = True
        self.last_result = None
        try:
            generator = DungeonGenerator(
                grid=self.grid,
                player=self.player,
                scene=self.scene,
                level=self.level,
                sampler=self.sampler,
            )
            result = generator.generate(request)
        finally:
            self._generating = False

        self._record_exit(result)
        self.last_result = result
        return result

    def _record_exit(self, result: DungeonResult) -> None:
        level = self.level
        if level is None or not result.success or result.exit is None:
            # A failed pass leaves the previous exit fields alone.
            return
        level.exit_x, level.exit_y = result.exit

    def on_map_loaded(self) -> DungeonResult | None:
        """Lifecycle hook: regenerate when a next-floor transfer is pending.

        The pending flag is cleared only after the pass completes, so a reload
        fired from inside the pass cannot start a second one.
        """
        level = self.level
        if level is None or not level.next_floor_pending:
            return None
        if self._generating:
            return None
        try:
            return self.generate_floor()
        finally:
            level.next_floor_pending = False

    def transfer_to_next_floor(self) -> bool:
        """Mark a pending next floor and ask the host to reload the map in place.

        Returns True if a transfer was requested.
        """
        level = self.level
        player = self.player
        if level is None or self.map_host is None or player is None:
            logger.warning(
                "%s Cannot transfer to the next floor: level, player or map host "
                "missing",
                config.LOG_TAG,
            )
            return False
        if level.next_floor_pending:
            return False

        level.next_floor_pending = True
        self.map_host.reserve_transfer(
            level.map_id, player.x, player.y, player.direction
        )
        return True
