"""Dungeon floor generation: rooms joined by L-shaped corridors.

``DungeonGenerator`` runs one synchronous pass over a host-owned tile grid:

1. Validate the wall/floor/door anchors.
2. Fill the ground layer with wall.
3. Sample rooms, scaled to the map area.
4. Carve the rooms, joining the last room to every room.
5. Place the player in the first room and a door in the farthest room.
6. Ask the host to redraw.

Every reported condition (see ``delve.environment.errors``) is logged and
returned on the ``DungeonResult``. A pass always returns.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

from delve import config
from delve.environment.errors import (
    DungeonGenerationError,
    GridNotReady,
    HostPortFailed,
    MapTooSmall,
    NoRoomsPlaced,
)
from delve.environment.tile_types import TileSet, resolve_tileset
from delve.events import (
    DungeonGeneratedEvent,
    DungeonGenerationFailedEvent,
    MessageEvent,
    publish_event,
)
from delve.util import rng as rng_module

from .corridors import CorridorCarver, corridor_cells
from .exits import select_exit_room
from .rooms import Room, RoomSampler, target_room_count

if TYPE_CHECKING:
    from delve.environment.tile_grid import TileGrid
    from delve.host.ports import LevelState, PlayerPort, ScenePort
    from delve.types import RandomSeed, WorldTilePos
    from delve.util.rng import RNG

logger = logging.getLogger(__name__)

_rng = rng_module.get("map.dungeon")


class GenerationState(Enum):
    """Phases of a generation pass, in the order they are entered."""

    IDLE = auto()
    VALIDATING_TILES = auto()
    FILLING = auto()
    SAMPLING_ROOMS = auto()
    CARVING = auto()
    PLACING_SPAWN_AND_EXIT = auto()
    REFRESHING = auto()
    DONE = auto()
    ABORTED = auto()


@dataclass(frozen=True)
class Corridor:
    """A carved connection from ``start`` to ``end``."""

    start: Room
    end: Room
    horizontal_first: bool

    def cells(self) -> list[WorldTilePos]:
        return corridor_cells(self.start, self.end, self.horizontal_first)


@dataclass(frozen=True)
class DungeonGenerationRequest:
    """Inputs for one pass.

    Attributes:
        seed: Seed for a private RNG, making the pass reproducible.
        rng: An explicit RNG to draw from. Takes precedence over ``seed``.
        target_rooms: Overrides the area-scaled room target.
    """

    seed: RandomSeed = None
    rng: RNG | None = None
    target_rooms: int | None = None

    def resolve_rng(self) -> RNG:
        if self.rng is not None:
            return self.rng
        if self.seed is not None:
            return random.Random(self.seed)
        return _rng


@dataclass
class DungeonResult:
    """Outcome of one pass. ``rooms`` keeps sampling order."""

    rooms: list[Room] = field(default_factory=list)
    corridors: list[Corridor] = field(default_factory=list)
    spawn: WorldTilePos | None = None
    exit: WorldTilePos | None = None
    success: bool = False
    target_rooms: int = 0
    tileset: TileSet | None = None
    final_state: GenerationState = GenerationState.IDLE
    failure: DungeonGenerationError | None = None
    warnings: list[DungeonGenerationError] = field(default_factory=list)

    @property
    def aborted(self) -> bool:
        return self.final_state is GenerationState.ABORTED


class DungeonGenerator:
    """Runs generation passes against a host grid and its optional ports."""

    def __init__(
        self,
        grid: TileGrid | None,
        player: PlayerPort | None = None,
        scene: ScenePort | None = None,
        level: LevelState | None = None,
        sampler: RoomSampler | None = None,
    ) -> None:
        self.grid = grid
        self.player = player
        self.scene = scene
        self.level = level
        self.sampler = sampler if sampler is not None else RoomSampler()
        self.state = GenerationState.IDLE

    def generate(
        self, request: DungeonGenerationRequest | None = None
    ) -> DungeonResult:
        """Run one full pass. Never raises.

        Reported conditions and errors raised by host ports both end the pass
        in ``ABORTED`` with the cause on ``result.failure``.
        """
        if request is None:
            request = DungeonGenerationRequest()
        result = DungeonResult()
        self.state = GenerationState.IDLE

        try:
            self._run(request, result)
        except DungeonGenerationError as exc:
            self._transition(GenerationState.ABORTED)
            result.failure = exc
            logger.warning(
                "%s Generation aborted (%s): %s", config.LOG_TAG, exc.code, exc
            )
        except Exception as exc:
            failed_in = self.state
            self._transition(GenerationState.ABORTED)
            failure = HostPortFailed(
                f"{type(exc).__name__} during {failed_in.name}: {exc}"
            )
            failure.__cause__ = exc
            result.failure = failure
            logger.exception(
                "%s Generation aborted (%s): %s",
                config.LOG_TAG,
                failure.code,
                failure,
            )
        result.final_state = self.state

        if result.success:
            publish_event(DungeonGeneratedEvent(result))
        else:
            publish_event(DungeonGenerationFailedEvent(result))
        return result

    def _transition(self, state: GenerationState) -> None:
        logger.debug("Generation state %s -> %s", self.state.name, state.name)
        self.state = state

    def _warn(self, result: DungeonResult, condition: DungeonGenerationError) -> None:
        result.warnings.append(condition)
        publish_event(MessageEvent(text=f"{config.LOG_TAG} {condition}"))

    def _run(self, request: DungeonGenerationRequest, result: DungeonResult) -> None:
        # Ports are read once; the pass works on these references throughout.
        grid = self.grid
        player = self.player
        scene = self.scene
        level = self.level

        self._transition(GenerationState.VALIDATING_TILES)
        if grid is None:
            raise GridNotReady("The map's tile grid is not ready.")
        width, height = grid.width, grid.height
        rng = request.resolve_rng()

        tileset = resolve_tileset(grid)
        result.tileset = tileset
        if (
            width < config.SMALL_MAP_WARNING_SIZE
            or height < config.SMALL_MAP_WARNING_SIZE
        ):
            notice = MapTooSmall(
                f"The map is smaller than {config.SMALL_MAP_WARNING_SIZE}x"
                f"{config.SMALL_MAP_WARNING_SIZE}. Please, use a bigger map."
            )
            logger.info("%s %s", config.LOG_TAG, notice)
            self._warn(result, notice)

        target = request.target_rooms
        if target is None:
            target = target_room_count(width, height)
        result.target_rooms = target
        logger.debug(
            "Generating %dx%d map (area=%d, target rooms=%d)",
            width,
            height,
            width * height,
            target,
        )

        self._transition(GenerationState.FILLING)
        self._fill(grid, tileset.wall)

        self._transition(GenerationState.SAMPLING_ROOMS)
        report = self.sampler.sample(width, height, target, rng)
        if report.too_small is not None:
            self._warn(result, report.too_small)
        if not report.rooms:
            # The grid is already wall-filled; show that state.
            self._request_refresh(scene, level)
            raise NoRoomsPlaced(
                f"It was impossible to place any rooms in {report.attempts} "
                "attempts. Try changing the room sizes, the attempt budget or "
                "the map size."
            )
        result.rooms = list(report.rooms)

        self._transition(GenerationState.CARVING)
        carver = CorridorCarver(grid, tileset.floor, rng)
        hub = result.rooms[-1]
        for room in result.rooms:
            carver.carve_room(room)
            horizontal_first = carver.connect(hub, room)
            result.corridors.append(Corridor(hub, room, horizontal_first))

        self._transition(GenerationState.PLACING_SPAWN_AND_EXIT)
        # TODO: spawn the player in the room farthest from the exit door
        # instead of always using the first room.
        first_room = result.rooms[0]
        result.spawn = first_room.center
        if player is not None:
            player.locate(*result.spawn)

        exit_room = select_exit_room(result.rooms, first_room)
        if exit_room is not None and tileset.door:
            grid.set_tile(
                config.GROUND_LAYER,
                exit_room.center_x,
                exit_room.center_y,
                tileset.door,
            )
            result.exit = exit_room.center

        self._transition(GenerationState.REFRESHING)
        self._request_refresh(scene, level)

        self._transition(GenerationState.DONE)
        result.success = True
        logger.info(
            "%s Map generated successfully: %d/%d rooms, spawn=%s, exit=%s",
            config.LOG_TAG,
            len(result.rooms),
            target,
            result.spawn,
            result.exit,
        )

    def _fill(self, grid: TileGrid, wall_id: int) -> None:
        for y in range(grid.height):
            for x in range(grid.width):
                grid.set_tile(config.GROUND_LAYER, x, y, wall_id)

    def _request_refresh(
        self, scene: ScenePort | None, level: LevelState | None
    ) -> None:
        if scene is not None:
            scene.refresh()
        if level is not None:
            level.request_refresh()
