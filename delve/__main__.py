"""Generate dungeon floors on an in-memory map and print them.

Example:
    python -m delve --width 48 --height 24 --seed crypt-3 --floors 2
"""

from __future__ import annotations

import argparse
import logging

from . import config
from .environment.tile_grid import ArrayTileGrid
from .environment.tile_types import TileSet
from .host import (
    ConsoleScene,
    DungeonHostAdapter,
    MemoryLevelState,
    MemoryMapHost,
    MemoryPlayer,
    ProcGenCommands,
    render_ascii,
    tile_glyphs_for,
)
from .util import rng

logger = logging.getLogger(__name__)


def _parse_seed(value: str) -> int | str:
    try:
        return int(value)
    except ValueError:
        return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="delve", description="Generate and print dungeon floors"
    )
    parser.add_argument("--width", type=int, default=40, help="Map width in tiles")
    parser.add_argument("--height", type=int, default=24, help="Map height in tiles")
    parser.add_argument(
        "--seed",
        type=_parse_seed,
        default=config.RANDOM_SEED,
        help="Master seed (int or string). Omit for a random floor.",
    )
    parser.add_argument(
        "--floors",
        type=int,
        default=1,
        help="Number of floors to generate, descending after the first",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level, format="%(levelname)s %(name)s: %(message)s"
    )
    rng.init(args.seed)

    tileset = TileSet(
        wall=config.DEMO_WALL_ID, floor=config.DEMO_FLOOR_ID, door=config.DEMO_DOOR_ID
    )
    try:
        grid = ArrayTileGrid.with_anchors(
            args.width, args.height, tileset.wall, tileset.floor, tileset.door
        )
    except ValueError as exc:
        build_parser().error(str(exc))

    player = MemoryPlayer()
    map_host = MemoryMapHost(grid, player)
    scene = ConsoleScene(grid, tile_glyphs_for(tileset), player=player)
    adapter = DungeonHostAdapter(
        grid=grid,
        player=player,
        scene=scene,
        level=MemoryLevelState(),
        map_host=map_host,
    )
    map_host.on_loaded = adapter.on_map_loaded
    commands = ProcGenCommands(adapter)

    ok = True
    for floor in range(1, max(1, args.floors) + 1):
        if floor == 1:
            commands.execute_line(f"{config.PLUGIN_COMMAND} GenerateMap")
        else:
            adapter.transfer_to_next_floor()
        result = adapter.last_result
        print(f"Floor {floor}:")
        print(render_ascii(scene.console))
        if result is None or not result.success:
            reason = result.failure if result is not None else "unexpected error"
            print(f"Generation failed: {reason}")
            ok = False
            break
        print(
            f"rooms={len(result.rooms)}/{result.target_rooms} "
            f"spawn={result.spawn} exit={result.exit}"
        )
        print()

    return 0 if ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
