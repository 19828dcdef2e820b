"""Map generation for Delve.

- RoomSampler: rejection-sampled, gap-separated rooms
- CorridorCarver: L-shaped corridors between room centers
- select_exit_room: farthest room from the start room
- DungeonGenerator: the full pass against a host tile grid
"""

from .corridors import CorridorCarver, corridor_cells
from .dungeon import (
    Corridor,
    DungeonGenerationRequest,
    DungeonGenerator,
    DungeonResult,
    GenerationState,
)
from .exits import select_exit_room
from .rooms import (
    Room,
    RoomSampler,
    SamplingReport,
    rooms_too_close,
    target_room_count,
)

__all__ = [
    "Corridor",
    "CorridorCarver",
    "DungeonGenerationRequest",
    "DungeonGenerator",
    "DungeonResult",
    "GenerationState",
    "Room",
    "RoomSampler",
    "SamplingReport",
    "corridor_cells",
    "rooms_too_close",
    "select_exit_room",
    "target_room_count",
]
