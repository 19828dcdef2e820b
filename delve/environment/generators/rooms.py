"""Room placement by bounded rejection sampling."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from delve import config
from delve.environment.errors import MapTooSmall

if TYPE_CHECKING:
    from delve.types import TileCoord, WorldTilePos
    from delve.util.rng import RNG

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Room:
    """An axis-aligned rectangle of floor tiles, anchored at its top-left."""

    x: TileCoord
    y: TileCoord
    width: TileCoord
    height: TileCoord

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Room must be at least 1x1, got {self!r}")

    @property
    def center_x(self) -> TileCoord:
        return self.x + self.width // 2

    @property
    def center_y(self) -> TileCoord:
        return self.y + self.height // 2

    @property
    def center(self) -> WorldTilePos:
        return (self.center_x, self.center_y)

    @property
    def x2(self) -> TileCoord:
        """One past the rightmost column."""
        return self.x + self.width

    @property
    def y2(self) -> TileCoord:
        """One past the bottom row."""
        return self.y + self.height

    def cells(self) -> Iterator[WorldTilePos]:
        for y in range(self.y, self.y2):
            for x in range(self.x, self.x2):
                yield x, y

    def contains(self, x: TileCoord, y: TileCoord) -> bool:
        return self.x <= x < self.x2 and self.y <= y < self.y2

    def manhattan_distance(self, other: Room) -> int:
        """Distance between the two room centers in grid steps."""
        return abs(self.center_x - other.center_x) + abs(
            self.center_y - other.center_y
        )


def rooms_too_close(
    candidate: Room, existing: Room, gap: int = config.ROOM_GAP
) -> bool:
    """Return True if ``candidate`` touches ``existing`` grown by ``gap`` tiles."""
    gx1 = existing.x - gap
    gy1 = existing.y - gap
    gx2 = existing.x2 + gap
    gy2 = existing.y2 + gap
    return (
        candidate.x < gx2
        and candidate.x2 > gx1
        and candidate.y < gy2
        and candidate.y2 > gy1
    )


def target_room_count(
    map_width: TileCoord,
    map_height: TileCoord,
    area_per_room: int = config.AREA_PER_ROOM,
    min_rooms: int = config.MIN_TARGET_ROOMS,
    max_rooms: int = config.MAX_TARGET_ROOMS,
) -> int:
    """Room target scaled by map area, clamped to ``[min_rooms, max_rooms]``."""
    return max(min_rooms, min(max_rooms, (map_width * map_height) // area_per_room))


@dataclass
class SamplingReport:
    """What a sampling run produced and why it stopped."""

    rooms: list[Room] = field(default_factory=list)
    target: int = 0
    attempts: int = 0
    aspect_rejections: int = 0
    overlap_rejections: int = 0
    too_small: MapTooSmall | None = None

    @property
    def reached_target(self) -> bool:
        return len(self.rooms) >= self.target


class RoomSampler:
    """Places mutually separated rooms by drawing random candidates.

    Every loop iteration spends one attempt, whether the candidate is
    accepted, rejected for its aspect ratio or rejected for crowding an
    earlier room. Running out of attempts is not an error; the caller gets
    whatever was placed.
    """

    def __init__(
        self,
        min_room_size: int = config.MIN_ROOM_SIZE,
        max_room_size: int = config.MAX_ROOM_SIZE,
        max_attempts: int = config.MAX_ATTEMPTS,
        max_aspect_ratio: float = config.MAX_ROOM_ASPECT_RATIO,
        gap: int = config.ROOM_GAP,
    ) -> None:
        if min_room_size < 1 or max_room_size < min_room_size:
            raise ValueError(
                f"Invalid room size range [{min_room_size}, {max_room_size}]"
            )
        if max_aspect_ratio < 1.0:
            raise ValueError(f"max_aspect_ratio must be >= 1, got {max_aspect_ratio}")
        self.min_room_size = min_room_size
        self.max_room_size = max_room_size
        self.max_attempts = max_attempts
        self.max_aspect_ratio = max_aspect_ratio
        self.gap = gap

    def usable_dimensions(
        self, map_width: TileCoord, map_height: TileCoord
    ) -> tuple[int, int]:
        """Largest room width and height that fit inside the one-tile border."""
        return (
            min(self.max_room_size, map_width - 2),
            min(self.max_room_size, map_height - 2),
        )

    def aspect_ok(self, width: int, height: int) -> bool:
        aspect = width / height
        return 1 / self.max_aspect_ratio <= aspect <= self.max_aspect_ratio

    def sample(
        self,
        map_width: TileCoord,
        map_height: TileCoord,
        target: int,
        rng: RNG,
    ) -> SamplingReport:
        """Draw candidates until ``target`` rooms are placed or attempts run out."""
        report = SamplingReport(target=target)

        while len(report.rooms) < target and report.attempts < self.max_attempts:
            max_width, max_height = self.usable_dimensions(map_width, map_height)
            if max_width < self.min_room_size or max_height < self.min_room_size:
                report.too_small = MapTooSmall(
                    f"Map {map_width}x{map_height} fits rooms up to "
                    f"{max_width}x{max_height}, below the minimum size "
                    f"{self.min_room_size}"
                )
                logger.warning(
                    "%s The map is too small for the defined room sizes: %s",
                    config.LOG_TAG,
                    report.too_small,
                )
                break

            report.attempts += 1
            width = rng.randint(self.min_room_size, max_width)
            height = rng.randint(self.min_room_size, max_height)
            if not self.aspect_ok(width, height):
                report.aspect_rejections += 1
                continue

            x = rng.randint(1, map_width - width - 1)
            y = rng.randint(1, map_height - height - 1)
            candidate = Room(x, y, width, height)

            if any(rooms_too_close(candidate, room, self.gap) for room in report.rooms):
                report.overlap_rejections += 1
                continue

            report.rooms.append(candidate)

        logger.debug(
            "Sampled %d/%d rooms in %d attempts (aspect rejects=%d, overlaps=%d)",
            len(report.rooms),
            target,
            report.attempts,
            report.aspect_rejections,
            report.overlap_rejections,
        )
        return report
