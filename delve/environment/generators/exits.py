from __future__ import annotations

from collections.abc import Sequence

from .rooms import Room


def select_exit_room(rooms: Sequence[Room], start: Room | None = None) -> Room | None:
    """Pick the room whose center is farthest (Manhattan) from ``start``.

    ``start`` defaults to the first room. With a single room the exit is that
    room. Ties keep the earliest room in ``rooms``.
    """
    if not rooms:
        return None
    if start is None:
        start = rooms[0]

    exit_room = rooms[-1]
    if len(rooms) > 1:
        best_distance = -1
        for room in rooms:
            distance = room.manhattan_distance(start)
            if distance > best_distance:
                best_distance = distance
                exit_room = room
    return exit_room
