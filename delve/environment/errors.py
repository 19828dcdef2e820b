"""Conditions that stop or degrade a generation pass.

These are raised inside the generator's phases and caught at the
``DungeonGenerator.generate()`` boundary, where they are logged and recorded
on the ``DungeonResult``. None of them reach the host.
"""

from __future__ import annotations


class DungeonGenerationError(Exception):
    """Base class for every reported generation condition."""

    #: Short machine-readable name used in logs and on results.
    code: str = "generation_error"


class GridNotReady(DungeonGenerationError):
    """The host has no tile grid to generate into."""

    code = "grid_not_ready"


class InvalidTileset(DungeonGenerationError):
    """The wall, floor and door anchors are missing or share an id."""

    code = "invalid_tileset"


class MapTooSmall(DungeonGenerationError):
    """The map cannot fit rooms of the configured minimum size.

    Non-fatal: it is recorded as a warning and generation carries on.
    """

    code = "map_too_small"


class NoRoomsPlaced(DungeonGenerationError):
    """Room sampling ran out of attempts without accepting a single room."""

    code = "no_rooms_placed"


class HostPortFailed(DungeonGenerationError):
    """A host port raised while the pass was talking to it.

    The original exception is kept as ``__cause__``.
    """

    code = "host_port_failed"
