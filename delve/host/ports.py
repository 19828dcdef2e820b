"""Interfaces the host runtime implements for the generator and its adapter.

Only the tile grid is required to generate. Every other port is optional and
resolved once at the start of a pass: a missing player or scene simply means
nobody is told about the spawn point or asked to redraw.
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from delve.types import Facing, TileCoord


class PlayerPort(abc.ABC):
    """The player avatar on the host map."""

    @property
    @abc.abstractmethod
    def x(self) -> TileCoord:
        raise NotImplementedError

    @property
    @abc.abstractmethod
    def y(self) -> TileCoord:
        raise NotImplementedError

    @property
    @abc.abstractmethod
    def direction(self) -> Facing:
        raise NotImplementedError

    @abc.abstractmethod
    def locate(self, x: TileCoord, y: TileCoord) -> None:
        """Place the avatar at grid coordinates ``(x, y)``."""
        raise NotImplementedError


class ScenePort(abc.ABC):
    """The renderer currently showing the map."""

    @abc.abstractmethod
    def refresh(self) -> None:
        """Redraw the grid from its current tile ids."""
        raise NotImplementedError


class LevelState(abc.ABC):
    """Per-map state object owned by the host.

    The ``next_floor_pending``, ``exit_x`` and ``exit_y`` attributes belong to
    ``DungeonHostAdapter``; nothing else writes them.
    """

    map_id: int
    next_floor_pending: bool = False
    exit_x: TileCoord | None = None
    exit_y: TileCoord | None = None

    @abc.abstractmethod
    def request_refresh(self) -> None:
        """Ask the host to re-sync anything derived from the tile data."""
        raise NotImplementedError


class MapHost(abc.ABC):
    """Map loading on the host side."""

    @abc.abstractmethod
    def reserve_transfer(
        self, map_id: int, x: TileCoord, y: TileCoord, direction: Facing
    ) -> None:
        """Reload ``map_id`` with the player at ``(x, y)`` facing ``direction``.

        Once the reload finishes the host must call
        ``DungeonHostAdapter.on_map_loaded()``.
        """
        raise NotImplementedError
