from __future__ import annotations

import logging
from unittest.mock import MagicMock

import pytest

from delve.environment.errors import HostPortFailed, NoRoomsPlaced
from delve.environment.generators import DungeonGenerationRequest
from delve.host import DungeonHostAdapter, MemoryLevelState
from tests.helpers import DOOR, TWO_ROOM_DRAWS, WALL, ScriptedRNG, make_host


def test_generate_floor_records_exit_on_level() -> None:
    host = make_host(20, 10)
    request = DungeonGenerationRequest(rng=ScriptedRNG(TWO_ROOM_DRAWS))

    result = host.adapter.generate_floor(request)

    assert result is not None and result.success
    assert host.adapter.last_result is result
    assert (host.level.exit_x, host.level.exit_y) == (12, 4)
    assert (host.player.x, host.player.y) == (3, 3)
    assert host.level.refresh_requests == 1
    assert host.scene.refresh_count == 1
    assert not host.adapter.is_generating


def test_failed_pass_keeps_previous_exit() -> None:
    host = make_host(3, 3)
    host.level.exit_x, host.level.exit_y = 5, 6

    result = host.adapter.generate_floor()

    assert result is not None
    assert isinstance(result.failure, NoRoomsPlaced)
    assert (host.level.exit_x, host.level.exit_y) == (5, 6)


def test_transfer_regenerates_from_authored_map() -> None:
    host = make_host()
    first = host.adapter.generate_floor()
    assert first is not None and first.success
    # Generation paints over the anchors; only a reload brings them back.
    assert host.grid.get_tile_id(2, 0, 0) == WALL

    spawn = first.spawn
    assert host.adapter.transfer_to_next_floor()

    second = host.adapter.last_result
    assert second is not None and second.success
    assert second is not first
    assert host.map_host.transfers == [(7, *spawn, 2)]
    assert host.level.next_floor_pending is False
    assert (host.level.exit_x, host.level.exit_y) == second.exit
    assert (host.player.x, host.player.y) == second.spawn
    assert host.grid.positions_of(DOOR) == [second.exit]


def test_several_floors_in_a_row() -> None:
    host = make_host()
    host.adapter.generate_floor()
    for _ in range(3):
        assert host.adapter.transfer_to_next_floor()
        assert host.adapter.last_result is not None
        assert host.adapter.last_result.success
    assert len(host.map_host.transfers) == 3
    assert host.scene.refresh_count == 4


def test_transfer_ignored_while_pending() -> None:
    host = make_host()
    host.level.next_floor_pending = True

    assert not host.adapter.transfer_to_next_floor()
    assert host.map_host.transfers == []


def test_transfer_without_ports_is_refused(caplog: pytest.LogCaptureFixture) -> None:
    adapter = DungeonHostAdapter(level=MemoryLevelState())
    with caplog.at_level(logging.WARNING):
        assert not adapter.transfer_to_next_floor()
    assert "Cannot transfer to the next floor" in caplog.text
    assert adapter.level is not None
    assert not adapter.level.next_floor_pending


def test_map_loaded_without_pending_transfer_does_nothing() -> None:
    host = make_host()
    assert host.adapter.on_map_loaded() is None
    assert host.scene.refresh_count == 0
    assert host.adapter.last_result is None


def test_map_loaded_without_level_does_nothing() -> None:
    assert DungeonHostAdapter().on_map_loaded() is None


def test_nested_triggers_run_a_single_pass() -> None:
    host = make_host()
    nested: list[object] = []

    def refresh() -> None:
        # A host that reloads or re-issues the command from inside the pass.
        host.level.next_floor_pending = True
        nested.append(host.adapter.on_map_loaded())
        nested.append(host.adapter.generate_floor())
        nested.append(host.adapter.transfer_to_next_floor())

    scene = MagicMock()
    scene.refresh.side_effect = refresh
    host.adapter.scene = scene

    result = host.adapter.generate_floor()

    assert result is not None and result.success
    assert nested == [None, None, False]
    assert scene.refresh.call_count == 1
    assert host.map_host.transfers == []


def test_pending_flag_clears_after_reload_pass() -> None:
    host = make_host()
    seen: list[bool] = []
    host.adapter.scene = MagicMock()
    host.adapter.scene.refresh.side_effect = lambda: seen.append(
        host.level.next_floor_pending
    )

    host.adapter.transfer_to_next_floor()

    assert seen == [True]
    assert host.level.next_floor_pending is False


def test_pending_flag_clears_when_pass_fails() -> None:
    host = make_host(3, 3)
    host.level.next_floor_pending = True

    result = host.adapter.on_map_loaded()

    assert result is not None and not result.success
    assert host.level.next_floor_pending is False


def test_port_error_keeps_previous_exit(caplog: pytest.LogCaptureFixture) -> None:
    host = make_host()
    host.level.exit_x, host.level.exit_y = 5, 6
    player = MagicMock()
    player.locate.side_effect = RuntimeError("avatar missing")
    host.adapter.player = player

    with caplog.at_level(logging.ERROR):
        result = host.adapter.generate_floor()

    assert result is not None
    assert isinstance(result.failure, HostPortFailed)
    assert host.adapter.last_result is result
    assert not host.adapter.is_generating
    assert (host.level.exit_x, host.level.exit_y) == (5, 6)
    assert "avatar missing" in caplog.text
    # The adapter recovers for the next trigger.
    host.adapter.player = host.player
    retry = host.adapter.generate_floor()
    assert retry is not None and retry.success
    assert (host.level.exit_x, host.level.exit_y) == retry.exit
