from __future__ import annotations

import itertools
import random

import pytest

from delve import config
from delve.environment.generators.rooms import (
    Room,
    RoomSampler,
    rooms_too_close,
    target_room_count,
)
from tests.helpers import TWO_ROOM_DRAWS, ScriptedRNG


def test_room_center_rounds_down() -> None:
    assert Room(1, 1, 5, 6).center == (3, 4)
    assert Room(2, 3, 4, 4).center == (4, 5)


def test_room_rejects_empty_size() -> None:
    with pytest.raises(ValueError):
        Room(1, 1, 0, 3)


def test_room_cells_cover_rectangle() -> None:
    room = Room(2, 3, 3, 2)
    assert list(room.cells()) == [(2, 3), (3, 3), (4, 3), (2, 4), (3, 4), (4, 4)]
    assert room.contains(4, 4)
    assert not room.contains(5, 4)


@pytest.mark.parametrize(
    ("candidate", "gap", "expected"),
    [
        (Room(6, 1, 5, 5), 1, True),  # no wall tile left between
        (Room(7, 1, 5, 5), 1, False),  # exactly one wall tile between
        (Room(6, 1, 5, 5), 0, False),  # touching is fine without a gap
        (Room(3, 3, 5, 5), 0, True),  # plain overlap
        (Room(7, 7, 5, 5), 1, False),  # diagonal neighbor
        (Room(6, 6, 5, 5), 1, True),
    ],
)
def test_rooms_too_close(candidate: Room, gap: int, expected: bool) -> None:
    existing = Room(1, 1, 5, 5)
    assert rooms_too_close(candidate, existing, gap) is expected


@pytest.mark.parametrize(
    ("width", "height", "expected"),
    [(3, 3, 2), (10, 10, 2), (15, 15, 2), (20, 20, 4), (30, 20, 6), (100, 100, 6)],
)
def test_target_room_count_scales_with_area(
    width: int, height: int, expected: int
) -> None:
    assert target_room_count(width, height) == expected


def test_sampler_places_scripted_rooms() -> None:
    report = RoomSampler().sample(20, 10, 2, ScriptedRNG(TWO_ROOM_DRAWS))

    assert report.rooms == [Room(1, 1, 5, 5), Room(10, 2, 5, 5)]
    assert report.attempts == 2
    assert report.reached_target


def test_sampler_counts_overlaps_against_attempt_budget() -> None:
    # The same candidate three times: accepted once, then rejected twice.
    draws = [5, 5, 1, 1] * 3
    sampler = RoomSampler(max_attempts=3)
    report = sampler.sample(40, 40, 6, ScriptedRNG(draws))

    assert report.rooms == [Room(1, 1, 5, 5)]
    assert report.attempts == 3
    assert report.overlap_rejections == 2
    assert not report.reached_target


def test_sampler_counts_aspect_rejections_against_attempt_budget() -> None:
    # 3x9 is too thin; only width and height are drawn for a rejected room.
    sampler = RoomSampler(min_room_size=3, max_attempts=2)
    report = sampler.sample(40, 40, 2, ScriptedRNG([3, 9, 3, 9]))

    assert report.rooms == []
    assert report.attempts == 2
    assert report.aspect_rejections == 2


def test_sampler_stops_when_map_too_small() -> None:
    rng = ScriptedRNG([])
    report = RoomSampler().sample(3, 3, 2, rng)

    assert report.rooms == []
    assert report.attempts == 0
    assert report.too_small is not None


def test_sampler_with_zero_target_draws_nothing() -> None:
    report = RoomSampler().sample(40, 40, 0, ScriptedRNG([]))
    assert report.rooms == []
    assert report.reached_target


def test_sampler_rejects_bad_size_range() -> None:
    with pytest.raises(ValueError):
        RoomSampler(min_room_size=6, max_room_size=5)
    with pytest.raises(ValueError):
        RoomSampler(max_aspect_ratio=0.5)


@pytest.mark.parametrize("seed", range(25))
def test_sampled_rooms_respect_invariants(seed: int) -> None:
    map_width, map_height = 60, 40
    target = target_room_count(map_width, map_height)
    sampler = RoomSampler()
    report = sampler.sample(map_width, map_height, target, random.Random(seed))
    rooms = report.rooms

    assert len(rooms) <= target
    assert len(rooms) == target or report.attempts == config.MAX_ATTEMPTS

    for room in rooms:
        assert config.MIN_ROOM_SIZE <= room.width <= config.MAX_ROOM_SIZE
        assert config.MIN_ROOM_SIZE <= room.height <= config.MAX_ROOM_SIZE
        assert sampler.aspect_ok(room.width, room.height)
        assert 1 <= room.x and room.x + room.width <= map_width - 1
        assert 1 <= room.y and room.y + room.height <= map_height - 1

    for a, b in itertools.combinations(rooms, 2):
        assert not rooms_too_close(a, b, config.ROOM_GAP)
        assert not rooms_too_close(b, a, config.ROOM_GAP)


def test_sampling_is_deterministic_for_a_seed() -> None:
    sampler = RoomSampler()
    first = sampler.sample(50, 30, 6, random.Random(1234))
    second = sampler.sample(50, 30, 6, random.Random(1234))
    assert first.rooms == second.rooms
    assert first.attempts == second.attempts
