from __future__ import annotations

from collections.abc import Iterator

import pytest

from delve.events import reset_event_bus_for_testing
from delve.util import rng


@pytest.fixture(autouse=True)
def isolate_global_state() -> Iterator[None]:
    """Give each test a fresh event bus and a fixed master seed."""
    reset_event_bus_for_testing()
    rng.init("tests")
    yield
    reset_event_bus_for_testing()
