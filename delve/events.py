"""Global event bus for cross-system notifications about generated floors.

The bus lets a host (renderer, message log, sound) react to a finished or
failed generation pass without the generator knowing about any of them.

USE FOR:
- Notices for a message log ("The map is too small")
- Reacting to a freshly generated floor (refreshing views, playing a cue)

DO NOT USE FOR:
- Core generation steps (room sampling, carving, tile writes)
- Operations that need a return value or confirmation
- Error handling or exception propagation

The event bus is fire-and-forget. All handlers execute immediately
(synchronously), and a failing handler is logged without affecting the
publisher or the other handlers.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from contextlib import suppress
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from delve.environment.generators.dungeon import DungeonResult

logger = logging.getLogger(__name__)


@dataclass
class DelveEvent:
    """Base class for all events."""

    pass


@dataclass
class MessageEvent(DelveEvent):
    """A human-readable notice for the host's message log."""

    text: str


@dataclass
class DungeonGeneratedEvent(DelveEvent):
    """Published after a generation pass reached the DONE state."""

    result: DungeonResult


@dataclass
class DungeonGenerationFailedEvent(DelveEvent):
    """Published after a generation pass aborted.

    ``result.failure`` holds the condition that stopped the pass.
    """

    result: DungeonResult


class EventBus:
    """Simple event bus for publish/subscribe pattern."""

    def __init__(self) -> None:
        self._handlers: dict[type, list[Callable]] = {}

    def subscribe(self, event_type: type, handler: Callable) -> None:
        """Subscribe a handler to an event type."""
        if event_type not in self._handlers:
            self._handlers[event_type] = []
        self._handlers[event_type].append(handler)

    def unsubscribe(self, event_type: type, handler: Callable) -> None:
        """Unsubscribe a handler from an event type."""
        if event_type in self._handlers:
            with suppress(ValueError):
                self._handlers[event_type].remove(handler)

    def publish(self, event: DelveEvent) -> None:
        """Publish an event to all subscribed handlers."""
        event_type = type(event)
        if event_type in self._handlers:
            # Copy the handler list to allow safe subscribe/unsubscribe during dispatch
            for handler in list(self._handlers[event_type]):
                try:
                    handler(event)
                except Exception:
                    logger.exception(f"Error handling event {event_type.__name__}")


# Global event bus instance
_global_event_bus = EventBus()


def subscribe_to_event(event_type: type, handler: Callable) -> None:
    """Subscribe to an event type globally."""
    _global_event_bus.subscribe(event_type, handler)


def unsubscribe_from_event(event_type: type, handler: Callable) -> None:
    """Unsubscribe from an event type globally."""
    _global_event_bus.unsubscribe(event_type, handler)


def publish_event(event: DelveEvent) -> None:
    """Publish an event globally."""
    _global_event_bus.publish(event)


def reset_event_bus_for_testing() -> None:
    """Reset the global event bus. Use only in tests."""
    global _global_event_bus
    _global_event_bus = EventBus()
