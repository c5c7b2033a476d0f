"""Event system for lifecycle notifications.

This module provides a small publish/subscribe event system that lets the
application react to persistence lifecycle operations without the manager
knowing who is listening.

The event system consists of:
- Event: Base class for all events
- Lifecycle events: DataCreatedEvent, DataLoadedEvent, DataSavedEvent, DataResetEvent
- EventBus: Central hub for subscribing to and publishing events

Example usage:
    bus = EventBus()

    def on_saved(event: DataSavedEvent):
        print("Progress saved")

    bus.subscribe(DataSavedEvent, on_saved)
    bus.publish(DataSavedEvent())

    bus.unsubscribe(DataSavedEvent, on_saved)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)


@dataclass
class Event:
    """Base event class."""


@dataclass
class DataCreatedEvent(Event):
    """Fired after new_game() populated a fresh aggregate.

    Also fired by load_game() when the data handler had nothing stored and a
    new game was created in its place.
    """


@dataclass
class DataLoadedEvent(Event):
    """Fired after load_game() handed the aggregate to every serializable."""


@dataclass
class DataSavedEvent(Event):
    """Fired after save_game() wrote the aggregate through the data handler."""


@dataclass
class DataResetEvent(Event):
    """Fired after delete_game() cleared every serializable and saved the result.

    Always published after the DataSavedEvent of the save that delete_game()
    performs internally.
    """


class EventBus:
    """Central event bus for publish/subscribe event handling.

    Handlers are called synchronously, on the publishing thread, in the order
    they were subscribed.

    Thread safety: This implementation is NOT thread-safe. PersistenceManager
    only publishes while holding its own lock, but subscribe/unsubscribe calls
    from other threads are not protected.
    """

    def __init__(self) -> None:
        """Initialize the event bus with no listeners."""
        self.listeners: dict[type[Event], list[Callable[[Event], None]]] = {}

    def subscribe(self, event_type: type[Event], handler: Callable[[Event], None]) -> None:
        """Subscribe a handler to an event type.

        The same handler can be subscribed multiple times, and will be called
        once for each subscription.

        Args:
            event_type: The type of event to listen for (e.g., DataSavedEvent).
            handler: Callback that takes the event as its only argument.
        """
        if event_type not in self.listeners:
            self.listeners[event_type] = []
        self.listeners[event_type].append(handler)

    def unsubscribe(self, event_type: type[Event], handler: Callable[[Event], None]) -> None:
        """Unsubscribe a handler from an event type.

        Removes every subscription of handler for event_type. Does nothing if
        the handler is not subscribed.

        Args:
            event_type: The type of event to stop listening for.
            handler: The handler function to remove.
        """
        if event_type in self.listeners:
            self.listeners[event_type] = [h for h in self.listeners[event_type] if h != handler]

    def publish(self, event: Event) -> None:
        """Publish an event to all subscribed handlers.

        Events with no subscribers are silently ignored. An exception raised
        by a handler propagates to the publisher and skips the remaining
        handlers.

        Args:
            event: The event instance to publish. Its exact type selects the handlers.
        """
        event_type = type(event)
        handlers = list(self.listeners.get(event_type, ()))
        logger.debug("Publishing %s to %d handler(s)", event_type.__name__, len(handlers))
        for handler in handlers:
            handler(event)

    def clear(self) -> None:
        """Remove all handlers for all event types."""
        self.listeners.clear()
