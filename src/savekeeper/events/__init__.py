"""Module for lifecycle events."""

from savekeeper.events.base import (
    DataCreatedEvent,
    DataLoadedEvent,
    DataResetEvent,
    DataSavedEvent,
    Event,
    EventBus,
)

__all__ = [
    "DataCreatedEvent",
    "DataLoadedEvent",
    "DataResetEvent",
    "DataSavedEvent",
    "Event",
    "EventBus",
]
