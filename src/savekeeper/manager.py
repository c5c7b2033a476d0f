"""Persistence manager: the lifecycle coordinator for game data.

This module provides PersistenceManager, the central object of savekeeper. It
owns the live game data aggregate, the ordered list of registered
serializables, and the data handler that reads and writes the aggregate.

Lifecycle:
1. init(handler): bind a data handler (UNINITIALIZED -> NO_GAME)
2. register_serializable(obj): add objects holding persistent state
3. new_game() or load_game(): materialize the aggregate (-> ACTIVE)
4. save_game() / delete_game(): write the aggregate back (ACTIVE)

Every lifecycle operation fans out to the registered serializables one at a
time, in registration order, and publishes an event on completion:

    operation      fan-out                    events
    new_game       create_data                DataCreatedEvent
    load_game      load_data                  DataLoadedEvent
    save_game      save_data                  DataSavedEvent
    delete_game    clear_data, then save      DataSavedEvent, DataResetEvent

Example usage:
    manager = PersistenceManager(FragmentedGameData)
    manager.init(JsonFileHandler("saves", "game_data.json", FragmentedGameData))
    manager.register_serializable(inventory)
    manager.subscribe(DataLoadedEvent, lambda event: print("ready"))

    manager.load_game()   # creates a new game if nothing is saved yet
    ...
    manager.save_game()
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from savekeeper.errors import (
    CorruptedDataError,
    DuplicateSerializableError,
    NoActiveGameError,
    UninitializedHandlerError,
)
from savekeeper.events import (
    DataCreatedEvent,
    DataLoadedEvent,
    DataResetEvent,
    DataSavedEvent,
    Event,
    EventBus,
)
from savekeeper.types import ManagerState

if TYPE_CHECKING:
    from collections.abc import Callable

    from savekeeper.data.base import GameData
    from savekeeper.handlers.base import BaseDataHandler
    from savekeeper.participants.base import BaseSerializable

logger = logging.getLogger(__name__)


class PersistenceManager:
    """Coordinates creating, loading, saving and deleting game data.

    The manager is an ordinary object: build one in the application's
    composition root (see savekeeper.helpers.create_manager) and pass it to
    whatever needs persistence.

    Serializables are called synchronously and strictly in registration
    order. A re-entrant lock spans each lifecycle operation, so concurrent
    callers are serialized and a fan-out is never interleaved with another.

    Attributes:
        event_bus: Bus on which lifecycle events are published.
    """

    def __init__(self, game_data_factory: Callable[[], GameData], event_bus: EventBus | None = None) -> None:
        """Initialize the manager in the UNINITIALIZED state.

        Args:
            game_data_factory: Zero-argument callable returning a fresh,
                default-initialized aggregate. A GameData subclass works.
            event_bus: Bus for lifecycle events. A private one is created if omitted.
        """
        self.game_data_factory = game_data_factory
        self.event_bus = event_bus if event_bus is not None else EventBus()
        self._data_handler: BaseDataHandler | None = None
        self._game_data: GameData | None = None
        self._serializables: list[BaseSerializable] = []
        self._lock = threading.RLock()

    @property
    def state(self) -> ManagerState:
        """Current lifecycle state."""
        if self._data_handler is None:
            return ManagerState.UNINITIALIZED
        if self._game_data is None:
            return ManagerState.NO_GAME
        return ManagerState.ACTIVE

    @property
    def data_handler(self) -> BaseDataHandler | None:
        """The bound data handler, or None before init()."""
        return self._data_handler

    @property
    def game_data(self) -> GameData | None:
        """The live aggregate, or None if no game was created or loaded."""
        return self._game_data

    @property
    def serializables(self) -> tuple[BaseSerializable, ...]:
        """Registered serializables, in fan-out order."""
        return tuple(self._serializables)

    def init(self, data_handler: BaseDataHandler) -> None:
        """Bind the data handler used by every lifecycle operation.

        Can be called again to swap handlers. The live aggregate and the
        registered serializables are kept.

        Args:
            data_handler: Storage backend that loads and saves game data.
        """
        with self._lock:
            if self._data_handler is not None:
                logger.debug(
                    "Replacing data handler %s with %s",
                    type(self._data_handler).__name__,
                    type(data_handler).__name__,
                )
            self._data_handler = data_handler
            logger.debug("Initialized with data handler %s", type(data_handler).__name__)

    def reset(self) -> None:
        """Unbind the data handler and drop the live aggregate.

        The manager goes back to UNINITIALIZED. Registered serializables and
        event subscriptions are kept.
        """
        with self._lock:
            self._data_handler = None
            self._game_data = None
            logger.debug("Persistence manager reset")

    def register_serializable(self, serializable: BaseSerializable) -> None:
        """Register a serializable so it takes part in every lifecycle operation.

        Args:
            serializable: Object holding a fragment of persistent state.

        Raises:
            DuplicateSerializableError: If the same object is already registered.
        """
        with self._lock:
            if any(s is serializable for s in self._serializables):
                msg = f"Serializable {serializable!r} is already registered"
                raise DuplicateSerializableError(msg)
            self._serializables.append(serializable)
            logger.debug("Registered serializable %s", type(serializable).__name__)

    def deregister_serializable(self, serializable: BaseSerializable) -> None:
        """Remove a registered serializable. Does nothing if it is not registered."""
        with self._lock:
            for index, registered in enumerate(self._serializables):
                if registered is serializable:
                    del self._serializables[index]
                    logger.debug("Deregistered serializable %s", type(serializable).__name__)
                    return

    def deregister_all_serializables(self) -> None:
        """Remove every registered serializable."""
        with self._lock:
            self._serializables.clear()
            logger.debug("Deregistered all serializables")

    def subscribe(self, event_type: type[Event], handler: Callable[[Event], None]) -> None:
        """Subscribe handler to a lifecycle event type on the manager's bus."""
        self.event_bus.subscribe(event_type, handler)

    def unsubscribe(self, event_type: type[Event], handler: Callable[[Event], None]) -> None:
        """Unsubscribe handler from a lifecycle event type."""
        self.event_bus.unsubscribe(event_type, handler)

    def new_game(self) -> None:
        """Create a new game.

        A fresh aggregate is built with the factory and handed to create_data()
        of every serializable. The aggregate is not validated. Publishes
        DataCreatedEvent.

        Raises:
            UninitializedHandlerError: If init() was not called.
        """
        with self._lock:
            self._require_handler("create a new game")

            game_data = self.game_data_factory()
            self._game_data = game_data
            for serializable in self._snapshot():
                serializable.create_data(game_data)
                logger.debug("Created data for %s", type(serializable).__name__)

            logger.info("New game created")
            self.event_bus.publish(DataCreatedEvent())

    def load_game(self) -> None:
        """Load the stored game into every serializable.

        If the data handler has nothing stored, a new game is created first
        (with its DataCreatedEvent). The aggregate is then validated and handed
        to load_data() of every serializable. Publishes DataLoadedEvent.

        Data that fails validation is never adopted: the previous aggregate,
        if any, stays live. This includes a freshly created game, although its
        create_data() calls and DataCreatedEvent have already happened.

        Raises:
            UninitializedHandlerError: If init() was not called.
            CorruptedDataError: If the aggregate fails validation. No load_data() is called.
            HandlerIOError: If the data handler cannot read the stored data.
        """
        with self._lock:
            data_handler = self._require_handler("load a game")

            previous = self._game_data
            loaded = data_handler.load()
            if loaded is None:
                logger.info("No stored game data, creating a new game")
                self.new_game()
                game_data = self._game_data
            else:
                game_data = loaded

            if not game_data.validate_data():
                self._game_data = previous
                msg = "Corrupted game data. No data was loaded."
                raise CorruptedDataError(msg)

            self._game_data = game_data
            for serializable in self._snapshot():
                serializable.load_data(game_data)
                logger.debug("Loaded data into %s", type(serializable).__name__)

            logger.info("Game loaded")
            self.event_bus.publish(DataLoadedEvent())

    def save_game(self) -> None:
        """Save the current state of every serializable.

        Every serializable writes into the live aggregate through save_data(),
        then the aggregate is validated and passed to the data handler.
        Publishes DataSavedEvent.

        Raises:
            UninitializedHandlerError: If init() was not called.
            NoActiveGameError: If no game was created or loaded.
            CorruptedDataError: If the aggregate fails validation. Nothing is written.
            HandlerIOError: If the data handler cannot write the data.
        """
        with self._lock:
            data_handler = self._require_handler("save the game")
            game_data = self._require_game_data("save")

            for serializable in self._snapshot():
                serializable.save_data(game_data)
                logger.debug("Saved data from %s", type(serializable).__name__)

            if not game_data.validate_data():
                msg = "Corrupted game data. No data was saved."
                raise CorruptedDataError(msg)

            data_handler.save(game_data)
            logger.info("Game saved")
            self.event_bus.publish(DataSavedEvent())

    def delete_game(self) -> None:
        """Reset every serializable and save the cleared state.

        clear_data() is called on every serializable, then a full save_game()
        runs (including its DataSavedEvent). Publishes DataResetEvent last.

        Raises:
            UninitializedHandlerError: If init() was not called.
            NoActiveGameError: If no game was created or loaded.
            CorruptedDataError: If the cleared aggregate fails validation. Nothing is written.
            HandlerIOError: If the data handler cannot write the data.
        """
        with self._lock:
            self._require_handler("delete the game")
            game_data = self._require_game_data("delete")

            for serializable in self._snapshot():
                serializable.clear_data(game_data)
                logger.debug("Cleared data of %s", type(serializable).__name__)

            self.save_game()
            logger.info("Game data reset")
            self.event_bus.publish(DataResetEvent())

    def _snapshot(self) -> tuple[BaseSerializable, ...]:
        return tuple(self._serializables)

    def _require_handler(self, action: str) -> BaseDataHandler:
        if self._data_handler is None:
            msg = f"Cannot {action}: no data handler. Call init() first."
            raise UninitializedHandlerError(msg)
        return self._data_handler

    def _require_game_data(self, action: str) -> GameData:
        if self._game_data is None:
            msg = f"Trying to {action} non-existing game data. Call new_game() or load_game() first."
            raise NoActiveGameError(msg)
        return self._game_data
