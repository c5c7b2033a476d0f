"""savekeeper - persistence lifecycle for game state spread across many objects.

This package coordinates when game state is created, loaded, saved and
cleared, and leaves the actual storage to a pluggable data handler:
- PersistenceManager enforcing the lifecycle and fanning out to serializables
- Serializables owning fragments of the game data
- Data handlers (JSON file, in-memory) doing the I/O
- Lifecycle events published on an EventBus

Quick start:
    from savekeeper import FragmentedGameData, JsonFileHandler, PersistenceManager

    manager = PersistenceManager(FragmentedGameData)
    manager.init(JsonFileHandler("saves", "game_data.json", FragmentedGameData))
    manager.register_serializable(my_inventory)
    manager.load_game()

Alternative usage:
    # settings.py
    INSTALLED_SERIALIZABLES = ["mygame.persistence"]

    from savekeeper import create_manager

    manager = create_manager()
"""

__version__ = "0.1.0"

from savekeeper.conf import settings
from savekeeper.data import FragmentedGameData, GameData
from savekeeper.errors import (
    CorruptedDataError,
    DuplicateSerializableError,
    HandlerIOError,
    NoActiveGameError,
    PersistenceError,
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
from savekeeper.handlers import BaseDataHandler, JsonFileHandler, MemoryDataHandler
from savekeeper.helpers import create_manager, setup_logging
from savekeeper.manager import PersistenceManager
from savekeeper.participants import (
    BaseSerializable,
    FragmentSerializable,
    SerializableLoader,
    SerializableRegistry,
)
from savekeeper.types import ManagerState

__all__ = [
    "BaseDataHandler",
    "BaseSerializable",
    "CorruptedDataError",
    "DataCreatedEvent",
    "DataLoadedEvent",
    "DataResetEvent",
    "DataSavedEvent",
    "DuplicateSerializableError",
    "Event",
    "EventBus",
    "FragmentSerializable",
    "FragmentedGameData",
    "GameData",
    "HandlerIOError",
    "JsonFileHandler",
    "ManagerState",
    "MemoryDataHandler",
    "NoActiveGameError",
    "PersistenceError",
    "PersistenceManager",
    "SerializableLoader",
    "SerializableRegistry",
    "UninitializedHandlerError",
    "__version__",
    "create_manager",
    "settings",
    "setup_logging",
]
