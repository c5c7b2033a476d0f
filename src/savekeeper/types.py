"""Custom types and enumerations."""

from enum import Enum, auto


class ManagerState(Enum):
    """Lifecycle state of a PersistenceManager."""

    UNINITIALIZED = auto()
    NO_GAME = auto()
    ACTIVE = auto()
