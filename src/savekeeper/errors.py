"""Exceptions raised by the persistence lifecycle.

All errors derive from PersistenceError so callers can catch the whole family
with a single except clause:

    try:
        manager.save_game()
    except PersistenceError:
        logger.exception("Could not save")
"""


class PersistenceError(Exception):
    """Base class for every savekeeper error."""


class UninitializedHandlerError(PersistenceError):
    """A lifecycle operation ran before a data handler was bound with init()."""


class NoActiveGameError(PersistenceError):
    """save_game() or delete_game() was called while no game data is live."""


class CorruptedDataError(PersistenceError):
    """Game data failed its validate_data() check.

    Raised either for data coming from the data handler (nothing is loaded)
    or for the aggregate produced by a save fan-out (nothing is written).
    """


class DuplicateSerializableError(PersistenceError, ValueError):
    """The same serializable object was registered twice."""


class HandlerIOError(PersistenceError):
    """A data handler could not read, decode, encode or write game data."""
