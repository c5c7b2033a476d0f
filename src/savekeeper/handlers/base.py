"""Base class for data handlers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from savekeeper.data.base import GameData


class BaseDataHandler(ABC):
    """Abstract base class for data handlers.

    A data handler is the storage backend bound to a PersistenceManager with
    init(). It encodes game data to whatever medium it targets (a file, a
    database, a remote service) and decodes it back. The manager never looks
    at the encoded form.

    Handlers do not retry. Failures are raised to the manager, which passes
    them through to its caller unchanged.

    Example:
        class DictDataHandler(BaseDataHandler):
            def __init__(self) -> None:
                self.stored: GameData | None = None

            def load(self) -> GameData | None:
                return self.stored

            def save(self, data: GameData) -> None:
                self.stored = data
    """

    @abstractmethod
    def load(self) -> GameData | None:
        """Load game data from storage.

        Returns:
            The stored game data, or None if nothing has been saved yet. Absence
            is not an error.

        Raises:
            HandlerIOError: If stored data exists but cannot be read or decoded.
        """

    @abstractmethod
    def save(self, data: GameData) -> None:
        """Persist game data, replacing whatever was stored before.

        Args:
            data: The validated aggregate to store.

        Raises:
            HandlerIOError: If the data cannot be encoded or written.
        """
