"""In-memory data handler."""

from __future__ import annotations

import copy
import logging
from typing import TYPE_CHECKING, Any

from savekeeper.errors import HandlerIOError
from savekeeper.handlers.base import BaseDataHandler

if TYPE_CHECKING:
    from savekeeper.data.base import GameData

logger = logging.getLogger(__name__)


class MemoryDataHandler(BaseDataHandler):
    """Data handler keeping the last save in process memory.

    The aggregate is stored as a deep-copied dictionary, so later mutations of
    the live aggregate never leak into the stored copy, and every load()
    returns a new instance. Useful for tests and for sessions that should not
    touch the disk.

    Attributes:
        data_class: GameData subclass used to rebuild loaded data.
        save_count: Number of successful save() calls.
    """

    def __init__(self, data_class: type[GameData]) -> None:
        """Initialize an empty handler.

        Args:
            data_class: GameData subclass used to rebuild loaded data.
        """
        self.data_class = data_class
        self.save_count = 0
        self._stored: dict[str, Any] | None = None

    def load(self) -> GameData | None:
        """Rebuild the stored aggregate, or return None if nothing was saved."""
        if self._stored is None:
            return None
        try:
            return self.data_class.from_dict(copy.deepcopy(self._stored))
        except (TypeError, ValueError, KeyError) as e:
            msg = f"Stored data cannot be decoded as {self.data_class.__name__}"
            raise HandlerIOError(msg) from e

    def save(self, data: GameData) -> None:
        """Store a deep copy of the aggregate."""
        try:
            self._stored = copy.deepcopy(data.to_dict())
        except TypeError as e:
            msg = f"Cannot encode {type(data).__name__}"
            raise HandlerIOError(msg) from e
        self.save_count += 1
        logger.debug("Stored game data in memory (save #%d)", self.save_count)

    def clear(self) -> None:
        """Forget the stored aggregate."""
        self._stored = None
