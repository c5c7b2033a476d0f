"""Base classes for serializable objects.

A serializable is any object holding a fragment of persistent state. It is
registered on a PersistenceManager, which calls it back during every
lifecycle operation with the shared game data aggregate.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar

from savekeeper.data.base import FragmentedGameData

if TYPE_CHECKING:
    from savekeeper.data.base import GameData

logger = logging.getLogger(__name__)


class BaseSerializable(ABC):
    """Abstract base class for objects whose state is persisted.

    The manager invokes these methods synchronously, one serializable at a
    time, in registration order. A later serializable may rely on an earlier
    one having already written its part of the aggregate.

    Serializables should only touch the part of the aggregate they own, and
    must not raise for normal absence of data. Corruption is detected by the
    aggregate's validate_data(), not by individual serializables.

    Class Attributes:
        name: Identifier used by SerializableRegistry and as the fragment key.
        priority: Registration order when loaded from settings (lower first).
    """

    name: ClassVar[str]
    priority: ClassVar[int] = 100

    @abstractmethod
    def create_data(self, data: GameData) -> None:
        """Populate this object's part of a freshly created aggregate.

        Called once per new_game().

        Args:
            data: The new aggregate. May be mutated.
        """

    @abstractmethod
    def load_data(self, data: GameData) -> None:
        """Pull this object's state out of the aggregate.

        Called once per load_game(). The aggregate should be treated as read-only.

        Args:
            data: The aggregate loaded from storage or created by new_game().
        """

    @abstractmethod
    def save_data(self, data: GameData) -> None:
        """Write this object's current in-memory state into the aggregate.

        Called once per save_game(), and therefore once per delete_game().

        Args:
            data: The live aggregate. May be mutated.
        """

    @abstractmethod
    def clear_data(self, data: GameData) -> None:
        """Reset this object's in-memory state to its empty default.

        Called once per delete_game(), before the save fan-out. Only the
        in-memory state is reset; storage changes on the following save.

        Args:
            data: The live aggregate. Should be treated as read-only.
        """


class FragmentSerializable(BaseSerializable):
    """Serializable owning one named fragment of a FragmentedGameData.

    Subclasses only deal with their own state as a plain dictionary. The
    fragment key is the class's name attribute.

    Example:
        @SerializableRegistry.register
        class WalletSerializable(FragmentSerializable):
            name: ClassVar[str] = "wallet"

            def __init__(self) -> None:
                self.gold = 0

            def to_dict(self) -> dict[str, Any]:
                return {"gold": self.gold}

            def from_dict(self, state: dict[str, Any]) -> None:
                self.gold = int(state.get("gold", 0))

            def clear(self) -> None:
                self.gold = 0
    """

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """Serialize in-memory state (must be JSON-serializable)."""

    @abstractmethod
    def from_dict(self, state: dict[str, Any]) -> None:
        """Restore in-memory state from a fragment."""

    @abstractmethod
    def clear(self) -> None:
        """Reset in-memory state to its empty default."""

    def initial_state(self) -> dict[str, Any]:
        """Fragment written into a brand new game. Override for non-empty defaults."""
        return {}

    def create_data(self, data: GameData) -> None:
        """Write initial_state() as this object's fragment."""
        self._fragments(data).set_fragment(self.name, self.initial_state())

    def load_data(self, data: GameData) -> None:
        """Restore from this object's fragment, or clear if it has none."""
        state = self._fragments(data).get_fragment(self.name)
        if state is None:
            logger.debug("No fragment for %s, clearing state", self.name)
            self.clear()
            return
        self.from_dict(state)

    def save_data(self, data: GameData) -> None:
        """Write to_dict() as this object's fragment."""
        self._fragments(data).set_fragment(self.name, self.to_dict())

    def clear_data(self, data: GameData) -> None:  # noqa: ARG002
        """Reset in-memory state."""
        self.clear()

    def _fragments(self, data: GameData) -> FragmentedGameData:
        if not isinstance(data, FragmentedGameData):
            msg = f"{type(self).__name__} requires FragmentedGameData, got {type(data).__name__}"
            raise TypeError(msg)
        return data
