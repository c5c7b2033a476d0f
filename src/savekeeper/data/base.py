"""Game data contract and the fragment-partitioned default implementation."""

from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Self

DEFAULT_SAVE_VERSION = "1.0"


class GameData(ABC):
    """Aggregate holding every piece of persistable state for one session.

    The aggregate is owned by PersistenceManager while a game is active. It is
    handed to serializables during a fan-out and to the data handler when
    saving. Its fields are entirely up to the application; the only contract
    imposed is validate_data().

    Handlers that encode to text (JsonFileHandler, MemoryDataHandler) also use
    to_dict() and from_dict(). The defaults work for dataclass subclasses.

    Example:
        @dataclass
        class MyGameData(GameData):
            gold: int = 0
            level: str = "intro"

            def validate_data(self) -> bool:
                return self.gold >= 0
    """

    @abstractmethod
    def validate_data(self) -> bool:
        """Check that the data is internally consistent.

        Returns:
            True if the data can be loaded or saved, False if it is corrupted.
        """

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary.

        Raises:
            TypeError: If the subclass is not a dataclass and does not override this.
        """
        if not dataclasses.is_dataclass(self):
            msg = f"{type(self).__name__} must be a dataclass or override to_dict()"
            raise TypeError(msg)
        return dataclasses.asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create an instance from a dictionary produced by to_dict()."""
        return cls(**data)


@dataclass
class FragmentedGameData(GameData):
    """Game data partitioned into one fragment per serializable.

    Each fragment is keyed by the owning serializable's name, so a serializable
    only ever reads and writes its own sub-dictionary. The partition is a
    convention: nothing stops a serializable from touching another key.

    Attributes:
        fragments: Mapping of serializable name to its serialized state.
        save_version: Format version string stored with the data. Informational only.
    """

    fragments: dict[str, dict[str, Any]] = field(default_factory=dict)
    save_version: str = DEFAULT_SAVE_VERSION

    def validate_data(self) -> bool:
        """Check the version string and the shape of every fragment."""
        if not isinstance(self.save_version, str) or not self.save_version:
            return False
        if not isinstance(self.fragments, dict):
            return False
        return all(isinstance(name, str) and isinstance(state, dict) for name, state in self.fragments.items())

    def get_fragment(self, name: str) -> dict[str, Any] | None:
        """Return the fragment owned by name, or None if it has none."""
        return self.fragments.get(name)

    def set_fragment(self, name: str, state: dict[str, Any]) -> None:
        """Store state as the fragment owned by name, replacing any previous one."""
        self.fragments[name] = state

    def remove_fragment(self, name: str) -> bool:
        """Drop the fragment owned by name.

        Returns:
            True if a fragment was removed, False if there was none.
        """
        return self.fragments.pop(name, None) is not None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create from a dictionary loaded from storage.

        Missing keys fall back to defaults. Values are not coerced, so a
        malformed document is caught later by validate_data().
        """
        return cls(
            fragments=data.get("fragments", {}),
            save_version=data.get("save_version", DEFAULT_SAVE_VERSION),
        )
