"""Registry for serializable classes."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from savekeeper.participants.base import BaseSerializable

logger = logging.getLogger(__name__)


class SerializableRegistry:
    """Central registry for serializable classes.

    Serializable classes register themselves using the
    @SerializableRegistry.register decorator. SerializableLoader later
    instantiates every registered class and registers the instances on a
    PersistenceManager.
    """

    _serializables: ClassVar[dict[str, type[BaseSerializable]]] = {}

    @classmethod
    def register(cls, serializable_class: type[BaseSerializable]) -> type[BaseSerializable]:
        """Register a serializable class.

        Use as a decorator:
            @SerializableRegistry.register
            class InventorySerializable(FragmentSerializable):
                name = "inventory"
                ...

        Args:
            serializable_class: The serializable class to register.

        Returns:
            The same class (allows use as decorator).
        """
        name = getattr(serializable_class, "name", None)
        if not name:
            msg = f"Serializable {serializable_class.__name__} must have a 'name' class attribute"
            raise ValueError(msg)

        if name in cls._serializables:
            logger.warning("Re-registering serializable: %s", name)

        cls._serializables[name] = serializable_class
        logger.debug("Registered serializable: %s", name)
        return serializable_class

    @classmethod
    def get(cls, name: str) -> type[BaseSerializable] | None:
        """Get a registered serializable class by name."""
        return cls._serializables.get(name)

    @classmethod
    def get_all(cls) -> dict[str, type[BaseSerializable]]:
        """Get all registered serializable classes."""
        return cls._serializables.copy()

    @classmethod
    def is_registered(cls, name: str) -> bool:
        """Check if a serializable class is registered."""
        return name in cls._serializables

    @classmethod
    def clear(cls) -> None:
        """Clear all registered classes (for testing)."""
        cls._serializables.clear()
