"""Loader for serializables configured in settings."""

from __future__ import annotations

import importlib
import logging
from typing import TYPE_CHECKING

from savekeeper.conf import settings
from savekeeper.errors import DuplicateSerializableError
from savekeeper.participants.registry import SerializableRegistry

if TYPE_CHECKING:
    from savekeeper.manager import PersistenceManager
    from savekeeper.participants.base import BaseSerializable

logger = logging.getLogger(__name__)


class SerializableLoader:
    """Loads and registers serializable instances.

    The SerializableLoader handles:
    1. Importing the modules listed in INSTALLED_SERIALIZABLES to trigger registration
    2. Instantiating every registered serializable class
    3. Registering the instances on a PersistenceManager in priority order
    """

    def __init__(self, installed_serializables: list[str] | None = None) -> None:
        """Initialize the loader.

        Args:
            installed_serializables: Module paths to import. Defaults to
                settings.INSTALLED_SERIALIZABLES.
        """
        if installed_serializables is None:
            installed_serializables = settings.INSTALLED_SERIALIZABLES
        self.installed_serializables = list(installed_serializables or [])
        self._instances: dict[str, BaseSerializable] = {}
        self._load_order: list[str] = []

    def load_modules(self) -> None:
        """Import all configured serializable modules to trigger registration."""
        for module_path in self.installed_serializables:
            try:
                importlib.import_module(module_path)
                logger.debug("Loaded serializable module: %s", module_path)
            except ImportError:
                logger.exception("Could not load serializable module '%s'", module_path)
                raise

    def instantiate_all(self) -> dict[str, BaseSerializable]:
        """Create instances of all registered serializable classes.

        Returns:
            Dictionary mapping serializable names to their instances, in load order.
        """
        self.load_modules()

        all_serializables = SerializableRegistry.get_all()
        if not all_serializables:
            logger.warning("No serializables registered")
            return {}

        # Sort by priority (lower = earlier); sorted() keeps registration order on ties
        sorted_serializables = sorted(all_serializables.items(), key=lambda x: x[1].priority)
        self._load_order = [name for name, _ in sorted_serializables]

        for name in self._load_order:
            self._instances[name] = all_serializables[name]()
            logger.debug("Instantiated serializable: %s", name)

        logger.info("Instantiated %d serializables", len(self._instances))
        return dict(self._instances)

    def register_all(self, manager: PersistenceManager) -> list[BaseSerializable]:
        """Instantiate every serializable and register it on manager.

        Args:
            manager: The manager that will fan out lifecycle calls to the instances.

        Nothing is registered if any instance is already registered on manager.

        Returns:
            The registered instances, in fan-out order.

        Raises:
            DuplicateSerializableError: If an instance is already registered on manager.
        """
        if not self._instances:
            self.instantiate_all()

        registered = [self._instances[name] for name in self._load_order]
        already = [s.name for s in registered if any(s is m for m in manager.serializables)]
        if already:
            msg = f"Serializables already registered: {', '.join(already)}"
            raise DuplicateSerializableError(msg)

        for instance in registered:
            manager.register_serializable(instance)
        return registered

    def get_serializable(self, name: str) -> BaseSerializable | None:
        """Get a serializable instance by name."""
        return self._instances.get(name)
