"""Helper functions for wiring savekeeper into an application.

Users can choose between create_manager(), which builds everything from
settings, or constructing PersistenceManager and a data handler by hand.
"""

from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Any

from rich.logging import RichHandler

from savekeeper.conf import settings
from savekeeper.handlers.json_file import JsonFileHandler
from savekeeper.manager import PersistenceManager
from savekeeper.participants.loader import SerializableLoader


def setup_logging(log_level: str = "INFO") -> None:
    """Configure logging for the application.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).

    Side effects:
        - Configures the root logger with RichHandler
        - Sets the specified log level
    """
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, markup=True)],
    )


def import_string(dotted_path: str) -> Any:  # noqa: ANN401
    """Import a class or attribute from a dotted module path.

    Args:
        dotted_path: Path such as "savekeeper.data.FragmentedGameData".

    Returns:
        The attribute named by the last path component.

    Raises:
        ImportError: If the path is malformed, or the module or attribute does not exist.
    """
    module_path, _, attribute = dotted_path.rpartition(".")
    if not module_path:
        msg = f"{dotted_path!r} is not a dotted module path"
        raise ImportError(msg)

    module = importlib.import_module(module_path)
    try:
        return getattr(module, attribute)
    except AttributeError as e:
        msg = f"Module {module_path!r} has no attribute {attribute!r}"
        raise ImportError(msg) from e


def create_manager(*, configure_logging: bool = False) -> PersistenceManager:
    """Create a PersistenceManager configured from settings.

    Builds the manager for GAME_DATA_CLASS, binds a JsonFileHandler on
    SAVE_DIR / SAVE_FILE_NAME, and registers every serializable from
    INSTALLED_SERIALIZABLES in priority order. No game is created or loaded.

    Args:
        configure_logging: Also call setup_logging() with LOG_LEVEL.

    Returns:
        Initialized manager in the NO_GAME state.

    Example:
        >>> # settings.py: INSTALLED_SERIALIZABLES = ["mygame.persistence"]
        >>> from savekeeper import create_manager
        >>> manager = create_manager()
        >>> manager.load_game()
    """
    if configure_logging:
        setup_logging(settings.LOG_LEVEL)

    data_class = import_string(settings.GAME_DATA_CLASS)
    manager = PersistenceManager(data_class)
    manager.init(JsonFileHandler(Path(settings.SAVE_DIR), settings.SAVE_FILE_NAME, data_class))

    SerializableLoader().register_all(manager)
    return manager
