"""JSON file data handler.

Stores the whole aggregate as a single human-readable JSON document. The
document is whatever the GameData subclass returns from to_dict(), and is
decoded back with the subclass's from_dict().

File structure:
- One file at file_dir / file_name
- The directory is created on first save
- Indentation and encoding come from SAVE_JSON_INDENT and SAVE_FILE_ENCODING

Example usage:
    handler = JsonFileHandler("saves", "game_data.json", FragmentedGameData)
    manager.init(handler)
"""

from __future__ import annotations

import contextlib
import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from savekeeper.conf import settings
from savekeeper.errors import HandlerIOError
from savekeeper.handlers.base import BaseDataHandler

if TYPE_CHECKING:
    from savekeeper.data.base import GameData

logger = logging.getLogger(__name__)


class JsonFileHandler(BaseDataHandler):
    """Data handler reading and writing one JSON file.

    Attributes:
        file_dir: Directory containing the save file.
        file_name: Name of the save file.
        data_class: GameData subclass used to decode the file.
    """

    def __init__(self, file_dir: str | Path, file_name: str, data_class: type[GameData]) -> None:
        """Initialize the handler. Nothing is read or created until load() or save().

        Args:
            file_dir: Directory containing the save file.
            file_name: Name of the save file.
            data_class: GameData subclass used to decode the file.
        """
        self.file_dir = Path(file_dir)
        self.file_name = file_name
        self.data_class = data_class

    @property
    def file_path(self) -> Path:
        """Full path of the save file."""
        return self.file_dir / self.file_name

    @property
    def temp_path(self) -> Path:
        """Path written by save() before it is moved over file_path."""
        return self.file_dir / f"{self.file_name}.tmp"

    def exists(self) -> bool:
        """Check if the save file exists."""
        return self.file_path.exists()

    def load(self) -> GameData | None:
        """Load game data from the JSON file.

        Returns:
            Decoded game data, or None if the file does not exist.

        Raises:
            HandlerIOError: If the file exists but cannot be read or decoded.
        """
        path = self.file_path
        if not path.exists():
            logger.debug("No save file at %s", path)
            return None

        try:
            with path.open(encoding=settings.SAVE_FILE_ENCODING) as f:
                raw = json.load(f)
            data = self._decode(raw)
        except (OSError, ValueError, TypeError, KeyError, AttributeError) as e:
            msg = f"Error while trying to load data from file: {path}"
            raise HandlerIOError(msg) from e

        logger.info("Loaded game data from %s", path)
        return data

    def save(self, data: GameData) -> None:
        """Write game data to the JSON file, overwriting any previous content.

        The document is written to a temporary file next to the save file and
        then moved over it, so a failure at any point leaves the previous save
        intact.

        Args:
            data: Game data to write.

        Raises:
            HandlerIOError: If the data cannot be encoded or the file cannot be written.
        """
        path = self.file_path
        temp_path = self.temp_path
        try:
            payload = json.dumps(data.to_dict(), indent=settings.SAVE_JSON_INDENT)
            path.parent.mkdir(parents=True, exist_ok=True)
            temp_path.write_text(payload, encoding=settings.SAVE_FILE_ENCODING)
            temp_path.replace(path)
        except (OSError, ValueError, TypeError) as e:
            with contextlib.suppress(OSError):
                temp_path.unlink(missing_ok=True)
            msg = f"Error while trying to save data into file: {path}"
            raise HandlerIOError(msg) from e

        logger.info("Saved game data to %s", path)

    def delete(self) -> bool:
        """Delete the save file.

        Returns:
            True if the file existed and was deleted, False if there was no file.

        Raises:
            HandlerIOError: If the file exists but cannot be removed.
        """
        path = self.file_path
        if not path.exists():
            logger.warning("No save file to delete at %s", path)
            return False
        try:
            path.unlink()
        except OSError as e:
            msg = f"Error while trying to delete file: {path}"
            raise HandlerIOError(msg) from e

        logger.info("Deleted save file %s", path)
        return True

    def _decode(self, raw: Any) -> GameData:  # noqa: ANN401
        if not isinstance(raw, dict):
            msg = f"Expected a JSON object, got {type(raw).__name__}"
            raise TypeError(msg)
        return self.data_class.from_dict(raw)
