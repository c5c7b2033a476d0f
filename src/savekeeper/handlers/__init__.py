"""Data handlers: storage backends for game data."""

from savekeeper.handlers.base import BaseDataHandler
from savekeeper.handlers.json_file import JsonFileHandler
from savekeeper.handlers.memory import MemoryDataHandler

__all__ = ["BaseDataHandler", "JsonFileHandler", "MemoryDataHandler"]
