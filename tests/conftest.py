"""Shared pytest configuration and fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from savekeeper.conf import settings
from savekeeper.participants.registry import SerializableRegistry

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture(autouse=True)
def configure_test_settings() -> Generator[None]:
    """Configure settings for each test and reset them afterwards.

    Yields:
        None
    """
    settings.configure(
        SAVE_DIR="saves",
        SAVE_FILE_NAME="game_data.json",
        SAVE_JSON_INDENT=2,
        SAVE_FILE_ENCODING="utf-8",
        GAME_DATA_CLASS="savekeeper.data.FragmentedGameData",
        INSTALLED_SERIALIZABLES=[],
        LOG_LEVEL="INFO",
    )
    yield
    settings.reset()


@pytest.fixture(autouse=True)
def clean_serializable_registry() -> Generator[None]:
    """Keep SerializableRegistry registrations from leaking between tests.

    Yields:
        None
    """
    SerializableRegistry.clear()
    yield
    SerializableRegistry.clear()
