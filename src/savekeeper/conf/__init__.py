"""Django-like settings system for savekeeper.

Usage:
    # In your project's settings.py
    SAVE_DIR = "saves"
    SAVE_FILE_NAME = "progress.json"
    INSTALLED_SERIALIZABLES = ["mygame.persistence"]

    # In your code
    from savekeeper.conf import settings

    print(settings.SAVE_FILE_NAME)  # "progress.json"

    # In tests
    with settings.override(SAVE_DIR=tmp_dir):
        ...
"""

from __future__ import annotations

import importlib
import logging
import os
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any

from savekeeper.conf import global_settings

if TYPE_CHECKING:
    from collections.abc import Iterator
    from types import ModuleType

logger = logging.getLogger(__name__)

SETTINGS_MODULE_ENV = "SAVEKEEPER_SETTINGS_MODULE"
DEFAULT_SETTINGS_MODULE = "settings"

_MISSING = object()


def _uppercase_items(module: ModuleType) -> dict[str, Any]:
    return {name: getattr(module, name) for name in dir(module) if name.isupper()}


class Settings:
    """Package defaults overlaid with an optional user settings module.

    Attributes:
        settings_module: Dotted path of the user module that was applied, or
            None if only the defaults are in effect.
    """

    def __init__(self, settings_module: str | None = None) -> None:
        """Load defaults, then apply settings_module if it can be imported.

        Args:
            settings_module: Dotted path of the user settings module. A module
                that cannot be imported is skipped.
        """
        for name, value in _uppercase_items(global_settings).items():
            # global_settings lists stay untouched
            setattr(self, name, list(value) if isinstance(value, list) else value)

        self.settings_module = None
        if settings_module is None:
            return
        try:
            module = importlib.import_module(settings_module)
        except ImportError:
            logger.debug("No settings module '%s', using defaults", settings_module)
            return
        for name, value in _uppercase_items(module).items():
            setattr(self, name, value)
        self.settings_module = settings_module


class LazySettings:
    """Proxy that builds Settings on first attribute access.

    The user module is the one named by the SAVEKEEPER_SETTINGS_MODULE
    environment variable, or "settings" by convention.
    """

    def __init__(self) -> None:
        """Initialize the proxy without loading anything."""
        self._wrapped: Settings | None = None

    def _setup(self) -> Settings:
        self._wrapped = Settings(os.environ.get(SETTINGS_MODULE_ENV, DEFAULT_SETTINGS_MODULE))
        return self._wrapped

    def _settings(self) -> Settings:
        return self._wrapped if self._wrapped is not None else self._setup()

    def __getattr__(self, name: str) -> Any:  # noqa: ANN401
        """Get a setting value, loading settings if not yet loaded."""
        return getattr(self._settings(), name)

    def __setattr__(self, name: str, value: Any) -> None:  # noqa: ANN401
        """Set a setting value."""
        if name == "_wrapped":
            self.__dict__["_wrapped"] = value
        else:
            setattr(self._settings(), name, value)

    def configure(self, **options: Any) -> None:  # noqa: ANN401
        """Set options on top of the package defaults, without a user module.

        Settings that were already loaded are kept and updated instead.

        Example:
            settings.configure(
                SAVE_DIR="/tmp/saves",
                SAVE_FILE_NAME="test.json",
            )
        """
        if self._wrapped is None:
            self._wrapped = Settings()
        for name, value in options.items():
            setattr(self._wrapped, name, value)

    @contextmanager
    def override(self, **options: Any) -> Iterator[None]:  # noqa: ANN401
        """Temporarily replace settings, restoring the previous values on exit.

        Example:
            with settings.override(SAVE_JSON_INDENT=None):
                handler.save(data)
        """
        current = self._settings()
        previous = {name: getattr(current, name, _MISSING) for name in options}
        for name, value in options.items():
            setattr(current, name, value)
        try:
            yield
        finally:
            for name, value in previous.items():
                if value is _MISSING:
                    delattr(current, name)
                else:
                    setattr(current, name, value)

    def reset(self) -> None:
        """Forget loaded settings; the next access loads them again."""
        self._wrapped = None

    def is_configured(self) -> bool:
        """Check if settings have been loaded."""
        return self._wrapped is not None


# Global singleton instance
settings = LazySettings()

__all__ = ["LazySettings", "Settings", "global_settings", "settings"]
