"""Default settings for savekeeper.

Users can override these in their project's settings.py file.

Example:
    # In your project's settings.py:
    from savekeeper.conf import global_settings

    SAVE_DIR = "userdata"
    GAME_DATA_CLASS = "mygame.data.MyGameData"
    INSTALLED_SERIALIZABLES = [
        *global_settings.INSTALLED_SERIALIZABLES,
        "mygame.persistence.inventory",
    ]
"""

# Storage settings
SAVE_DIR = "saves"
"""Directory holding the save file. Relative paths resolve against the working directory."""

SAVE_FILE_NAME = "game_data.json"
"""Name of the save file inside SAVE_DIR."""

SAVE_JSON_INDENT = 2
"""Indentation used when writing JSON save files (None for compact output)."""

SAVE_FILE_ENCODING = "utf-8"
"""Text encoding of JSON save files."""

# Game data settings
GAME_DATA_CLASS = "savekeeper.data.FragmentedGameData"
"""Dotted path to the GameData subclass created by new_game() and decoded by the handler."""

# Installed serializables (like Django's INSTALLED_APPS)
INSTALLED_SERIALIZABLES = []
"""List of module paths to import for serializable registration.

Example:
    INSTALLED_SERIALIZABLES = [
        "mygame.persistence.inventory",
        "mygame.persistence.quests",
    ]
"""

# Logging settings
LOG_LEVEL = "INFO"
"""Level passed to setup_logging() by create_manager()."""
