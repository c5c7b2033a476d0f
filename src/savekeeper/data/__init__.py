"""Game data contract."""

from savekeeper.data.base import DEFAULT_SAVE_VERSION, FragmentedGameData, GameData

__all__ = ["DEFAULT_SAVE_VERSION", "FragmentedGameData", "GameData"]
