"""Unit tests for FragmentedGameData and FragmentSerializable."""

import unittest
from typing import Any, ClassVar

from savekeeper.data import FragmentedGameData, GameData
from savekeeper.handlers.memory import MemoryDataHandler
from savekeeper.manager import PersistenceManager
from savekeeper.participants.base import FragmentSerializable


class WalletSerializable(FragmentSerializable):
    """Keeps an amount of gold."""

    name: ClassVar[str] = "wallet"

    def __init__(self) -> None:
        self.gold = 0

    def to_dict(self) -> dict[str, Any]:
        return {"gold": self.gold}

    def from_dict(self, state: dict[str, Any]) -> None:
        self.gold = int(state.get("gold", 0))

    def clear(self) -> None:
        self.gold = 0

    def initial_state(self) -> dict[str, Any]:
        return {"gold": 50}


class QuestSerializable(FragmentSerializable):
    """Keeps completed quest names."""

    name: ClassVar[str] = "quests"

    def __init__(self) -> None:
        self.completed: list[str] = []

    def to_dict(self) -> dict[str, Any]:
        return {"completed": list(self.completed)}

    def from_dict(self, state: dict[str, Any]) -> None:
        self.completed = list(state.get("completed", []))

    def clear(self) -> None:
        self.completed = []


class OtherData(GameData):
    """Game data that is not fragmented."""

    def validate_data(self) -> bool:
        return True


class TestFragmentedGameData(unittest.TestCase):
    """Unit test class for FragmentedGameData."""

    def test_defaults_are_valid(self) -> None:
        assert FragmentedGameData().validate_data()

    def test_fragment_helpers(self) -> None:
        data = FragmentedGameData()

        data.set_fragment("wallet", {"gold": 1})

        assert data.get_fragment("wallet") == {"gold": 1}
        assert data.get_fragment("missing") is None
        assert data.remove_fragment("wallet") is True
        assert data.remove_fragment("wallet") is False

    def test_non_dict_fragment_is_invalid(self) -> None:
        assert not FragmentedGameData(fragments={"wallet": [1, 2]}).validate_data()

    def test_non_string_key_is_invalid(self) -> None:
        assert not FragmentedGameData(fragments={1: {}}).validate_data()

    def test_empty_version_is_invalid(self) -> None:
        assert not FragmentedGameData(save_version="").validate_data()

    def test_non_dict_fragments_is_invalid(self) -> None:
        assert not FragmentedGameData(fragments=["wallet"]).validate_data()

    def test_from_dict_defaults(self) -> None:
        assert FragmentedGameData.from_dict({}) == FragmentedGameData()

    def test_from_dict_does_not_coerce(self) -> None:
        data = FragmentedGameData.from_dict({"fragments": "oops"})

        assert not data.validate_data()

    def test_to_dict(self) -> None:
        data = FragmentedGameData(fragments={"wallet": {"gold": 2}}, save_version="3")

        assert data.to_dict() == {"fragments": {"wallet": {"gold": 2}}, "save_version": "3"}

    def test_to_dict_requires_dataclass(self) -> None:
        with self.assertRaises(TypeError):
            OtherData().to_dict()


class TestFragmentSerializable(unittest.TestCase):
    """Fragment serializables driven through a PersistenceManager."""

    def setUp(self) -> None:
        """Wire two fragment serializables on an in-memory manager."""
        self.handler = MemoryDataHandler(FragmentedGameData)
        self.manager = PersistenceManager(FragmentedGameData)
        self.manager.init(self.handler)
        self.wallet = WalletSerializable()
        self.quests = QuestSerializable()
        self.manager.register_serializable(self.wallet)
        self.manager.register_serializable(self.quests)

    def test_new_game_writes_initial_state(self) -> None:
        self.manager.new_game()

        assert self.manager.game_data.fragments == {"wallet": {"gold": 50}, "quests": {}}

    def test_load_game_without_save_uses_initial_state(self) -> None:
        self.manager.load_game()

        assert self.wallet.gold == 50
        assert self.quests.completed == []

    def test_save_and_load_round_trip(self) -> None:
        self.manager.new_game()
        self.wallet.gold = 75
        self.quests.completed = ["intro"]
        self.manager.save_game()

        self.wallet.clear()
        self.quests.clear()
        self.manager.load_game()

        assert self.wallet.gold == 75
        assert self.quests.completed == ["intro"]

    def test_missing_fragment_clears_state(self) -> None:
        self.handler.save(FragmentedGameData(fragments={"wallet": {"gold": 9}}))
        self.quests.completed = ["stale"]

        self.manager.load_game()

        assert self.wallet.gold == 9
        assert self.quests.completed == []

    def test_delete_game_persists_cleared_state(self) -> None:
        self.manager.new_game()
        self.wallet.gold = 75
        self.manager.save_game()

        self.manager.delete_game()

        assert self.wallet.gold == 0
        assert self.handler.load().get_fragment("wallet") == {"gold": 0}

    def test_requires_fragmented_game_data(self) -> None:
        manager = PersistenceManager(OtherData)
        manager.init(MemoryDataHandler(OtherData))
        manager.register_serializable(WalletSerializable())

        with self.assertRaises(TypeError):
            manager.new_game()
