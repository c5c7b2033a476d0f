"""Unit tests for SerializableRegistry and SerializableLoader."""

import unittest
from typing import Any, ClassVar
from unittest.mock import MagicMock, patch

from savekeeper.conf import settings
from savekeeper.data import FragmentedGameData
from savekeeper.errors import DuplicateSerializableError
from savekeeper.handlers.memory import MemoryDataHandler
from savekeeper.manager import PersistenceManager
from savekeeper.participants.base import FragmentSerializable
from savekeeper.participants.loader import SerializableLoader
from savekeeper.participants.registry import SerializableRegistry


class CounterSerializable(FragmentSerializable):
    """Keeps a counter."""

    name: ClassVar[str] = "counter"

    def __init__(self) -> None:
        self.count = 0

    def to_dict(self) -> dict[str, Any]:
        return {"count": self.count}

    def from_dict(self, state: dict[str, Any]) -> None:
        self.count = int(state.get("count", 0))

    def clear(self) -> None:
        self.count = 0


class EarlySerializable(CounterSerializable):
    """Counter registered with a low priority."""

    name: ClassVar[str] = "early"
    priority: ClassVar[int] = 10


class LateSerializable(CounterSerializable):
    """Counter registered with a high priority."""

    name: ClassVar[str] = "late"
    priority: ClassVar[int] = 200


class TestSerializableRegistry(unittest.TestCase):
    """Unit test class for SerializableRegistry."""

    def test_register_returns_class(self) -> None:
        assert SerializableRegistry.register(CounterSerializable) is CounterSerializable
        assert SerializableRegistry.get("counter") is CounterSerializable
        assert SerializableRegistry.is_registered("counter")

    def test_register_requires_name(self) -> None:
        class Nameless(CounterSerializable):
            name: ClassVar[str] = ""

        with self.assertRaises(ValueError):
            SerializableRegistry.register(Nameless)

    def test_re_register_replaces_and_warns(self) -> None:
        class Replacement(CounterSerializable):
            name: ClassVar[str] = "counter"

        SerializableRegistry.register(CounterSerializable)

        with self.assertLogs("savekeeper.participants.registry", level="WARNING"):
            SerializableRegistry.register(Replacement)

        assert SerializableRegistry.get("counter") is Replacement

    def test_get_all_is_a_copy(self) -> None:
        SerializableRegistry.register(CounterSerializable)

        SerializableRegistry.get_all().clear()

        assert SerializableRegistry.is_registered("counter")

    def test_clear(self) -> None:
        SerializableRegistry.register(CounterSerializable)

        SerializableRegistry.clear()

        assert SerializableRegistry.get("counter") is None


class TestSerializableLoader(unittest.TestCase):
    """Unit test class for SerializableLoader."""

    def test_defaults_to_settings(self) -> None:
        settings.configure(INSTALLED_SERIALIZABLES=["mygame.persistence"])

        loader = SerializableLoader()

        assert loader.installed_serializables == ["mygame.persistence"]

    @patch("savekeeper.participants.loader.importlib.import_module")
    def test_load_modules_imports_each_module(self, import_module: MagicMock) -> None:
        loader = SerializableLoader(["mygame.wallet", "mygame.quests"])

        loader.load_modules()

        assert [c.args[0] for c in import_module.call_args_list] == ["mygame.wallet", "mygame.quests"]

    def test_load_modules_reraises_import_error(self) -> None:
        loader = SerializableLoader(["savekeeper_tests_missing_module"])

        with self.assertRaises(ImportError):
            loader.load_modules()

    def test_instantiate_all_sorts_by_priority(self) -> None:
        SerializableRegistry.register(LateSerializable)
        SerializableRegistry.register(CounterSerializable)
        SerializableRegistry.register(EarlySerializable)

        instances = SerializableLoader([]).instantiate_all()

        assert list(instances) == ["early", "counter", "late"]
        assert isinstance(instances["late"], LateSerializable)

    def test_instantiate_all_without_registrations(self) -> None:
        assert SerializableLoader([]).instantiate_all() == {}

    def test_register_all_registers_in_priority_order(self) -> None:
        SerializableRegistry.register(LateSerializable)
        SerializableRegistry.register(EarlySerializable)
        loader = SerializableLoader([])
        manager = PersistenceManager(FragmentedGameData)
        manager.init(MemoryDataHandler(FragmentedGameData))

        registered = loader.register_all(manager)

        assert manager.serializables == tuple(registered)
        assert [s.name for s in registered] == ["early", "late"]
        assert loader.get_serializable("early") is registered[0]

    def test_register_all_registers_nothing_when_one_is_duplicate(self) -> None:
        SerializableRegistry.register(EarlySerializable)
        SerializableRegistry.register(LateSerializable)
        loader = SerializableLoader([])
        loader.instantiate_all()
        manager = PersistenceManager(FragmentedGameData)
        late = loader.get_serializable("late")
        manager.register_serializable(late)

        with self.assertRaises(DuplicateSerializableError):
            loader.register_all(manager)

        assert manager.serializables == (late,)

    def test_registered_instances_take_part_in_lifecycle(self) -> None:
        SerializableRegistry.register(CounterSerializable)
        loader = SerializableLoader([])
        manager = PersistenceManager(FragmentedGameData)
        manager.init(MemoryDataHandler(FragmentedGameData))
        loader.register_all(manager)
        manager.new_game()

        loader.get_serializable("counter").count = 4
        manager.save_game()

        assert manager.game_data.get_fragment("counter") == {"count": 4}
