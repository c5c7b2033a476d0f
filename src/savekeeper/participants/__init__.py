"""Serializable objects taking part in the persistence lifecycle."""

from savekeeper.participants.base import BaseSerializable, FragmentSerializable
from savekeeper.participants.loader import SerializableLoader
from savekeeper.participants.registry import SerializableRegistry

__all__ = ["BaseSerializable", "FragmentSerializable", "SerializableLoader", "SerializableRegistry"]
