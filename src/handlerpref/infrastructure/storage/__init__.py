"""Key-value storage adapters for preference scores."""

from handlerpref.infrastructure.storage.json_store import JsonFilePreferenceStorage
from handlerpref.infrastructure.storage.memory_store import InMemoryPreferenceStorage

__all__ = ["InMemoryPreferenceStorage", "JsonFilePreferenceStorage"]
