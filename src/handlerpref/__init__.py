"""Learn and apply pairwise preferences between candidate handlers."""

from handlerpref.domain.ranking import RankingEngine, domain_of
from handlerpref.infrastructure.storage import (
    InMemoryPreferenceStorage,
    JsonFilePreferenceStorage,
)
from handlerpref.shared.types import Item

__all__ = [
    "InMemoryPreferenceStorage",
    "Item",
    "JsonFilePreferenceStorage",
    "RankingEngine",
    "domain_of",
]
