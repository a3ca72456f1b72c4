"""Pairwise handler preference ranking."""

from handlerpref.domain.ranking.domains import domain_of
from handlerpref.domain.ranking.repositories import (
    PreferenceHandle,
    PreferenceStorage,
)
from handlerpref.domain.ranking.services import PreferenceStore, RankingEngine
from handlerpref.domain.ranking.value_objects import (
    CanonicalPair,
    canonicalize,
    clamp_score,
    pref_key,
)

__all__ = [
    "CanonicalPair",
    "PreferenceHandle",
    "PreferenceStorage",
    "PreferenceStore",
    "RankingEngine",
    "canonicalize",
    "clamp_score",
    "domain_of",
    "pref_key",
]
