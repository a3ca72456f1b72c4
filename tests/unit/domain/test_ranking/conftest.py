"""Fixtures for Ranking domain tests."""

from __future__ import annotations

import pytest

from handlerpref.domain.ranking.services import RankingEngine
from handlerpref.infrastructure.storage.memory_store import InMemoryPreferenceStorage
from handlerpref.shared.types import Item


@pytest.fixture
def storage() -> InMemoryPreferenceStorage:
    return InMemoryPreferenceStorage()


@pytest.fixture
def engine(storage: InMemoryPreferenceStorage) -> RankingEngine:
    return RankingEngine(storage)


@pytest.fixture
def per_domain_engine(engine: RankingEngine) -> RankingEngine:
    engine.set_per_domain(True)
    return engine


@pytest.fixture
def pkg_a() -> Item:
    return Item("pkg.a")


@pytest.fixture
def pkg_b() -> Item:
    return Item("pkg.b")
