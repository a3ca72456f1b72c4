"""Domain services for learning and applying handler preferences."""

from __future__ import annotations

import functools
import logging

from collections.abc import Iterable
from dataclasses import dataclass, field

from handlerpref.domain.ranking.domains import domain_of
from handlerpref.domain.ranking.repositories import (
    PreferenceHandle,
    PreferenceStorage,
)
from handlerpref.domain.ranking.value_objects import (
    CanonicalPair,
    canonicalize,
    clamp_score,
    pref_key,
)
from handlerpref.shared.constants import (
    DEFAULT_PER_DOMAIN,
    DEFAULT_PREFER_AMOUNT,
    PER_DOMAIN_KEY,
)
from handlerpref.shared.types import Domain, Item

logger = logging.getLogger(__name__)

# =============================================================================
# STORE
# =============================================================================


@dataclass
class PreferenceStore:
    """Reads and writes clamped pair scores through the storage port.

    Nothing is cached: every call goes to storage, so changes made by
    other writers are visible immediately.
    """

    storage: PreferenceStorage

    def get(self, pair: CanonicalPair, domain: Domain | None = None) -> int:
        """Return the score for *pair*, 0 when nothing is stored."""
        handle = self.storage.init_int(pref_key(pair, domain), 0)
        return clamp_score(self.storage.get(handle))

    def set(self, pair: CanonicalPair, domain: Domain | None, value: int) -> None:
        """Persist *value* for *pair*, clamped to the score range."""
        handle = self.storage.init_int(pref_key(pair, domain), 0)
        self.storage.set(handle, clamp_score(value))


# =============================================================================
# ENGINE
# =============================================================================


@dataclass
class RankingEngine:
    """Learns pairwise handler preferences and orders candidates by them.

    A negative stored score favours the pair's ``left`` item, a positive
    one its ``right`` item. With per-domain mode on, scores are kept per
    domain bucket of the URL; otherwise one global score per pair is used.
    """

    storage: PreferenceStorage
    _store: PreferenceStore = field(init=False, repr=False)
    _mode: PreferenceHandle[bool] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._store = PreferenceStore(self.storage)
        self._mode = self.storage.init_bool(PER_DOMAIN_KEY, DEFAULT_PER_DOMAIN)

    @property
    def per_domain(self) -> bool:
        """Whether scores are scoped by domain bucket."""
        return self.storage.get(self._mode)

    def set_per_domain(self, enabled: bool) -> None:
        """Switch per-domain scoping on or off."""
        self.storage.set(self._mode, enabled)

    def sort(self, items: Iterable[Item], url: str) -> list[Item]:
        """Return *items* ordered with the most preferred first.

        The sort is stable: items without a preference between them keep
        their input order.
        """
        return sorted(
            items,
            key=functools.cmp_to_key(
                lambda a, b: self.compare_prefer(a, b, url)
            ),
        )

    def sort_in_place(self, items: list[Item], url: str) -> None:
        """Reorder *items* in place, like :meth:`sort`."""
        items[:] = self.sort(items, url)

    def prefer(self, preferred: Item, others: Iterable[Item], url: str) -> None:
        """Record that *preferred* was chosen over each of *others*."""
        for other in others:
            self.prefer_pair(preferred, other, DEFAULT_PREFER_AMOUNT, url)

    def prefer_pair(self, a: Item, b: Item, amount: int, url: str) -> None:
        """Move the score between *a* and *b* by *amount* toward *a*.

        Preferring an item over itself is a no-op.
        """
        if a == b:
            return

        pair, sign = canonicalize(a, b)
        domain = self._domain_for(url)

        # Subtract: a lower score favours ``left``.
        old = self._store.get(pair, domain)
        new = clamp_score(old - amount * sign)
        self._store.set(pair, domain, new)
        logger.debug(
            "Preference %s/%s in %r: %d -> %d",
            pair.left,
            pair.right,
            domain,
            old,
            new,
        )

    def compare_prefer(self, a: Item, b: Item, url: str) -> int:
        """Three-way compare *a* and *b* by learned preference.

        Negative means *a* is preferred, positive means *b* is, zero means
        no preference. ``compare_prefer(a, b) == -compare_prefer(b, a)``.
        """
        if a == b:
            return 0
        pair, sign = canonicalize(a, b)
        return sign * self._store.get(pair, self._domain_for(url))

    def _domain_for(self, url: str) -> Domain | None:
        if not self.per_domain:
            return None
        return domain_of(url)
