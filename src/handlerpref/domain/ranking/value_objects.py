"""Value objects for the Ranking bounded context."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from handlerpref.shared.constants import MAX_PREFERENCE, PAIR_KEY_FORMAT
from handlerpref.shared.types import Domain, Item

Sign = Literal[1, -1]


def code_unit_key(item: str) -> bytes:
    """Sort key ordering strings by UTF-16 code units.

    Stored pair keys were written with this ordering, which differs from
    code point order once astral characters meet U+E000..U+FFFF.
    """
    return item.encode("utf-16-be", "surrogatepass")


# =============================================================================
# VALUE OBJECTS
# =============================================================================


@dataclass(frozen=True)
class CanonicalPair:
    """Two distinct items in lexicographic order (``left < right``)."""

    left: Item
    right: Item

    def __post_init__(self) -> None:
        if not code_unit_key(self.left) < code_unit_key(self.right):
            msg = f"left ({self.left!r}) must sort before right ({self.right!r})"
            raise ValueError(msg)


def canonicalize(a: Item, b: Item) -> tuple[CanonicalPair, Sign]:
    """Map an unordered pair onto its single storage slot.

    Returns:
        The canonical pair and ``+1`` when ``(a, b)`` was already in order,
        ``-1`` when it had to be swapped.

    Raises:
        ValueError: If ``a == b``; self pairs carry no preference.
    """
    if a == b:
        msg = f"Cannot canonicalize a pair of identical items: {a!r}"
        raise ValueError(msg)
    if code_unit_key(a) < code_unit_key(b):
        return CanonicalPair(left=a, right=b), 1
    return CanonicalPair(left=b, right=a), -1


def pref_key(pair: CanonicalPair, domain: Domain | None = None) -> str:
    """Build the persisted key for a pair, scoped by *domain* when given."""
    key = PAIR_KEY_FORMAT.format(left=pair.left, right=pair.right)
    if domain is None:
        return key
    return f"{domain} {key}"


def clamp_score(value: int) -> int:
    """Bound a score to ``[-MAX_PREFERENCE, MAX_PREFERENCE]``."""
    return max(-MAX_PREFERENCE, min(value, MAX_PREFERENCE))
