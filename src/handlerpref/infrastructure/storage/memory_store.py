"""In-process preference storage."""

from __future__ import annotations

import logging

from dataclasses import dataclass, field

from handlerpref.domain.ranking.repositories import PreferenceHandle, T

logger = logging.getLogger(__name__)


def matches_default_type(value: object, default: object) -> bool:
    """True when *value* has exactly the handle's value type.

    ``bool`` is an ``int`` subclass, so a plain isinstance check would let
    a stored flag be read back as a score.
    """
    return type(value) is type(default)


@dataclass
class InMemoryPreferenceStorage:
    """Implements PreferenceStorage over a plain dict."""

    values: dict[str, bool | int] = field(default_factory=dict[str, bool | int])

    def init_bool(self, key: str, default: bool) -> PreferenceHandle[bool]:
        return PreferenceHandle(key=key, default=default)

    def init_int(self, key: str, default: int) -> PreferenceHandle[int]:
        return PreferenceHandle(key=key, default=default)

    def get(self, handle: PreferenceHandle[T]) -> T:
        value = self.values.get(handle.key)
        if value is None:
            return handle.default
        if not matches_default_type(value, handle.default):
            logger.warning(
                "Ignoring %s stored under %r, expected %s",
                type(value).__name__,
                handle.key,
                type(handle.default).__name__,
            )
            return handle.default
        return value  # type: ignore[return-value]

    def set(self, handle: PreferenceHandle[T], value: T) -> None:
        self.values[handle.key] = value
