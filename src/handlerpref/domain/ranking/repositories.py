"""Storage port for preference scores."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar

T = TypeVar("T", bool, int)


@dataclass(frozen=True)
class PreferenceHandle(Generic[T]):
    """A named, typed slot in the key-value store."""

    key: str
    default: T


class PreferenceStorage(Protocol):
    """Key-value persistence port implemented by the host application."""

    def init_bool(self, key: str, default: bool) -> PreferenceHandle[bool]:
        """Declare a boolean preference."""
        ...

    def init_int(self, key: str, default: int) -> PreferenceHandle[int]:
        """Declare an integer preference."""
        ...

    def get(self, handle: PreferenceHandle[T]) -> T:
        """Read a value, or the handle's default when absent."""
        ...

    def set(self, handle: PreferenceHandle[T], value: T) -> None:
        """Persist a value."""
        ...
