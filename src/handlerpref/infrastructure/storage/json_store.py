"""JSON-file preference storage with file locking."""

from __future__ import annotations

import fcntl
import logging

from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, Field, StrictBool, StrictInt, ValidationError

from handlerpref.domain.ranking.repositories import PreferenceHandle, T
from handlerpref.infrastructure.storage.memory_store import matches_default_type
from handlerpref.shared.constants import STORAGE_FORMAT_VERSION
from handlerpref.shared.exceptions import StorageError

logger = logging.getLogger(__name__)

# =============================================================================
# DOCUMENT SCHEMA
# =============================================================================


class PreferenceDocument(BaseModel):
    """On-disk layout: a flat map of preference keys to values."""

    version: int = STORAGE_FORMAT_VERSION
    values: dict[str, StrictBool | StrictInt] = Field(default_factory=dict)


# =============================================================================
# STORE
# =============================================================================


@dataclass
class JsonFilePreferenceStorage:
    """Implements PreferenceStorage via a single JSON document.

    Every ``get`` re-reads the file and every ``set`` rewrites it under an
    exclusive lock, so other processes sharing the file see updates on
    their next read.
    """

    path: Path

    def init_bool(self, key: str, default: bool) -> PreferenceHandle[bool]:
        return PreferenceHandle(key=key, default=default)

    def init_int(self, key: str, default: int) -> PreferenceHandle[int]:
        return PreferenceHandle(key=key, default=default)

    def get(self, handle: PreferenceHandle[T]) -> T:
        """Read a value, or the handle's default when absent or mistyped."""
        value = self.load().values.get(handle.key)
        if value is None:
            return handle.default
        if not matches_default_type(value, handle.default):
            logger.warning(
                "Ignoring %s stored under %r in %s",
                type(value).__name__,
                handle.key,
                self.path,
            )
            return handle.default
        return value  # type: ignore[return-value]

    def set(self, handle: PreferenceHandle[T], value: T) -> None:
        """Persist a value.

        Raises:
            StorageError: If the file cannot be written.
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("a+b") as f:
                fcntl.flock(f, fcntl.LOCK_EX)
                try:
                    f.seek(0)
                    document = self._parse(f.read())
                    document.version = STORAGE_FORMAT_VERSION
                    document.values[handle.key] = value
                    f.seek(0)
                    f.truncate()
                    f.write(document.model_dump_json(indent=2).encode("utf-8"))
                finally:
                    fcntl.flock(f, fcntl.LOCK_UN)
        except OSError as e:
            raise StorageError(self.path, str(e)) from e

    def load(self) -> PreferenceDocument:
        """Read the whole document; missing or corrupt files read as empty."""
        if not self.path.exists():
            return PreferenceDocument()
        try:
            with self.path.open("rb") as f:
                fcntl.flock(f, fcntl.LOCK_SH)
                try:
                    raw = f.read()
                finally:
                    fcntl.flock(f, fcntl.LOCK_UN)
        except OSError as e:
            logger.warning("Cannot read preferences %s: %s", self.path, e)
            return PreferenceDocument()
        return self._parse(raw)

    def _parse(self, raw: bytes) -> PreferenceDocument:
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            logger.warning("Corrupt preferences file %s: %s", self.path, e)
            return PreferenceDocument()
        if not text.strip():
            return PreferenceDocument()
        try:
            document = PreferenceDocument.model_validate_json(text)
        except ValidationError as e:
            logger.warning("Corrupt preferences file %s: %s", self.path, e)
            return PreferenceDocument()
        if document.version != STORAGE_FORMAT_VERSION:
            logger.warning(
                "Preferences file %s has format version %d, expected %d",
                self.path,
                document.version,
                STORAGE_FORMAT_VERSION,
            )
        return document
