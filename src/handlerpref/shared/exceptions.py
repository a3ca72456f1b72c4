"""Typed exception hierarchy for handlerpref."""

from __future__ import annotations

from pathlib import Path

# =============================================================================
# BASE
# =============================================================================


class HandlerPrefError(Exception):
    """Base exception for all handlerpref errors."""


# =============================================================================
# STORAGE
# =============================================================================


class StorageError(HandlerPrefError):
    """Failed to persist preferences."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Failed to write preferences to {path}: {reason}")


# =============================================================================
# CONFIGURATION
# =============================================================================


class ConfigurationError(HandlerPrefError):
    """Invalid or missing configuration."""
