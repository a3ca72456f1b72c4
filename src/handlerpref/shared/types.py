"""Domain-specific types that prevent primitive obsession."""

from __future__ import annotations

# =============================================================================
# NEWTYPES
# =============================================================================


class Item(str):
    """An opaque identifier of a candidate handler (e.g. an app package)."""


class Domain(str):
    """A domain bucket derived from a URL host (``""`` when unknown)."""
