"""Centralized defaults for handlerpref. Overridable via configuration."""

from __future__ import annotations

# =============================================================================
# PREFERENCE SCORES
# =============================================================================

MAX_PREFERENCE = 3
DEFAULT_PREFER_AMOUNT = 1

# =============================================================================
# PERSISTED KEYS (must stay bit-exact for existing stored data)
# =============================================================================

PAIR_KEY_FORMAT = "opened {left} {right}"
PER_DOMAIN_KEY = "lastOpen_perDomain"
DEFAULT_PER_DOMAIN = False

# =============================================================================
# STORAGE
# =============================================================================

DEFAULT_STORAGE_PATH = ".handlerpref/preferences.json"
STORAGE_FORMAT_VERSION = 1
