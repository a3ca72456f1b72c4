"""Shared environment variable helpers for interfaces."""

from __future__ import annotations

import os

from handlerpref.shared.exceptions import ConfigurationError

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def require_env(name: str) -> str:
    """Read a required environment variable or raise.

    Raises:
        ConfigurationError: If the variable is missing or empty.
    """
    value = os.environ.get(name)
    if not value:
        msg = f"Missing required environment variable: {name}"
        raise ConfigurationError(msg)
    return value


def parse_list(raw: str) -> list[str]:
    """Split a comma-separated value, dropping blanks."""
    return [part.strip() for part in raw.split(",") if part.strip()]


def env_flag(name: str, default: bool) -> bool:
    """Read a boolean environment variable.

    Raises:
        ConfigurationError: If the value is not a recognised boolean.
    """
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    if raw in _TRUE:
        return True
    if raw in _FALSE:
        return False
    msg = f"Invalid boolean for {name}: {raw!r}"
    raise ConfigurationError(msg)
