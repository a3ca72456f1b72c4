"""TOML-based configuration loader.

Reads ``[tool.handlerpref]`` from ``pyproject.toml`` and produces a typed
``HandlerPrefConfig`` dataclass.  Missing file or missing section → all
defaults apply.
"""

from __future__ import annotations

import logging
import tomllib

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from handlerpref.shared.constants import DEFAULT_PER_DOMAIN, DEFAULT_STORAGE_PATH
from handlerpref.shared.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# ── defaults ────────────────────────────────────────────────────────────
_DEFAULTS: dict[str, Any] = {
    "storage_path": DEFAULT_STORAGE_PATH,
    "per_domain": DEFAULT_PER_DOMAIN,
}


@dataclass(frozen=True)
class HandlerPrefConfig:
    """Typed configuration produced by the TOML loader."""

    storage_path: str = DEFAULT_STORAGE_PATH
    per_domain: bool = DEFAULT_PER_DOMAIN


def load_handlerpref_config(project_root: Path | None = None) -> HandlerPrefConfig:
    """Load configuration from ``pyproject.toml``.

    Args:
        project_root: Directory containing ``pyproject.toml``.
            Defaults to ``Path.cwd()``.

    Returns:
        A frozen ``HandlerPrefConfig`` dataclass.

    Raises:
        ConfigurationError: On TOML parse errors or invalid values.
    """
    if project_root is None:
        project_root = Path.cwd()

    merged: dict[str, Any] = dict(_DEFAULTS)
    section = _read_tool_section(project_root / "pyproject.toml")
    if section is not None:
        for key, value in section.items():
            if key not in _DEFAULTS:
                logger.warning("Unknown key in [tool.handlerpref]: %r", key)
                continue
            merged[key] = value

    storage_path = merged["storage_path"]
    if not isinstance(storage_path, str) or not storage_path:
        msg = f"storage_path must be a non-empty string, got {storage_path!r}"
        raise ConfigurationError(msg)

    per_domain = merged["per_domain"]
    if not isinstance(per_domain, bool):
        msg = f"per_domain must be a boolean, got {per_domain!r}"
        raise ConfigurationError(msg)

    return HandlerPrefConfig(storage_path=storage_path, per_domain=per_domain)


# ── internal helpers ────────────────────────────────────────────────────


def _read_tool_section(toml_path: Path) -> dict[str, Any] | None:
    """Read ``[tool.handlerpref]`` from *toml_path*, or ``None`` if absent."""
    if not toml_path.is_file():
        return None
    try:
        with toml_path.open("rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        msg = f"Failed to parse {toml_path}: {exc}"
        raise ConfigurationError(msg) from exc
    tool: dict[str, Any] | None = data.get("tool")
    if not isinstance(tool, dict):
        return None
    section: dict[str, Any] | None = tool.get("handlerpref")
    if not isinstance(section, dict):
        return None
    return section
