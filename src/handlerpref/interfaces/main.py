"""Command-line entry point for sorting and recording handler choices.

Reads ``INPUT_MODE`` from the environment and runs the corresponding
operation against the configured JSON preference file:

- ``sort`` (default): print ``INPUT_ITEMS`` most-preferred first
- ``prefer``: record ``INPUT_PREFERRED`` as chosen over ``INPUT_ITEMS``
"""

from __future__ import annotations

import logging
import os
import sys

from pathlib import Path

from handlerpref.domain.ranking.services import RankingEngine
from handlerpref.infrastructure.storage.json_store import JsonFilePreferenceStorage
from handlerpref.interfaces.env_utils import env_flag, parse_list, require_env
from handlerpref.interfaces.toml_config import load_handlerpref_config
from handlerpref.shared.constants import PER_DOMAIN_KEY
from handlerpref.shared.exceptions import HandlerPrefError
from handlerpref.shared.types import Item

logger = logging.getLogger(__name__)

_VALID_MODES = {"sort", "prefer"}


def build_engine() -> RankingEngine:
    """Wire a RankingEngine to the configured preference file.

    ``per_domain`` from configuration (or ``INPUT_PER_DOMAIN``) only seeds
    the persisted mode flag; once written, the stored flag wins.
    """
    config = load_handlerpref_config()
    path = Path(os.environ.get("INPUT_STORAGE_PATH", config.storage_path))
    storage = JsonFilePreferenceStorage(path=path)
    engine = RankingEngine(storage)

    if PER_DOMAIN_KEY not in storage.load().values:
        engine.set_per_domain(env_flag("INPUT_PER_DOMAIN", config.per_domain))
    return engine


def run(mode: str) -> None:
    """Execute *mode* using inputs from the environment."""
    url = os.environ.get("INPUT_URL", "")
    items = [Item(i) for i in parse_list(require_env("INPUT_ITEMS"))]
    engine = build_engine()

    if mode == "sort":
        for item in engine.sort(items, url):
            print(item)
    else:
        preferred = Item(require_env("INPUT_PREFERRED").strip())
        engine.prefer(preferred, items, url)
        logger.info("Recorded %s as preferred over %d item(s)", preferred, len(items))


def main() -> None:
    """Dispatch to the appropriate operation based on INPUT_MODE."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    mode = os.environ.get("INPUT_MODE", "sort").strip().lower()

    if mode not in _VALID_MODES:
        valid = ", ".join(sorted(_VALID_MODES))
        logger.error("Unknown mode: %r (valid: %s)", mode, valid)
        sys.exit(1)

    try:
        run(mode)
    except HandlerPrefError as e:
        logger.error("%s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
