"""Root logger setup for the web runtime.

``SUBTRACK_LOG_LEVEL`` (a level name or number) wins over everything;
otherwise a truthy ``SUBTRACK_DEBUG`` forces DEBUG. The settings card's
debug toggle applies only when neither is set.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"
LEVEL_ENV = "SUBTRACK_LOG_LEVEL"
DEBUG_ENV = "SUBTRACK_DEBUG"


def env_level() -> Optional[int]:
    """Level forced by the environment, or None."""
    raw = (os.getenv(LEVEL_ENV) or "").strip()
    if raw:
        if raw.isdigit():
            return int(raw)
        level = logging.getLevelName(raw.upper())
        return level if isinstance(level, int) else logging.INFO
    if (os.getenv(DEBUG_ENV) or "").strip().lower() in {"1", "true", "yes", "on"}:
        return logging.DEBUG
    return None


def env_requests_debug() -> bool:
    level = env_level()
    return level is not None and level <= logging.DEBUG


def configure_root(debug_logging: bool = False) -> int:
    """Install the compact console format once and set the effective level."""
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=LOG_FORMAT, datefmt=LOG_DATEFMT)
    return apply_gui_preferences(debug_logging)


def apply_gui_preferences(debug_logging: bool) -> int:
    """Apply ``SettingsVM.debug_logging`` unless the environment pins a level."""
    level = env_level()
    if level is None:
        level = logging.DEBUG if debug_logging else logging.INFO
    logging.getLogger().setLevel(level)
    return level
