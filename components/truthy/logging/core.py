"""Logging setup for the truthy components."""

import logging
import os
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
ROOT_LOGGER_NAME = "truthy"

_configured = False


def _resolve_level(level_name: str) -> Optional[int]:
    """Map a level name to its number, or None if logging does not know it."""
    level = logging.getLevelName(level_name.strip().upper())
    if isinstance(level, int):
        return level
    return None


def _configure_root() -> None:
    global _configured
    if _configured:
        return

    root = logging.getLogger(ROOT_LOGGER_NAME)
    level_name = os.getenv("TRUTHY_LOG_LEVEL")
    if level_name and level_name.strip():
        level = _resolve_level(level_name)
        console = logging.StreamHandler()
        console.setFormatter(logging.Formatter(LOG_FORMAT))
        root.setLevel(logging.WARNING if level is None else level)
        root.addHandler(console)
        _configured = True
        if level is None:
            root.warning(f"Unknown TRUTHY_LOG_LEVEL {level_name!r}, using WARNING")
    else:
        root.addHandler(logging.NullHandler())
        _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``truthy`` hierarchy.

    Args:
        name: Usually the calling module's ``__name__``.

    Returns:
        logging.Logger: The configured logger.
    """
    _configure_root()
    return logging.getLogger(name)
