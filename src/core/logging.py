"""
Logging setup.

Modules log through ``logging.getLogger(__name__)``; the entry point calls
``setup_logging`` once.
"""

import logging

from src.domain.constants import DEFAULT_LOG_LEVEL

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(level: str | int | None) -> int:
    """
    Level name or number to a logging level.

    Unknown names fall back to INFO.
    """
    if isinstance(level, int):
        return level

    name = (level or DEFAULT_LOG_LEVEL).strip().upper()
    resolved = logging.getLevelName(name)
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(level: str | int | None = None) -> int:
    """
    Configure the root logger.

    Args:
        level: "DEBUG", "INFO", ... or a logging constant

    Returns:
        The effective level
    """
    effective = resolve_level(level)
    logging.basicConfig(
        level=effective,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )
    logging.getLogger().setLevel(effective)
    return effective
