"""
Console logging for the API server and CLI.
"""

import logging
from typing import Optional

from repo_tracker.settings import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_level(level: Optional[str] = None) -> int:
    """
    Turn a level name into a logging constant.

    Falls back to the configured APP_LOG_LEVEL when no name is given,
    and to INFO when the name is not a known level.
    """
    level_name = (level or get_settings().log_level).upper()
    value = getattr(logging, level_name, None)
    return value if isinstance(value, int) else logging.INFO


def setup_logging(level: Optional[str] = None) -> None:
    """Configure a single console handler on the root logger."""
    logging.basicConfig(
        level=resolve_level(level),
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
    )
