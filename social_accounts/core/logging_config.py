# Standard library imports
import logging
from typing import Optional

# Local application imports
from .config import get_settings

_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure process logging with a consistent format

    Args:
        level: Log level name; defaults to LOG_LEVEL from settings
    """
    if level is None:
        level = get_settings().log_level

    normalized_level = level.strip().upper() if level and level.strip() else "INFO"
    resolved_level = getattr(logging, normalized_level, logging.INFO)

    logging.basicConfig(
        level=resolved_level,
        format=_LOG_FORMAT,
    )
