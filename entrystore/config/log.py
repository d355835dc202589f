"""Logging setup for hosts embedding the entry store."""

import logging
import sys
from typing import Optional

from .settings import settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(debug: bool = False, level: Optional[str] = None) -> None:
    """
    Configure root logging for a host process.

    Args:
        debug: Force DEBUG level regardless of other settings
        level: Level name to use (default from settings.LOG_LEVEL)
    """
    if debug or settings.DEBUG:
        resolved = logging.DEBUG
    else:
        resolved = getattr(logging, (level or settings.LOG_LEVEL).upper(), logging.INFO)

    logging.basicConfig(
        level=resolved,
        format=LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,
    )
