"""
SHIFTCRACK - Logging setup (loguru).
"""

import sys
from typing import Optional
from loguru import logger

from core.config import settings

LOG_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>"


def configure_logging(level: Optional[str] = None) -> None:
    """Replace loguru's default handler: console sink on stderr, optional rotating file sink."""
    logger.remove()
    logger.add(sys.stderr, format=LOG_FORMAT, level=level or settings.LOG_LEVEL)
    if settings.LOG_FILE:
        logger.add(settings.LOG_FILE, rotation="10 MB", retention="7 days", level="DEBUG")
