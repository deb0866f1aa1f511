"""
Logging Configuration for the Online Shop Backend

Configures loguru once for the API and the scripts:
- Console output with colors (DEBUG level if DEBUG_LEVEL > 0)
- errors.log: ERROR and above, with the bound context (correlation id, path,
  employee/department/customer ids) appended to each line
- debug.log: everything, only if DEBUG_LEVEL > 0

Log files go to settings.LOG_DIR.
"""

import os
import sys

from loguru import logger

from config import settings

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message} | {extra}"
)

# Remove default handler
logger.remove()

logger.add(
    sys.stdout,
    format=CONSOLE_FORMAT,
    level="DEBUG" if settings.DEBUG_LEVEL > 0 else "INFO",
    colorize=True
)

os.makedirs(settings.LOG_DIR, exist_ok=True)

logger.add(
    os.path.join(settings.LOG_DIR, "errors.log"),
    format=FILE_FORMAT,
    level="ERROR",
    rotation="10 MB",
    retention="30 days",
    compression="zip"
)

if settings.DEBUG_LEVEL > 0:
    logger.add(
        os.path.join(settings.LOG_DIR, "debug.log"),
        format=FILE_FORMAT,
        level="DEBUG",
        rotation="50 MB",
        retention="7 days",
        compression="zip"
    )

# Export configured logger
__all__ = ['logger']
