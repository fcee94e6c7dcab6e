"""
Logging Setup
Configures loguru sinks for deployment runs
"""

import sys
from typing import Optional
from loguru import logger


CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function} - {message}"


def setup_logging(level: str = "INFO", log_file: Optional[str] = None):
    """
    Route all log output to stderr (and optionally a file)

    Stdout is reserved for the deployment result line.

    Args:
        level: Minimum level for the stderr sink
        log_file: Optional path for a rotating DEBUG log
    """
    # Unknown levels raise here, while the current sinks are still installed
    logger.level(level)

    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, diagnose=False)

    if log_file:
        logger.add(
            log_file,
            rotation="1 day",
            retention="7 days",
            format=FILE_FORMAT,
            level="DEBUG",
            diagnose=False
        )
