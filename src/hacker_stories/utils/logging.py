"""
Logging configuration for the hacker stories service.

Application code logs through loguru. The stdlib loggers of the HTTP stack
are only raised to WARNING so request chatter does not drown the story
lifecycle messages.
"""

import logging
import sys
from typing import Optional

from loguru import logger

from ..config import Settings, get_settings

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{module}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)
LOG_FILE = "logs/hacker_stories.log"
NOISY_LOGGERS = ("httpx", "httpcore")


def setup_logging(log_level: Optional[str] = None, settings: Optional[Settings] = None) -> None:
    """
    Set up logging configuration.

    Args:
        log_level: Override log level (DEBUG, INFO, WARNING, ERROR)
        settings: Settings to read from (cached settings if omitted)
    """
    settings = settings or get_settings()
    level = (log_level or settings.log_level).upper()
    as_json = settings.log_format == "json"

    # Remove default handler
    logger.remove()

    logger.add(
        sys.stderr,
        format=LOG_FORMAT,
        level=level,
        colorize=not as_json,
        serialize=as_json,
        backtrace=settings.debug_mode,
        diagnose=settings.debug_mode
    )

    # Persist to a rotating file outside of debug sessions
    if not settings.debug_mode:
        logger.add(
            LOG_FILE,
            format=LOG_FORMAT,
            level=level,
            rotation="1 day",
            retention="30 days",
            compression="gz",
            serialize=as_json,
            backtrace=False,
            diagnose=False
        )

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logger.info(f"Logging initialized with level: {level}, format: {settings.log_format}")
