"""
Centralized logging configuration.
"""
import logging
import logging.handlers
from pathlib import Path
from typing import Optional

from .constants import (
    LOG_LEVEL, LOG_FORMAT, LOG_FILE,
    LOG_MAX_SIZE_MB, LOG_BACKUP_COUNT
)


def setup_logger(
    name: str = None,
    level: Optional[str] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Get or create a configured logger.

    Usage:
        from config.logging_config import setup_logger
        logger = setup_logger(__name__)
        logger.info("Message here")

    Args:
        name: Logger name. If None, uses 'pagination'.
        level: Level name (DEBUG, INFO, ...). Defaults to LOG_LEVEL.
        log_file: Rotating log file path. Defaults to LOG_FILE; no file
            handler is attached when both are empty.

    Returns:
        Configured logging.Logger instance.
    """
    logger = logging.getLogger(name or 'pagination')

    # Avoid adding handlers multiple times
    if logger.handlers:
        return logger

    logger.setLevel(getattr(logging, (level or LOG_LEVEL).upper()))

    # Console handler - INFO level
    console = logging.StreamHandler()
    console.setLevel(logging.INFO)
    console.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(console)

    # File handler with rotation - DEBUG level
    log_file = log_file or LOG_FILE
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=LOG_MAX_SIZE_MB * 1024 * 1024,
            backupCount=LOG_BACKUP_COUNT,
            encoding='utf-8',
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(file_handler)

    return logger


def configure_logging(settings=None) -> logging.Logger:
    """
    Configure the 'pagination' logger from Settings.

    Engine modules log under 'pagination.*', so their records reach the
    handlers attached here.
    """
    if settings is None:
        from .settings import get_settings
        settings = get_settings()
    return setup_logger('pagination', level=settings.log_level, log_file=settings.log_file)


def get_logger(name: str = None) -> logging.Logger:
    """
    Alias for setup_logger for convenience.

    Usage:
        from config.logging_config import get_logger
        logger = get_logger(__name__)
    """
    return setup_logger(name)
