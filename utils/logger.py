"""
Central logger configuration for the word count tally.

All modules should import get_logger from this module instead of using
logging.getLogger directly, so that the stderr handler and format are
configured exactly once.

Usage:
    from utils.logger import get_logger

    logger = get_logger(__name__)
    logger.info("This message goes to stderr")
"""

import sys
import logging
from typing import Dict, Optional
from threading import Lock


# Global initialization state
_initialized: bool = False
_lock = Lock()

# Cache of module loggers
_logger_cache: Dict[str, logging.Logger] = {}


def initialize_central_logging(
    log_level: int = logging.INFO,
    force: bool = False
) -> None:
    """
    Initialize central logging.

    This should be called once at application startup before any logging occurs.
    If not called explicitly, it will be initialized with default settings on first use.

    Args:
        log_level: Default logging level (default: logging.INFO)
        force: Force re-initialization even if already initialized
    """
    global _initialized

    with _lock:
        if _initialized and not force:
            return

        _configure_root_logger(log_level)

        _initialized = True


def _configure_root_logger(log_level: int):
    """
    Configure the root logger for stderr output.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove any existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance.

    This is a drop-in replacement for logging.getLogger() that ensures
    consistent logging configuration.

    Args:
        name: Logger name (typically __name__ from the calling module)

    Returns:
        A logging.Logger instance
    """
    if not _initialized:
        initialize_central_logging()

    logger_name = name or "word-count-tally"

    if logger_name in _logger_cache:
        return _logger_cache[logger_name]

    logger = logging.getLogger(logger_name)

    _logger_cache[logger_name] = logger
    return logger


def resolve_log_level(level_name: str) -> int:
    """
    Convert a level name such as "debug" or "INFO" to a logging level.

    Raises:
        ValueError: If the name is not a standard logging level
    """
    level = logging.getLevelName(level_name.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {level_name}")
    return level
