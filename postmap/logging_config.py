"""
Logging configuration for the postmap package.

All package loggers live under the "postmap" hierarchy. This module attaches
a console handler (and optionally a file handler) to that hierarchy and maps
CLI-style verbosity flags onto logging levels.
"""

import logging
import os
import sys
from typing import Optional, TextIO


DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
SIMPLE_FORMAT = "%(levelname)s: %(message)s"

LOG_LEVEL_ENV_VAR = "POSTMAP_LOG_LEVEL"

_VERBOSITY_LEVELS = {
    1: logging.DEBUG,
    0: logging.INFO,
    -1: logging.WARNING,
    -2: logging.ERROR,
}


def _level_for_verbosity(verbosity: int) -> int:
    verbosity = max(-2, min(1, verbosity))
    return _VERBOSITY_LEVELS[verbosity]


def setup_logging(
    verbosity: int = 0,
    log_file: Optional[str] = None,
    format_string: Optional[str] = None,
    stream: Optional[TextIO] = None
) -> logging.Logger:
    """
    Configure the "postmap" logger.
    
    Args:
        verbosity: 1 or more for DEBUG, 0 for INFO, -1 for WARNING,
            -2 or less for ERROR
        log_file: Optional path; when given, everything at DEBUG and above
            is appended to it as well
        format_string: Optional console format string
        stream: Console stream (default: sys.stdout)
        
    Returns:
        The configured package logger
        
    Environment Variables:
        POSTMAP_LOG_LEVEL: Overrides the level derived from verbosity
        
    Example:
        >>> setup_logging(verbosity=1)
        >>> setup_logging(log_file="postmap.log")
    """
    level = _level_for_verbosity(verbosity)
    
    env_level = os.environ.get(LOG_LEVEL_ENV_VAR, "").upper()
    if env_level in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        level = getattr(logging, env_level)
    
    if format_string is None:
        format_string = DEFAULT_FORMAT if verbosity >= 0 else SIMPLE_FORMAT
    
    logger = logging.getLogger("postmap")
    logger.setLevel(level)
    logger.propagate = False
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    
    console_handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(format_string))
    logger.addHandler(console_handler)
    
    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode='a')
        except OSError as e:
            logger.warning(f"Failed to open log file {log_file}: {e}")
        else:
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
            logger.addHandler(file_handler)
            # Console handler keeps filtering at `level`
            logger.setLevel(logging.DEBUG)
            logger.info(f"Logging to file: {log_file}")
    
    logger.debug(f"Logging configured: level={logging.getLevelName(level)}")
    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a module inside the package.
    
    Args:
        name: Logger name, typically __name__ of the calling module
        
    Returns:
        Logger instance under the postmap hierarchy
    """
    return logging.getLogger(name)
