"""Logging utility for Inline Extract."""

import logging
from .config import LOG_FORMAT, LOG_LEVEL

def setup_logging(verbose: bool = False) -> None:
    """Set up logging configuration.

    Args:
        verbose: Log at DEBUG level instead of the configured default
    """
    level = logging.DEBUG if verbose else getattr(logging, LOG_LEVEL)
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt='%Y-%m-%d %H:%M:%S'
    )

def get_logger(name):
    """Get a logger instance for the specified module.
    
    Args:
        name: Name of the module
        
    Returns:
        Logger instance
    """
    return logging.getLogger(name)

# Exported functions
__all__ = ['setup_logging', 'get_logger']
