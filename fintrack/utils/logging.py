"""
Logging utilities for fintrack.

Provides standardized logger configuration following privacy rules.

PRIVACY RULES:
- NEVER log passwords, access tokens, refresh tokens or API keys
- NEVER log monetary amounts, budget limits or free-text notes
- NEVER log full records returned by Supabase

Acceptable logging:
- Table names, record ids and user ids
- Row counts (e.g., "Fetched 12 rows from income")
- Backend error codes and messages
"""

import logging
from typing import Optional, Union

from fintrack.config import settings


def get_logger(name: str, level: Optional[Union[int, str]] = None) -> logging.Logger:
    """
    Get a configured logger for the specified module.

    Args:
        name: Module name (typically __name__)
        level: Optional logging level (defaults to settings.LOG_LEVEL)

    Returns:
        Configured logger instance

    Usage:
        >>> from fintrack.utils.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.info("Signed in user 38f7d540")
    """
    logger = logging.getLogger(name)

    if level is None:
        level = settings.LOG_LEVEL.upper()

    logger.setLevel(level)

    # Add handler if not already configured (avoid duplicate handlers)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
