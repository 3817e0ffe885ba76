"""
Shared logger utility for the inventory tracker.
Provides a consistent logger configuration for all modules.
"""

import logging
import os

LOG_LEVEL_ENV = "INVENTORY_LOG_LEVEL"


def get_logger(name: str | None = None, level: str | int | None = None) -> logging.Logger:
    """
    Returns a logger with the specified name, configured with a standard format.
    The level comes from ``level``, else the INVENTORY_LOG_LEVEL environment
    variable, else INFO. An unknown environment value falls back to INFO.
    If no name is provided, returns the root logger.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    if level is None:
        env_level = os.getenv(LOG_LEVEL_ENV, "INFO").upper()
        level = logging.getLevelName(env_level)
        if not isinstance(level, int):
            logger.warning(f"Unknown {LOG_LEVEL_ENV} value {env_level!r}, using INFO")
            level = logging.INFO
    logger.setLevel(level)
    return logger
