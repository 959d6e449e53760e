"""Logger factory for the package.

Each logger gets one stream handler; the level comes from the
BOUNDED_VALUE_LOG_LEVEL environment variable (default WARNING).
"""

import logging
import os

LOG_LEVEL_ENV = "BOUNDED_VALUE_LOG_LEVEL"


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    # Library default; override with BOUNDED_VALUE_LOG_LEVEL
    default_level = logging.WARNING
    level_name = os.getenv(LOG_LEVEL_ENV, logging.getLevelName(default_level))
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        level = default_level

    logger.setLevel(level)
    return logger
