"""
Logging setup for command line and service use
"""
import logging
import sys
from typing import Optional

from regexp_table.config.settings import LOG_LEVEL

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Attach a console handler to the package logger (once) and set its level"""
    logger = logging.getLogger("regexp_table")
    log_level = getattr(logging, (level or LOG_LEVEL).upper(), logging.WARNING)
    logger.setLevel(log_level)

    # Prevent duplicate handlers on repeated calls
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
    logger.addHandler(handler)
    return logger
