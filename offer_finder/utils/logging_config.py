import logging
import os
import sys
from typing import Optional


def setup_logging(name: str = "offer_finder", level: Optional[int] = None) -> logging.Logger:
    """
    Sets up the project logger with a single stdout handler.

    Args:
        name: Name of the logger.
        level: Logging level. Falls back to OFFER_FINDER_LOG_LEVEL, then INFO.

    Returns:
        logging.Logger: Configured logger instance.
    """
    logger = logging.getLogger(name)

    # Avoid duplicate handlers if already configured
    if logger.handlers:
        return logger

    if level is None:
        level_name = os.getenv("OFFER_FINDER_LOG_LEVEL", "INFO").upper()
        level = getattr(logging, level_name, logging.INFO)
    logger.setLevel(level)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger

# Default logger for the project
logger = setup_logging()
