"""Logging setup for the API process."""

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = "INFO", logger: Optional[logging.Logger] = None) -> None:
    """Configure a logger (the root logger by default) with a console handler.

    The level is always applied. The handler is only added if the logger has
    none yet, so repeated ``create_app`` calls (as in tests) don't stack handlers.
    """
    if logger is None:
        logger = logging.getLogger()

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if logger.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(handler)
