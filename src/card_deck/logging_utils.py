"""Logging helpers.

Library modules only call get_logger(); applications call setup_logging()
once at startup if they want the package's debug output on stderr.
"""

import logging

from card_deck import config


def setup_logging(level: str = config.LOG_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
