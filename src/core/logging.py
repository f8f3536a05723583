import logging
import sys
from typing import TextIO


def configure_logging(level: int = logging.INFO, stream: TextIO | None = None) -> None:
    """
    Route harness logs to a single stream handler on the root logger.

    Test runners and shells tend to install their own handlers; existing root
    handlers are removed so each record is emitted once.
    """
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove default handlers to avoid duplication
    for h in list(logger.handlers):
        logger.removeHandler(h)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    ))

    logger.addHandler(handler)
