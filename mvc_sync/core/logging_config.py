import logging
import sys
from typing import Union

LOGGER_NAME = "mvc_sync"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: Union[int, str] = logging.INFO) -> logging.Logger:
    """Send the mvc_sync logger tree to stdout at the given level."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    # repeated calls replace the handler instead of stacking another
    logger.handlers.clear()
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
    logger.addHandler(handler)
    return logger
