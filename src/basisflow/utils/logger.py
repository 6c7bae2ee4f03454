import logging
import sys

LOGGER_NAME = "basisflow"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(module)s:%(lineno)d | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logger(name: str = LOGGER_NAME, level: int = logging.WARNING) -> logging.Logger:
    """Create (or fetch) a logger with a single stream handler.

    Calling this again for the same name only updates the level.

    Args:
        name: Logger name.
        level: Logging level to set on the logger.

    Returns:
        The configured logger.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger


logger = setup_logger()
