"""Logging configuration helpers."""

import logging

LOGGER_NAME = "wellness_log"
LOG_FORMAT = "%(asctime)s %(levelname)s: %(name)s: %(message)s"


def configure_logging(level: int | str = logging.INFO) -> logging.Logger:
    """Route ``wellness_log`` records to one stream handler at ``level``.

    Safe to call once per app instance: the handler is attached only once,
    while the level follows the latest call.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
    return logger
