import logging

from textforge.core.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(settings: Settings) -> logging.Logger:
    """
    Attach a single stream handler to the package logger.

    Safe to call more than once; an existing handler is reused.
    """
    logger = logging.getLogger("textforge")
    logger.setLevel(settings.log_level.upper())

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
