import logging

from accounthub.core.config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
HANDLER_NAME = "accounthub"


def configure_logging(level: str | None = None) -> logging.Logger:
    """
    Attaches a single stream handler to the package logger.
    Safe to call more than once; later calls only adjust the level.
    """
    logger = logging.getLogger("accounthub")
    logger.setLevel(level or get_settings().log_level)

    if not any(h.get_name() == HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler.set_name(HANDLER_NAME)
        logger.addHandler(handler)

    return logger
