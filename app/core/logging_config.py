"""Process-wide logging setup. Called once by each entrypoint (API, CLI)."""

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.core.config import Settings

APP_LOGGER_NAME = "aton"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%SZ"


def configure_logging(settings: "Settings") -> logging.Logger:
    """
    Configure root logging from settings and return the application logger.

    The returned logger is handed to services explicitly; services do not
    look loggers up on their own.
    """
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )
    # SQL echo is controlled by DEBUG on the engine; keep sqlalchemy quiet otherwise.
    if not settings.DEBUG:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logger = logging.getLogger(APP_LOGGER_NAME)
    logger.setLevel(settings.LOG_LEVEL)
    return logger
