"""Console logging setup shared by the API process and gunicorn workers."""
from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configure the `app` logger tree and return its root logger."""
    logger = logging.getLogger("app")
    logger.setLevel(level.upper())

    # Remove existing handlers to avoid duplicates on app reload
    logger.handlers.clear()

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)

    logger.info("Logging initialized at %s", level.upper())
    return logger
