"""Logging setup for the service."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a single stream handler to the ``growthcalc`` logger.

    Calling it again only updates the level.
    """
    logger = logging.getLogger("growthcalc")
    logger.setLevel(level)

    if not any(getattr(handler, "_growthcalc", False) for handler in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._growthcalc = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    return logger
