"""
Logging Setup
=============

Modules log through ``logging.getLogger(__name__)``; this sets the root handler once.
"""
import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Configure root logging for the application.

    Args:
        level: Level name such as "DEBUG" or "INFO"
    """
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("webinars").setLevel(level)
