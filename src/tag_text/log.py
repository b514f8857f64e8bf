"""Logging helpers for Tag Text.

Example:
    >>> from tag_text.log import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.warning("Unknown modifier")
"""

import logging

from rich.logging import RichHandler


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under "tag_text".

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance
    """
    if not (name == "tag_text" or name.startswith("tag_text.")):
        name = f"tag_text.{name}"
    return logging.getLogger(name)


def configure_logging(level: str = "WARNING") -> None:
    """Route Tag Text log records to the terminal through rich."""
    logger = logging.getLogger("tag_text")
    logger.setLevel(level.upper())
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(show_path=False, markup=False))
