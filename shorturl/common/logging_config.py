"""Logging configuration for URL shortener."""

import logging
import sys
from typing import Optional

PLAIN_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"
JSON_FORMAT = (
    '{"timestamp": "%(asctime)s", "level": "%(levelname)s", '
    '"logger": "%(name)s", "message": "%(message)s"}'
)

# Server loggers that should share the service's handlers and format
SERVER_LOGGERS = ("uvicorn", "uvicorn.error")


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    json_format: bool = False,
) -> logging.Logger:
    """Configure the ``shorturl`` logger and the uvicorn server loggers.

    Args:
        level: Logging level name; unknown names fall back to INFO
        log_file: Optional file that receives a copy of every record
        json_format: Emit one JSON-shaped object per line

    Returns:
        The ``shorturl`` logger
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    if json_format:
        formatter = logging.Formatter(JSON_FORMAT)
    else:
        formatter = logging.Formatter(PLAIN_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    for handler in handlers:
        handler.setLevel(numeric_level)
        handler.setFormatter(formatter)

    logger = logging.getLogger("shorturl")
    logger.setLevel(numeric_level)
    logger.handlers[:] = handlers
    logger.propagate = False

    for name in SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers[:] = handlers
        server_logger.propagate = False

    return logger
