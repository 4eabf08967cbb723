"""Common utilities for URL shortener."""

from .validators import is_valid_url, resolve_hostname, URLValidator
from .logging_config import setup_logging

__all__ = [
    "is_valid_url",
    "resolve_hostname",
    "URLValidator",
    "setup_logging",
]
