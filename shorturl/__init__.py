"""Core business logic for URL shortener."""

from .service import ShortURLService
from .store import ShortURLEntry, create_store
from .common.validators import URLValidator

__all__ = ["ShortURLService", "ShortURLEntry", "URLValidator", "create_store"]
