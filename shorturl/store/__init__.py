"""Storage layer for URL shortener."""

import logging
from typing import Optional

from .base import ShortURLStoreBase
from .memory import InMemoryShortURLStore
from .models import ShortURLEntry
from .redis_store import RedisShortURLStore

STORE_BACKENDS = ("memory", "redis")


def create_store(config, logger: Optional[logging.Logger] = None) -> ShortURLStoreBase:
    """Build the store selected by ``config.store_backend``."""
    backend = config.store_backend.lower()

    if backend == "memory":
        return InMemoryShortURLStore(logger=logger)

    if backend == "redis":
        return RedisShortURLStore(
            redis_url=config.redis_url,
            prefix=config.redis_key_prefix,
            logger=logger,
        )

    raise ValueError(f"Unknown store backend '{config.store_backend}' (expected one of {STORE_BACKENDS})")


__all__ = [
    "ShortURLStoreBase",
    "InMemoryShortURLStore",
    "RedisShortURLStore",
    "ShortURLEntry",
    "STORE_BACKENDS",
    "create_store",
]
