"""Redis-backed short URL store."""

import logging
from typing import Optional

import redis.asyncio as redis

from .base import ShortURLStoreBase
from .models import ShortURLEntry


class RedisShortURLStore(ShortURLStoreBase):
    """Persistent store keeping codes in Redis.

    Keys (under ``prefix``):
        <prefix>:counter  - last assigned code, advanced with INCR
        <prefix>:by_url   - hash original URL -> code
        <prefix>:by_code  - hash code -> original URL
    """

    def __init__(
        self,
        redis_url: Optional[str] = None,
        prefix: str = "shorturl",
        client: Optional[redis.Redis] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize Redis store.

        Args:
            redis_url: Redis connection URL (e.g., redis://localhost:6379/0)
            prefix: Key namespace
            client: Pre-built client, used instead of redis_url when given
            logger: Optional logger instance
        """
        if client is None and not redis_url:
            raise ValueError("redis_url is required for the redis store")

        self.redis_url = redis_url
        self.prefix = prefix.rstrip(":")
        self.logger = logger or logging.getLogger(__name__)
        self.client = client or redis.from_url(
            redis_url,
            encoding="utf-8",
            decode_responses=True,
        )

    @property
    def counter_key(self) -> str:
        return f"{self.prefix}:counter"

    @property
    def by_url_key(self) -> str:
        return f"{self.prefix}:by_url"

    @property
    def by_code_key(self) -> str:
        return f"{self.prefix}:by_code"

    async def submit(self, original_url: str) -> ShortURLEntry:
        existing = await self.client.hget(self.by_url_key, original_url)
        if existing is not None:
            return ShortURLEntry(original_url=original_url, short_url=int(existing))

        code = int(await self.client.incr(self.counter_key))

        if not await self.client.hsetnx(self.by_url_key, original_url, code):
            # Another writer stored this URL first; its code wins and ours is skipped
            winner = await self.client.hget(self.by_url_key, original_url)
            self.logger.info(f"Lost race for {original_url}, reusing code {winner}, skipped {code}")
            return ShortURLEntry(original_url=original_url, short_url=int(winner))

        await self.client.hset(self.by_code_key, str(code), original_url)
        return ShortURLEntry(original_url=original_url, short_url=code)

    async def resolve(self, short_url: int) -> Optional[ShortURLEntry]:
        original_url = await self.client.hget(self.by_code_key, str(short_url))
        if original_url is None:
            return None
        return ShortURLEntry(original_url=original_url, short_url=short_url)

    async def count(self) -> int:
        return int(await self.client.hlen(self.by_url_key))

    async def health_check(self) -> bool:
        try:
            return bool(await self.client.ping())
        except redis.RedisError as e:
            self.logger.error(f"Redis health check failed: {e}")
            return False

    async def close(self) -> None:
        await self.client.aclose()
        self.logger.info("Redis connection closed")
