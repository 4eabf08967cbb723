"""Business logic service for URL shortener."""

import logging
import re
from typing import Optional

from .common.validators import URLValidator
from .store.base import ShortURLStoreBase
from .store.models import ShortURLEntry

INVALID_URL = "invalid url"
WRONG_FORMAT = "Wrong format"

_SHORT_URL_PATTERN = re.compile(r"^[+-]?[0-9]+$")

# CPython's default int string conversion limit; longer codes are never assigned
MAX_SHORT_URL_DIGITS = 4300


class ShortURLService:
    """Service layer tying URL validation to the short URL store."""

    def __init__(
        self,
        store: ShortURLStoreBase,
        validator: Optional[URLValidator] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize URL shortener service.

        Args:
            store: Store instance that owns every entry
            validator: Optional validator (default resolves with a 5s bound)
            logger: Optional logger
        """
        self.store = store
        self.logger = logger or logging.getLogger(__name__)
        self.validator = validator or URLValidator(logger=self.logger)

    async def create_short_url(self, original_url: Optional[str]) -> ShortURLEntry:
        """Validate a URL and store it, reusing the code of a known URL.

        Args:
            original_url: The original long URL

        Returns:
            The stored entry

        Raises:
            ValueError: If the URL is missing or fails validation
        """
        if not original_url or not isinstance(original_url, str):
            raise ValueError(INVALID_URL)

        if not await self.validator.validate(original_url):
            self.logger.debug(f"Invalid URL submitted: {original_url!r}")
            raise ValueError(INVALID_URL)

        entry = await self.store.submit(original_url)
        self.logger.info(f"Short URL {entry.short_url} -> {entry.original_url}")
        return entry

    def parse_short_url(self, raw: str) -> Optional[int]:
        """Parse a path parameter into a short code.

        Returns None for integers longer than MAX_SHORT_URL_DIGITS; no such code is ever assigned.

        Raises:
            ValueError: If the value is not an ASCII decimal integer
        """
        candidate = (raw or "").strip()
        # Whole-string match: trailing junk such as "1abc" or "1.5" is a wrong format
        if not _SHORT_URL_PATTERN.match(candidate):
            raise ValueError(WRONG_FORMAT)
        if len(candidate.lstrip("+-").lstrip("0")) > MAX_SHORT_URL_DIGITS:
            self.logger.debug(f"Short URL of {len(candidate)} characters is too long to exist")
            return None
        try:
            return int(candidate)
        except ValueError:
            # Interpreter limit lowered below MAX_SHORT_URL_DIGITS
            return None

    async def get_entry(self, short_url: int) -> Optional[ShortURLEntry]:
        """Get the entry for a short code, or None if it was never assigned."""
        entry = await self.store.resolve(short_url)
        if entry is None:
            self.logger.warning(f"Short URL not found: {short_url}")
        return entry

    async def close(self) -> None:
        """Close store connections."""
        await self.store.close()
