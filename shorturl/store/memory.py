"""Process-local, non-persistent short URL store."""

import logging
from typing import Dict, List, Optional

from .base import ShortURLStoreBase
from .models import ShortURLEntry


class InMemoryShortURLStore(ShortURLStoreBase):
    """Keeps entries in insertion order with dict indexes for both lookups.

    Nothing survives a restart: every previously issued code is forgotten
    and numbering starts again at 1.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)
        self._entries: List[ShortURLEntry] = []
        self._by_url: Dict[str, ShortURLEntry] = {}
        self._by_code: Dict[int, ShortURLEntry] = {}
        self._counter = 1

    async def submit(self, original_url: str) -> ShortURLEntry:
        # No await between lookup and insert, so this is atomic on one event loop
        existing = self._by_url.get(original_url)
        if existing is not None:
            return existing

        entry = ShortURLEntry(original_url=original_url, short_url=self._counter)
        self._entries.append(entry)
        self._by_url[original_url] = entry
        self._by_code[entry.short_url] = entry
        self._counter += 1

        self.logger.debug(f"Stored entry {entry.short_url} ({len(self._entries)} total)")
        return entry

    async def resolve(self, short_url: int) -> Optional[ShortURLEntry]:
        return self._by_code.get(short_url)

    async def count(self) -> int:
        return len(self._entries)

    async def health_check(self) -> bool:
        return True

    async def close(self) -> None:
        pass

    def entries(self) -> List[ShortURLEntry]:
        """Snapshot of all entries in assignment order."""
        return list(self._entries)
