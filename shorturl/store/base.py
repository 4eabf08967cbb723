"""Abstract base class for short URL stores."""

from abc import ABC, abstractmethod
from typing import Optional

from .models import ShortURLEntry


class ShortURLStoreBase(ABC):
    """Abstract base class for short URL storage.

    Implementations own every entry they hand out. Codes are positive
    integers assigned in increasing order starting at 1, and each distinct
    original URL (exact string match) is stored at most once.
    """

    @abstractmethod
    async def submit(self, original_url: str) -> ShortURLEntry:
        """Store an original URL, or return the entry already holding it.

        Args:
            original_url: URL that already passed validation

        Returns:
            The new entry, or the existing one unchanged
        """
        pass

    @abstractmethod
    async def resolve(self, short_url: int) -> Optional[ShortURLEntry]:
        """Look up an entry by its short code.

        Args:
            short_url: The numeric short code

        Returns:
            The entry if found, None otherwise
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Return the number of stored entries."""
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Check if the store is usable."""
        pass

    @abstractmethod
    async def close(self) -> None:
        """Release store resources."""
        pass
