"""Data models for URL shortener."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ShortURLEntry:
    """A stored mapping from an original URL to its numeric short code."""

    original_url: str
    short_url: int

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "original_url": self.original_url,
            "short_url": self.short_url,
        }
