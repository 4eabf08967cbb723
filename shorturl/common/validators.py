"""Validation utilities for URL shortener."""

import asyncio
import logging
import re
import socket
from urllib.parse import urlparse
from typing import Any, Awaitable, Callable, List, Optional, Tuple

ALLOWED_SCHEMES = ("http", "https")

# Characters that can never appear unescaped in a URI
_FORBIDDEN_CHARS = re.compile(r'[\s<>"{}|\\^`\x00-\x1f\x7f]')

Resolver = Callable[[str], Awaitable[Any]]


def is_valid_url(url: str) -> Tuple[bool, str]:
    """Check that a string is a well-formed absolute web URL.

    Args:
        url: The URL to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not url or not isinstance(url, str):
        return False, "URL is required"

    if _FORBIDDEN_CHARS.search(url):
        return False, "URL contains characters that are not allowed"

    try:
        result = urlparse(url)

        if result.scheme not in ALLOWED_SCHEMES:
            return False, "URL must use http or https protocol"

        if not result.hostname:
            return False, "URL must have a valid domain"

        # Raises ValueError for ports outside 0-65535 or non-numeric ports
        result.port

        return True, ""

    except Exception as e:
        return False, f"Invalid URL format: {str(e)}"


async def resolve_hostname(hostname: str) -> List[Any]:
    """Resolve a hostname with the running loop's non-blocking resolver."""
    loop = asyncio.get_running_loop()
    return await loop.getaddrinfo(hostname, None, type=socket.SOCK_STREAM)


class URLValidator:
    """Two-phase URL check: syntax first, then hostname resolution."""

    def __init__(
        self,
        timeout_seconds: Optional[float] = 5.0,
        resolver: Optional[Resolver] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize validator.

        Args:
            timeout_seconds: Bound on a single resolution; None or 0 waits forever
            resolver: Coroutine function taking a hostname, raising on failure
            logger: Optional logger
        """
        self.timeout_seconds = timeout_seconds or None
        self.resolver = resolver or resolve_hostname
        self.logger = logger or logging.getLogger(__name__)

    async def validate(self, candidate: str) -> bool:
        """Return True when the candidate is well-formed and its host resolves."""
        is_valid, error = is_valid_url(candidate)
        if not is_valid:
            self.logger.debug(f"Rejected {candidate!r}: {error}")
            return False

        try:
            hostname = urlparse(candidate).hostname
            await asyncio.wait_for(self.resolver(hostname), timeout=self.timeout_seconds)
        except asyncio.TimeoutError:
            self.logger.warning(f"Resolution of {hostname} timed out after {self.timeout_seconds}s")
            return False
        except Exception as e:
            self.logger.debug(f"Resolution of {candidate!r} failed: {e}")
            return False

        return True
