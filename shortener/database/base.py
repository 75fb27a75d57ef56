"""Abstract base class for URL shortener database implementations."""

from abc import ABC, abstractmethod
from typing import Optional

from .models import URLMapping


class URLShortenerDBBase(ABC):
    """Abstract base class for URL shortener storage.

    Implementations must enforce uniqueness of both the short code and the
    long URL, and ``insert`` must check and write atomically: when two callers
    insert a colliding mapping, exactly one succeeds and the other gets
    ``False`` back.
    """

    name = "base"

    def __init__(self, db_config: str):
        """Initialize database connection.

        Args:
            db_config: Database connection string
        """
        self.db_config = db_config

    @abstractmethod
    async def find_by_long_url(self, long_url: str) -> Optional[URLMapping]:
        """Find the mapping stored for a normalized long URL.

        Args:
            long_url: The normalized long URL

        Returns:
            The mapping if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_short_code(self, short_code: str) -> Optional[URLMapping]:
        """Find the mapping stored for a short code.

        Args:
            short_code: The short code to lookup

        Returns:
            The mapping if found, None otherwise
        """
        pass

    @abstractmethod
    async def insert(self, short_code: str, long_url: str) -> bool:
        """Atomically insert a new mapping.

        Args:
            short_code: The short code to use
            long_url: The normalized long URL

        Returns:
            True if inserted, False if either key is already taken

        Raises:
            Exception: Storage failures other than a uniqueness conflict
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Return the number of stored mappings."""
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close database connections."""
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Check if database is healthy.

        Returns:
            True if healthy, False otherwise
        """
        pass
