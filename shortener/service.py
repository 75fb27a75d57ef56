"""Business logic service for URL shortener."""

import logging
from typing import Optional, Dict, Any

from .shortcode import ShortCodeGenerator
from .database.base import URLShortenerDBBase
from .database.cache import RedisCache
from .common.validators import normalize_url, is_valid_short_code, MAX_URL_LENGTH
from .exceptions import ConflictingDataError, NotFoundError


class URLShortenerService:
    """Service layer for URL shortening business logic.

    Holds no per-request state: concurrent calls are safe as long as the
    database enforces uniqueness atomically on insert.
    """

    def __init__(
        self,
        db: URLShortenerDBBase,
        cache: Optional[RedisCache] = None,
        short_code_generator: Optional[ShortCodeGenerator] = None,
        logger: Optional[logging.Logger] = None,
        max_collision_retries: int = 10,
        max_url_length: int = MAX_URL_LENGTH,
    ):
        """Initialize URL shortener service.

        Args:
            db: Database instance
            cache: Optional cache instance
            short_code_generator: Optional short code generator
            logger: Optional logger
            max_collision_retries: Extra candidates tried after the first one
            max_url_length: Maximum accepted long URL length

        Raises:
            ValueError: If the retry bound exceeds what one digest can yield
        """
        self.db = db
        self.cache = cache
        self.generator = short_code_generator or ShortCodeGenerator()
        self.logger = logger or logging.getLogger(__name__)
        self.max_url_length = max_url_length

        if max_collision_retries < 0:
            raise ValueError("max_collision_retries cannot be negative")
        if max_collision_retries + 1 > self.generator.max_candidates:
            raise ValueError(
                f"max_collision_retries={max_collision_retries} needs "
                f"{max_collision_retries + 1} candidates, digest allows "
                f"{self.generator.max_candidates}"
            )
        self.max_collision_retries = max_collision_retries

    async def shorten(self, long_url: str) -> str:
        """Return the short code for a long URL, creating it if needed.

        Repeated calls for the same normalized URL return the same code.

        Args:
            long_url: The original long URL

        Returns:
            The short code

        Raises:
            InvalidURLError: If the URL is empty or malformed
            ConflictingDataError: If every candidate collided with another URL
        """
        result = await self.create_short_url(long_url)
        return result["short_code"]

    async def create_short_url(self, original_url: str) -> Dict[str, Any]:
        """Shorten a URL and report what was stored.

        Args:
            original_url: The original long URL

        Returns:
            Dictionary with short_code, original_url (normalized) and created
            (False when an existing mapping was reused)
        """
        valid_url = normalize_url(original_url, max_length=self.max_url_length)

        existing = await self.db.find_by_long_url(valid_url)
        if existing:
            self.logger.info(f"Found {valid_url}, using short code {existing.short_code}")
            return self._result(existing.short_code, valid_url, created=False)

        for candidate in self.generator.candidates(valid_url, self.max_collision_retries + 1):
            if await self.db.insert(candidate.short_code, valid_url):
                self.logger.info(f"Created short URL: {candidate.short_code} -> {valid_url}")
                return self._result(candidate.short_code, valid_url, created=True)

            self.logger.info(
                f"Conflict detected for {candidate.short_code} + {valid_url} "
                f"(attempt {candidate.source_index})"
            )

            # Another writer may have just stored this same URL
            existing = await self.db.find_by_long_url(valid_url)
            if existing:
                self.logger.info(f"Found {valid_url}, using short code {existing.short_code}")
                return self._result(existing.short_code, valid_url, created=False)

        self.logger.error(
            f"Unsolvable conflict after {self.max_collision_retries + 1} attempts "
            f"for {valid_url}"
        )
        raise ConflictingDataError(f"Unable to create short url for {valid_url}")

    @staticmethod
    def _result(short_code: str, original_url: str, created: bool) -> Dict[str, Any]:
        return {"short_code": short_code, "original_url": original_url, "created": created}

    async def resolve(self, short_code: str) -> str:
        """Return the long URL stored for a short code.

        Args:
            short_code: The short code to lookup

        Returns:
            The normalized long URL

        Raises:
            NotFoundError: If the code has the wrong length or is not stored
        """
        is_valid, error = is_valid_short_code(short_code, length=self.generator.default_length)
        if not is_valid:
            self.logger.info(f"Rejected short code {short_code!r}: {error}")
            raise NotFoundError(f"Short code '{short_code}' not found")

        if self.cache:
            cached_url = await self.cache.get_url(short_code)
            if cached_url:
                self.logger.debug(f"Cache hit for {short_code}")
                return cached_url

        mapping = await self.db.find_by_short_code(short_code)
        if not mapping:
            self.logger.info(f"Could not find long URL for short code {short_code}")
            raise NotFoundError(f"Short code '{short_code}' not found")

        if self.cache:
            await self.cache.set_url(short_code, mapping.original_url)

        self.logger.debug(f"Resolved URL: {short_code} -> {mapping.original_url}")
        return mapping.original_url

    async def get_url_info(self, short_code: str) -> Dict[str, Any]:
        """Get the full stored mapping for a short code.

        Raises:
            NotFoundError: If the code has the wrong length or is not stored
        """
        is_valid, _ = is_valid_short_code(short_code, length=self.generator.default_length)
        mapping = await self.db.find_by_short_code(short_code) if is_valid else None
        if not mapping:
            raise NotFoundError(f"Short code '{short_code}' not found")
        return mapping.to_dict()

    async def get_statistics(self) -> Dict[str, Any]:
        """Get service statistics."""
        return {
            "total_urls": await self.db.count(),
            "database": self.db.name,
            "cache_enabled": self.cache is not None and self.cache.enabled,
            "max_collision_retries": self.max_collision_retries,
        }

    async def health_check(self) -> Dict[str, bool]:
        """Perform health check.

        Returns:
            Dictionary with health status
        """
        db_healthy = await self.db.health_check()
        cache_healthy = await self.cache.ping() if self.cache else True

        return {
            "database": db_healthy,
            "cache": cache_healthy,
            "overall": db_healthy and cache_healthy,
        }

    async def close(self) -> None:
        """Close service connections."""
        await self.db.close()
        if self.cache:
            await self.cache.close()
