"""Redis cache layer for URL shortener."""

import logging
from typing import Optional

import redis.asyncio as redis
from redis.exceptions import RedisError


class RedisCache:
    """Read-through cache of short code -> long URL for ``resolve``.

    Mappings never change once stored, so cached entries cannot go stale;
    the TTL only bounds memory use. Redis errors are logged and treated as
    cache misses so lookups fall through to the database.
    """

    KEY_PREFIX = "url:shortener"

    def __init__(
        self,
        redis_url: Optional[str] = None,
        ttl_seconds: int = 3600,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize Redis cache.

        Args:
            redis_url: Redis connection URL (e.g., redis://localhost:6379/0).
                Caching is disabled when not given.
            ttl_seconds: Expiry of cached mappings
            logger: Optional logger instance
        """
        self.redis_url = redis_url
        self.ttl_seconds = ttl_seconds
        self.logger = logger or logging.getLogger(__name__)
        self.enabled = redis_url is not None
        self.client: Optional[redis.Redis] = None

    async def connect(self) -> None:
        """Open the client; an unreachable server disables the cache."""
        if not self.enabled:
            return

        self.client = redis.from_url(self.redis_url, encoding="utf-8", decode_responses=True)
        try:
            await self.client.ping()
        except RedisError as e:
            self.logger.error(f"Redis unavailable, lookups go to the database: {e}")
            await self.client.aclose()
            self.client = None
            self.enabled = False
            return

        self.logger.info(f"Redis cache enabled with TTL={self.ttl_seconds}s")

    @property
    def active(self) -> bool:
        return self.enabled and self.client is not None

    def get_cache_key(self, short_code: str) -> str:
        """Generate cache key for short code."""
        return f"{self.KEY_PREFIX}:{short_code}"

    async def get_url(self, short_code: str) -> Optional[str]:
        """Return the cached long URL for a short code, None on a miss."""
        if not self.active:
            return None

        try:
            return await self.client.get(self.get_cache_key(short_code))
        except RedisError as e:
            self.logger.error(f"Cache get error for {short_code}: {e}")
            return None

    async def set_url(self, short_code: str, original_url: str) -> bool:
        """Cache a stored mapping. Returns True if it was written."""
        if not self.active:
            return False

        try:
            await self.client.setex(self.get_cache_key(short_code), self.ttl_seconds, original_url)
        except RedisError as e:
            self.logger.error(f"Cache set error for {short_code}: {e}")
            return False
        return True

    async def ping(self) -> bool:
        """Check the Redis connection; a disabled cache counts as healthy."""
        if not self.active:
            return True

        try:
            return bool(await self.client.ping())
        except RedisError as e:
            self.logger.error(f"Cache ping error: {e}")
            return False

    async def close(self) -> None:
        """Close Redis connection."""
        if self.client:
            await self.client.aclose()
            self.client = None
            self.logger.info("Redis connection closed")
