"""In-memory implementation for URL shortener."""

import asyncio
import logging
from typing import Dict, Optional

from .base import URLShortenerDBBase
from .models import URLMapping


class InMemoryURLShortenerDB(URLShortenerDBBase):
    """Dictionary-backed storage, shared by every request of one process."""

    name = "memory"

    def __init__(
        self,
        db_config: str = "memory://",
        logger: Optional[logging.Logger] = None,
    ):
        super().__init__(db_config)
        self.logger = logger or logging.getLogger(__name__)
        self._by_short_code: Dict[str, URLMapping] = {}
        self._by_long_url: Dict[str, URLMapping] = {}
        self._lock = asyncio.Lock()

    async def find_by_long_url(self, long_url: str) -> Optional[URLMapping]:
        return self._by_long_url.get(long_url)

    async def find_by_short_code(self, short_code: str) -> Optional[URLMapping]:
        return self._by_short_code.get(short_code)

    async def insert(self, short_code: str, long_url: str) -> bool:
        # No await between the check and the write
        async with self._lock:
            if short_code in self._by_short_code or long_url in self._by_long_url:
                self.logger.debug(f"Uniqueness conflict inserting {short_code} -> {long_url}")
                return False

            mapping = URLMapping(short_code=short_code, original_url=long_url)
            self._by_short_code[short_code] = mapping
            self._by_long_url[long_url] = mapping

        self.logger.debug(f"Stored mapping: {short_code} -> {long_url}")
        return True

    async def count(self) -> int:
        return len(self._by_short_code)

    async def health_check(self) -> bool:
        return True

    async def close(self) -> None:
        """Nothing to release; mappings live as long as the instance."""
        pass
