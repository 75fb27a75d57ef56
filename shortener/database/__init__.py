"""Database layer for URL shortener."""

import logging
from typing import Optional

from .base import URLShortenerDBBase
from .memory import InMemoryURLShortenerDB
from .postgres import URLShortenerPostgresDB
from .cache import RedisCache
from .models import URLMapping


def create_database(config, logger: Optional[logging.Logger] = None) -> URLShortenerDBBase:
    """Create the storage backend selected by ``config.database_backend``."""
    backend = config.database_backend.lower()

    if backend == "memory":
        return InMemoryURLShortenerDB(logger=logger)
    if backend == "postgres":
        return URLShortenerPostgresDB(
            db_config=config.database_url,
            create_tables=config.database_create_tables,
            logger=logger,
        )
    raise ValueError(f"Unknown database backend: {config.database_backend}")


__all__ = [
    "URLShortenerDBBase",
    "InMemoryURLShortenerDB",
    "URLShortenerPostgresDB",
    "RedisCache",
    "URLMapping",
    "create_database",
]
