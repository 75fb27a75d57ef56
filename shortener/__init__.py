"""Core business logic for URL shortener."""

from .shortcode import Candidate, ShortCodeGenerator
from .service import URLShortenerService
from .exceptions import (
    URLShortenerError,
    InvalidURLError,
    NotFoundError,
    ConflictingDataError,
)

__all__ = [
    "Candidate",
    "ShortCodeGenerator",
    "URLShortenerService",
    "URLShortenerError",
    "InvalidURLError",
    "NotFoundError",
    "ConflictingDataError",
]
