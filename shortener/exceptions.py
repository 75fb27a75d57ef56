"""
Error classes for the URL shortener.

Each error carries the HTTP status code the transport layer should answer with,
so routes and the CLI can report failures consistently.
"""

from typing import Optional, Dict, Any


class URLShortenerError(Exception):
    """
    Base URL shortener error.

    Attributes:
        status_code: HTTP status code (default: 500)
        message: Error message (default: "Internal server error")
        details: Optional additional error details
    """
    status_code: int = 500
    message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        """
        Initialize error.

        Args:
            message: Error message (overrides default)
            details: Optional additional error details
        """
        self.message = message or self.message
        self.details = details or {}
        super().__init__(self.message)


class InvalidURLError(URLShortenerError, ValueError):
    """400 Malformed or empty long URL."""
    status_code = 400
    message = "Malformed url, or otherwise invalid"


class NotFoundError(URLShortenerError, LookupError):
    """404 No mapping for the short code."""
    status_code = 404
    message = "Short url not found"


class ConflictingDataError(URLShortenerError):
    """409 Collision resolution exhausted its attempts."""
    status_code = 409
    message = "Unable to create a unique short url"
