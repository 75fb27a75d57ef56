"""Short code generation utilities."""

import hashlib
from typing import Iterator, NamedTuple


class Candidate(NamedTuple):
    """A proposed short code and the digest offset it was cut from."""

    short_code: str
    source_index: int


class ShortCodeGenerator:
    """Derive deterministic short code candidates from a URL digest.

    The URL is hashed with MD5 and rendered as 32 lowercase hex characters.
    Candidate ``i`` is the window of ``default_length`` characters starting at
    offset ``i``, so the same URL always produces the same ordered sequence.
    """

    HEX_DIGEST_LENGTH = 32

    def __init__(self, default_length: int = 6):
        """Initialize short code generator.

        Args:
            default_length: Length of generated codes

        Raises:
            ValueError: If the length does not fit inside the digest
        """
        if not 1 <= default_length < self.HEX_DIGEST_LENGTH:
            raise ValueError(
                f"Short code length must be between 1 and {self.HEX_DIGEST_LENGTH - 1}"
            )
        self.default_length = default_length

    @property
    def max_candidates(self) -> int:
        """Number of distinct offsets a single digest can yield."""
        return self.HEX_DIGEST_LENGTH - self.default_length

    @staticmethod
    def digest(url: str) -> str:
        """Return the lowercase hex MD5 digest of the URL's UTF-8 bytes."""
        return hashlib.md5(url.encode("utf-8")).hexdigest()

    def generate_from_url(self, url: str, attempt: int = 0) -> str:
        """Generate the short code for a URL at a given attempt index.

        Args:
            url: Normalized URL to hash
            attempt: 0-based attempt index (digest offset)

        Returns:
            Short code of ``default_length`` hex characters

        Raises:
            ValueError: If the URL is empty or the attempt is out of range
        """
        if not url:
            raise ValueError("URL is required")
        if not 0 <= attempt < self.max_candidates:
            raise ValueError(
                f"Attempt index {attempt} out of range (0..{self.max_candidates - 1})"
            )

        url_hash = self.digest(url)
        return url_hash[attempt:attempt + self.default_length]

    def candidates(self, url: str, count: int) -> Iterator[Candidate]:
        """Yield the first ``count`` candidates for a URL in attempt order."""
        if count > self.max_candidates:
            raise ValueError(
                f"Cannot derive {count} candidates, digest allows {self.max_candidates}"
            )
        if not url:
            raise ValueError("URL is required")
        url_hash = self.digest(url)
        for index in range(count):
            yield Candidate(url_hash[index:index + self.default_length], index)
