"""Validation utilities for URL shortener."""

import re
from urllib.parse import urlsplit
from typing import Optional, Tuple

from ..exceptions import InvalidURLError


DEFAULT_SCHEME = "http"
MAX_URL_LENGTH = 2048

# RFC 3986 character classes
_UNRESERVED = r"A-Za-z0-9\-._~"
_SUB_DELIMS = r"!$&'()*+,;="
_PCT_ENCODED = r"%[0-9A-Fa-f]{2}"

SCHEME_PREFIX_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*://")
URI_CHARS_RE = re.compile(rf"^(?:[{_UNRESERVED}{_SUB_DELIMS}:/?#\[\]@]|{_PCT_ENCODED})+$")
USERINFO_RE = re.compile(rf"^(?:[{_UNRESERVED}{_SUB_DELIMS}:]|{_PCT_ENCODED})*$")
REG_NAME_RE = re.compile(rf"^(?:[{_UNRESERVED}{_SUB_DELIMS}]|{_PCT_ENCODED})+$")
IP_LITERAL_RE = re.compile(r"^\[(?:[0-9A-Fa-f:.]+|v[0-9A-Fa-f]+\.[A-Za-z0-9\-._~!$&'()*+,;=:]+)\]$")
PORT_RE = re.compile(r"^[0-9]*$")


def _split_authority(netloc: str) -> Optional[Tuple[str, str, str]]:
    """Split an authority into (userinfo, host, port); None if malformed."""
    userinfo, _, hostport = netloc.rpartition("@")

    if hostport.startswith("["):
        end = hostport.find("]")
        if end == -1:
            return None
        host, rest = hostport[:end + 1], hostport[end + 1:]
        if rest and not rest.startswith(":"):
            return None
        return userinfo, host, rest[1:]

    host, _, port = hostport.partition(":")
    return userinfo, host, port


def _is_valid_authority(netloc: str) -> bool:
    parts = _split_authority(netloc)
    if parts is None:
        return False
    userinfo, host, port = parts

    if not host:
        return False
    if not USERINFO_RE.match(userinfo):
        return False
    if host.startswith("["):
        if not IP_LITERAL_RE.match(host):
            return False
    elif not REG_NAME_RE.match(host):
        return False
    return bool(PORT_RE.match(port))


def normalize_url(url: Optional[str], max_length: int = MAX_URL_LENGTH) -> str:
    """Validate a long URL and return its absolute form.

    A URL without a ``scheme://`` prefix gets ``http://`` prepended, so
    ``example.com`` and ``http://example.com`` normalize identically while
    ``https://example.com`` stays distinct. Nothing else is rewritten, so
    ``http://example.com/a?`` and ``HTTP://example.com/a`` are their own URLs.

    Args:
        url: The URL submitted by the caller
        max_length: Maximum accepted length of the submitted URL

    Returns:
        The absolute URL, exactly as submitted apart from the default scheme

    Raises:
        InvalidURLError: If the URL is empty, too long or not a valid absolute URI
    """
    if not url or not isinstance(url, str):
        raise InvalidURLError("URL is required")

    if len(url) > max_length:
        raise InvalidURLError(f"URL is too long (max {max_length} characters)")

    absolute_url = url
    if not SCHEME_PREFIX_RE.match(url):
        absolute_url = f"{DEFAULT_SCHEME}://{url}"

    # Reject whitespace, control characters and anything else RFC 3986 forbids
    if not URI_CHARS_RE.match(absolute_url):
        raise InvalidURLError(f"Malformed url: {url!r}")

    try:
        parts = urlsplit(absolute_url)
    except ValueError as e:
        raise InvalidURLError(f"Malformed url: {url!r}") from e

    if not parts.scheme or not _is_valid_authority(parts.netloc):
        raise InvalidURLError(f"URL must have a valid host: {url!r}")

    # Brackets only belong to IP literals, '#' only starts the fragment
    for component in (parts.path, parts.query, parts.fragment):
        if "[" in component or "]" in component:
            raise InvalidURLError(f"Malformed url: {url!r}")
    if "#" in parts.fragment:
        raise InvalidURLError(f"Malformed url: {url!r}")

    # urlsplit only validates; empty "?"/"#" and scheme case are kept as given
    return absolute_url


def is_valid_short_code(short_code: str, length: int = 6) -> Tuple[bool, str]:
    """Validate the shape of a short code before it is looked up.

    Args:
        short_code: The short code to validate
        length: Exact length every generated short code has

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not short_code or not isinstance(short_code, str):
        return False, "Short code is required"

    if len(short_code) != length:
        return False, f"Short code must be exactly {length} characters"

    return True, ""
