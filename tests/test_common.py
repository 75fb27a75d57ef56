"""Tests for common utilities."""

import logging

import pytest

from shortener.common.validators import normalize_url, is_valid_short_code, MAX_URL_LENGTH
from shortener.common.headers import (
    extract_forwarded_headers,
    build_base_url,
    build_short_url,
    get_path_prefix,
)
from shortener.common.logging_config import setup_logging, get_logger, LOGGER_NAME
from shortener.exceptions import InvalidURLError


class TestNormalizeURL:
    """Test URL normalization and validation."""

    @pytest.mark.parametrize("url,expected", [
        ("example.com", "http://example.com"),
        ("example.com/frostbite", "http://example.com/frostbite"),
        ("http://example.com/frostbite", "http://example.com/frostbite"),
        ("https://example.com/frostbite", "https://example.com/frostbite"),
        ("HTTP://example.com/Path", "HTTP://example.com/Path"),
        ("http://example.com/a?", "http://example.com/a?"),
        ("http://example.com/a#", "http://example.com/a#"),
        ("https://sub.example.com:8080/path?query=value#top", "https://sub.example.com:8080/path?query=value#top"),
        ("http://user:pw@example.com/p", "http://user:pw@example.com/p"),
        ("http://[::1]:8080/", "http://[::1]:8080/"),
        ("ftp://files.example.com/a.txt", "ftp://files.example.com/a.txt"),
        ("http://www.google.com,", "http://www.google.com,"),
        ("http://example.com/a%20b", "http://example.com/a%20b"),
    ])
    def test_valid_urls(self, url, expected):
        """Valid URLs normalize to their canonical absolute form."""
        assert normalize_url(url) == expected

    def test_scheme_defaults_to_http(self):
        """A bare host and its http:// form are the same URL."""
        assert normalize_url("example.com/frostbite") == normalize_url("http://example.com/frostbite")
        assert normalize_url("example.com/frostbite") != normalize_url("https://example.com/frostbite")
        assert normalize_url("google.com") != normalize_url("www.google.com")

    def test_no_further_canonicalization(self):
        """Empty query or fragment delimiters and scheme case are significant."""
        assert normalize_url("http://example.com/a?") != normalize_url("http://example.com/a")
        assert normalize_url("http://example.com/a#") != normalize_url("http://example.com/a")
        assert normalize_url("HTTP://example.com") == "HTTP://example.com"
        assert normalize_url("HTTP://example.com") != normalize_url("http://example.com")

    @pytest.mark.parametrize("url", [
        None,
        "",
        " ",
        "http://goo gle.com",
        "goog|e.com",
        "http://",
        "http://example.com:80a",
        "http://example.com/a b",
        "http://[::1/",
        "http://example.com/a[1]",
        "example.com/page#one#two",
        "http://exa<mple.com",
    ])
    def test_invalid_urls(self, url):
        """Malformed or empty URLs are rejected."""
        with pytest.raises(InvalidURLError):
            normalize_url(url)

    def test_invalid_url_is_value_error(self):
        """InvalidURLError can be caught as ValueError."""
        with pytest.raises(ValueError):
            normalize_url("goog|e.com")

    def test_max_length(self):
        """URLs longer than the limit are rejected."""
        prefix = "http://example.com/"
        at_limit = prefix + "a" * (MAX_URL_LENGTH - len(prefix))

        assert normalize_url(at_limit) == at_limit
        with pytest.raises(InvalidURLError, match="too long"):
            normalize_url(at_limit + "a")

        with pytest.raises(InvalidURLError):
            normalize_url("http://example.com/abcdef", max_length=10)

    def test_valid_short_codes(self):
        """Test valid short code validation."""
        valid, _ = is_valid_short_code("abc123")
        assert valid

        valid, _ = is_valid_short_code("julia1")
        assert valid

        valid, _ = is_valid_short_code("abcd", length=4)
        assert valid

    def test_invalid_short_codes(self):
        """Test invalid short code validation."""
        valid, error = is_valid_short_code("")
        assert not valid
        assert "required" in error.lower()

        valid, error = is_valid_short_code("elu39")
        assert not valid
        assert "6" in error

        valid, _ = is_valid_short_code("balling")
        assert not valid


class TestHeaders:
    """Test header utilities."""

    def test_extract_forwarded_headers(self):
        """Test extracting forwarded headers."""
        headers = {
            "X-Forwarded-Proto": "https",
            "x-forwarded-host": "sho.rt",
            "X-Forwarded-Prefix": "/s",
        }

        result = extract_forwarded_headers(headers)

        assert result["forwarded_proto"] == "https"
        assert result["forwarded_host"] == "sho.rt"
        assert result["forwarded_prefix"] == "/s"

    def test_build_base_url_with_forwarded(self):
        """Forwarded headers win over the request values."""
        headers = {"x-forwarded-proto": "https", "x-forwarded-host": "sho.rt"}

        base_url = build_base_url(headers, "http://localhost:8080", "http", "internal:8080")

        assert base_url == "https://sho.rt"

    def test_build_base_url_from_request(self):
        """Request scheme and host are used without proxy headers."""
        base_url = build_base_url({}, "http://localhost:8080", "http", "testserver")

        assert base_url == "http://testserver"

    def test_build_base_url_fallback(self):
        """Test building base URL with fallback."""
        assert build_base_url({}, "http://localhost:8080/") == "http://localhost:8080"

    def test_get_path_prefix(self):
        """Forwarded prefix beats the configured one."""
        assert get_path_prefix({"X-Forwarded-Prefix": "/s/"}, "/ignored") == "/s"
        assert get_path_prefix({}, "go") == "/go"
        assert get_path_prefix({}) == ""


class TestURLBuilder:
    """Test URL building."""

    def test_build_short_url(self):
        """Test building short URL."""
        assert build_short_url("abc123", "https://sho.rt") == "https://sho.rt/abc123"

    def test_build_short_url_with_prefix(self):
        """Test building short URL with prefix."""
        url = build_short_url("abc123", "https://sho.rt/", "/s/")

        assert url == "https://sho.rt/s/abc123"


class TestLogging:
    """Test logging configuration."""

    def test_setup_logging_replaces_handlers(self):
        """Calling setup twice keeps a single console handler."""
        setup_logging(level="INFO")
        logger = setup_logging(level="WARNING")

        assert logger.name == LOGGER_NAME
        assert logger.level == logging.WARNING
        assert len(logger.handlers) == 1

    def test_get_logger_is_child(self):
        """Named loggers hang off the service logger."""
        assert get_logger("web").name == f"{LOGGER_NAME}.web"
        assert get_logger().name == LOGGER_NAME
