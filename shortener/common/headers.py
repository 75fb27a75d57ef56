"""Public short URL construction from configuration and proxy headers."""

from typing import Dict, Mapping, Optional


def _lower_keys(headers: Mapping[str, str]) -> Dict[str, str]:
    return {k.lower(): v for k, v in headers.items()}


def extract_forwarded_headers(headers: Mapping[str, str]) -> Dict[str, Optional[str]]:
    """Pick the X-Forwarded-* values a reverse proxy may have set.

    Args:
        headers: Request headers (any casing)

    Returns:
        Dictionary with forwarded_proto, forwarded_host, forwarded_prefix
    """
    lowered = _lower_keys(headers)
    return {
        "forwarded_proto": lowered.get("x-forwarded-proto"),
        "forwarded_host": lowered.get("x-forwarded-host"),
        "forwarded_prefix": lowered.get("x-forwarded-prefix"),
    }


def build_base_url(
    headers: Mapping[str, str],
    fallback_base_url: str,
    request_scheme: Optional[str] = None,
    request_host: Optional[str] = None,
) -> str:
    """Work out the public base URL short links are served under.

    Priority:
    1. X-Forwarded-Proto + X-Forwarded-Host
    2. Request scheme + host
    3. Configured base URL

    Returns:
        Base URL without trailing slash (e.g. https://sho.rt)
    """
    forwarded = extract_forwarded_headers(headers)

    if forwarded["forwarded_proto"] and forwarded["forwarded_host"]:
        return f"{forwarded['forwarded_proto']}://{forwarded['forwarded_host']}"

    if request_scheme and request_host:
        return f"{request_scheme}://{request_host}"

    return fallback_base_url.rstrip("/")


def get_path_prefix(headers: Mapping[str, str], configured_prefix: str = "") -> str:
    """Path prefix from X-Forwarded-Prefix, else the configured one.

    Returns:
        Prefix with a leading slash and no trailing one (e.g. '/s'), or ''
    """
    forwarded = extract_forwarded_headers(headers)["forwarded_prefix"] or ""
    prefix = (forwarded or configured_prefix or "").strip().strip("/")
    return "/" + prefix if prefix else ""


def build_short_url(
    short_code: str,
    base_url: str,
    path_prefix: str = "",
) -> str:
    """Join base URL, optional prefix and code (e.g. https://sho.rt/s/abc123)."""
    segments = [base_url.rstrip("/")]
    if path_prefix.strip("/"):
        segments.append(path_prefix.strip("/"))
    segments.append(short_code)
    return "/".join(segments)
