"""
URL normalization and domain resolution.

Used for cache keys and portal routing, so nothing here may raise:
malformed input is returned unchanged.
"""

import urllib.parse


def normalize_url(url: str) -> str:
    """
    Keep scheme, host and path; drop query string, fragment and trailing slash.
    Idempotent. Returns the input untouched when it has no scheme or host.
    """
    try:
        parsed = urllib.parse.urlsplit(url.strip())
    except (ValueError, AttributeError):
        return url

    if not parsed.scheme or not parsed.netloc:
        return url

    path = parsed.path.rstrip("/")
    return f"{parsed.scheme.lower()}://{parsed.netloc.lower()}{path}"


def extract_domain(url: str) -> str:
    """Hostname without a leading 'www.', or '' if the URL cannot be parsed."""
    try:
        hostname = urllib.parse.urlsplit(url.strip()).hostname
    except (ValueError, AttributeError):
        return ""

    if not hostname:
        return ""
    if hostname.startswith("www."):
        hostname = hostname[len("www."):]
    return hostname


def domain_matches(domain: str, registered: str) -> bool:
    """Exact match or subdomain of the registered domain."""
    if not domain:
        return False
    return domain == registered or domain.endswith(f".{registered}")
