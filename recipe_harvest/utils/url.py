"""URL helpers."""
from __future__ import annotations

from urllib.parse import urlparse


def _parse(url: str):
    # urlparse only finds the host when a scheme or '//' prefix is present
    if "//" not in url:
        url = f"//{url}"
    return urlparse(url)


def get_host_name(url: str) -> str:
    """Return the host of a URL without a leading 'www.'.

    Examples:
        >>> get_host_name("https://www.example.com/path")
        'example.com'
    """
    host = _parse(url.strip()).hostname or ""
    return host[4:] if host.startswith("www.") else host
