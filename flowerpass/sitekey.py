"""
Extracting the site key from the current page's address.
"""

import re
import logging
from urllib.parse import urlsplit

logger = logging.getLogger(__name__)

_SCHEME_RE = re.compile(r"^([A-Za-z][A-Za-z0-9+.-]*):(.*)$", re.DOTALL)
_PORT_RE = re.compile(r"^\d+(?:[/?#]|$)")


def site_key_from_hostname(hostname: str) -> str:
    """
    Normalize a hostname into a site key.

    A leading "www." is dropped. With more than two labels the
    second-to-last one is used ("maps.google.com" -> "google"), otherwise
    the first one ("google.com" -> "google", "localhost" -> "localhost").
    Returns "" for an empty hostname.
    """
    hostname = (hostname or "").strip().lower().rstrip('.')
    if hostname.startswith('www.'):
        hostname = hostname[len('www.'):]
    if not hostname:
        return ""

    parts = hostname.split('.')
    if len(parts) > 2:
        return parts[-2]
    return parts[0]


def site_key_from_url(url: str) -> str:
    """
    Derive the site key from a full URL such as the active tab's address.

    Addresses without a scheme ("example.com/login", "localhost:8000") are
    read as http URLs. Returns "" when no hostname can be extracted, which
    includes host-less schemes such as "about:blank" or "mailto:".
    """
    url = (url or "").strip()
    if not url:
        return ""
    if not _has_scheme(url):
        url = f"http://{url}"

    try:
        hostname = urlsplit(url).hostname
    except ValueError as e:
        logger.debug(f"Could not parse URL {url!r}: {e}")
        return ""

    if not hostname:
        logger.debug(f"URL {url!r} has no hostname")
        return ""
    return site_key_from_hostname(hostname)


def _has_scheme(url: str) -> bool:
    """True if the text before the first ":" is a scheme rather than a host followed by a port."""
    match = _SCHEME_RE.match(url)
    if not match:
        return False
    return not _PORT_RE.match(match.group(2))
