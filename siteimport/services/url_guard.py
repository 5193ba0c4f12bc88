"""SSRF guard for user-supplied import URLs.

The check never resolves the hostname, so no network access happens before
the URL has been accepted. Numeric hosts are first rewritten to their dotted
quad (``127.1``, ``2130706433`` and ``0x7f000001`` all become ``127.0.0.1``)
and then matched against loopback, RFC 1918 and link-local patterns.
"""

import ipaddress
import re
import socket
from urllib.parse import urlparse

from siteimport.services.errors import InvalidUrl, PrivateNetworkBlocked, UnsupportedProtocol

ALLOWED_SCHEMES = {"http", "https"}

_BLOCKED_HOST_PATTERNS = (
    re.compile(r"^(localhost|127\.\d+\.\d+\.\d+)$", re.IGNORECASE),
    re.compile(r"^10\.\d+\.\d+\.\d+$"),
    re.compile(r"^172\.(1[6-9]|2[0-9]|3[01])\.\d+\.\d+$"),
    re.compile(r"^192\.168\.\d+\.\d+$"),
    # 169.254.0.0/16 covers cloud metadata endpoints
    re.compile(r"^169\.254\.\d+\.\d+$"),
)

# Decimal, octal and hex parts, one to four of them
_NUMERIC_HOST_RE = re.compile(r"^\d[0-9a-fx]*(\.\d[0-9a-fx]*){0,3}\.?$")


def _canonical_host(hostname: str) -> str:
    """Return the dotted-quad form of a numeric IPv4 *hostname*, else *hostname* itself."""
    if not _NUMERIC_HOST_RE.match(hostname):
        return hostname
    try:
        packed = socket.inet_aton(hostname.rstrip("."))
    except OSError:
        return hostname
    return str(ipaddress.IPv4Address(packed))


def is_private_host(hostname: str) -> bool:
    """Return True when *hostname* names localhost or a private/link-local IPv4 range."""
    hostname = _canonical_host(hostname.lower())
    return any(pattern.match(hostname) for pattern in _BLOCKED_HOST_PATTERNS)


def validate_url(url: str) -> None:
    """Raise a :class:`~siteimport.services.errors.ValidationError` if *url* may not be fetched."""
    try:
        parsed = urlparse(url)
        hostname = parsed.hostname
        parsed.port  # raises for out-of-range ports
    except ValueError:
        raise InvalidUrl()

    if not parsed.scheme:
        raise InvalidUrl()

    if parsed.scheme.lower() not in ALLOWED_SCHEMES:
        raise UnsupportedProtocol()

    if not hostname:
        raise InvalidUrl()

    if is_private_host(hostname):
        raise PrivateNetworkBlocked()
