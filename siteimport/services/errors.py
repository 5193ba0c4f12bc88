"""Error taxonomy for the website import pipeline.

Services raise these; the router maps them onto HTTP status codes:

* :class:`AuthError` → 401
* :class:`ValidationError` (and subclasses) → 400
* :class:`FetchError`, :class:`ParseError`, :class:`PersistenceError` → 500
"""

from typing import Optional


class AuthError(Exception):
    """The caller's bearer token is missing or was rejected by Supabase Auth."""


class ValidationError(ValueError):
    """The target URL was rejected before any network access happened."""


class InvalidUrl(ValidationError):
    def __init__(self, message: str = "Invalid URL format") -> None:
        super().__init__(message)


class UnsupportedProtocol(ValidationError):
    def __init__(self, message: str = "Only HTTP/HTTPS protocols allowed") -> None:
        super().__init__(message)


class PrivateNetworkBlocked(ValidationError):
    def __init__(self, message: str = "Access to private networks not allowed") -> None:
        super().__init__(message)


class FetchError(RuntimeError):
    """The target site could not be retrieved.

    ``status_code`` is set for non-2xx responses, ``aborted`` for timeouts.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        aborted: bool = False,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.aborted = aborted


class ParseError(RuntimeError):
    """The fetched document could not be parsed as HTML."""


class PersistenceError(RuntimeError):
    """A database write failed."""
