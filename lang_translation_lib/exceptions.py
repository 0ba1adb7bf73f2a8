"""
Custom exception hierarchy for the Language Translation client library.

All public exceptions inherit from :class:`LanguageTranslationError`, allowing
callers to catch a single base class for any client‑related failure while still
being able to differentiate specific error conditions when needed.

Transport failures (``requests.RequestException`` / ``httpx.HTTPError``) are
not wrapped; they reach the caller unchanged.
"""

from typing import Optional


class LanguageTranslationError(Exception):
    """Base exception for all Language‑Translation‑specific errors."""

    pass


class InvalidArgumentError(LanguageTranslationError, ValueError):
    """Raised before any network call when a required argument is empty."""

    pass


class DecodeError(LanguageTranslationError):
    """Raised when a successful response body does not match the expected shape."""

    pass


class ServiceError(LanguageTranslationError):
    """
    Raised when the remote service answers with a non‑2xx status code.

    Attributes
    ----------
    status_code : int
        HTTP status code returned by the service.
    message : str
        Error message extracted from the response body, or the raw body text.
    """

    def __init__(self, status_code: int, message: Optional[str] = None):
        self.status_code = status_code
        self.message = message or ""
        super().__init__(f"HTTP {status_code}: {self.message}")


class AuthenticationError(ServiceError):
    """Raised when the server returns HTTP 401/403 – invalid or missing credentials."""

    pass


class NotFoundError(ServiceError):
    """Raised when the server returns HTTP 404 – e.g. an unknown model id."""

    pass


class RateLimitError(ServiceError):
    """Raised when the server returns HTTP 429 – request rate limit exceeded."""

    pass
