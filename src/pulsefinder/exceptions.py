"""Exception hierarchy for the PulseFinder SDK.

Every failure surfaced by the client is one of these kinds, so callers can
branch on the type instead of matching message strings.
"""

from __future__ import annotations


class PulseFinderError(Exception):
    """Base exception for all SDK errors."""

    pass


class AuthConfigError(PulseFinderError):
    """Raised at construction when the client configuration is unusable.

    Covers missing credentials in production mode and malformed
    environment settings such as a non-numeric timeout.
    """

    pass


class AuthenticationError(PulseFinderError):
    """Raised when the backend rejects the credentials (HTTP 401)."""

    def __init__(self, message: str = "Authentication failed"):
        super().__init__(message)
        self.status_code = 401


class NotFoundError(PulseFinderError):
    """Raised when the requested entity does not exist."""

    pass


class MalformedPayloadError(PulseFinderError):
    """Raised when a payload could not be repaired into valid JSON.

    Attributes:
        excerpt: Leading part of the offending input, for diagnostics.
        length: Length of the full offending input.
    """

    EXCERPT_LENGTH = 200

    def __init__(self, message: str, payload: str = ""):
        self.excerpt = payload[: self.EXCERPT_LENGTH]
        self.length = len(payload)
        if payload:
            suffix = "..." if self.length > self.EXCERPT_LENGTH else ""
            message = f"{message} (payload: {self.excerpt!r}{suffix})"
        super().__init__(message)


class TransportError(PulseFinderError):
    """Raised on non-2xx responses (other than 401) and network failures."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
