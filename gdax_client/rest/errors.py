"""Typed errors raised by the REST client and the response decoders."""

from __future__ import annotations


class GdaxError(Exception):
    """Base class for every error surfaced by this package."""


class ConnectorError(GdaxError):
    """Raised when the HTTP transport cannot be built.

    Attributes:
        reason: Human-readable description of the setup failure.
    """

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"HTTP connector setup failed: {reason}")


class UriError(GdaxError):
    """Raised when the final request URI cannot be parsed.

    Attributes:
        uri: The string that was rejected.
        reason: Why it was rejected.
    """

    def __init__(self, uri: str, reason: str) -> None:
        self.uri = uri
        self.reason = reason
        super().__init__(f"Invalid request URI {uri!r}: {reason}")


class TransportError(GdaxError):
    """Raised when the HTTP exchange fails or returns a non-success status.

    Attributes:
        method: HTTP method of the failed request.
        url: Full request URL.
        status_code: Response status, or None when no response was received.
        reason: Network error text or a snippet of the response body.
    """

    def __init__(self, method: str, url: str, reason: str, status_code: int | None = None) -> None:
        self.method = method
        self.url = url
        self.status_code = status_code
        self.reason = reason
        status = f"HTTP {status_code}" if status_code is not None else "network error"
        super().__init__(f"{method} {url} failed ({status}): {reason}")


class DecodeError(GdaxError, ValueError):
    """Raised when a response body or one of its fields cannot be decoded.

    Subclasses ValueError so that field decoders can raise it from inside
    pydantic validators.
    """

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)
