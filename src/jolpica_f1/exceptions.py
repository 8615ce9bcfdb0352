"""Custom exceptions for the Jolpica F1 client."""

from __future__ import annotations


class JolpicaError(Exception):
    """Base exception for all Jolpica client errors."""


class TransientSourceError(JolpicaError):
    """Marker base for failures worth retrying (rate limiting, connection resets)."""


class JolpicaConnectionError(TransientSourceError):
    """Raised when the client cannot connect or the connection is reset."""


class JolpicaTimeoutError(JolpicaError):
    """Raised when a request to the API times out."""


class JolpicaAPIError(JolpicaError):
    """Raised when the API returns an error response (4xx/5xx)."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}")


class JolpicaRateLimitError(JolpicaAPIError, TransientSourceError):
    """Raised when the API answers with HTTP 429."""


class JolpicaValidationError(JolpicaError):
    """Raised when API response data fails model validation."""


class JolpicaTransportError(JolpicaError):
    """Raised for any other transport failure (protocol, write, proxy); not retried."""
