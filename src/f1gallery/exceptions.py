"""Custom exceptions for the f1gallery data layer."""

from __future__ import annotations


class F1GalleryError(Exception):
    """Base exception for all f1gallery errors."""


class RemoteUnavailable(F1GalleryError):
    """Raised when upstream race data cannot be fetched.

    List-style gateway operations catch this and degrade to an empty result;
    single-driver lookups let it propagate.
    """


class RemoteConnectionError(RemoteUnavailable):
    """Raised when the client cannot connect to the API."""


class RemoteTimeoutError(RemoteUnavailable):
    """Raised when a request to the API times out."""


class RemoteAPIError(RemoteUnavailable):
    """Raised when the API returns a non-2xx response."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}")


class ResponseValidationError(RemoteUnavailable):
    """Raised when API response data fails model validation."""
