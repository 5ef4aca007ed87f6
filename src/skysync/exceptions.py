"""Custom exceptions for the SkySync client."""

from __future__ import annotations


class SkySyncError(Exception):
    """Base exception for all SkySync client errors."""


class SkySyncConnectionError(SkySyncError):
    """Raised when the client cannot connect to the API."""


class SkySyncTimeoutError(SkySyncError):
    """Raised when a request to the API times out."""


class SkySyncAPIError(SkySyncError):
    """Raised when the API returns an error response (4xx/5xx)."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}")


class SkySyncValidationError(SkySyncError):
    """Raised when API response data fails model validation."""


class SkySyncDecodeError(SkySyncError):
    """Raised when a successful response does not carry a JSON body."""

    def __init__(self, status_code: int, content_type: str | None) -> None:
        self.status_code = status_code
        self.content_type = content_type
        super().__init__(
            f"HTTP {status_code}: expected a JSON body, got {content_type or 'no content type'}"
        )
