"""
Custom exceptions for Cloudinary client library.
"""

from typing import Optional


class CloudinaryClientError(Exception):
    """Base exception for Cloudinary client errors."""
    pass


class ConfigurationError(CloudinaryClientError):
    """Raised when the connection URI or client configuration is invalid."""
    pass


class HTTPError(CloudinaryClientError):
    """Raised when the HTTP request or reading its response fails."""
    pass


class DecodeError(CloudinaryClientError):
    """Raised when a response body is not the expected JSON."""
    pass


class APIError(CloudinaryClientError):
    """
    Error reported by the Cloudinary API.

    Carries the message from the ``{"error": {"message": ...}}`` envelope, or
    the ``result`` of a destroy call that was not ``"ok"``.
    """

    def __init__(self, message: Optional[str], status_code: Optional[int] = None):
        message = "" if message is None else str(message)
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self):
        return self.message
