"""
Custom exceptions for Openload API operations.

Every call either returns a fully decoded result or raises one of these.
Transport failures, undecodable bodies and API-level failures are kept
apart so callers can tell them from each other.
"""
from typing import Optional, Any


class OpenloadException(Exception):
    """Base exception for all Openload-related errors."""

    def __init__(self, message: str, status: Optional[int] = None) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            status: Envelope status code (if available)
        """
        self.message = message
        self.status = status
        super().__init__(message)


class ConfigurationError(OpenloadException):
    """Exception raised when the client configuration is unusable."""
    pass


class TransportError(OpenloadException):
    """Exception raised when the HTTP round trip itself fails."""
    pass


class DecodeError(OpenloadException):
    """Exception raised when a response body is not a valid envelope."""

    def __init__(
        self,
        message: str,
        body: Any = None,
        status: Optional[int] = None
    ) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            body: Offending body or sub-document (if available)
            status: Envelope status code (if available)
        """
        self.body = body
        super().__init__(message, status)


class ResultShapeError(DecodeError):
    """Exception raised when the envelope result has the wrong shape."""
    pass


class APIError(OpenloadException):
    """
    Exception raised when the envelope status is not a success.

    The message is the envelope ``msg`` verbatim; ``status`` is kept for
    information only.
    """
    pass
