"""Exception classes for the Tumblr API client.

This module defines the exception hierarchy raised by the client: argument
and lifecycle errors raised before any request is made, and API errors
raised while a request is in flight.
"""

from typing import Optional, Dict, Any


class TumblrClientError(Exception):
    """Base exception class for all Tumblr client errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigError(TumblrClientError):
    """Exception raised for configuration-related errors."""
    pass


class AuthenticationError(TumblrClientError):
    """Exception raised for OAuth signing errors."""
    pass


class ClientDisposedError(TumblrClientError, RuntimeError):
    """Exception raised when a closed client is used."""

    def __init__(self, object_name: str = "TumblrClient") -> None:
        super().__init__(f"Cannot access a closed {object_name}.")
        self.object_name = object_name


class InvalidArgumentError(TumblrClientError, ValueError):
    """Exception raised for missing or empty required arguments."""

    def __init__(self, message: str, argument: str) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            argument: Name of the offending argument
        """
        super().__init__(message, details={"argument": argument})
        self.argument = argument


class ArgumentOutOfRangeError(TumblrClientError, ValueError):
    """Exception raised for numeric arguments outside their documented bounds."""

    def __init__(self, message: str, argument: str, value: Any = None) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            argument: Name of the offending argument
            value: The rejected value
        """
        super().__init__(message, details={"argument": argument, "value": value})
        self.argument = argument
        self.value = value


class PostDecodeError(TumblrClientError):
    """Exception raised when a post payload cannot be mapped to a post type."""

    def __init__(
        self,
        message: str,
        post_type: Optional[str] = None,
        index: Optional[int] = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            post_type: The discriminator value found, if any
            index: Position of the element within the decoded array
        """
        super().__init__(message, details={"type": post_type, "index": index})
        self.post_type = post_type
        self.index = index


class APIError(TumblrClientError):
    """Base exception for API-related errors."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_data: Optional[Any] = None
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            status_code: HTTP status code
            response_data: Raw response data from API
        """
        super().__init__(message)
        self.status_code = status_code
        self.response_data = response_data if response_data is not None else {}


class BadRequestError(APIError):
    """Exception raised for 400 Bad Request errors."""
    pass


class UnauthorizedError(APIError):
    """Exception raised for 401 Unauthorized errors."""
    pass


class ForbiddenError(APIError):
    """Exception raised for 403 Forbidden errors."""
    pass


class NotFoundError(APIError):
    """Exception raised for 404 Not Found errors."""
    pass


class ServerError(APIError):
    """Exception raised for 5xx server errors."""
    pass


class NetworkError(APIError):
    """Exception raised when the request never produced a response."""
    pass


class ResponseDecodeError(APIError):
    """Exception raised when a response body does not match the expected shape."""
    pass


class RateLimitError(APIError):
    """Exception raised for 429 Rate Limit errors."""

    def __init__(
        self,
        message: str,
        retry_after: Optional[int] = None,
        **kwargs: Any
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            retry_after: Seconds to wait before retrying
            **kwargs: Additional arguments passed to parent class
        """
        super().__init__(message, **kwargs)
        self.retry_after = retry_after
