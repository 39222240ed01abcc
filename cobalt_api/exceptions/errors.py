"""Custom exception classes for the Cobalt API client.

Option and source validation problems are raised immediately; failures while
talking to the download API are returned as data (see ``RequestResult``) and
never show up here.
"""

from typing import Iterable, Optional


class CobaltException(Exception):
    """Base exception for all client errors.

    Attributes:
        message: Human-readable error message
        details: Additional technical details for debugging
        recoverable: Whether the caller can fix the input and try again
    """

    def __init__(
        self,
        message: str,
        details: Optional[str] = None,
        recoverable: bool = True
    ):
        self.message = message
        self.details = details
        self.recoverable = recoverable
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message

    def to_dict(self) -> dict:
        """Convert exception to dictionary for logging/serialization."""
        return {
            'type': self.__class__.__name__,
            'message': self.message,
            'details': self.details,
            'recoverable': self.recoverable,
        }


class InvalidOptionError(CobaltException):
    """Raised when a setter receives a value outside its allow-list.

    Attributes:
        option: Name of the option being set (e.g. "vQuality")
        value: The rejected value
        allowed: The allow-list the value was checked against
    """

    def __init__(self, option: str, value, allowed: Iterable[str]):
        self.option = option
        self.value = value
        self.allowed = tuple(allowed)
        super().__init__(
            message=f"Invalid {option}: {value!r}",
            details=f"Allowed: {', '.join(self.allowed)}",
            recoverable=True
        )


class InvalidSourceError(CobaltException):
    """Raised when the source URL is empty or not a supported video.

    Examples:
        - Empty URL passed to the client
        - URL rejected by the metadata provider
    """

    def __init__(self, url: str, reason: str = "Invalid YouTube URL"):
        self.url = url
        self.reason = reason
        url = url or ""
        super().__init__(
            message=reason,
            details=f"URL: {url[:100]}..." if len(url) > 100 else f"URL: {url}",
            recoverable=True
        )


class MetadataFetchError(CobaltException):
    """Raised when video metadata could not be retrieved.

    Attributes:
        url: The URL whose metadata was requested
        reason: Short description of the underlying failure
        original_error: The exception raised by the metadata provider
    """

    def __init__(
        self,
        message: str = "Failed to fetch video qualities",
        url: Optional[str] = None,
        reason: Optional[str] = None,
        original_error: Optional[Exception] = None
    ):
        self.url = url
        self.reason = reason
        self.original_error = original_error

        details_parts = []
        if url:
            details_parts.append(f"URL: {url[:50]}..." if len(url) > 50 else f"URL: {url}")
        if reason:
            details_parts.append(f"Reason: {reason}")
        if original_error:
            details_parts.append(f"Original: {type(original_error).__name__}")

        super().__init__(
            message=message,
            details=", ".join(details_parts) if details_parts else None,
            recoverable=False
        )


class ConfigurationError(CobaltException):
    """Raised for invalid client settings.

    Examples:
        - Non-positive timeout
        - Empty API endpoint
    """

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        expected_type: Optional[str] = None
    ):
        self.config_key = config_key
        self.expected_type = expected_type

        details_parts = []
        if config_key:
            details_parts.append(f"Key: {config_key}")
        if expected_type:
            details_parts.append(f"Expected: {expected_type}")

        super().__init__(
            message=message,
            details=", ".join(details_parts) if details_parts else None,
            recoverable=True
        )
