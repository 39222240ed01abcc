"""Custom exceptions for the Cobalt API client."""

from .errors import (
    CobaltException,
    InvalidOptionError,
    InvalidSourceError,
    MetadataFetchError,
    ConfigurationError,
)

__all__ = [
    'CobaltException',
    'InvalidOptionError',
    'InvalidSourceError',
    'MetadataFetchError',
    'ConfigurationError',
]
