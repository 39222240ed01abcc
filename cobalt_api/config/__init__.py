"""Configuration management for the Cobalt API client."""

from .settings import ClientSettings
from .validators import OptionValidator, URLValidator, ValidationResult

__all__ = [
    'ClientSettings',
    'OptionValidator',
    'URLValidator',
    'ValidationResult',
]
