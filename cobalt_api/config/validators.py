"""Input validation utilities for the Cobalt API client.

This module provides allow-list validation for download options and
recognition of YouTube URLs for the metadata lookup.
"""

import re
from typing import Any, Dict, List, Optional, Tuple
from dataclasses import dataclass
from enum import Enum
from urllib.parse import urlparse

from cobalt_api.config import defaults
from cobalt_api.exceptions import InvalidOptionError


@dataclass
class ValidationResult:
    """Result of a validation operation.

    Attributes:
        is_valid: Whether validation passed
        error_message: Error message if validation failed
        sanitized_value: Cleaned/normalized value (if applicable)
        warnings: Non-fatal warnings about the input
    """
    is_valid: bool
    error_message: Optional[str] = None
    sanitized_value: Any = None
    warnings: List[str] = None

    def __post_init__(self):
        if self.warnings is None:
            self.warnings = []

    def __bool__(self) -> bool:
        return self.is_valid


class OptionValidator:
    """Validator for download options with fixed allow-lists.

    Keys are the wire field names the API expects.
    """

    OPTION_SCHEMA: Dict[str, Tuple[str, ...]] = {
        'vCodec': defaults.VIDEO_CODECS,
        'vQuality': defaults.VIDEO_QUALITIES,
        'aFormat': defaults.AUDIO_FORMATS,
        'filenamePattern': defaults.FILENAME_PATTERNS,
    }

    @classmethod
    def allowed(cls, option: str) -> Tuple[str, ...]:
        """Get the allow-list for an option."""
        return cls.OPTION_SCHEMA[option]

    @classmethod
    def validate(cls, option: str, value: Any) -> ValidationResult:
        """Validate a single option value.

        Enum members are unwrapped to their string value; numbers are
        accepted for qualities (``1080`` -> ``"1080"``).

        Args:
            option: Wire field name of the option
            value: Value to validate

        Returns:
            ValidationResult with the normalized string as sanitized_value
        """
        if option not in cls.OPTION_SCHEMA:
            return ValidationResult(
                is_valid=False,
                error_message=f"Unknown option: {option}"
            )

        if isinstance(value, Enum):
            value = value.value
        if isinstance(value, int) and not isinstance(value, bool):
            value = str(value)

        allowed = cls.OPTION_SCHEMA[option]
        if not isinstance(value, str) or value not in allowed:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid value for {option}: {value!r}"
            )

        return ValidationResult(is_valid=True, sanitized_value=value)

    @classmethod
    def require(cls, option: str, value: Any) -> str:
        """Validate an option value or raise.

        Returns:
            The normalized option value

        Raises:
            InvalidOptionError: If the value is not in the allow-list
        """
        result = cls.validate(option, value)
        if not result:
            raise InvalidOptionError(option, value, cls.OPTION_SCHEMA.get(option, ()))
        return result.sanitized_value


class URLValidator:
    """Validator for YouTube URLs.

    Supports:
        - Video URLs (youtube.com/watch?v=, youtu.be/)
        - Shorts, live and embed URLs
        - Playlist URLs (recognized, but not a single video)
    """

    # Video ID pattern (11 characters)
    VIDEO_ID_PATTERN = r'[a-zA-Z0-9_-]{11}'

    URL_PATTERNS = [
        (r'^https?://(?:www\.|m\.|music\.)?youtube\.com/watch\?.*v=(' + VIDEO_ID_PATTERN + r')',
         'video'),
        (r'^https?://(?:www\.)?youtu\.be/(' + VIDEO_ID_PATTERN + r')',
         'video'),
        (r'^https?://(?:www\.)?youtube\.com/embed/(' + VIDEO_ID_PATTERN + r')',
         'video'),
        (r'^https?://(?:www\.)?youtube\.com/shorts/(' + VIDEO_ID_PATTERN + r')',
         'video'),
        (r'^https?://(?:www\.)?youtube\.com/live/(' + VIDEO_ID_PATTERN + r')',
         'video'),
        (r'^https?://(?:www\.)?youtube\.com/playlist\?.*list=([a-zA-Z0-9_-]+)',
         'playlist'),
    ]

    VALID_DOMAINS = (
        'youtube.com', 'www.youtube.com',
        'youtu.be', 'www.youtu.be',
        'm.youtube.com',
        'music.youtube.com',
    )

    _compiled_patterns = None

    @classmethod
    def _get_patterns(cls):
        """Get compiled regex patterns (lazy initialization)."""
        if cls._compiled_patterns is None:
            cls._compiled_patterns = [
                (re.compile(pattern, re.IGNORECASE), url_type)
                for pattern, url_type in cls.URL_PATTERNS
            ]
        return cls._compiled_patterns

    @classmethod
    def validate(cls, url: str) -> ValidationResult:
        """Validate a YouTube URL.

        Args:
            url: The URL to validate

        Returns:
            ValidationResult; sanitized_value holds url, type and id
        """
        if not url or not url.strip():
            return ValidationResult(
                is_valid=False,
                error_message="URL cannot be empty"
            )

        url = url.strip()
        parsed = urlparse(url)
        if not parsed.scheme:
            url = f"https://{url}"
            parsed = urlparse(url)

        if parsed.netloc.lower() not in cls.VALID_DOMAINS:
            return ValidationResult(
                is_valid=False,
                error_message=f"Not a YouTube URL. Domain: {parsed.netloc}"
            )

        for pattern, url_type in cls._get_patterns():
            match = pattern.match(url)
            if match:
                return ValidationResult(
                    is_valid=True,
                    sanitized_value={
                        'url': url,
                        'type': url_type,
                        'id': match.group(1)
                    }
                )

        return ValidationResult(
            is_valid=False,
            error_message="URL format not recognized"
        )

    @classmethod
    def is_video(cls, url: str) -> bool:
        """Check if URL points to a single YouTube video."""
        result = cls.validate(url)
        return result.is_valid and result.sanitized_value.get('type') == 'video'

    @classmethod
    def extract_video_id(cls, url: str) -> Optional[str]:
        """Extract video ID from a URL.

        Returns:
            Video ID if found, None otherwise
        """
        if cls.is_video(url):
            return cls.validate(url).sanitized_value.get('id')
        return None
