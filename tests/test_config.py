"""Unit tests for configuration modules."""

import pytest

from cobalt_api.config.defaults import (
    API_URL, DEFAULT_TIMEOUT, VIDEO_QUALITIES, VIDEO_CODECS, AUDIO_FORMATS, FILENAME_PATTERNS
)
from cobalt_api.config.settings import ClientSettings
from cobalt_api.config.validators import OptionValidator, URLValidator, ValidationResult
from cobalt_api.core.options import VideoQuality
from cobalt_api.exceptions import ConfigurationError, InvalidOptionError


class TestClientSettings:
    """Tests for ClientSettings."""

    def test_defaults(self):
        settings = ClientSettings()
        assert settings.api_url == API_URL
        assert settings.timeout == DEFAULT_TIMEOUT
        assert settings.proxies is None

    def test_proxies(self):
        settings = ClientSettings(proxy="socks5://127.0.0.1:9050")
        assert settings.proxies == {
            'http': "socks5://127.0.0.1:9050",
            'https': "socks5://127.0.0.1:9050",
        }

    def test_round_trip_dict(self):
        settings = ClientSettings(timeout=10, user_agent="test")
        assert ClientSettings.from_dict(settings.to_dict()) == settings

    def test_from_dict_ignores_unknown_keys(self):
        settings = ClientSettings.from_dict({'timeout': 15, 'theme': 'dark'})
        assert settings.timeout == 15

    @pytest.mark.parametrize("kwargs", [
        {'api_url': ''},
        {'timeout': 0},
        {'timeout': -1},
        {'timeout': 'fast'},
    ])
    def test_invalid_settings(self, kwargs):
        with pytest.raises(ConfigurationError):
            ClientSettings(**kwargs)


class TestOptionValidator:
    """Tests for allow-list validation."""

    def test_allow_lists(self):
        assert OptionValidator.allowed('vQuality') == VIDEO_QUALITIES
        assert OptionValidator.allowed('vCodec') == VIDEO_CODECS
        assert OptionValidator.allowed('aFormat') == AUDIO_FORMATS
        assert OptionValidator.allowed('filenamePattern') == FILENAME_PATTERNS

    def test_validate_valid(self):
        result = OptionValidator.validate('vCodec', 'av1')
        assert result
        assert result.sanitized_value == 'av1'

    def test_validate_enum(self):
        result = OptionValidator.validate('vQuality', VideoQuality.Q1440)
        assert result.sanitized_value == '1440'

    def test_validate_bool_quality_rejected(self):
        assert not OptionValidator.validate('vQuality', True)

    def test_validate_unknown_option(self):
        result = OptionValidator.validate('vContainer', 'mp4')
        assert not result
        assert "Unknown option" in result.error_message

    def test_require_raises(self):
        with pytest.raises(InvalidOptionError) as exc_info:
            OptionValidator.require('aFormat', 'flac')
        assert "Allowed: best, mp3, ogg, wav, opus" in str(exc_info.value)


class TestURLValidator:
    """Tests for URL validation."""

    def test_valid_video_urls(self):
        valid_urls = [
            "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
            "https://youtube.com/watch?v=dQw4w9WgXcQ",
            "https://m.youtube.com/watch?v=dQw4w9WgXcQ",
            "https://youtu.be/dQw4w9WgXcQ",
            "https://www.youtube.com/shorts/dQw4w9WgXcQ",
            "https://www.youtube.com/embed/dQw4w9WgXcQ",
            "www.youtube.com/watch?v=dQw4w9WgXcQ",
        ]
        for url in valid_urls:
            assert URLValidator.is_video(url), url

    def test_invalid_urls(self):
        invalid_urls = [
            "",
            "   ",
            "https://vimeo.com/123456",
            "https://www.youtube.com/about",
            "https://www.youtube.com/watch?v=short",
        ]
        for url in invalid_urls:
            assert not URLValidator.validate(url).is_valid, url

    def test_playlist_not_video(self, sample_playlist_url):
        result = URLValidator.validate(sample_playlist_url)
        assert result.is_valid
        assert result.sanitized_value['type'] == 'playlist'
        assert not URLValidator.is_video(sample_playlist_url)

    def test_extract_video_id(self):
        assert URLValidator.extract_video_id("https://youtu.be/dQw4w9WgXcQ") == "dQw4w9WgXcQ"
        assert URLValidator.extract_video_id("https://vimeo.com/123456") is None


class TestValidationResult:

    def test_bool(self):
        assert ValidationResult(is_valid=True)
        assert not ValidationResult(is_valid=False)

    def test_warnings_default(self):
        assert ValidationResult(is_valid=True).warnings == []
