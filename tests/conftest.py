"""Pytest configuration and shared fixtures."""

import pytest
import sys
import os
from typing import List
from unittest.mock import MagicMock

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from cobalt_api.core.metadata import FormatInfo, MetadataProvider
from cobalt_api.utils.logger import Logger


class FakeMetadataProvider(MetadataProvider):
    """In-memory provider for quality lookup tests."""

    def __init__(self, formats=None, valid=True, error=None):
        self.formats = formats or []
        self.valid = valid
        self.error = error
        self.calls = 0

    def is_valid_source(self, url: str) -> bool:
        return self.valid

    def list_formats(self, url: str) -> List[FormatInfo]:
        self.calls += 1
        if self.error:
            raise self.error
        return list(self.formats)


@pytest.fixture
def sample_youtube_url():
    """Sample YouTube video URL."""
    return "https://www.youtube.com/watch?v=OAr6AIvH9VY"


@pytest.fixture
def sample_playlist_url():
    """Sample YouTube playlist URL."""
    return "https://www.youtube.com/playlist?list=PLrAXtmErZgOeiKm4sgNOknGvNjby9efdf"


@pytest.fixture
def logger():
    """Logger that records every level."""
    from cobalt_api.utils.logger import LogLevel
    return Logger("cobalt_api.tests", min_level=LogLevel.DEBUG)


@pytest.fixture
def sample_formats():
    """Formats as a YouTube video typically reports them."""
    return [
        FormatInfo("299", "mp4", height=1080, fps=60, vcodec="avc1", quality_label="1080p60"),
        FormatInfo("137", "mp4", height=1080, fps=30, vcodec="avc1", quality_label="1080p"),
        FormatInfo("22", "mp4", height=720, fps=30, vcodec="avc1", acodec="mp4a", quality_label="720p"),
        FormatInfo("140", "m4a", acodec="mp4a"),
        FormatInfo("160", "mp4", height=144, fps=60, vcodec="avc1", quality_label="144p60"),
    ]


@pytest.fixture
def fake_provider(sample_formats):
    return FakeMetadataProvider(formats=sample_formats)


@pytest.fixture
def provider_factory():
    return FakeMetadataProvider


@pytest.fixture
def sample_video_info():
    """Sample yt-dlp info dictionary."""
    return {
        "id": "OAr6AIvH9VY",
        "title": "Test Video Title",
        "formats": [
            {"format_id": "140", "ext": "m4a", "vcodec": "none", "acodec": "mp4a.40.2",
             "format_note": "medium"},
            {"format_id": "299", "ext": "mp4", "height": 1080, "fps": 60,
             "vcodec": "avc1.64002a", "acodec": "none", "format_note": "1080p60"},
            {"format_id": "137", "ext": "mp4", "height": 1080, "fps": 30,
             "vcodec": "avc1.640028", "acodec": "none", "format_note": "1080p"},
            {"format_id": "136", "ext": "mp4", "height": 720, "fps": 60,
             "vcodec": "avc1.4d401f", "acodec": "none"},
            {"format_id": "sb0", "ext": "mhtml", "vcodec": "none", "acodec": "none",
             "format_note": "storyboard"},
        ]
    }


def make_response(status_code=200, json_data=None, text="", json_error=False):
    """Build a stand-in for requests.Response."""
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    if json_error:
        response.json.side_effect = ValueError("No JSON object could be decoded")
    else:
        response.json.return_value = json_data
    return response


@pytest.fixture
def response_factory():
    return make_response


# Skip markers for tests requiring network
def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "network: marks tests as requiring network (deselect with '-m \"not network\"')"
    )
