"""Download options for a single Cobalt request.

``DownloadOptions`` is an immutable value: every ``with_*`` method validates
its input and returns a new instance, leaving the original untouched.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, Optional

from cobalt_api.config import defaults
from cobalt_api.config.validators import OptionValidator
from cobalt_api.exceptions import InvalidSourceError


class VideoCodec(str, Enum):
    """Video codec for YouTube downloads."""
    H264 = "h264"
    AV1 = "av1"
    VP9 = "vp9"


class VideoQuality(str, Enum):
    """Target video quality (vertical resolution)."""
    MAX = "max"
    Q2160 = "2160"
    Q1440 = "1440"
    Q1080 = "1080"
    Q720 = "720"
    Q480 = "480"
    Q360 = "360"
    Q240 = "240"
    Q144 = "144"


class AudioFormat(str, Enum):
    """Audio format for audio downloads."""
    BEST = "best"
    MP3 = "mp3"
    OGG = "ogg"
    WAV = "wav"
    OPUS = "opus"


class FilenamePattern(str, Enum):
    """Filename style of the downloaded file.

    - classic: Standard naming
    - basic: Simplistic naming
    - pretty: More descriptive naming
    - nerdy: Detailed naming including additional metadata
    """
    CLASSIC = "classic"
    BASIC = "basic"
    PRETTY = "pretty"
    NERDY = "nerdy"


# Attribute name -> wire field name, for the boolean feature flags
FLAG_FIELDS = {
    'audio_only': 'isAudioOnly',
    'tiktok_full_audio': 'isTTFullAudio',
    'audio_muted': 'isAudioMuted',
    'dub_lang': 'dubLang',
    'disable_metadata': 'disableMetadata',
    'twitter_gif': 'twitterGif',
    'tiktok_h265': 'tiktokH265',
}


@dataclass(frozen=True)
class DownloadOptions:
    """Configuration of one download request.

    Attributes:
        url: Source URL, stored verbatim
        video_codec: One of h264, av1, vp9
        video_quality: One of max, 2160 ... 144
        audio_format: One of best, mp3, ogg, wav, opus
        filename_pattern: One of classic, basic, pretty, nerdy
        audio_only: Download only the audio track
        tiktok_full_audio: Download the original sound of a TikTok video
        audio_muted: Mute the audio track in video downloads
        dub_lang: Use Accept-Language to pick a dubbed YouTube audio track
        disable_metadata: Don't write file metadata
        twitter_gif: Convert Twitter gifs to .gif
        tiktok_h265: Prefer 1080p h265 videos on TikTok
        accept_language: Optional Accept-Language header override
    """
    url: str
    video_codec: str = defaults.DEFAULT_VIDEO_CODEC
    video_quality: str = defaults.DEFAULT_VIDEO_QUALITY
    audio_format: str = defaults.DEFAULT_AUDIO_FORMAT
    filename_pattern: str = defaults.DEFAULT_FILENAME_PATTERN
    audio_only: bool = False
    tiktok_full_audio: bool = False
    audio_muted: bool = False
    dub_lang: bool = False
    disable_metadata: bool = False
    twitter_gif: bool = False
    tiktok_h265: bool = False
    accept_language: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.url, str) or not self.url.strip():
            raise InvalidSourceError(self.url or "", "URL cannot be empty")

        # Normalize enum members/ints passed directly to the constructor
        for attr, option in (
            ('video_codec', 'vCodec'),
            ('video_quality', 'vQuality'),
            ('audio_format', 'aFormat'),
            ('filename_pattern', 'filenamePattern'),
        ):
            value = OptionValidator.require(option, getattr(self, attr))
            object.__setattr__(self, attr, value)

    def with_video_codec(self, codec) -> 'DownloadOptions':
        """Return a copy using another video codec."""
        return replace(self, video_codec=OptionValidator.require('vCodec', codec))

    def with_quality(self, quality) -> 'DownloadOptions':
        """Return a copy using another video quality."""
        return replace(self, video_quality=OptionValidator.require('vQuality', quality))

    def with_audio_format(self, audio_format) -> 'DownloadOptions':
        """Return a copy using another audio format."""
        return replace(self, audio_format=OptionValidator.require('aFormat', audio_format))

    def with_filename_pattern(self, pattern) -> 'DownloadOptions':
        """Return a copy using another filename pattern."""
        return replace(
            self, filename_pattern=OptionValidator.require('filenamePattern', pattern)
        )

    def with_accept_language(self, language: Optional[str]) -> 'DownloadOptions':
        """Return a copy with an Accept-Language override (None/"" clears it)."""
        return replace(self, accept_language=language or None)

    def with_flag(self, flag: str) -> 'DownloadOptions':
        """Return a copy with a boolean feature flag turned on.

        Flags can only be enabled; start from fresh options to turn one off.

        Raises:
            KeyError: If ``flag`` is not a known feature flag
        """
        if flag not in FLAG_FIELDS:
            raise KeyError(f"Unknown flag: {flag}")
        return replace(self, **{flag: True})

    def to_payload(self) -> Dict[str, Any]:
        """Serialize to the JSON body the API expects."""
        return {
            'url': self.url,
            'vQuality': self.video_quality,
            'filenamePattern': self.filename_pattern,
            'isAudioOnly': self.audio_only,
            'isTTFullAudio': self.tiktok_full_audio,
            'isAudioMuted': self.audio_muted,
            'dubLang': self.dub_lang,
            'disableMetadata': self.disable_metadata,
            'twitterGif': self.twitter_gif,
            'tiktokH265': self.tiktok_h265,
            'vCodec': self.video_codec,
            'aFormat': self.audio_format,
        }
