"""Video metadata lookup used to list available qualities.

Provides the ``MetadataProvider`` interface, a yt-dlp backed implementation
and the helpers that turn raw quality labels into Cobalt quality values.
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, List, Optional

import yt_dlp

from cobalt_api.config.validators import URLValidator


# Leading "1080p" / "1080p60" part of a yt-dlp format_note
_LABEL_PATTERN = re.compile(r'^(\d+p)(60)?')


@dataclass
class FormatInfo:
    """Information about one media format of a video.

    Attributes:
        format_id: yt-dlp format identifier
        ext: File extension (mp4, webm, etc.)
        height: Video height in pixels
        fps: Frames per second
        vcodec: Video codec ("none" for audio-only)
        acodec: Audio codec ("none" for video-only)
        quality_label: Human-readable quality, e.g. "1080p60" or "720p"
    """
    format_id: str
    ext: str = ""
    height: int = 0
    fps: Optional[float] = None
    vcodec: str = "none"
    acodec: str = "none"
    quality_label: str = ""

    @property
    def has_video(self) -> bool:
        return bool(self.vcodec) and self.vcodec != "none"

    @property
    def has_audio(self) -> bool:
        return bool(self.acodec) and self.acodec != "none"


class MetadataProvider(ABC):
    """Source of format information for a video URL."""

    @abstractmethod
    def is_valid_source(self, url: str) -> bool:
        """Check whether ``url`` points to a video this provider can inspect."""

    @abstractmethod
    def list_formats(self, url: str) -> List[FormatInfo]:
        """Fetch every format available for ``url``."""


class YtDlpMetadataProvider(MetadataProvider):
    """Metadata provider backed by yt-dlp.

    Usage:
        provider = YtDlpMetadataProvider()
        if provider.is_valid_source(url):
            formats = provider.list_formats(url)
    """

    def __init__(self, ydl_opts: Optional[dict] = None):
        """Initialize the provider.

        Args:
            ydl_opts: Extra options merged into the YoutubeDL options
        """
        self.ydl_opts = {
            'quiet': True,
            'no_warnings': True,
            'extract_flat': False,
            'skip_download': True,
        }
        if ydl_opts:
            self.ydl_opts.update(ydl_opts)

    def is_valid_source(self, url: str) -> bool:
        return URLValidator.is_video(url)

    def list_formats(self, url: str) -> List[FormatInfo]:
        """Extract formats with yt-dlp.

        Errors from yt-dlp propagate to the caller.
        """
        with yt_dlp.YoutubeDL(self.ydl_opts) as ydl:
            info = ydl.extract_info(url, download=False)

        if not info:
            return []

        formats = []
        for fmt in info.get('formats') or []:
            format_info = self._parse_format(fmt)
            if format_info:
                formats.append(format_info)
        return formats

    def _parse_format(self, fmt: dict) -> Optional[FormatInfo]:
        """Parse a format dictionary from yt-dlp.

        Returns:
            FormatInfo object or None if format has no id
        """
        format_id = fmt.get('format_id')
        if not format_id:
            return None

        height = fmt.get('height') or 0
        fps = fmt.get('fps')

        return FormatInfo(
            format_id=format_id,
            ext=fmt.get('ext', ''),
            height=height,
            fps=fps,
            vcodec=fmt.get('vcodec') or 'none',
            acodec=fmt.get('acodec') or 'none',
            quality_label=self._quality_label(fmt.get('format_note') or '', height, fps),
        )

    @staticmethod
    def _quality_label(format_note: str, height: int, fps: Optional[float]) -> str:
        """Build a "1080p" / "1080p60" style label."""
        match = _LABEL_PATTERN.match(format_note)
        if match:
            return match.group(0)
        if height:
            return f"{height}p60" if fps and round(fps) == 60 else f"{height}p"
        return ""


def normalize_quality_label(label: str) -> str:
    """Turn a quality label into a Cobalt quality value.

    Drops the first "p60" frame-rate marker, then the first "p" unit:
    "1080p60" -> "1080", "720p" -> "720".
    """
    return label.replace("p60", "", 1).replace("p", "", 1)


def unique_qualities(labels: Iterable[str]) -> List[str]:
    """Normalize labels and drop duplicates, keeping first-seen order.

    Empty labels are skipped.
    """
    seen = set()
    qualities = []
    for label in labels:
        if not label:
            continue
        quality = normalize_quality_label(label)
        if quality not in seen:
            seen.add(quality)
            qualities.append(quality)
    return qualities
