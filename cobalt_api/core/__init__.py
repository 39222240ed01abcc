"""Core client modules."""

from .client import CobaltAPI
from .options import (
    DownloadOptions,
    VideoCodec,
    VideoQuality,
    AudioFormat,
    FilenamePattern,
)
from .result import RequestResult
from .metadata import (
    FormatInfo,
    MetadataProvider,
    YtDlpMetadataProvider,
    normalize_quality_label,
    unique_qualities,
)

__all__ = [
    'CobaltAPI',
    'DownloadOptions',
    'VideoCodec',
    'VideoQuality',
    'AudioFormat',
    'FilenamePattern',
    'RequestResult',
    'FormatInfo',
    'MetadataProvider',
    'YtDlpMetadataProvider',
    'normalize_quality_label',
    'unique_qualities',
]
