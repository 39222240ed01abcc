"""Python client for the Cobalt video download API.

Usage:
    from cobalt_api import CobaltAPI

    cobalt = CobaltAPI("https://www.youtube.com/watch?v=OAr6AIvH9VY")
    result = cobalt.send_request()
"""

from cobalt_api.config.defaults import APP_VERSION as __version__
from cobalt_api.config import ClientSettings
from cobalt_api.core import (
    CobaltAPI,
    DownloadOptions,
    VideoCodec,
    VideoQuality,
    AudioFormat,
    FilenamePattern,
    RequestResult,
    FormatInfo,
    MetadataProvider,
    YtDlpMetadataProvider,
)
from cobalt_api.exceptions import (
    CobaltException,
    InvalidOptionError,
    InvalidSourceError,
    MetadataFetchError,
    ConfigurationError,
)

__all__ = [
    'CobaltAPI',
    'ClientSettings',
    'DownloadOptions',
    'VideoCodec',
    'VideoQuality',
    'AudioFormat',
    'FilenamePattern',
    'RequestResult',
    'FormatInfo',
    'MetadataProvider',
    'YtDlpMetadataProvider',
    'CobaltException',
    'InvalidOptionError',
    'InvalidSourceError',
    'MetadataFetchError',
    'ConfigurationError',
]
