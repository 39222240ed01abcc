"""Cobalt API client.

This module provides the request configurator for the Cobalt download API:
- Validated option setters
- Payload and header construction
- Sending the request and normalizing the response
- Listing the qualities available for a YouTube URL

Sources:
    - Cobalt: https://github.com/imputnet/cobalt
    - API docs: https://github.com/imputnet/cobalt/blob/current/docs/api.md
"""

import threading
from typing import Callable, Dict, Iterable, List, Optional, Union

import requests

from cobalt_api.config import defaults
from cobalt_api.config.settings import ClientSettings
from cobalt_api.config.validators import OptionValidator
from cobalt_api.core.metadata import (
    MetadataProvider,
    YtDlpMetadataProvider,
    unique_qualities,
)
from cobalt_api.core.options import DownloadOptions
from cobalt_api.core.result import RequestResult
from cobalt_api.exceptions import (
    CobaltException,
    InvalidSourceError,
    MetadataFetchError,
)
from cobalt_api.utils.logger import get_logger


_NO_BODY = object()


class CobaltAPI:
    """Configures and sends a download request for one URL.

    Options start at the API defaults (h264, 720, mp3, classic, all flags
    off) and change only through the setters below. A setter that rejects
    its value raises ``InvalidOptionError`` and leaves the configuration
    as it was. Feature flags can only be enabled.

    Usage:
        cobalt = CobaltAPI("https://www.youtube.com/watch?v=OAr6AIvH9VY")
        cobalt.set_quality("1080")
        cobalt.enable_audio_muted()
        result = cobalt.send_request()
        if result.success:
            print(result.data["url"])
        else:
            print(result.message)
    """

    def __init__(
        self,
        url: str,
        settings: Optional[ClientSettings] = None,
        session: Optional[requests.Session] = None,
        metadata_provider: Optional[MetadataProvider] = None,
        logger=None
    ):
        """Initialize the client.

        Args:
            url: Source URL, stored as given
            settings: Transport settings (endpoint, timeout, proxy)
            session: Optional requests session to send through
            metadata_provider: Provider used for quality lookups
            logger: Logger instance (defaults to the global logger)

        Raises:
            InvalidSourceError: If the URL is empty
        """
        self._options = DownloadOptions(url=url)
        self.settings = settings or ClientSettings()
        self.session = session
        self.metadata_provider = metadata_provider or YtDlpMetadataProvider()
        self.logger = logger if logger is not None else get_logger()

    # Read-only state

    @property
    def url(self) -> str:
        return self._options.url

    @property
    def options(self) -> DownloadOptions:
        """Current options (immutable snapshot)."""
        return self._options

    @property
    def quality(self) -> str:
        return self._options.video_quality

    @property
    def video_codec(self) -> str:
        return self._options.video_codec

    @property
    def audio_format(self) -> str:
        return self._options.audio_format

    @property
    def filename_pattern(self) -> str:
        return self._options.filename_pattern

    @property
    def accept_language(self) -> Optional[str]:
        return self._options.accept_language

    # Option setters

    def set_quality(self, quality):
        """Set the video quality (max, 2160, 1440, 1080, 720, 480, 360, 240, 144).

        Raises:
            InvalidOptionError: If the quality is not valid
        """
        self._options = self._options.with_quality(quality)

    def set_filename_pattern(self, pattern):
        """Set the filename pattern (classic, basic, pretty, nerdy).

        Raises:
            InvalidOptionError: If the pattern is not valid
        """
        self._options = self._options.with_filename_pattern(pattern)

    def set_video_codec(self, codec):
        """Set the video codec (h264, av1, vp9).

        Raises:
            InvalidOptionError: If the codec is not valid
        """
        self._options = self._options.with_video_codec(codec)

    def set_audio_format(self, audio_format):
        """Set the audio format (best, mp3, ogg, wav, opus).

        Raises:
            InvalidOptionError: If the format is not valid
        """
        self._options = self._options.with_audio_format(audio_format)

    def set_accept_language(self, language: Optional[str]):
        """Set a custom Accept-Language header value (None clears it)."""
        self._options = self._options.with_accept_language(language)

    def enable_audio_only(self):
        """Download only the audio."""
        self._options = self._options.with_flag('audio_only')

    def enable_tiktok_full_audio(self):
        """Download the original sound of a TikTok video."""
        self._options = self._options.with_flag('tiktok_full_audio')

    def enable_audio_muted(self):
        """Mute the audio track in video downloads."""
        self._options = self._options.with_flag('audio_muted')

    def enable_dub_lang(self):
        """Use the Accept-Language header to pick YouTube dubbed audio."""
        self._options = self._options.with_flag('dub_lang')

    def enable_disable_metadata(self):
        """Don't write file metadata."""
        self._options = self._options.with_flag('disable_metadata')

    def enable_twitter_gif(self):
        """Convert Twitter gifs to .gif."""
        self._options = self._options.with_flag('twitter_gif')

    def enable_tiktok_h265(self):
        """Prefer 1080p h265 videos on TikTok."""
        self._options = self._options.with_flag('tiktok_h265')

    # Request building

    def build_payload(self) -> Dict:
        """Get the JSON body for the download request."""
        return self._options.to_payload()

    def build_headers(self) -> Dict[str, str]:
        """Get the headers for the download request."""
        headers = {
            'Accept': defaults.JSON_CONTENT_TYPE,
            'Content-Type': defaults.JSON_CONTENT_TYPE,
        }
        if self._options.accept_language is not None:
            headers['Accept-Language'] = self._options.accept_language
        if self.settings.user_agent:
            headers['User-Agent'] = self.settings.user_agent
        return headers

    def send_request(self) -> RequestResult:
        """Send the configured request to the API.

        Never raises: transport errors and API errors are both returned as
        a failed ``RequestResult``.

        Returns:
            RequestResult with the response body on success, or a
            diagnostic message on failure
        """
        post = self.session.post if self.session is not None else requests.post
        self._log(f"Sending download request for {self.url}", "DEBUG")

        try:
            response = post(
                self.settings.api_url,
                json=self.build_payload(),
                headers=self.build_headers(),
                timeout=self.settings.timeout,
                proxies=self.settings.proxies,
            )
        except requests.exceptions.Timeout as e:
            self._log(f"Request timed out: {e}", "ERROR")
            return RequestResult.fail(str(e) or "Connection timeout")
        except requests.exceptions.RequestException as e:
            self._log(f"Request failed: {e}", "ERROR")
            return RequestResult.fail(str(e) or defaults.GENERIC_ERROR_MESSAGE)
        except Exception as e:
            self._log(f"Unexpected error sending request: {e}", "ERROR")
            return RequestResult.fail(str(e) or defaults.GENERIC_ERROR_MESSAGE)

        return self._parse_response(response)

    def _parse_response(self, response) -> RequestResult:
        """Turn an HTTP response into a RequestResult."""
        status_code = response.status_code
        try:
            body = response.json()
        except ValueError:
            body = _NO_BODY

        is_error = isinstance(body, dict) and body.get('status') == 'error'

        if status_code == 200 and body is not _NO_BODY and not is_error:
            self._log(f"Request succeeded for {self.url}", "SUCCESS")
            return RequestResult.ok(body, status_code=status_code)

        if status_code == 200 and body is _NO_BODY:
            message = defaults.INVALID_JSON_MESSAGE
        elif isinstance(body, dict) and body.get('text'):
            message = str(body['text'])
        elif body is _NO_BODY and (response.text or '').strip():
            message = response.text.strip()
        elif status_code != 200:
            message = self._http_error_message(response)
        else:
            message = defaults.GENERIC_ERROR_MESSAGE

        self._log(f"Request failed (HTTP {status_code}): {message}", "WARNING")
        return RequestResult.fail(message, status_code=status_code)

    @staticmethod
    def _http_error_message(response) -> str:
        """Describe a non-200 response that carried no diagnostic text."""
        try:
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            if str(e):
                return str(e)
        return f"Request failed with status code {response.status_code}"

    # Quality lookup

    def get_available_qualities(self) -> List[str]:
        """Get the video qualities available for the URL.

        Returns:
            Distinct quality values in first-seen order, e.g. ["1080", "720"]

        Raises:
            InvalidSourceError: If the provider rejects the URL
            MetadataFetchError: If the metadata lookup fails
        """
        if not self.metadata_provider.is_valid_source(self.url):
            raise InvalidSourceError(self.url, "Invalid YouTube URL")

        try:
            formats = self.metadata_provider.list_formats(self.url)
        except Exception as e:
            self._log(f"Failed to fetch formats for {self.url}: {e}", "ERROR")
            raise MetadataFetchError(
                url=self.url,
                reason=str(e) or None,
                original_error=e
            ) from e

        qualities = unique_qualities(f.quality_label for f in formats if f.has_video)
        self._log(f"Found {len(qualities)} qualities for {self.url}", "DEBUG")
        return qualities

    def select_best_quality(
        self,
        preferred: Iterable[str] = defaults.PREFERRED_QUALITIES
    ) -> Optional[str]:
        """Set the quality to the best available option.

        Picks the first ``preferred`` quality the video offers, otherwise
        the first offered quality the API accepts. The quality is left
        unchanged when nothing matches.

        Returns:
            The quality that was set, or None
        """
        available = self.get_available_qualities()
        allowed = OptionValidator.allowed('vQuality')

        chosen = next((q for q in preferred if q in available), None)
        if chosen is None:
            chosen = next((q for q in available if q in allowed), None)
        if chosen is None:
            return None

        self.set_quality(chosen)
        return chosen

    # Background variants

    def send_request_async(
        self,
        on_complete: Callable[[RequestResult], None]
    ) -> threading.Thread:
        """Send the request on a background thread.

        Args:
            on_complete: Callback receiving the RequestResult

        Returns:
            Thread running the request
        """
        def request_task():
            on_complete(self.send_request())

        thread = threading.Thread(target=request_task, daemon=True)
        thread.start()
        return thread

    def get_available_qualities_async(
        self,
        on_complete: Callable[[Union[List[str], CobaltException]], None],
        on_error: Optional[Callable[[CobaltException], None]] = None
    ) -> threading.Thread:
        """Fetch available qualities on a background thread.

        Errors are logged and always delivered: to ``on_error`` when given,
        otherwise to ``on_complete`` in place of the quality list. Anything
        that is not a CobaltException is wrapped in MetadataFetchError.

        Args:
            on_complete: Callback receiving the quality list
            on_error: Callback receiving InvalidSourceError/MetadataFetchError

        Returns:
            Thread running the lookup
        """
        def fetch_task():
            try:
                qualities = self.get_available_qualities()
            except CobaltException as e:
                error = e
            except Exception as e:
                error = MetadataFetchError(
                    url=self.url,
                    reason=str(e) or None,
                    original_error=e
                )
                error.__cause__ = e
            else:
                on_complete(qualities)
                return

            self._log(f"Quality lookup failed for {self.url}: {error}", "ERROR")
            if on_error:
                on_error(error)
            else:
                on_complete(error)

        thread = threading.Thread(target=fetch_task, daemon=True)
        thread.start()
        return thread

    def _log(self, message: str, level: str = "INFO"):
        """Log a message."""
        if self.logger:
            log_method = getattr(self.logger, level.lower(), self.logger.info)
            log_method(message)
