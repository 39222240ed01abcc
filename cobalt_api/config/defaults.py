"""Default configuration values for the Cobalt API client."""


# Package metadata
APP_NAME = "cobalt-api"
APP_VERSION = "1.0.0"

# Endpoint
API_URL = "https://api.cobalt.tools/api/json"

# Timeouts
DEFAULT_TIMEOUT = 30  # seconds

# Request headers
JSON_CONTENT_TYPE = "application/json"

# Option allow-lists (order matches the API docs)
VIDEO_CODECS = ("h264", "av1", "vp9")
VIDEO_QUALITIES = ("max", "2160", "1440", "1080", "720", "480", "360", "240", "144")
AUDIO_FORMATS = ("best", "mp3", "ogg", "wav", "opus")
FILENAME_PATTERNS = ("classic", "basic", "pretty", "nerdy")

# Option defaults
DEFAULT_VIDEO_CODEC = "h264"
DEFAULT_VIDEO_QUALITY = "720"
DEFAULT_AUDIO_FORMAT = "mp3"
DEFAULT_FILENAME_PATTERN = "classic"

# Quality preference used by CobaltAPI.select_best_quality
PREFERRED_QUALITIES = ("2160", "1080")

# Messages
GENERIC_ERROR_MESSAGE = "An error occurred"
INVALID_JSON_MESSAGE = "Invalid JSON response"
