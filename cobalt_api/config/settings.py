"""Transport settings for the Cobalt API client.

Settings are plain values passed in code; nothing is read from files or
the environment.
"""

from dataclasses import dataclass, asdict
from typing import Optional

from cobalt_api.config import defaults
from cobalt_api.exceptions import ConfigurationError


@dataclass
class ClientSettings:
    """Settings for outbound requests.

    Attributes:
        api_url: Endpoint the download request is POSTed to
        timeout: Request timeout in seconds, passed to requests
        proxy: Optional proxy URL used for both http and https
        user_agent: Optional User-Agent header value
    """
    api_url: str = defaults.API_URL
    timeout: float = defaults.DEFAULT_TIMEOUT
    proxy: Optional[str] = None
    user_agent: Optional[str] = None

    def __post_init__(self):
        if not self.api_url:
            raise ConfigurationError("API URL cannot be empty", config_key="api_url")
        if not isinstance(self.timeout, (int, float)) or isinstance(self.timeout, bool):
            raise ConfigurationError(
                "Invalid timeout", config_key="timeout", expected_type="float"
            )
        if self.timeout <= 0:
            raise ConfigurationError("Timeout must be positive", config_key="timeout")

    @property
    def proxies(self) -> Optional[dict]:
        """Proxy mapping in the form requests expects."""
        if not self.proxy:
            return None
        return {'http': self.proxy, 'https': self.proxy}

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> 'ClientSettings':
        """Create from dictionary."""
        # Filter only valid keys
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}
        filtered_data = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered_data)
