"""Client settings loaded from environment variables."""

import functools

from pydantic_settings import BaseSettings

from spotify_web.constants import DEFAULT_REQUEST_TIMEOUT, SPOTIFY_API_BASE


class SpotifySettings(BaseSettings):
    """Spotify client configuration."""

    # Bearer token obtained from an OAuth flow outside this package
    SPOTIFY_ACCESS_TOKEN: str = ""
    SPOTIFY_API_BASE: str = SPOTIFY_API_BASE
    SPOTIFY_REQUEST_TIMEOUT: float = DEFAULT_REQUEST_TIMEOUT

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True

    model_config = {"env_prefix": ""}


@functools.lru_cache(maxsize=1)
def get_settings() -> SpotifySettings:
    """Return cached settings singleton."""
    return SpotifySettings()
