"""Typed async client for the Spotify Web API."""

from spotify_web import options
from spotify_web.client import SpotifyClient
from spotify_web.exceptions import (
    SpotifyAPIError,
    SpotifyAuthError,
    SpotifyClientError,
    SpotifyNoMorePagesError,
    SpotifyRateLimitError,
    SpotifyRequestError,
    SpotifyServerError,
    SpotifyValidationError,
)
from spotify_web.options import RequestOption, TimeRange
from spotify_web.settings import SpotifySettings, get_settings

__all__ = [
    "RequestOption",
    "SpotifyAPIError",
    "SpotifyAuthError",
    "SpotifyClient",
    "SpotifyClientError",
    "SpotifyNoMorePagesError",
    "SpotifyRateLimitError",
    "SpotifyRequestError",
    "SpotifyServerError",
    "SpotifySettings",
    "SpotifyValidationError",
    "TimeRange",
    "get_settings",
    "options",
]
