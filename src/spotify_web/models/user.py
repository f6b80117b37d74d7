"""Pydantic models for Spotify user profiles."""

from pydantic import BaseModel, Field

from spotify_web.models.common import SpotifyFollowers, SpotifyImage


class SpotifyUser(BaseModel):
    """Public profile information about a Spotify user.

    ``display_name`` is frequently null, notably when the user is embedded in
    a playlist.
    """

    id: str | None = None
    display_name: str | None = None
    uri: str | None = None
    href: str | None = None
    type: str | None = None
    followers: SpotifyFollowers | None = None
    images: list[SpotifyImage] = Field(default_factory=list)
    external_urls: dict[str, str] = Field(default_factory=dict)


class SpotifyExplicitContent(BaseModel):
    filter_enabled: bool = False
    filter_locked: bool = False


class SpotifyPrivateUser(SpotifyUser):
    """Profile of the current user from GET /me.

    ``country``, ``product`` and ``explicit_content`` require the
    ``user-read-private`` scope; ``email`` requires ``user-read-email`` and is
    not verified by Spotify. ``birthdate`` (``YYYY-MM-DD``) is only populated
    for clients granted the birthdate scope.
    """

    country: str | None = None
    email: str | None = None
    product: str | None = None
    birthdate: str | None = None
    explicit_content: SpotifyExplicitContent | None = None
