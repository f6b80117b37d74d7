"""Pydantic models for playlists and playlist items.

Spotify renamed the playlist ``tracks`` object to ``items`` and each entry's
``track`` to ``item``; both spellings are accepted on input.
"""

from datetime import datetime
from typing import Annotated, Any

from pydantic import AliasChoices, BaseModel, Discriminator, Field, Tag

from spotify_web.models.common import Numeric, SpotifyFollowers, SpotifyImage
from spotify_web.models.music import SpotifyTrack
from spotify_web.models.paging import SpotifyPage
from spotify_web.models.show import SpotifyEpisode
from spotify_web.models.user import SpotifyUser


def _item_kind(value: Any) -> str:
    # Entries without a type predate podcast support and are always tracks.
    kind = value.get("type") if isinstance(value, dict) else getattr(value, "type", None)
    return "episode" if kind == "episode" else "track"


PlaylistEntry = Annotated[
    Annotated[SpotifyTrack, Tag("track")] | Annotated[SpotifyEpisode, Tag("episode")],
    Discriminator(_item_kind),
]
"""A playlist entry: a track, or an episode when ``additional_types`` includes it."""


class SpotifyPlaylistItem(BaseModel):
    """Single entry within a playlist.

    ``added_at`` and ``added_by`` may be missing on very old playlists.
    ``item`` is ``None`` when the track has been removed from the catalog, and
    a :class:`SpotifyEpisode` for podcast entries.
    """

    added_at: datetime | None = None
    added_by: SpotifyUser | None = None
    is_local: bool = False
    item: PlaylistEntry | None = Field(default=None, validation_alias=AliasChoices("item", "track"))


class SpotifyPlaylistItemsRef(BaseModel):
    """Link to a playlist's items, as embedded in simplified playlists."""

    href: str | None = None
    total: Numeric = 0


class SpotifyPlaylistSimplified(BaseModel):
    """Simplified playlist from list endpoints (items has only href and total)."""

    id: str | None = None
    name: str
    description: str | None = None
    public: bool | None = None
    collaborative: bool | None = None
    owner: SpotifyUser | None = None
    images: list[SpotifyImage] = Field(default_factory=list)
    items: SpotifyPlaylistItemsRef | None = Field(default=None, validation_alias=AliasChoices("items", "tracks"))
    snapshot_id: str | None = None
    uri: str | None = None
    href: str | None = None
    external_urls: dict[str, str] = Field(default_factory=dict)


class SpotifyPlaylist(BaseModel):
    """Full playlist object from GET /playlists/{id} or POST /me/playlists."""

    id: str | None = None
    name: str
    description: str | None = None
    public: bool | None = None
    collaborative: bool | None = None
    owner: SpotifyUser | None = None
    followers: SpotifyFollowers | None = None
    images: list[SpotifyImage] = Field(default_factory=list)
    items: SpotifyPage[SpotifyPlaylistItem] | None = Field(
        default=None, validation_alias=AliasChoices("items", "tracks")
    )
    snapshot_id: str | None = None
    uri: str | None = None
    href: str | None = None
    external_urls: dict[str, str] = Field(default_factory=dict)


class SpotifySnapshotResponse(BaseModel):
    """Response from add/remove items operations."""

    snapshot_id: str


PlaylistItemsPage = SpotifyPage[SpotifyPlaylistItem]
SimplePlaylistsPage = SpotifyPage[SpotifyPlaylistSimplified]
