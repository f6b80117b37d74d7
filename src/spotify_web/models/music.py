"""Pydantic models for artists, albums and tracks.

These are pure data models matching Spotify's JSON structure.
"""

from datetime import datetime, timedelta
from typing import Any

from pydantic import BaseModel, Field, model_validator

from spotify_web.models.common import (
    Numeric,
    SpotifyCopyright,
    SpotifyExternalIds,
    SpotifyFollowers,
    SpotifyImage,
    SpotifyRestrictions,
    parse_release_date,
)
from spotify_web.models.paging import SpotifyCursorPage, SpotifyPage

# ---------------------------------------------------------------------------
# Artists
# ---------------------------------------------------------------------------


class SpotifyArtistSimplified(BaseModel):
    """Simplified artist object (embedded in tracks, albums)."""

    id: str | None = None
    name: str
    uri: str | None = None
    href: str | None = None
    type: str | None = None
    external_urls: dict[str, str] = Field(default_factory=dict)


class SpotifyArtistFull(SpotifyArtistSimplified):
    """Full artist object (from /artists endpoint or top artists)."""

    genres: list[str] = Field(default_factory=list)
    popularity: Numeric | None = None
    images: list[SpotifyImage] = Field(default_factory=list)
    followers: SpotifyFollowers | None = None


class FollowedArtistsPage(SpotifyCursorPage[SpotifyArtistFull]):
    """Response from GET /me/following?type=artist.

    Spotify nests the page under an ``artists`` key; both the wrapped and the
    bare form are accepted so ``next`` links parse the same way.
    """

    @model_validator(mode="before")
    @classmethod
    def _unwrap_artists(cls, data: Any) -> Any:
        if isinstance(data, dict) and isinstance(data.get("artists"), dict):
            return data["artists"]
        return data


# ---------------------------------------------------------------------------
# Albums
# ---------------------------------------------------------------------------


class SpotifyAlbumSimplified(BaseModel):
    """Simplified album object (embedded in tracks)."""

    id: str | None = None
    name: str
    uri: str | None = None
    href: str | None = None
    type: str | None = None
    album_type: str | None = None
    # Present only on artist album listings: album, single, compilation, appears_on.
    album_group: str | None = None
    total_tracks: Numeric | None = None
    release_date: str | None = None
    release_date_precision: str | None = None
    available_markets: list[str] = Field(default_factory=list)
    artists: list[SpotifyArtistSimplified] = Field(default_factory=list)
    images: list[SpotifyImage] = Field(default_factory=list)
    restrictions: SpotifyRestrictions | None = None
    external_urls: dict[str, str] = Field(default_factory=dict)

    @property
    def release_date_time(self) -> datetime | None:
        """Release date as a UTC datetime, honouring ``release_date_precision``."""
        return parse_release_date(self.release_date, self.release_date_precision)


# ---------------------------------------------------------------------------
# Tracks
# ---------------------------------------------------------------------------


class SpotifyTrackSimplified(BaseModel):
    """Simplified track object (no album field, used in album track listings)."""

    id: str | None = None
    name: str
    uri: str | None = None
    type: str | None = None
    duration_ms: Numeric | None = None
    explicit: bool | None = None
    track_number: Numeric | None = None
    disc_number: Numeric | None = None
    preview_url: str | None = None
    is_local: bool = False
    artists: list[SpotifyArtistSimplified] = Field(default_factory=list)
    available_markets: list[str] = Field(default_factory=list)
    external_urls: dict[str, str] = Field(default_factory=dict)
    href: str | None = None

    @property
    def duration(self) -> timedelta:
        return timedelta(milliseconds=self.duration_ms or 0)


class SpotifyTrack(SpotifyTrackSimplified):
    """Full track object from Spotify."""

    popularity: Numeric | None = None
    album: SpotifyAlbumSimplified | None = None
    external_ids: SpotifyExternalIds | None = None
    # Only reported when a market was supplied (track relinking).
    is_playable: bool | None = None
    restrictions: SpotifyRestrictions | None = None


class SpotifyAlbumFull(SpotifyAlbumSimplified):
    """Full album object from GET /albums/{id}."""

    genres: list[str] = Field(default_factory=list)
    popularity: Numeric | None = None
    label: str | None = None
    tracks: SpotifyPage[SpotifyTrackSimplified] | None = None
    copyrights: list[SpotifyCopyright] = Field(default_factory=list)
    external_ids: SpotifyExternalIds | None = None


# ---------------------------------------------------------------------------
# Library wrappers
# ---------------------------------------------------------------------------


class SpotifySavedTrack(BaseModel):
    """Track saved in the user's library."""

    added_at: datetime | None = None
    track: SpotifyTrack


class SpotifySavedAlbum(BaseModel):
    """Album saved in the user's library."""

    added_at: datetime | None = None
    album: SpotifyAlbumFull


# ---------------------------------------------------------------------------
# Play History
# ---------------------------------------------------------------------------


class SpotifyContext(BaseModel):
    """Playback context (playlist, album, artist, etc.)."""

    type: str | None = None
    uri: str | None = None
    href: str | None = None
    external_urls: dict[str, str] = Field(default_factory=dict)


class SpotifyPlayHistoryItem(BaseModel):
    """Single item from /me/player/recently-played."""

    track: SpotifyTrack
    played_at: datetime
    context: SpotifyContext | None = None


class SpotifyArtistTopTracks(BaseModel):
    """Response from GET /artists/{id}/top-tracks."""

    tracks: list[SpotifyTrack] = Field(default_factory=list)


class BatchTracksResponse(BaseModel):
    """Response from GET /tracks?ids=..."""

    tracks: list[SpotifyTrack | None] = Field(default_factory=list)


class BatchArtistsResponse(BaseModel):
    """Response from GET /artists?ids=..."""

    artists: list[SpotifyArtistFull | None] = Field(default_factory=list)


class BatchAlbumsResponse(BaseModel):
    """Response from GET /albums?ids=..."""

    albums: list[SpotifyAlbumFull | None] = Field(default_factory=list)


AlbumTracksPage = SpotifyPage[SpotifyTrackSimplified]
ArtistAlbumsPage = SpotifyPage[SpotifyAlbumSimplified]
SavedTracksPage = SpotifyPage[SpotifySavedTrack]
SavedAlbumsPage = SpotifyPage[SpotifySavedAlbum]
TopArtistsResponse = SpotifyPage[SpotifyArtistFull]
TopTracksResponse = SpotifyPage[SpotifyTrack]
RecentlyPlayedResponse = SpotifyCursorPage[SpotifyPlayHistoryItem]
