"""Pydantic models for search results."""

import enum

from pydantic import BaseModel

from spotify_web.models.music import SpotifyAlbumSimplified, SpotifyArtistFull, SpotifyTrack
from spotify_web.models.paging import SpotifyPage
from spotify_web.models.playlist import SpotifyPlaylistSimplified
from spotify_web.models.show import SpotifyEpisodeSimplified, SpotifyShowSimplified


class SearchType(enum.StrEnum):
    """Object types a search can return."""

    ALBUM = "album"
    ARTIST = "artist"
    PLAYLIST = "playlist"
    TRACK = "track"
    SHOW = "show"
    EPISODE = "episode"


class SpotifySearchResponse(BaseModel):
    """Response from GET /search. Only the requested types are populated.

    Spotify may return ``null`` entries inside playlist results.
    """

    albums: SpotifyPage[SpotifyAlbumSimplified] | None = None
    artists: SpotifyPage[SpotifyArtistFull] | None = None
    playlists: SpotifyPage[SpotifyPlaylistSimplified | None] | None = None
    tracks: SpotifyPage[SpotifyTrack] | None = None
    shows: SpotifyPage[SpotifyShowSimplified] | None = None
    episodes: SpotifyPage[SpotifyEpisodeSimplified] | None = None
