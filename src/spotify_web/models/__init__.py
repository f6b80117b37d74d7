"""Re-export all model classes."""

from spotify_web.models.common import (
    Numeric,
    SpotifyCopyright,
    SpotifyExternalIds,
    SpotifyFollowers,
    SpotifyImage,
    SpotifyRestrictions,
)
from spotify_web.models.music import (
    AlbumTracksPage,
    ArtistAlbumsPage,
    BatchAlbumsResponse,
    BatchArtistsResponse,
    BatchTracksResponse,
    FollowedArtistsPage,
    RecentlyPlayedResponse,
    SavedAlbumsPage,
    SavedTracksPage,
    SpotifyAlbumFull,
    SpotifyAlbumSimplified,
    SpotifyArtistFull,
    SpotifyArtistSimplified,
    SpotifyArtistTopTracks,
    SpotifyContext,
    SpotifyPlayHistoryItem,
    SpotifySavedAlbum,
    SpotifySavedTrack,
    SpotifyTrack,
    SpotifyTrackSimplified,
    TopArtistsResponse,
    TopTracksResponse,
)
from spotify_web.models.paging import SpotifyCursorPage, SpotifyCursors, SpotifyPage
from spotify_web.models.playlist import (
    PlaylistEntry,
    PlaylistItemsPage,
    SimplePlaylistsPage,
    SpotifyPlaylist,
    SpotifyPlaylistItem,
    SpotifyPlaylistItemsRef,
    SpotifyPlaylistSimplified,
    SpotifySnapshotResponse,
)
from spotify_web.models.search import SearchType, SpotifySearchResponse
from spotify_web.models.show import (
    SavedShowsPage,
    ShowEpisodesPage,
    SpotifyEpisode,
    SpotifyEpisodeSimplified,
    SpotifyResumePoint,
    SpotifySavedShow,
    SpotifyShowFull,
    SpotifyShowSimplified,
)
from spotify_web.models.user import SpotifyExplicitContent, SpotifyPrivateUser, SpotifyUser

__all__ = [
    "AlbumTracksPage",
    "ArtistAlbumsPage",
    "BatchAlbumsResponse",
    "BatchArtistsResponse",
    "BatchTracksResponse",
    "FollowedArtistsPage",
    "Numeric",
    "PlaylistEntry",
    "PlaylistItemsPage",
    "RecentlyPlayedResponse",
    "SavedAlbumsPage",
    "SavedShowsPage",
    "SavedTracksPage",
    "SearchType",
    "ShowEpisodesPage",
    "SimplePlaylistsPage",
    "SpotifyAlbumFull",
    "SpotifyAlbumSimplified",
    "SpotifyArtistFull",
    "SpotifyArtistSimplified",
    "SpotifyArtistTopTracks",
    "SpotifyContext",
    "SpotifyCopyright",
    "SpotifyCursorPage",
    "SpotifyCursors",
    "SpotifyEpisode",
    "SpotifyEpisodeSimplified",
    "SpotifyExplicitContent",
    "SpotifyExternalIds",
    "SpotifyFollowers",
    "SpotifyImage",
    "SpotifyPage",
    "SpotifyPlayHistoryItem",
    "SpotifyPlaylist",
    "SpotifyPlaylistItem",
    "SpotifyPlaylistItemsRef",
    "SpotifyPlaylistSimplified",
    "SpotifyPrivateUser",
    "SpotifyResumePoint",
    "SpotifyRestrictions",
    "SpotifySavedAlbum",
    "SpotifySavedShow",
    "SpotifySavedTrack",
    "SpotifySearchResponse",
    "SpotifyShowFull",
    "SpotifyShowSimplified",
    "SpotifySnapshotResponse",
    "SpotifyTrack",
    "SpotifyTrackSimplified",
    "SpotifyUser",
    "TopArtistsResponse",
    "TopTracksResponse",
]
