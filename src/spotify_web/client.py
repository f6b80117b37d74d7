"""Spotify Web API async client."""

import logging
from collections.abc import AsyncIterator, Iterable, Sequence
from typing import Any, Self, TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter

from spotify_web.constants import (
    ALBUMS_PATH,
    ARTISTS_PATH,
    DEFAULT_REQUEST_TIMEOUT,
    EPISODES_PATH,
    MAX_ALBUM_IDS,
    MAX_ARTIST_IDS,
    MAX_PLAYLIST_URIS,
    MAX_TRACK_IDS,
    ME_ALBUMS_PATH,
    ME_FOLLOWING_PATH,
    ME_LIBRARY_CONTAINS_PATH,
    ME_LIBRARY_PATH,
    ME_PATH,
    ME_PLAYLISTS_PATH,
    ME_SHOWS_PATH,
    ME_TOP_ARTISTS_PATH,
    ME_TOP_TRACKS_PATH,
    ME_TRACKS_PATH,
    PLAYLISTS_PATH,
    RECENTLY_PLAYED_PATH,
    SEARCH_PATH,
    SHOWS_PATH,
    SPOTIFY_API_BASE,
    TRACKS_PATH,
    USERS_PATH,
)
from spotify_web.exceptions import (
    SpotifyAPIError,
    SpotifyAuthError,
    SpotifyNoMorePagesError,
    SpotifyRateLimitError,
    SpotifyRequestError,
    SpotifyServerError,
    SpotifyValidationError,
)
from spotify_web.models import (
    AlbumTracksPage,
    ArtistAlbumsPage,
    BatchAlbumsResponse,
    BatchArtistsResponse,
    BatchTracksResponse,
    FollowedArtistsPage,
    PlaylistItemsPage,
    RecentlyPlayedResponse,
    SavedAlbumsPage,
    SavedShowsPage,
    SavedTracksPage,
    SearchType,
    ShowEpisodesPage,
    SimplePlaylistsPage,
    SpotifyAlbumFull,
    SpotifyArtistFull,
    SpotifyArtistTopTracks,
    SpotifyCursorPage,
    SpotifyEpisode,
    SpotifyPage,
    SpotifyPlaylist,
    SpotifyPrivateUser,
    SpotifySearchResponse,
    SpotifyShowFull,
    SpotifySnapshotResponse,
    SpotifyTrack,
    SpotifyUser,
    TopArtistsResponse,
    TopTracksResponse,
)
from spotify_web.options import RequestOption, build_params
from spotify_web.settings import SpotifySettings, get_settings

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)
PageT = TypeVar("PageT", bound=SpotifyPage[Any] | SpotifyCursorPage[Any])
OffsetPageT = TypeVar("OffsetPageT", bound=SpotifyPage[Any])

_BOOL_LIST = TypeAdapter(list[bool])
_ERROR_BODY_PREVIEW = 200


def _error_message(payload: object) -> str:
    """Extract the message from either of Spotify's error envelopes.

    Web API: ``{"error": {"status": 404, "message": "..."}}``.
    Accounts service: ``{"error": "invalid_client", "error_description": "..."}``.
    """
    if not isinstance(payload, dict):
        return ""
    error = payload.get("error")
    if isinstance(error, dict):
        return str(error.get("message") or "")
    if isinstance(error, str):
        return str(payload.get("error_description") or error)
    return ""


def _parse_retry_after(value: str | None) -> float | None:
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def _decode_error(response: httpx.Response) -> SpotifyAPIError:
    """Build the typed error for a non-2xx response.

    The status always comes from the HTTP response, never from the body.
    """
    status = response.status_code
    reason = response.reason_phrase
    body = response.text
    if not body.strip():
        message = f"HTTP {status}: {reason} (body empty)"
    else:
        try:
            payload = response.json()
        except ValueError:
            message = f"couldn't decode error: {body[:_ERROR_BODY_PREVIEW]}"
        else:
            message = _error_message(payload) or f"unexpected HTTP {status}: {reason} (empty error)"

    retry_after = _parse_retry_after(response.headers.get("Retry-After"))
    if status == 401:
        return SpotifyAuthError(status, message, retry_after)
    if status == 429:
        return SpotifyRateLimitError(status, message, retry_after)
    if status >= 500:
        return SpotifyServerError(status, message, retry_after)
    return SpotifyRequestError(status, message, retry_after)


def _join_ids(ids: Sequence[str], maximum: int, kind: str) -> str:
    if not ids:
        raise SpotifyValidationError(f"at least one {kind} ID is required")
    if len(ids) > maximum:
        raise SpotifyValidationError(f"at most {maximum} {kind} IDs are allowed per request, got {len(ids)}")
    return ",".join(ids)


def _require_uris(uris: Sequence[str], maximum: int | None = None) -> list[str]:
    if not uris:
        raise SpotifyValidationError("at least one URI is required")
    if maximum is not None and len(uris) > maximum:
        raise SpotifyValidationError(f"at most {maximum} URIs are allowed per request, got {len(uris)}")
    return list(uris)


class SpotifyClient:
    """Async Spotify Web API client.

    Takes an access_token per-instance and attaches it as a bearer token to
    every request. Token acquisition and refresh are the caller's concern.

    Pass ``http_client`` to share a connection pool; otherwise a short-lived
    ``httpx.AsyncClient`` is opened per request. ``request_timeout`` applies
    either way. Cancelling the awaiting task aborts the in-flight request and
    propagates ``asyncio.CancelledError``.
    """

    def __init__(
        self,
        access_token: str,
        *,
        base_url: str = SPOTIFY_API_BASE,
        http_client: httpx.AsyncClient | None = None,
        request_timeout: float = DEFAULT_REQUEST_TIMEOUT,
    ) -> None:
        self._access_token = access_token
        self._base_url = base_url if base_url.endswith("/") else base_url + "/"
        self._http_client = http_client
        self._request_timeout = request_timeout

    @classmethod
    def from_settings(
        cls,
        settings: SpotifySettings | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> Self:
        """Build a client from environment-backed settings."""
        settings = settings or get_settings()
        if not settings.SPOTIFY_ACCESS_TOKEN:
            raise SpotifyValidationError("SPOTIFY_ACCESS_TOKEN is not set")
        return cls(
            settings.SPOTIFY_ACCESS_TOKEN,
            base_url=settings.SPOTIFY_API_BASE,
            http_client=http_client,
            request_timeout=settings.SPOTIFY_REQUEST_TIMEOUT,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    def _url(self, *segments: str) -> str:
        return self._base_url + "/".join(segments)

    async def _request(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, str] | None = None,
        json_body: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """Send an authorized request and raise a typed error for non-2xx responses.

        ``url`` is absolute; ``next``/``previous`` links are passed through
        unchanged with ``params`` left empty.
        """
        headers = {"Authorization": f"Bearer {self._access_token}"}
        logger.debug("Spotify request %s %s", method, url, extra={"http_method": method, "url": url})

        if self._http_client is not None:
            response = await self._http_client.request(
                method, url, params=params or None, json=json_body, headers=headers, timeout=self._request_timeout
            )
        else:
            async with httpx.AsyncClient(timeout=self._request_timeout) as client:
                response = await client.request(method, url, params=params or None, json=json_body, headers=headers)

        if response.is_success:
            return response

        error = _decode_error(response)
        logger.warning(
            "Spotify returned HTTP %d for %s %s: %s",
            error.status_code,
            method,
            url,
            error.message,
            extra={"http_method": method, "url": url, "status_code": error.status_code},
        )
        raise error

    async def _get(self, url: str, model: type[ModelT], params: dict[str, str] | None = None) -> ModelT:
        response = await self._request("GET", url, params=params)
        return model.model_validate(response.json())

    # -------------------------------------------------------------------
    # Paging
    # -------------------------------------------------------------------

    async def next_page(self, page: PageT) -> PageT:
        """Fetch the page linked by ``page.next``.

        Raises:
            SpotifyNoMorePagesError: ``page`` is the last page.
        """
        if not page.next:
            raise SpotifyNoMorePagesError("no next page")
        response = await self._request("GET", page.next)
        return type(page).model_validate(response.json())

    async def previous_page(self, page: OffsetPageT) -> OffsetPageT:
        """Fetch the page linked by ``page.previous``.

        Raises:
            SpotifyNoMorePagesError: ``page`` is the first page.
        """
        if not page.previous:
            raise SpotifyNoMorePagesError("no previous page")
        response = await self._request("GET", page.previous)
        return type(page).model_validate(response.json())

    async def iter_items(self, page: PageT) -> AsyncIterator[Any]:
        """Yield the items of ``page`` and of every page after it."""
        current = page
        while True:
            for item in current.items:
                yield item
            if not current.next:
                return
            current = await self.next_page(current)

    # -------------------------------------------------------------------
    # Albums
    # -------------------------------------------------------------------

    async def get_album(self, album_id: str, *opts: RequestOption) -> SpotifyAlbumFull:
        """GET /albums/{id}. Options: market."""
        return await self._get(self._url(ALBUMS_PATH, album_id), SpotifyAlbumFull, build_params(*opts))

    async def get_albums(self, album_ids: Sequence[str], *opts: RequestOption) -> list[SpotifyAlbumFull | None]:
        """GET /albums?ids=... (max 20 per request).

        Results keep the order of ``album_ids``; unknown IDs come back as ``None``.
        """
        ids = _join_ids(album_ids, MAX_ALBUM_IDS, "album")
        result = await self._get(self._url(ALBUMS_PATH), BatchAlbumsResponse, build_params(*opts, ids=ids))
        return result.albums

    async def get_album_tracks(self, album_id: str, *opts: RequestOption) -> AlbumTracksPage:
        """GET /albums/{id}/tracks. Options: limit, offset, market."""
        return await self._get(self._url(ALBUMS_PATH, album_id, "tracks"), AlbumTracksPage, build_params(*opts))

    # -------------------------------------------------------------------
    # Artists
    # -------------------------------------------------------------------

    async def get_artist(self, artist_id: str) -> SpotifyArtistFull:
        """GET /artists/{id}."""
        return await self._get(self._url(ARTISTS_PATH, artist_id), SpotifyArtistFull)

    async def get_artists(self, artist_ids: Sequence[str]) -> list[SpotifyArtistFull | None]:
        """GET /artists?ids=... (max 50 per request)."""
        ids = _join_ids(artist_ids, MAX_ARTIST_IDS, "artist")
        result = await self._get(self._url(ARTISTS_PATH), BatchArtistsResponse, {"ids": ids})
        return result.artists

    async def get_artist_albums(
        self,
        artist_id: str,
        *opts: RequestOption,
        include_groups: Iterable[str] = (),
    ) -> ArtistAlbumsPage:
        """GET /artists/{id}/albums. Options: market, limit, offset.

        ``include_groups`` filters by album, single, appears_on or compilation.
        """
        extra: dict[str, str] = {}
        groups = ",".join(include_groups)
        if groups:
            extra["include_groups"] = groups
        return await self._get(
            self._url(ARTISTS_PATH, artist_id, "albums"),
            ArtistAlbumsPage,
            build_params(*opts, **extra),
        )

    async def get_artist_top_tracks(self, artist_id: str, market: str) -> list[SpotifyTrack]:
        """GET /artists/{id}/top-tracks for the given market."""
        result = await self._get(
            self._url(ARTISTS_PATH, artist_id, "top-tracks"),
            SpotifyArtistTopTracks,
            {"market": market},
        )
        return result.tracks

    # -------------------------------------------------------------------
    # Tracks
    # -------------------------------------------------------------------

    async def get_track(self, track_id: str, *opts: RequestOption) -> SpotifyTrack:
        """GET /tracks/{id}. Options: market."""
        return await self._get(self._url(TRACKS_PATH, track_id), SpotifyTrack, build_params(*opts))

    async def get_tracks(self, track_ids: Sequence[str], *opts: RequestOption) -> list[SpotifyTrack | None]:
        """GET /tracks?ids=... (max 50 per request). Options: market."""
        ids = _join_ids(track_ids, MAX_TRACK_IDS, "track")
        result = await self._get(self._url(TRACKS_PATH), BatchTracksResponse, build_params(*opts, ids=ids))
        return result.tracks

    # -------------------------------------------------------------------
    # Shows and episodes
    # -------------------------------------------------------------------

    async def get_show(self, show_id: str, *opts: RequestOption) -> SpotifyShowFull:
        """GET /shows/{id}. Options: market."""
        return await self._get(self._url(SHOWS_PATH, show_id), SpotifyShowFull, build_params(*opts))

    async def get_show_episodes(self, show_id: str, *opts: RequestOption) -> ShowEpisodesPage:
        """GET /shows/{id}/episodes. Options: limit, offset, market."""
        return await self._get(self._url(SHOWS_PATH, show_id, "episodes"), ShowEpisodesPage, build_params(*opts))

    async def get_episode(self, episode_id: str, *opts: RequestOption) -> SpotifyEpisode:
        """GET /episodes/{id}. Options: market."""
        return await self._get(self._url(EPISODES_PATH, episode_id), SpotifyEpisode, build_params(*opts))

    # -------------------------------------------------------------------
    # Users
    # -------------------------------------------------------------------

    async def current_user(self) -> SpotifyPrivateUser:
        """GET /me.

        Email needs the user-read-email scope; country, product and explicit
        content settings need user-read-private.
        """
        return await self._get(self._url(ME_PATH), SpotifyPrivateUser)

    async def get_users_public_profile(self, user_id: str) -> SpotifyUser:
        """GET /users/{id}."""
        return await self._get(self._url(USERS_PATH, user_id), SpotifyUser)

    async def current_users_tracks(self, *opts: RequestOption) -> SavedTracksPage:
        """GET /me/tracks. Options: limit, offset, market."""
        return await self._get(self._url(ME_TRACKS_PATH), SavedTracksPage, build_params(*opts))

    async def current_users_albums(self, *opts: RequestOption) -> SavedAlbumsPage:
        """GET /me/albums. Options: market, limit, offset."""
        return await self._get(self._url(ME_ALBUMS_PATH), SavedAlbumsPage, build_params(*opts))

    async def current_users_shows(self, *opts: RequestOption) -> SavedShowsPage:
        """GET /me/shows. Options: limit, offset."""
        return await self._get(self._url(ME_SHOWS_PATH), SavedShowsPage, build_params(*opts))

    async def current_users_playlists(self, *opts: RequestOption) -> SimplePlaylistsPage:
        """GET /me/playlists. Options: limit, offset.

        Collaborative playlists are only listed with the
        playlist-read-collaborative scope.
        """
        return await self._get(self._url(ME_PLAYLISTS_PATH), SimplePlaylistsPage, build_params(*opts))

    async def current_users_followed_artists(self, *opts: RequestOption) -> FollowedArtistsPage:
        """GET /me/following?type=artist. Options: limit, after."""
        return await self._get(
            self._url(ME_FOLLOWING_PATH),
            FollowedArtistsPage,
            build_params(*opts, type="artist"),
        )

    async def current_users_top_artists(self, *opts: RequestOption) -> TopArtistsResponse:
        """GET /me/top/artists. Options: limit, offset, timerange (default medium_term)."""
        return await self._get(self._url(ME_TOP_ARTISTS_PATH), TopArtistsResponse, build_params(*opts))

    async def current_users_top_tracks(self, *opts: RequestOption) -> TopTracksResponse:
        """GET /me/top/tracks. Options: limit, offset, timerange (default medium_term)."""
        return await self._get(self._url(ME_TOP_TRACKS_PATH), TopTracksResponse, build_params(*opts))

    async def player_recently_played(self, *opts: RequestOption) -> RecentlyPlayedResponse:
        """GET /me/player/recently-played. Options: limit, before, after (Unix ms)."""
        return await self._get(self._url(RECENTLY_PLAYED_PATH), RecentlyPlayedResponse, build_params(*opts))

    async def get_playlists_for_user(self, user_id: str, *opts: RequestOption) -> SimplePlaylistsPage:
        """GET /users/{id}/playlists. Options: limit, offset."""
        return await self._get(
            self._url(USERS_PATH, user_id, "playlists"),
            SimplePlaylistsPage,
            build_params(*opts),
        )

    # -------------------------------------------------------------------
    # Library
    # -------------------------------------------------------------------

    async def save_to_library(self, *uris: str) -> None:
        """PUT /me/library.

        Accepts track, album, episode, show, artist or playlist URIs
        (``spotify:track:...``); the token needs the matching library scopes.
        """
        body = {"uris": _require_uris(uris)}
        await self._request("PUT", self._url(ME_LIBRARY_PATH), json_body=body)

    async def remove_from_library(self, *uris: str) -> None:
        """DELETE /me/library."""
        body = {"uris": _require_uris(uris)}
        await self._request("DELETE", self._url(ME_LIBRARY_PATH), json_body=body)

    async def user_has_saved_items(self, *uris: str) -> list[bool]:
        """GET /me/library/contains?uris=...

        Returns one flag per URI, in the order the URIs were given.
        """
        joined = ",".join(_require_uris(uris))
        response = await self._request("GET", self._url(ME_LIBRARY_CONTAINS_PATH), params={"uris": joined})
        return _BOOL_LIST.validate_python(response.json())

    # -------------------------------------------------------------------
    # Playlists
    # -------------------------------------------------------------------

    async def get_playlist(self, playlist_id: str, *opts: RequestOption) -> SpotifyPlaylist:
        """GET /playlists/{id}. Options: fields, market, additional_types."""
        return await self._get(self._url(PLAYLISTS_PATH, playlist_id), SpotifyPlaylist, build_params(*opts))

    async def get_playlist_items(self, playlist_id: str, *opts: RequestOption) -> PlaylistItemsPage:
        """GET /playlists/{id}/items. Options: fields, limit, offset, market, additional_types."""
        return await self._get(
            self._url(PLAYLISTS_PATH, playlist_id, "items"),
            PlaylistItemsPage,
            build_params(*opts),
        )

    async def create_playlist(
        self,
        name: str,
        *,
        description: str = "",
        public: bool = True,
        collaborative: bool = False,
    ) -> SpotifyPlaylist:
        """POST /me/playlists. Collaborative playlists must not be public."""
        if not name:
            raise SpotifyValidationError("playlist name is required")
        if collaborative and public:
            raise SpotifyValidationError("a collaborative playlist cannot be public")
        response = await self._request(
            "POST",
            self._url(ME_PLAYLISTS_PATH),
            json_body={"name": name, "description": description, "public": public, "collaborative": collaborative},
        )
        return SpotifyPlaylist.model_validate(response.json())

    async def add_items_to_playlist(
        self,
        playlist_id: str,
        *uris: str,
        position: int | None = None,
    ) -> str:
        """POST /playlists/{id}/items (max 100 URIs). Returns the new snapshot ID."""
        body: dict[str, Any] = {"uris": _require_uris(uris, MAX_PLAYLIST_URIS)}
        if position is not None:
            body["position"] = position
        response = await self._request("POST", self._url(PLAYLISTS_PATH, playlist_id, "items"), json_body=body)
        return SpotifySnapshotResponse.model_validate(response.json()).snapshot_id

    async def remove_items_from_playlist(self, playlist_id: str, *uris: str) -> str:
        """DELETE /playlists/{id}/items (max 100 URIs). Returns the new snapshot ID."""
        body = {"items": [{"uri": uri} for uri in _require_uris(uris, MAX_PLAYLIST_URIS)]}
        response = await self._request("DELETE", self._url(PLAYLISTS_PATH, playlist_id, "items"), json_body=body)
        return SpotifySnapshotResponse.model_validate(response.json()).snapshot_id

    async def change_playlist_details(
        self,
        playlist_id: str,
        *,
        name: str | None = None,
        description: str | None = None,
        public: bool | None = None,
        collaborative: bool | None = None,
    ) -> None:
        """PUT /playlists/{id}; returns 200 with empty body on success."""
        body: dict[str, Any] = {}
        if name is not None:
            body["name"] = name
        if description is not None:
            body["description"] = description
        if public is not None:
            body["public"] = public
        if collaborative is not None:
            body["collaborative"] = collaborative
        if not body:
            raise SpotifyValidationError("at least one playlist detail must be changed")
        await self._request("PUT", self._url(PLAYLISTS_PATH, playlist_id), json_body=body)

    # -------------------------------------------------------------------
    # Search
    # -------------------------------------------------------------------

    async def search(
        self,
        query: str,
        types: SearchType | str | Iterable[SearchType | str],
        *opts: RequestOption,
    ) -> SpotifySearchResponse:
        """GET /search. Options: market, limit, offset.

        One page is returned per requested type.
        """
        if not query:
            raise SpotifyValidationError("search query is required")
        if isinstance(types, str):
            types = [types]
        type_list: list[str] = []
        for t in types:
            try:
                type_list.append(str(SearchType(t)))
            except ValueError:
                raise SpotifyValidationError(f"unknown search type: {t!r}") from None
        if not type_list:
            raise SpotifyValidationError("at least one search type is required")
        params = build_params(*opts, q=query, type=",".join(type_list))
        return await self._get(self._url(SEARCH_PATH), SpotifySearchResponse, params)
