"""Tests for album and artist lookups."""

from collections.abc import Callable
from typing import Any

import httpx
import pytest
import respx

from spotify_web import options
from spotify_web.client import SpotifyClient
from spotify_web.exceptions import SpotifyRequestError, SpotifyValidationError

API = "https://api.spotify.com/v1"


@respx.mock
async def test_get_album(client: SpotifyClient, fixture_json: Callable[[str], Any]) -> None:
    """The documented example album parses, including its release year."""
    route = respx.get(f"{API}/albums/0sNOF9WDwhWunNAHPD3Baj").mock(
        return_value=httpx.Response(200, json=fixture_json("find_album.json"))
    )

    album = await client.get_album("0sNOF9WDwhWunNAHPD3Baj")
    assert route.called
    assert album.name == "She's So Unusual"
    assert album.release_date_time is not None
    assert album.release_date_time.year == 1983
    assert album.label == "Epic"
    assert album.copyrights[0].type == "P"
    assert album.tracks is not None
    assert album.tracks.total == 13
    assert album.tracks.items[0].name == "Money Changes Everything"


@respx.mock
async def test_get_album_with_market(client: SpotifyClient, fixture_json: Callable[[str], Any]) -> None:
    route = respx.get(f"{API}/albums/0sNOF9WDwhWunNAHPD3Baj").mock(
        return_value=httpx.Response(200, json=fixture_json("find_album.json"))
    )

    await client.get_album("0sNOF9WDwhWunNAHPD3Baj", options.market("US"))
    assert route.calls[0].request.url.params["market"] == "US"


@respx.mock
async def test_get_album_bad_id(client: SpotifyClient) -> None:
    respx.get(f"{API}/albums/asdf").mock(
        return_value=httpx.Response(404, json={"error": {"status": 404, "message": "non existing id"}})
    )

    with pytest.raises(SpotifyRequestError) as exc_info:
        await client.get_album("asdf")
    assert exc_info.value.status_code == 404
    assert exc_info.value.message == "non existing id"


@respx.mock
async def test_get_album_tracks(client: SpotifyClient, fixture_json: Callable[[str], Any]) -> None:
    route = respx.get(f"{API}/albums/0sNOF9WDwhWunNAHPD3Baj/tracks").mock(
        return_value=httpx.Response(200, json=fixture_json("find_album_tracks.json"))
    )

    page = await client.get_album_tracks("0sNOF9WDwhWunNAHPD3Baj", options.limit(1))
    assert str(route.calls[0].request.url).endswith("/albums/0sNOF9WDwhWunNAHPD3Baj/tracks?limit=1")
    assert page.total == 13
    assert len(page.items) == 1
    assert page.items[0].name == "Money Changes Everything"
    assert page.next is not None


@respx.mock
async def test_get_albums(client: SpotifyClient, fixture_json: Callable[[str], Any]) -> None:
    """Unknown IDs come back as None in request order."""
    route = respx.get(f"{API}/albums").mock(
        return_value=httpx.Response(200, json={"albums": [fixture_json("find_album.json"), None]})
    )

    albums = await client.get_albums(["0sNOF9WDwhWunNAHPD3Baj", "missing"])
    assert route.calls[0].request.url.params["ids"] == "0sNOF9WDwhWunNAHPD3Baj,missing"
    assert albums[0] is not None
    assert albums[0].name == "She's So Unusual"
    assert albums[1] is None


@respx.mock
async def test_get_albums_validation(client: SpotifyClient) -> None:
    """Empty and oversized ID lists are rejected before any request."""
    route = respx.get(f"{API}/albums")

    with pytest.raises(SpotifyValidationError, match="at least one album ID"):
        await client.get_albums([])
    with pytest.raises(SpotifyValidationError, match="at most 20"):
        await client.get_albums([f"id{i}" for i in range(21)])
    assert not route.called


@respx.mock
async def test_get_artist(client: SpotifyClient) -> None:
    respx.get(f"{API}/artists/0TnOYISbd1XYRBk9myaseg").mock(
        return_value=httpx.Response(
            200,
            json={
                "id": "0TnOYISbd1XYRBk9myaseg",
                "name": "Pitbull",
                "genres": ["dance pop", "latin"],
                "followers": {"href": None, "total": 10000000.0},
                "popularity": 86,
            },
        )
    )

    artist = await client.get_artist("0TnOYISbd1XYRBk9myaseg")
    assert artist.name == "Pitbull"
    assert artist.followers is not None
    assert artist.followers.total == 10_000_000


@respx.mock
async def test_get_artists(client: SpotifyClient) -> None:
    route = respx.get(f"{API}/artists").mock(
        return_value=httpx.Response(200, json={"artists": [{"id": "a1", "name": "Artist 1"}]})
    )

    artists = await client.get_artists(["a1"])
    assert route.calls[0].request.url.params["ids"] == "a1"
    assert len(artists) == 1


async def test_get_artists_empty(client: SpotifyClient) -> None:
    with pytest.raises(SpotifyValidationError):
        await client.get_artists([])


@respx.mock
async def test_get_artist_albums(client: SpotifyClient) -> None:
    route = respx.get(f"{API}/artists/a1/albums").mock(
        return_value=httpx.Response(
            200,
            json={
                "items": [{"id": "al1", "name": "Single", "album_group": "single", "album_type": "single"}],
                "total": 1,
                "limit": 20,
                "offset": 0,
            },
        )
    )

    page = await client.get_artist_albums("a1", options.limit(20), include_groups=["album", "single"])
    params = route.calls[0].request.url.params
    assert params["include_groups"] == "album,single"
    assert params["limit"] == "20"
    assert page.items[0].album_group == "single"


@respx.mock
async def test_get_artist_top_tracks(client: SpotifyClient) -> None:
    route = respx.get(f"{API}/artists/a1/top-tracks").mock(
        return_value=httpx.Response(200, json={"tracks": [{"id": "t1", "name": "Hit"}]})
    )

    tracks = await client.get_artist_top_tracks("a1", "SE")
    assert route.calls[0].request.url.params["market"] == "SE"
    assert tracks[0].name == "Hit"
