"""Tests for Spotify Pydantic models."""

from datetime import UTC, datetime, timedelta

from spotify_web.models import (
    FollowedArtistsPage,
    SpotifyAlbumSimplified,
    SpotifyCursorPage,
    SpotifyEpisode,
    SpotifyEpisodeSimplified,
    SpotifyImage,
    SpotifyPage,
    SpotifyPlaylistItem,
    SpotifyPlaylistSimplified,
    SpotifyTrack,
    SpotifyTrackSimplified,
)


def test_spotify_track_minimal() -> None:
    """Track can be parsed with minimal fields."""
    track = SpotifyTrack.model_validate({"name": "Test Track"})
    assert track.name == "Test Track"
    assert track.id is None
    assert track.artists == []
    assert track.is_local is False
    assert track.duration == timedelta(0)


def test_numeric_fields_accept_floats() -> None:
    track = SpotifyTrackSimplified.model_validate({"name": "Float", "duration_ms": 1000.0, "track_number": 3.0})
    assert track.duration_ms == 1000
    assert track.track_number == 3

    image = SpotifyImage.model_validate({"url": "https://i.scdn.co/image/x", "height": 64.0, "width": None})
    assert image.height == 64
    assert image.width is None


def test_page_defaults() -> None:
    page = SpotifyPage[SpotifyTrack].model_validate({})
    assert page.items == []
    assert page.total == 0
    assert page.next is None
    assert page.previous is None


def test_page_total_as_float() -> None:
    page = SpotifyPage[SpotifyTrack].model_validate({"total": 20.0, "limit": 20.0, "offset": 0.0})
    assert page.total == 20
    assert page.limit == 20


def test_cursor_page() -> None:
    page = SpotifyCursorPage[SpotifyTrack].model_validate(
        {"items": [{"name": "x"}], "cursors": {"after": "abc"}, "limit": 1, "next": "https://example.com/next"}
    )
    assert page.cursors.after == "abc"
    assert page.cursors.before is None
    assert page.total is None


def test_followed_artists_page_accepts_bare_page() -> None:
    page = FollowedArtistsPage.model_validate({"items": [{"name": "Bare"}], "limit": 1})
    assert page.items[0].name == "Bare"


def test_release_date_precisions() -> None:
    def released(date: str, precision: str | None) -> datetime | None:
        album = SpotifyAlbumSimplified.model_validate(
            {"name": "A", "release_date": date, "release_date_precision": precision}
        )
        return album.release_date_time

    assert released("1983-10-14", "day") == datetime(1983, 10, 14, tzinfo=UTC)
    assert released("1983-10", "month") == datetime(1983, 10, 1, tzinfo=UTC)
    assert released("1983", "year") == datetime(1983, 1, 1, tzinfo=UTC)
    assert released("1983", None) == datetime(1983, 1, 1, tzinfo=UTC)


def test_release_date_placeholder_year() -> None:
    """Spotify's "0000" placeholder clamps to the earliest representable date."""
    album = SpotifyAlbumSimplified.model_validate(
        {"name": "A", "release_date": "0000", "release_date_precision": "year"}
    )
    assert album.release_date_time == datetime(1, 1, 1, tzinfo=UTC)


def test_release_date_precision_mismatch() -> None:
    """Components the value lacks default to the first month and day."""
    episode = SpotifyEpisodeSimplified.model_validate(
        {"name": "E", "release_date": "1981", "release_date_precision": "month"}
    )
    assert episode.release_date_time == datetime(1981, 1, 1, tzinfo=UTC)

    album = SpotifyAlbumSimplified.model_validate(
        {"name": "A", "release_date": "1981-07-22", "release_date_precision": "year"}
    )
    assert album.release_date_time == datetime(1981, 1, 1, tzinfo=UTC)


def test_release_date_unparseable() -> None:
    album = SpotifyAlbumSimplified.model_validate(
        {"name": "A", "release_date": "unknown", "release_date_precision": "day"}
    )
    assert album.release_date_time == datetime(1, 1, 1, tzinfo=UTC)


def test_release_date_missing() -> None:
    album = SpotifyAlbumSimplified.model_validate({"name": "A"})
    assert album.release_date_time is None


def test_playlist_item_accepts_item_and_track_keys() -> None:
    current = SpotifyPlaylistItem.model_validate({"item": {"name": "New"}})
    legacy = SpotifyPlaylistItem.model_validate({"track": {"name": "Old"}})
    assert current.item is not None and current.item.name == "New"
    assert legacy.item is not None and legacy.item.name == "Old"


def test_playlist_item_dispatches_on_type() -> None:
    episode = SpotifyPlaylistItem.model_validate(
        {"item": {"type": "episode", "name": "Pilot", "release_date": "2020-03-01", "release_date_precision": "day"}}
    )
    track = SpotifyPlaylistItem.model_validate({"item": {"type": "track", "name": "Song"}})
    untyped = SpotifyPlaylistItem.model_validate({"track": {"name": "Old"}})

    assert isinstance(episode.item, SpotifyEpisode)
    assert episode.item.release_date_time == datetime(2020, 3, 1, tzinfo=UTC)
    assert isinstance(track.item, SpotifyTrack)
    assert isinstance(untyped.item, SpotifyTrack)


def test_simplified_playlist_items_ref() -> None:
    playlist = SpotifyPlaylistSimplified.model_validate(
        {"name": "Mix", "tracks": {"href": "https://api.spotify.com/v1/playlists/p/tracks", "total": 7}}
    )
    assert playlist.items is not None
    assert playlist.items.total == 7


def test_unknown_fields_are_ignored() -> None:
    track = SpotifyTrack.model_validate({"name": "x", "linked_from": {"id": "y"}, "audio_quality": "high"})
    assert track.name == "x"
