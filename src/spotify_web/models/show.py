"""Pydantic models for podcast shows and episodes."""

from datetime import datetime, timedelta

from pydantic import BaseModel, Field

from spotify_web.models.common import (
    Numeric,
    SpotifyCopyright,
    SpotifyImage,
    SpotifyRestrictions,
    parse_release_date,
)
from spotify_web.models.paging import SpotifyPage


class SpotifyResumePoint(BaseModel):
    """The user's most recent position in an episode."""

    fully_played: bool = False
    resume_position_ms: Numeric = 0


class SpotifyShowSimplified(BaseModel):
    """Simplified show object (embedded in episodes and saved-show listings)."""

    id: str | None = None
    name: str
    uri: str | None = None
    href: str | None = None
    type: str | None = None
    description: str | None = None
    html_description: str | None = None
    publisher: str | None = None
    media_type: str | None = None
    explicit: bool | None = None
    is_externally_hosted: bool | None = None
    total_episodes: Numeric | None = None
    languages: list[str] = Field(default_factory=list)
    available_markets: list[str] = Field(default_factory=list)
    copyrights: list[SpotifyCopyright] = Field(default_factory=list)
    images: list[SpotifyImage] = Field(default_factory=list)
    external_urls: dict[str, str] = Field(default_factory=dict)


class SpotifyEpisodeSimplified(BaseModel):
    """Simplified episode object (used in show episode listings)."""

    id: str | None = None
    name: str
    uri: str | None = None
    href: str | None = None
    type: str | None = None
    description: str | None = None
    html_description: str | None = None
    audio_preview_url: str | None = None
    duration_ms: Numeric | None = None
    explicit: bool | None = None
    is_externally_hosted: bool | None = None
    is_playable: bool | None = None
    language: str | None = None
    languages: list[str] = Field(default_factory=list)
    release_date: str | None = None
    release_date_precision: str | None = None
    resume_point: SpotifyResumePoint | None = None
    restrictions: SpotifyRestrictions | None = None
    images: list[SpotifyImage] = Field(default_factory=list)
    external_urls: dict[str, str] = Field(default_factory=dict)

    @property
    def duration(self) -> timedelta:
        return timedelta(milliseconds=self.duration_ms or 0)

    @property
    def release_date_time(self) -> datetime | None:
        return parse_release_date(self.release_date, self.release_date_precision)


class SpotifyEpisode(SpotifyEpisodeSimplified):
    """Full episode object from GET /episodes/{id}."""

    show: SpotifyShowSimplified | None = None


class SpotifyShowFull(SpotifyShowSimplified):
    """Full show object from GET /shows/{id}, including the first episode page."""

    episodes: SpotifyPage[SpotifyEpisodeSimplified] = Field(default_factory=SpotifyPage[SpotifyEpisodeSimplified])


class SpotifySavedShow(BaseModel):
    """Show saved in the user's library."""

    added_at: datetime | None = None
    show: SpotifyShowSimplified


ShowEpisodesPage = SpotifyPage[SpotifyEpisodeSimplified]
SavedShowsPage = SpotifyPage[SpotifySavedShow]
