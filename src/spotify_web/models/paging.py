"""Paging objects wrapping every list endpoint.

Offset-based endpoints return :class:`SpotifyPage`; endpoints that page by
cursor (followed artists, recently played) return :class:`SpotifyCursorPage`.
Both expose absolute ``next`` URLs that the client follows verbatim.
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

from spotify_web.models.common import Numeric

ItemT = TypeVar("ItemT")


class SpotifyPage(BaseModel, Generic[ItemT]):
    """Offset-based paging object."""

    href: str | None = None
    items: list[ItemT] = Field(default_factory=list)
    limit: Numeric = 0
    offset: Numeric = 0
    total: Numeric = 0
    next: str | None = None
    previous: str | None = None


class SpotifyCursors(BaseModel):
    """Cursors for cursor-based paging."""

    after: str | None = None
    before: str | None = None


class SpotifyCursorPage(BaseModel, Generic[ItemT]):
    """Cursor-based paging object. Has no ``previous`` link."""

    href: str | None = None
    items: list[ItemT] = Field(default_factory=list)
    limit: Numeric = 0
    total: Numeric | None = None
    next: str | None = None
    cursors: SpotifyCursors = Field(default_factory=SpotifyCursors)
