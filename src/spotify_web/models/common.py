"""Small objects shared across Spotify resources."""

from datetime import MINYEAR, UTC, datetime
from typing import Annotated

from pydantic import BaseModel, BeforeValidator

# Number of dash-separated components each precision carries.
_RELEASE_DATE_COMPONENTS = {
    "day": 3,
    "month": 2,
}


def _truncate_float(value: object) -> object:
    # Spotify occasionally serialises counters as floats ("total": 20.0).
    if isinstance(value, float):
        return int(value)
    return value


Numeric = Annotated[int, BeforeValidator(_truncate_float)]
"""An integer field that also accepts JSON floats."""


def parse_release_date(value: str | None, precision: str | None) -> datetime | None:
    """Parse a release date honouring its ``release_date_precision``.

    Only the components the precision covers are read, and missing components
    default to the first month/day; any precision other than ``day`` or
    ``month`` is read as a bare year. Returns ``None`` when the date is absent.

    Spotify sends placeholder dates such as ``"0000"`` for some catalog items.
    Those, and any other value that can't be parsed, map to
    ``0001-01-01T00:00:00Z`` rather than raising.
    """
    if not value:
        return None
    depth = _RELEASE_DATE_COMPONENTS.get(precision or "", 1)
    try:
        parts = [int(part) for part in value.split("-")[:depth]]
        year = max(parts[0], MINYEAR)
        month = parts[1] if len(parts) > 1 else 1
        day = parts[2] if len(parts) > 2 else 1
        return datetime(year, month, day, tzinfo=UTC)
    except ValueError:
        return datetime(MINYEAR, 1, 1, tzinfo=UTC)


class SpotifyImage(BaseModel):
    """Image object returned by Spotify (album art, artist photos, etc.)."""

    url: str
    height: Numeric | None = None
    width: Numeric | None = None


class SpotifyFollowers(BaseModel):
    """Follower information for an artist, user or playlist."""

    total: Numeric = 0
    # Always null in the current API; kept for forward compatibility.
    href: str | None = None


class SpotifyCopyright(BaseModel):
    """Copyright statement. ``type`` is ``C`` (copyright) or ``P`` (performance)."""

    text: str
    type: str | None = None


class SpotifyExternalIds(BaseModel):
    """External IDs (ISRC, EAN, UPC)."""

    isrc: str | None = None
    ean: str | None = None
    upc: str | None = None


class SpotifyRestrictions(BaseModel):
    """Content restriction reason: ``market``, ``product`` or ``explicit``."""

    reason: str | None = None
