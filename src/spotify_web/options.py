"""Optional query parameters shared by the list and lookup endpoints.

Each factory returns an immutable :class:`RequestOption`; operations accept any
number of them positionally and fold them into a query string::

    page = await client.current_users_tracks(options.limit(50), options.market("SE"))

Later options override earlier ones with the same name. Which options an
endpoint honours is listed in each operation's docstring; Spotify ignores the
rest.
"""

import enum
from dataclasses import dataclass
from datetime import datetime


class TimeRange(enum.StrEnum):
    """Affinity window for the top-items endpoints."""

    LONG_TERM = "long_term"  # several years of data
    MEDIUM_TERM = "medium_term"  # approximately the last 6 months
    SHORT_TERM = "short_term"  # approximately the last 4 weeks


class AdditionalType(enum.StrEnum):
    """Item types a playlist endpoint may return besides tracks."""

    TRACK = "track"
    EPISODE = "episode"


# Sentinel market meaning "the country associated with the access token".
MARKET_FROM_TOKEN = "from_token"


@dataclass(frozen=True, slots=True)
class RequestOption:
    """A single query parameter."""

    name: str
    value: str


def market(code: str) -> RequestOption:
    """ISO 3166-1 alpha-2 market, enabling track relinking."""
    return RequestOption("market", code)


def country(code: str) -> RequestOption:
    return RequestOption("country", code)


def limit(amount: int) -> RequestOption:
    """Maximum number of items to return."""
    return RequestOption("limit", str(amount))


def offset(amount: int) -> RequestOption:
    """Index of the first item to return."""
    return RequestOption("offset", str(amount))


def locale(code: str) -> RequestOption:
    """Language for localized content, e.g. ``es_MX``."""
    return RequestOption("locale", code)


def timestamp(value: datetime | str) -> RequestOption:
    if isinstance(value, datetime):
        value = value.strftime("%Y-%m-%dT%H:%M:%S")
    return RequestOption("timestamp", value)


def after(cursor: str | int) -> RequestOption:
    """Cursor (or Unix millisecond timestamp) to page forward from."""
    return RequestOption("after", str(cursor))


def before(cursor: str | int) -> RequestOption:
    """Cursor (or Unix millisecond timestamp) to page backward from."""
    return RequestOption("before", str(cursor))


def timerange(value: TimeRange | str) -> RequestOption:
    return RequestOption("time_range", str(TimeRange(value)))


def fields(expression: str) -> RequestOption:
    """Filter for the playlist endpoints, e.g. ``items(added_by.id,item(name))``."""
    return RequestOption("fields", expression)


def additional_types(*types: AdditionalType | str) -> RequestOption:
    return RequestOption("additional_types", ",".join(str(AdditionalType(t)) for t in types))


def build_params(*opts: RequestOption, **extra: str | int) -> dict[str, str]:
    """Fold options and fixed parameters into a query mapping with sorted keys.

    ``extra`` is applied last, so parameters an endpoint requires cannot be
    overridden by a caller-supplied option.
    """
    params: dict[str, str] = {}
    for opt in opts:
        params[opt.name] = opt.value
    for name, value in extra.items():
        params[name] = str(value)
    return {name: params[name] for name in sorted(params)}
