"""Spotify API client exceptions."""


class SpotifyClientError(Exception):
    """Base exception for Spotify client errors."""


class SpotifyValidationError(SpotifyClientError, ValueError):
    """Arguments were rejected before any request was sent."""


class SpotifyNoMorePagesError(SpotifyClientError):
    """The requested next/previous page link is empty."""


class SpotifyAPIError(SpotifyClientError):
    """Spotify answered with a non-2xx status.

    ``status_code`` is the HTTP status of the response; ``message`` is taken
    from the API's JSON error envelope when one is present.
    """

    def __init__(self, status_code: int, message: str = "", retry_after: float | None = None) -> None:
        self.status_code = status_code
        self.message = message
        self.retry_after = retry_after
        super().__init__(f"Spotify API error: HTTP {status_code}" + (f": {message}" if message else ""))


class SpotifyAuthError(SpotifyAPIError):
    """Spotify returned 401 Unauthorized."""


class SpotifyRateLimitError(SpotifyAPIError):
    """Spotify returned 429 Too Many Requests."""

    def __init__(self, status_code: int = 429, message: str = "", retry_after: float | None = None) -> None:
        super().__init__(status_code, message, retry_after)
        if retry_after is not None:
            self.args = (f"{self.args[0]} (retry-after: {retry_after}s)",)


class SpotifyServerError(SpotifyAPIError):
    """Spotify returned a 5xx server error."""


class SpotifyRequestError(SpotifyAPIError):
    """Spotify rejected the request with a 4xx other than 401/429."""
