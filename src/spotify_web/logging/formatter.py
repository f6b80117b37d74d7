"""JSON log formatter for the client's structured request records."""

import json
import logging
from datetime import UTC, datetime

from spotify_web.constants import DEFAULT_SERVICE_NAME

# Request context SpotifyClient attaches through ``extra=``.
_REQUEST_FIELDS = ("http_method", "url", "status_code")


class JSONLogFormatter(logging.Formatter):
    """Render each record as one JSON line.

    A failed call logged by ``spotify_web.client`` comes out as::

        {"timestamp": "2024-01-01T00:00:00+00:00", "level": "WARNING",
         "service": "spotify-web", "logger": "spotify_web.client",
         "message": "Spotify returned HTTP 404 for GET ...: non existing id",
         "http_method": "GET", "url": "https://api.spotify.com/v1/tracks/x",
         "status_code": 404}

    Request fields are omitted from records that don't carry them.
    """

    def __init__(self, service: str = DEFAULT_SERVICE_NAME) -> None:
        super().__init__()
        self._service = service

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "service": self._service,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(
            (name, getattr(record, name))
            for name in _REQUEST_FIELDS
            if getattr(record, name, None) is not None
        )
        if record.exc_info and record.exc_info[1] is not None:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)
