"""Logging configuration for applications embedding the client."""

import logging
import sys

from spotify_web.constants import DEFAULT_SERVICE_NAME
from spotify_web.logging.formatter import JSONLogFormatter
from spotify_web.settings import get_settings

_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(
    level: int | str | None = None,
    *,
    json_output: bool | None = None,
    service: str = DEFAULT_SERVICE_NAME,
) -> None:
    """Replace the root logger's handlers with a single stdout handler.

    ``level`` and ``json_output`` default to the ``LOG_LEVEL`` and
    ``LOG_JSON`` settings.
    """
    settings = get_settings()
    if level is None:
        level = settings.LOG_LEVEL
    if json_output is None:
        json_output = settings.LOG_JSON

    root = logging.getLogger()
    root.setLevel(level.upper() if isinstance(level, str) else level)
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    handler = logging.StreamHandler(sys.stdout)
    if json_output:
        handler.setFormatter(JSONLogFormatter(service=service))
    else:
        handler.setFormatter(logging.Formatter(_PLAIN_FORMAT))
    root.addHandler(handler)
