"""Application settings constants."""

from __future__ import annotations

import os

# Allowed absolute difference between an unresolved duration and a candidate.
DURATION_MATCH_TOLERANCE_MS = 1500

# Suffix appended to an author when matching auto-generated channel uploads.
TOPIC_CHANNEL_SUFFIX = " - Topic"

YOUTUBE_THUMBNAIL_URL = "https://img.youtube.com/vi/{identifier}/{size}.jpg"
THUMBNAIL_SIZES = (
    "0",
    "1",
    "2",
    "3",
    "default",
    "mqdefault",
    "hqdefault",
    "maxresdefault",
)
DEFAULT_THUMBNAIL_SIZE = "default"

# Lavalink search identifiers per source, e.g. "ytsearch:<query>".
SEARCH_PREFIXES = {
    "youtube": "ytsearch",
    "soundcloud": "scsearch",
}
DEFAULT_SEARCH_SOURCE = "youtube"


def _get_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _get_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


LAVALINK_HOST = os.getenv("LAVALINK_HOST", "localhost")
LAVALINK_PORT = _get_int("LAVALINK_PORT", 2333)
LAVALINK_PASSWORD = os.getenv("LAVALINK_PASSWORD", "youshallnotpass")
LAVALINK_SECURE = _get_bool("LAVALINK_SECURE", False)
LAVALINK_REQUEST_TIMEOUT_SEC = _get_int("LAVALINK_REQUEST_TIMEOUT_SEC", 10)
