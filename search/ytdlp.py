"""Search provider running yt-dlp search extractors without a Lavalink node."""

from __future__ import annotations

import asyncio
import logging
from typing import Any
from urllib.parse import urlparse

from yt_dlp import YoutubeDL

from search.types import LoadType, SearchResult, Severity, TrackData, TrackException
from tracks.builder import build
from tracks.context import TrackContext


def _is_http_url(value):
    if not value or not isinstance(value, str):
        return False
    try:
        return urlparse(value).scheme in ("http", "https")
    except ValueError:
        return False


def entry_to_track_data(entry: dict[str, Any]) -> TrackData | None:
    """Map a yt-dlp entry onto the raw track contract, or ``None`` when unusable."""
    url = entry.get("webpage_url")
    if not _is_http_url(url):
        return None
    title = entry.get("title")
    if not title:
        return None
    duration = entry.get("duration")
    is_live = bool(entry.get("is_live"))
    return {
        "track": url,
        "info": {
            "title": title,
            "identifier": entry.get("id") or url,
            "author": entry.get("artist") or entry.get("uploader") or entry.get("channel") or "",
            "length": int(round(float(duration) * 1000)) if duration else 0,
            "isSeekable": not is_live,
            "isStream": is_live,
            "uri": url,
        },
    }


class YtDlpSearchProvider:
    def __init__(self, *, search_prefix: str = "ytsearch", limit: int = 5, context: TrackContext | None = None) -> None:
        self.search_prefix = search_prefix
        self.limit = limit
        self.context = context

    def _extract(self, query: str) -> list[dict[str, Any]]:
        search_term = f"{self.search_prefix}{self.limit}:{query}"
        opts = {
            "skip_download": True,
            "quiet": True,
            "no_warnings": True,
            "ignoreerrors": True,
            "noplaylist": True,
            "cachedir": False,
            "socket_timeout": 10,
        }
        with YoutubeDL(opts) as ydl:
            info = ydl.extract_info(search_term, download=False)
        entries = info.get("entries") if isinstance(info, dict) else None
        return [entry for entry in entries or [] if isinstance(entry, dict)]

    async def search(self, query: str, requester: Any = None) -> SearchResult:
        try:
            entries = await asyncio.to_thread(self._extract, query)
        except Exception as exc:
            logging.exception("Search failed for prefix=%s query=%s", self.search_prefix, query)
            return SearchResult(
                load_type=LoadType.LOAD_FAILED,
                exception=TrackException(message=str(exc), severity=Severity.FAULT, cause=type(exc).__name__),
            )

        tracks = []
        for entry in entries:
            data = entry_to_track_data(entry)
            if data is None:
                # Search extractors can expose internal extractor URLs, never real media.
                logging.debug("Skipping non-http search result: %r", entry.get("url"))
                continue
            tracks.append(build(data, requester, context=self.context))

        if not tracks:
            return SearchResult(load_type=LoadType.NO_MATCHES)
        return SearchResult(load_type=LoadType.SEARCH_RESULT, tracks=tracks)
