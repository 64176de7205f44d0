"""Search provider backed by a Lavalink node's REST track loader."""

from __future__ import annotations

import asyncio
import logging
from typing import Any
from urllib.parse import urlparse

from config.settings import DEFAULT_SEARCH_SOURCE, SEARCH_PREFIXES
from search.types import LoadType, PlaylistInfo, SearchResult, TrackException
from tracks.builder import build
from tracks.context import TrackContext
from tracks.errors import ArgumentInvalidError

logger = logging.getLogger(__name__)


def _is_http_url(value: str) -> bool:
    try:
        return urlparse(value).scheme in ("http", "https")
    except ValueError:
        return False


def search_identifier(query: str, source: str = DEFAULT_SEARCH_SOURCE) -> str:
    """Return the loader identifier for ``query``; URLs are passed through as-is."""
    if _is_http_url(query):
        return query
    try:
        prefix = SEARCH_PREFIXES[source]
    except KeyError:
        raise ArgumentInvalidError(f"Unknown search source {source!r}.") from None
    return f"{prefix}:{query}"


def search_result_from_payload(
    payload: dict[str, Any],
    requester: Any = None,
    *,
    context: TrackContext | None = None,
) -> SearchResult:
    """Turn a ``/loadtracks`` response into a :class:`SearchResult` of built tracks."""
    tracks = [build(data, requester, context=context) for data in payload.get("tracks") or []]
    result = SearchResult(
        load_type=LoadType(payload.get("loadType")),
        tracks=tracks,
        exception=TrackException.from_payload(payload.get("exception")),
    )
    if result.load_type == LoadType.PLAYLIST_LOADED:
        playlist_info = payload.get("playlistInfo") or {}
        selected = playlist_info.get("selectedTrack")
        has_selected = isinstance(selected, int) and 0 <= selected < len(tracks)
        result.playlist = PlaylistInfo(
            name=playlist_info.get("name") or "",
            selected_track=tracks[selected] if has_selected else None,
            duration=sum(track.get("duration") or 0 for track in tracks),
        )
    return result


class LavalinkSearchProvider:
    """Resolve search queries through a node's ``/loadtracks`` endpoint."""

    def __init__(self, node, *, source: str = DEFAULT_SEARCH_SOURCE, context: TrackContext | None = None) -> None:
        if source not in SEARCH_PREFIXES:
            raise ArgumentInvalidError(f"Unknown search source {source!r}.")
        self.node = node
        self.source = source
        self.context = context

    async def search(self, query: str, requester: Any = None) -> SearchResult:
        identifier = search_identifier(query, self.source)
        logger.debug("Loading tracks identifier=%r node=%s", identifier, self.node.identifier)
        payload = await asyncio.to_thread(self.node.load_tracks, identifier)
        result = search_result_from_payload(payload, requester, context=self.context)
        logger.info(
            "Lavalink search query=%r load_type=%s tracks=%d",
            query,
            result.load_type.value,
            len(result.tracks),
        )
        return result
