"""Builders for resolved tracks (from raw search data) and unresolved tracks."""

from __future__ import annotations

import functools
from collections.abc import Mapping
from typing import Any

from config.settings import DEFAULT_THUMBNAIL_SIZE, THUMBNAIL_SIZES, YOUTUBE_THUMBNAIL_URL
from search.types import TrackData
from tracks.context import TrackContext, default_context
from tracks.errors import ArgumentInvalidError, ArgumentMissingError, TrackConstructionError
from tracks.model import Resolved, Track, Unresolved
from tracks.partial import project
from tracks.resolver import get_closest_track

_UNRESOLVED_QUERY_FIELDS = ("title", "author", "duration")


def _is_youtube(uri: str) -> bool:
    return "youtube" in uri


def display_thumbnail(identifier: str, uri: str, size: str = DEFAULT_THUMBNAIL_SIZE) -> str | None:
    """Return the thumbnail URL for ``size``, or ``None`` for non-YouTube sources.

    Unknown sizes fall back to ``"default"``.
    """
    if not _is_youtube(uri):
        return None
    final_size = size if size in THUMBNAIL_SIZES else DEFAULT_THUMBNAIL_SIZE
    return YOUTUBE_THUMBNAIL_URL.format(identifier=identifier, size=final_size)


def build(data: TrackData, requester: Any = None, *, context: TrackContext | None = None) -> Track:
    """Build a track from raw search backend data and an optional requester."""
    if data is None:
        raise ArgumentMissingError('Argument "data" must be present.')
    context = default_context if context is None else context

    try:
        info = data["info"]
        identifier = info["identifier"]
        uri = info["uri"]
        fields = {
            "track": data["track"],
            "title": info["title"],
            "identifier": identifier,
            "author": info["author"],
            "duration": info["length"],
            "is_seekable": info["isSeekable"],
            "is_stream": info["isStream"],
            "uri": uri,
            "thumbnail": display_thumbnail(identifier, uri),
            "display_thumbnail": functools.partial(display_thumbnail, identifier, uri),
            "requester": requester,
        }
    except (KeyError, TypeError, AttributeError) as exc:
        raise TrackConstructionError(f'Argument "data" is not a valid track: {exc}') from exc

    return Track(Resolved(project(fields, context.partial)))


def build_unresolved(
    query: str | Mapping[str, Any],
    requester: Any = None,
    *,
    context: TrackContext | None = None,
) -> Track:
    """Build a placeholder track to be resolved before it is played.

    ``query`` is either a title or a mapping with ``title`` and optional
    ``author`` and ``duration``; author and duration make the lookup more
    precise.
    """
    if query is None:
        raise ArgumentMissingError('Argument "query" must be present.')
    context = default_context if context is None else context

    fields: dict[str, Any] = {"requester": requester}
    if isinstance(query, str):
        fields["title"] = query
    elif not isinstance(query, Mapping):
        raise ArgumentInvalidError('Argument "query" must be a string or a mapping.')
    else:
        for key in _UNRESOLVED_QUERY_FIELDS:
            if key in query:
                fields[key] = query[key]

    resolver = functools.partial(get_closest_track, context=context)
    return Track(Unresolved(fields, resolver))
