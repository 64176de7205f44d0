"""Closest-track resolution for unresolved tracks."""

from __future__ import annotations

import logging
from typing import Any

from config.settings import DURATION_MATCH_TOLERANCE_MS, TOPIC_CHANNEL_SUFFIX
from search.types import LoadType, SearchResult, Severity, TrackException
from tracks.context import TrackContext, default_context
from tracks.errors import ArgumentInvalidError, NoMatchError, NotInitializedError
from tracks.markers import is_track, is_unresolved_track
from tracks.model import Track

_LOG = logging.getLogger(__name__)


def log_resolution(query: str, best_candidate: Track, reason: str) -> None:
    """Log a structured resolver decision."""
    _LOG.info(
        "resolver query=%r best_match=%r uri=%s reason=%s",
        query,
        best_candidate.get("title"),
        best_candidate.get("uri"),
        reason,
    )


def build_query(unresolved_track: Track) -> str:
    """Return ``"<author> - <title>"``, dropping whichever part is empty."""
    parts = [unresolved_track.get("author"), unresolved_track.get("title")]
    return " - ".join(str(part) for part in parts if part)


def _same_text(expected: Any, actual: Any) -> bool:
    if not isinstance(expected, str) or not isinstance(actual, str):
        return False
    return expected.casefold() == actual.casefold()


def _within_duration(expected: float, actual: Any) -> bool:
    if isinstance(actual, bool) or not isinstance(actual, (int, float)):
        return False
    return expected - DURATION_MATCH_TOLERANCE_MS <= actual <= expected + DURATION_MATCH_TOLERANCE_MS


def select_closest(unresolved_track: Track, candidates: list[Track]) -> tuple[Track, str]:
    """Pick the closest candidate and the reason it was chosen.

    Selection order, first match wins:
    - With an author: a candidate whose author equals the author or the
      author's ``" - Topic"`` channel, or whose title equals the title
      (case-insensitive).
    - With a duration: a candidate within the duration tolerance.
    - Otherwise the first candidate, trusting the provider's ranking.
    """
    author = unresolved_track.get("author")
    title = unresolved_track.get("title")
    duration = unresolved_track.get("duration")

    if author:
        channel_names = (author, f"{author}{TOPIC_CHANNEL_SUFFIX}")
        for candidate in candidates:
            candidate_author = candidate.get("author")
            if any(_same_text(name, candidate_author) for name in channel_names):
                return candidate, "author_match"
            if _same_text(title, candidate.get("title")):
                return candidate, "title_match"

    if duration and isinstance(duration, (int, float)) and not isinstance(duration, bool):
        for candidate in candidates:
            if _within_duration(duration, candidate.get("duration")):
                return candidate, "duration_match"

    return candidates[0], "first_result"


async def get_closest_track(unresolved_track: Track, *, context: TrackContext | None = None) -> Track:
    """Search for ``unresolved_track`` and return the closest resolved candidate."""
    context = default_context if context is None else context
    if context.provider is None:
        raise NotInitializedError("Search provider has not been initiated.")
    if not is_unresolved_track(unresolved_track):
        raise ArgumentInvalidError("Provided track is not a UnresolvedTrack.")

    query = build_query(unresolved_track)
    _LOG.info("Resolving unresolved track using query=%r", query)
    result: SearchResult = await context.search(query, unresolved_track.get("requester"))

    if result.load_type != LoadType.SEARCH_RESULT:
        _LOG.info("No search result for query=%r load_type=%s", query, result.load_type)
        raise NoMatchError(result.exception or _no_tracks_found())
    if not result.tracks:
        _LOG.info("Empty search result for query=%r", query)
        raise NoMatchError(_no_tracks_found())

    _LOG.debug("Scoring %d candidates for query=%r", len(result.tracks), query)
    best, reason = select_closest(unresolved_track, result.tracks)
    if not is_track(best):
        raise ArgumentInvalidError("Search provider returned a candidate that is not a Track.")
    log_resolution(query, best, reason)
    return best


def _no_tracks_found() -> TrackException:
    return TrackException(message="No tracks found.", severity=Severity.COMMON)
